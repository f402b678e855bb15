import logging
from typing import Optional
import numpy as np
from ioencrypt.models import (CipherState, Mode, PaddingType, SEED_BLOCK_LEN)
from ioencrypt.errors import (CipherLengthError, FatalError, UnsupportedModeError)
from ioencrypt.utils.keygen import (seed_encrypt)
from ioencrypt.utils.padding import (apply_padding, check_padding)
from ioencrypt.utils.primitives import (as_block_array, block_copy, block_xor)

logger = logging.getLogger(__name__)

# Declared so callers can select them, but no handlers exist yet
RESERVED_MODES = (Mode.ECB, Mode.CBC, Mode.OFB)

# -----------------------------
# State Setup
# -----------------------------
def set_alg_info(mode, padding, iv: Optional[bytes], state: CipherState):
    """
    Load mode, padding and IV into a cipher state and reset the stream.

    An IV that is missing or not exactly one block long is replaced by zeros.
    """
    state.mode = mode
    state.padding = padding
    if iv is not None and len(iv) == SEED_BLOCK_LEN:
        block_copy(state.iv, iv)
    else:
        state.iv.fill(0)
    state.wipe()

def new_state(mode=Mode.CFB, padding=PaddingType.NO_PADDING, iv: Optional[bytes] = None) -> CipherState:
    state = CipherState()
    set_alg_info(mode, padding, iv, state)
    return state

def _require_cfb(state: CipherState):
    if state.mode == Mode.CFB:
        return
    if state.mode in RESERVED_MODES:
        raise UnsupportedModeError(f"{Mode(state.mode).name} mode is not implemented")
    raise FatalError(f"Unknown mode {state.mode!r}")

# -----------------------------
# Init
# -----------------------------
def _init(state: CipherState):
    state.buf_len = 0
    state.buffer.fill(0)
    if state.mode != Mode.ECB:
        block_copy(state.chain_var, state.iv)

def enc_init(state: CipherState):
    """Start an encryption stream: clear the buffer and seed the chaining variable from the IV."""
    _init(state)

def dec_init(state: CipherState):
    """Start a decryption stream: clear the buffer and seed the chaining variable from the IV."""
    _init(state)

# -----------------------------
# CFB Block Step
# -----------------------------
def _cfb_block(state: CipherState, src: np.ndarray, src_offset: int, out: np.ndarray, out_offset: int, decrypt: bool):
    """
    Process one full block in CFB mode.

    C[i] = P[i] ⊕ Encrypt(C[i-1]), with C[-1] = IV. In both directions the
    chaining variable ends up holding the ciphertext block just produced or
    consumed.
    """
    seed_encrypt(state, state.chain_var)
    if decrypt:
        block_xor(out, state.chain_var, src, out_offset, 0, src_offset)
        block_copy(state.chain_var, src, 0, src_offset)
    else:
        block_xor(state.chain_var, state.chain_var, src, 0, 0, src_offset)
        block_copy(out, state.chain_var, out_offset)

def _cfb_update(state: CipherState, data: np.ndarray, decrypt: bool) -> bytes:
    block_len = SEED_BLOCK_LEN
    buf_len = state.buf_len
    data_len = len(data)
    total = buf_len + data_len

    # Padded decryption holds back the last full block so Final can strip it
    hold_last = decrypt and state.padding == PaddingType.PKCS_PADDING

    if total < block_len or (hold_last and total == block_len):
        state.buffer[buf_len:total] = data
        state.buf_len = total
        return b""

    # Worst case: every input byte plus one buffered block
    out = np.zeros(data_len + block_len, dtype=np.uint8)

    needed = block_len - buf_len
    state.buffer[buf_len:block_len] = data[:needed]
    pos = needed
    _cfb_block(state, state.buffer, 0, out, 0, decrypt)
    written = block_len

    remaining = data_len - pos
    while remaining > block_len or (remaining == block_len and not hold_last):
        _cfb_block(state, data, pos, out, written, decrypt)
        pos += block_len
        written += block_len
        remaining -= block_len

    if remaining > 0:
        state.buffer[:remaining] = data[pos:]
        state.buf_len = remaining
    else:
        state.buf_len = 0

    return out[:written].tobytes()

# -----------------------------
# Update
# -----------------------------
def enc_update(state: CipherState, plaintext) -> bytes:
    """
    Encrypt as many full blocks as the buffered and new input allow.

    Bytes that do not complete a block stay in state.buffer for the next
    Update or for Final.

    Args:
        state: Initialized cipher state
        plaintext: Input bytes

    Returns:
        Ciphertext produced by this call, a multiple of the block size

    Raises:
        UnsupportedModeError: ECB, CBC or OFB selected
        FatalError: Unknown mode or missing round keys
    """
    _require_cfb(state)
    return _cfb_update(state, as_block_array(plaintext), decrypt=False)

def dec_update(state: CipherState, ciphertext) -> bytes:
    """Decrypt as many full blocks as available. Mirror of enc_update."""
    _require_cfb(state)
    return _cfb_update(state, as_block_array(ciphertext), decrypt=True)

# -----------------------------
# Final
# -----------------------------
def _cfb_partial(state: CipherState) -> bytes:
    # Short final block: keystream is cut to the buffered length
    buf_len = state.buf_len
    if buf_len == 0:
        return b""
    seed_encrypt(state, state.chain_var)
    return np.bitwise_xor(state.chain_var[:buf_len], state.buffer[:buf_len]).tobytes()

def _cfb_enc_final(state: CipherState) -> bytes:
    buf_len = state.buf_len
    if state.padding == PaddingType.NO_PADDING:
        return _cfb_partial(state)
    if state.padding == PaddingType.PKCS_PADDING:
        pad_len = apply_padding(state.buffer, buf_len, SEED_BLOCK_LEN, state.padding)
        if pad_len > 0 or buf_len == 0:
            seed_encrypt(state, state.chain_var)
            block_xor(state.chain_var, state.chain_var, state.buffer)
            return state.chain_var.tobytes()
        return b""
    raise FatalError(f"Unknown padding type {state.padding!r}")

def _cfb_dec_final(state: CipherState) -> bytes:
    if state.padding == PaddingType.NO_PADDING:
        return _cfb_partial(state)
    if state.padding == PaddingType.PKCS_PADDING:
        if state.buf_len != SEED_BLOCK_LEN:
            raise CipherLengthError(f"Padded ciphertext must end on a full block, {state.buf_len} bytes buffered")
        seed_encrypt(state, state.chain_var)
        plain = np.zeros(SEED_BLOCK_LEN, dtype=np.uint8)
        block_xor(plain, state.chain_var, state.buffer)
        pad_len = check_padding(plain, SEED_BLOCK_LEN, state.padding)
        return plain[:SEED_BLOCK_LEN - pad_len].tobytes()
    raise FatalError(f"Unknown padding type {state.padding!r}")

def enc_final(state: CipherState) -> bytes:
    """
    Flush the buffered tail of an encryption stream.

    NO_PADDING emits exactly the buffered bytes XORed with one keystream
    block. PKCS padding always emits one full block. The buffer, chaining
    variable and buffered length are wiped on every path, including errors.
    """
    try:
        _require_cfb(state)
        logger.debug("CFB encrypt final with %d buffered bytes", state.buf_len)
        return _cfb_enc_final(state)
    finally:
        state.wipe()

def dec_final(state: CipherState) -> bytes:
    """
    Flush the buffered tail of a decryption stream.

    With PKCS padding the held-back block is decrypted, validated and
    stripped. Wipes the state like enc_final.

    Raises:
        CipherLengthError: PKCS padding without a full final block
        PaddingError: Malformed padding
    """
    try:
        _require_cfb(state)
        logger.debug("CFB decrypt final with %d buffered bytes", state.buf_len)
        return _cfb_dec_final(state)
    finally:
        state.wipe()
