import logging
from typing import Optional
from ioencrypt.models import (SeedParams, nation_iv)
from ioencrypt.errors import (SeedError)
from ioencrypt.utils.codec import (bytes_to_hex, hex_to_bytes)
from ioencrypt.utils.keygen import (pad_user_key, seed_key_schedule)
from ioencrypt.utils.encryption import (
    new_state, enc_init, enc_update, enc_final, dec_init, dec_update, dec_final
)

logger = logging.getLogger(__name__)

DEFAULT_PARAMS = SeedParams()

# Legacy error numbers per lifecycle step
_STEPS = {
    -3: "Key schedule",
    -4: "Init",
    -5: "Update",
    -6: "Final",
}

# -----------------------------
# Legacy Fixed-Length Wrapper
# -----------------------------
def encode15(plain: str, user_key: str, nation=None, params: SeedParams = DEFAULT_PARAMS) -> Optional[str]:
    """
    Encrypt a short string with SEED-CFB, reproducing the native Encode15 API.

    The plaintext is zero-padded into one 16-byte block and encrypted, then the
    ciphertext is cut back to the plaintext's own length. This keeps the
    output length equal to the input length, unlike textbook CFB framing.

    Args:
        plain: Text whose UTF-8 form is shorter than params.data_len
        user_key: Text whose UTF-8 form is shorter than params.user_key_len
        nation: NationType selecting the IV, params.nation when omitted
        params: Legacy buffer sizes, mode and padding

    Returns:
        Lowercase hex ciphertext, or None on any failure (logged)
    """
    try:
        plain_bytes = plain.encode('utf-8')
        key_bytes = user_key.encode('utf-8')
    except (AttributeError, UnicodeError) as e:
        logger.error("Encode15 - Error: plaintext and user key must be UTF-8 text: %s", e)
        return None
    plain_len = len(plain_bytes)

    if plain_len >= params.data_len:
        logger.error("Encode15 - Error -1: Plaintext length (%d) must be less than DATA_LEN (%d)", plain_len, params.data_len)
        return None
    if len(key_bytes) >= params.user_key_len:
        logger.error("Encode15 - Error -2: User key too long")
        return None

    if nation is None:
        nation = params.nation
    iv = nation_iv(nation)
    if iv is None:
        logger.error("Encode15 - Error: Invalid NationType %r", nation)
        return None

    plain_buffer = plain_bytes.ljust(params.data_len, b'\x00')
    key_buffer = pad_user_key(key_bytes, params.user_key_len)
    state = new_state(params.mode, params.padding, iv)

    step = -3
    try:
        seed_key_schedule(key_buffer, state)
        step = -4
        enc_init(state)
        step = -5
        cipher = enc_update(state, plain_buffer)
        step = -6
        tail = enc_final(state)
    except SeedError as e:
        logger.error("Encode15 - Error %d: %s failed (status 0x%04x): %s", step, _STEPS[step], e.code, e)
        return None

    total_len = len(cipher)
    if tail:
        logger.warning("Encode15: Unexpected output from SEED_EncFinal (%d bytes)", len(tail))
        total_len += len(tail)

    if total_len < plain_len:
        logger.error("Encode15 - Error: Encrypted length (%d) is less than original plaintext length (%d)", total_len, plain_len)
        return None

    return bytes_to_hex(cipher[:plain_len])

def decode15(cipher_hex: str, user_key: str, nation=None, params: SeedParams = DEFAULT_PARAMS) -> Optional[str]:
    """
    Decrypt hex produced by encode15 back into text.

    Args:
        cipher_hex: Hex ciphertext of 1 to params.data_len bytes
        user_key: Same key used for encode15
        nation: Same NationType used for encode15, params.nation when omitted
        params: Legacy buffer sizes, mode and padding

    Returns:
        Decoded text, or None on any failure (logged). Invalid UTF-8 sequences
        are replaced rather than rejected.
    """
    try:
        cipher_bytes = hex_to_bytes(cipher_hex)
    except (TypeError, ValueError) as e:
        logger.error("Decode15 - Error: Invalid hex ciphertext: %s", e)
        return None

    try:
        key_bytes = user_key.encode('utf-8')
    except (AttributeError, UnicodeError) as e:
        logger.error("Decode15 - Error: user key must be UTF-8 text: %s", e)
        return None
    decode_len = len(cipher_bytes)

    if decode_len == 0 or decode_len > params.data_len:
        logger.error("Decode15 - Error -1: Ciphertext byte length (%d) must be > 0 and <= DATA_LEN (%d)", decode_len, params.data_len)
        return None
    if len(key_bytes) >= params.user_key_len:
        logger.error("Decode15 - Error -2: User key too long")
        return None

    if nation is None:
        nation = params.nation
    iv = nation_iv(nation)
    if iv is None:
        logger.error("Decode15 - Error: Invalid NationType %r", nation)
        return None

    key_buffer = pad_user_key(key_bytes, params.user_key_len)
    state = new_state(params.mode, params.padding, iv)

    step = -3
    try:
        seed_key_schedule(key_buffer, state)
        step = -4
        dec_init(state)
        step = -5
        plain = dec_update(state, cipher_bytes)
        step = -6
        plain += dec_final(state)
    except SeedError as e:
        logger.error("Decode15 - Error %d: %s failed (status 0x%04x): %s", step, _STEPS[step], e.code, e)
        return None

    if len(plain) != decode_len:
        logger.error("Decode15 - Error: Output length (%d) mismatch with input ciphertext length (%d). Decryption logic error?", len(plain), decode_len)
        return None

    return plain.decode('utf-8', errors='replace')
