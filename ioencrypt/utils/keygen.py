import numpy as np
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.decrepit.ciphers.algorithms import SEED
from cryptography.hazmat.primitives.ciphers import Cipher, modes
from ioencrypt.models import (CipherState, SEED_BLOCK_LEN, SEED_USER_KEY_LEN)
from ioencrypt.errors import (FatalError, InvalidUserKeyLengthError)

# -----------------------------
# Key Preparation
# -----------------------------
def pad_user_key(key: bytes, length: int = SEED_USER_KEY_LEN) -> bytes:
    """
    Zero-pad a user key into a fixed-length key buffer.

    This is the only key derivation the legacy API performs: the key bytes are
    copied to the front of a zeroed buffer.

    Raises:
        InvalidUserKeyLengthError: If the key does not fit the buffer
    """
    if len(key) > length:
        raise InvalidUserKeyLengthError(f"User key is {len(key)} bytes, buffer holds {length}")
    return bytes(key).ljust(length, b'\x00')

# -----------------------------
# Key Schedule
# -----------------------------
def seed_key_schedule(user_key: bytes, state: CipherState):
    """
    Expand a 16-byte user key into SEED round keys and store them on state.

    The round function and key schedule are provided by the `cryptography`
    SEED implementation. The expanded key is kept as a single-block ECB
    encryptor, which is all CFB needs.

    Args:
        user_key: Exactly SEED_USER_KEY_LEN bytes
        state: Cipher state receiving the round keys

    Raises:
        InvalidUserKeyLengthError: If user_key is not 16 bytes
        FatalError: If the backend does not provide SEED
    """
    if len(user_key) != SEED_USER_KEY_LEN:
        raise InvalidUserKeyLengthError(f"SEED user key must be {SEED_USER_KEY_LEN} bytes, got {len(user_key)}")
    try:
        state.round_keys = Cipher(SEED(bytes(user_key)), modes.ECB()).encryptor()
    except UnsupportedAlgorithm as e:
        raise FatalError("SEED is not supported by the cryptography backend") from e

# -----------------------------
# Block Primitive
# -----------------------------
def seed_encrypt(state: CipherState, block: np.ndarray):
    """Encrypt one 16-byte block in place with the state's round keys."""
    if state.round_keys is None:
        raise FatalError("Key schedule has not been run")
    out = state.round_keys.update(block[:SEED_BLOCK_LEN].tobytes())
    block[:SEED_BLOCK_LEN] = np.frombuffer(out, dtype=np.uint8)
