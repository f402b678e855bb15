import numpy as np
from ioencrypt.models import (PaddingType)
from ioencrypt.errors import (DataLengthError, FatalError, PaddingError)

# -----------------------------
# Padding
# -----------------------------
def apply_padding(buffer: np.ndarray, used_len: int, block_len: int, padding) -> int:
    """
    Pad the final block in place.

    NO_PADDING can only finish on a block boundary, since no bytes can be
    synthesized. PKCS padding fills the tail with the pad length itself.

    Args:
        buffer: Final block buffer, written in place
        used_len: Number of data bytes already in buffer
        block_len: Block size in bytes
        padding: PaddingType selector

    Returns:
        Number of padding bytes added

    Raises:
        DataLengthError: NO_PADDING with a partial block
        FatalError: Impossible pad length or unknown padding type
    """
    if padding == PaddingType.NO_PADDING:
        if used_len == 0:
            return 0
        raise DataLengthError(f"{used_len} trailing bytes cannot be padded with NO_PADDING")

    if padding == PaddingType.PKCS_PADDING:
        pad_len = block_len - used_len
        if pad_len <= 0 or pad_len > block_len:
            raise FatalError(f"Invalid pad length {pad_len}")
        buffer[used_len:block_len] = pad_len
        return pad_len

    raise FatalError(f"Unknown padding type {padding!r}")

def check_padding(buffer: np.ndarray, block_len: int, padding) -> int:
    """
    Validate the padding of a decrypted final block.

    Returns:
        Number of padding bytes to strip

    Raises:
        PaddingError: Pad length byte out of range or pad bytes mismatch
        FatalError: Unknown padding type
    """
    if padding == PaddingType.NO_PADDING:
        return 0

    if padding == PaddingType.PKCS_PADDING:
        pad_len = int(buffer[block_len - 1])
        if pad_len <= 0 or pad_len > block_len:
            raise PaddingError(f"Invalid pad length byte {pad_len}")
        if np.any(buffer[block_len - pad_len:block_len] != pad_len):
            raise PaddingError("Padding bytes do not match pad length")
        return pad_len

    raise FatalError(f"Unknown padding type {padding!r}")
