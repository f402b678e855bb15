from typing import Optional
from ioencrypt.models import (
    CTR_FATAL_ERROR, CTR_INVALID_USERKEYLEN, CTR_PAD_CHECK_ERROR, CTR_DATA_LEN_ERROR,
    CTR_CIPHER_LEN_ERROR, CTR_UNSUPPORTED_MODE
)

# -----------------------------
# Engine Errors
# -----------------------------
class SeedError(ValueError):
    """Base error of the SEED engine. `code` holds the CTR_* status."""
    code = CTR_FATAL_ERROR

    def __init__(self, message: str = "", code: Optional[int] = None):
        if code is not None:
            self.code = code
        super().__init__(message or f"SEED error 0x{self.code:04x}")


class FatalError(SeedError):
    code = CTR_FATAL_ERROR


class InvalidUserKeyLengthError(SeedError):
    code = CTR_INVALID_USERKEYLEN


class PaddingError(SeedError):
    code = CTR_PAD_CHECK_ERROR


class DataLengthError(SeedError):
    code = CTR_DATA_LEN_ERROR


class CipherLengthError(SeedError):
    code = CTR_CIPHER_LEN_ERROR


class UnsupportedModeError(SeedError):
    code = CTR_UNSUPPORTED_MODE
