from dataclasses import dataclass, field
from enum import IntEnum
from types import MappingProxyType
from typing import Any, Optional
import numpy as np

# -----------------------------
# CLI Colors
# -----------------------------
class bcolors:
    HEADER = '\033[95m'
    OKBLUE = '\033[94m'
    OKCYAN = '\033[96m'
    OKGREEN = '\033[92m'
    GREY = '\033[90m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'
    UNDERLINE = '\033[4m'

# -----------------------------
# SEED Constants
# -----------------------------
SEED_BLOCK_LEN = 16
SEED_USER_KEY_LEN = 16
SEED_NO_ROUNDS = 16
SEED_NO_ROUNDKEY = 2 * SEED_NO_ROUNDS

# Fixed buffer size of the legacy Encode15/Decode15 API
DATA_LEN = 16

# Status codes
CTR_SUCCESS = 0
CTR_FATAL_ERROR = 0x1001
CTR_INVALID_USERKEYLEN = 0x1002
CTR_PAD_CHECK_ERROR = 0x1003
CTR_DATA_LEN_ERROR = 0x1004
CTR_CIPHER_LEN_ERROR = 0x1005
CTR_UNSUPPORTED_MODE = 0x1006

# -----------------------------
# Algorithm Selectors
# -----------------------------
class Mode(IntEnum):
    """Operation modes. Only CFB is implemented; the rest are reserved."""
    ECB = 1
    CBC = 2
    OFB = 3
    CFB = 4


class PaddingType(IntEnum):
    NO_PADDING = 1
    PKCS_PADDING = 2


class NationType(IntEnum):
    """Region selector for the legacy IV table."""
    KOREA = 0
    TAIWAN = 1

# -----------------------------
# Nation IV Table
# -----------------------------
NATION_IVS = MappingProxyType({
    NationType.KOREA: bytes([56, 170, 255, 3, 4, 78, 6, 54, 8, 222, 10, 123, 19, 88, 14, 1]),
    NationType.TAIWAN: bytes([57, 171, 215, 31, 14, 88, 7, 4, 48, 122, 30, 153, 39, 98, 64, 10]),
})


def nation_iv(nation) -> Optional[bytes]:
    """
    Look up the IV for a nation selector.

    Accepts a NationType, its integer value, or its name (case-insensitive).
    Anything outside the closed enumeration returns None; there is no fallback.
    """
    if isinstance(nation, str):
        nation = NationType.__members__.get(nation.upper())
    elif isinstance(nation, int) and not isinstance(nation, bool):
        try:
            nation = NationType(nation)
        except ValueError:
            return None
    if not isinstance(nation, NationType):
        return None
    return NATION_IVS.get(nation)

# -----------------------------
# Core Parameters
# -----------------------------
@dataclass(frozen=True)
class SeedParams:
    """
    Parameters of the legacy SEED wrapper.

    The defaults reproduce the historical native API: a 16-byte zero-padded
    user key, a 16-byte data buffer, CFB without
    padding, and the Korean IV.
    """
    user_key_len: int = SEED_USER_KEY_LEN  # Zero-padded user key buffer
    data_len: int = DATA_LEN  # Fixed plaintext buffer of Encode15/Decode15
    mode: Mode = Mode.CFB
    padding: PaddingType = PaddingType.NO_PADDING
    nation: NationType = NationType.KOREA

# -----------------------------
# Cipher State
# -----------------------------
def _zero_block() -> np.ndarray:
    return np.zeros(SEED_BLOCK_LEN, dtype=np.uint8)


@dataclass
class CipherState:
    """
    Mutable state threaded through the Init/Update/Final lifecycle.

    One instance belongs to exactly one encode or decode operation. Final
    wipes the buffer, the chaining variable and the buffered length.

    Attributes:
        mode: Operation mode selector
        padding: Padding scheme applied by Final
        iv: Initialization vector, copied into chain_var at Init
        chain_var: Feedback register, always the latest ciphertext block
        buffer: Unconsumed input bytes carried between Update calls
        buf_len: Number of valid bytes in buffer
        round_keys: Opaque expanded key produced by the key schedule
    """
    mode: Mode = Mode.CFB
    padding: PaddingType = PaddingType.NO_PADDING
    iv: np.ndarray = field(default_factory=_zero_block)
    chain_var: np.ndarray = field(default_factory=_zero_block)
    buffer: np.ndarray = field(default_factory=_zero_block)
    buf_len: int = 0
    round_keys: Any = field(default=None, repr=False)

    def wipe(self):
        """Zero the sensitive per-stream fields."""
        self.buffer.fill(0)
        self.chain_var.fill(0)
        self.buf_len = 0
