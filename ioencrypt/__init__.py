"""
ioencrypt - SEED-CFB streaming engine with the legacy Encode15/Decode15 API

Components:

Block Cipher:

SEED (KISA, RFC 4269) 128-bit block cipher, used only in the forward direction
Round function and key schedule provided by the cryptography library

Streaming Mode:

Cipher feedback (CFB): C[i] = P[i] ⊕ E(C[i-1]), C[-1] = IV
Init/Update/Final lifecycle with buffering across partial blocks
The chaining variable always holds the latest ciphertext block
Final wipes the buffer and chaining variable, on errors too

Padding:

NO_PADDING: the final partial block is XORed with a truncated keystream block
PKCS padding: pad bytes carry the pad length and are validated on decryption

Legacy Wrapper:

encode15/decode15 reproduce a historical fixed 16-byte native API
The plaintext is zero-padded into one block and the ciphertext is truncated
back to the plaintext length, so output length equals input length
The IV is chosen from a closed nation table (Korea, Taiwan)
Failures are logged and returned as None; no exception escapes
"""
from ioencrypt.models import (
    CipherState, Mode, NationType, PaddingType, SeedParams, NATION_IVS
)
from ioencrypt.errors import (
    SeedError, FatalError, InvalidUserKeyLengthError, PaddingError, DataLengthError,
    CipherLengthError, UnsupportedModeError
)
from ioencrypt.core import (encode15, decode15)
