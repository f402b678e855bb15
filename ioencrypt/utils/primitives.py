"""
Block and word helpers for the SEED engine.

The CFB engine uses the block helpers. The word packing and rotate helpers
(big_b2d, big_d2b, rotl32) round out the SEED primitive set for callers and
tests, since the round function itself runs inside cryptography.
"""
import numpy as np
from ioencrypt.models import (SEED_BLOCK_LEN)

# -----------------------------
# Block Helpers
# -----------------------------
def as_block_array(data) -> np.ndarray:
    """
    View bytes-like input as a uint8 array.

    numpy arrays pass through untouched so that in-place writes reach the
    caller's buffer.
    """
    if isinstance(data, np.ndarray):
        return data
    return np.frombuffer(bytes(data), dtype=np.uint8)

def block_copy(dst: np.ndarray, src, dst_offset: int = 0, src_offset: int = 0):
    """
    Copy exactly one block (16 bytes) from src into dst.

    Args:
        dst: Destination uint8 array, written in place
        src: Source bytes or uint8 array
        dst_offset: Start position in dst
        src_offset: Start position in src
    """
    src = as_block_array(src)
    dst[dst_offset:dst_offset + SEED_BLOCK_LEN] = src[src_offset:src_offset + SEED_BLOCK_LEN]

def block_xor(dst: np.ndarray, a, b, dst_offset: int = 0, a_offset: int = 0, b_offset: int = 0):
    """
    XOR two blocks into dst: dst[i] = a[i] ^ b[i] for 16 bytes.

    dst may alias a or b; both operands are read before dst is written.
    """
    a = as_block_array(a)
    b = as_block_array(b)
    dst[dst_offset:dst_offset + SEED_BLOCK_LEN] = np.bitwise_xor(
        a[a_offset:a_offset + SEED_BLOCK_LEN],
        b[b_offset:b_offset + SEED_BLOCK_LEN],
    )

# -----------------------------
# Word Helpers
# -----------------------------
def big_b2d(buf, offset: int = 0) -> int:
    """Read 4 bytes at offset as a big-endian unsigned 32-bit word."""
    return int.from_bytes(bytes(as_block_array(buf)[offset:offset + 4]), 'big')

def big_d2b(dword: int, buf: np.ndarray, offset: int = 0):
    """Write a 32-bit word into buf at offset, big-endian."""
    buf[offset:offset + 4] = np.frombuffer((dword & 0xFFFFFFFF).to_bytes(4, 'big'), dtype=np.uint8)

def rotl32(x: int, n: int) -> int:
    """Circular left rotation of a 32-bit unsigned value."""
    x &= 0xFFFFFFFF
    n %= 32
    return ((x << n) | (x >> (32 - n))) & 0xFFFFFFFF
