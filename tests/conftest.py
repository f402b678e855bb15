import pytest
from cryptography.hazmat.decrepit.ciphers.algorithms import SEED
from cryptography.hazmat.primitives.ciphers import Cipher, modes
try:
    from cryptography.hazmat.decrepit.ciphers.modes import CFB
except ImportError:
    # Releases before the CFB move only ship it here
    from cryptography.hazmat.primitives.ciphers.modes import CFB

KEY = bytes(range(16))
IV = bytes([56, 170, 255, 3, 4, 78, 6, 54, 8, 222, 10, 123, 19, 88, 14, 1])


def _reference_cfb(key: bytes, iv: bytes, data: bytes, decrypt: bool = False) -> bytes:
    """Full-block CFB straight from the cryptography backend."""
    cipher = Cipher(SEED(key), CFB(iv))
    ctx = cipher.decryptor() if decrypt else cipher.encryptor()
    return ctx.update(data) + ctx.finalize()


def _keystream_block(key: bytes, block: bytes) -> bytes:
    """E_K(block), the value CFB XORs against."""
    ctx = Cipher(SEED(key), modes.ECB()).encryptor()
    return ctx.update(block) + ctx.finalize()


@pytest.fixture
def key():
    return KEY


@pytest.fixture
def iv():
    return IV


@pytest.fixture
def reference_cfb():
    return _reference_cfb


@pytest.fixture
def keystream_block():
    return _keystream_block
