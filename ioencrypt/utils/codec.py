import string

_HEX_DIGITS = frozenset(string.hexdigits)

# -----------------------------
# Hex Codec
# -----------------------------
def bytes_to_hex(data: bytes) -> str:
    """Lowercase hex, two characters per byte, no separators."""
    return bytes(data).hex()

def hex_to_bytes(text: str) -> bytes:
    """
    Decode a hex string into bytes.

    Args:
        text: Hex digits, upper or lower case, no separators

    Returns:
        Decoded bytes

    Raises:
        ValueError: If the length is odd or a character is not a hex digit
    """
    if len(text) % 2 != 0:
        raise ValueError("Hex string must have an even length.")
    for i, ch in enumerate(text):
        if ch not in _HEX_DIGITS:
            raise ValueError(f"Invalid hex character at position {i}")
    return bytes.fromhex(text)
