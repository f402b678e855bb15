import logging
from dataclasses import fields
import pytest
from ioencrypt import (encode15, decode15, NationType, NATION_IVS)
from ioencrypt.core import (DEFAULT_PARAMS)
from ioencrypt.main import (main)
from ioencrypt.models import (SeedParams, PaddingType, Mode, nation_iv)
from ioencrypt.utils.keygen import (pad_user_key)

NATIONS = [NationType.KOREA, NationType.TAIWAN]
KEYS = ["", "k", "testkey1", "한국어", "x" * 15]
PLAINS = ["H", "Hello", "session-0042", "192.168.100.254", "ünïcødé", "가나다라마", "z" * 15]

# -----------------------------
# Scenario / Round Trip
# -----------------------------
def test_hello_scenario():
    cipher = encode15("Hello", "testkey1", NationType.KOREA)
    assert cipher is not None
    assert len(cipher) == 10
    assert decode15(cipher, "testkey1", NationType.KOREA) == "Hello"

@pytest.mark.parametrize("nation", NATIONS)
@pytest.mark.parametrize("key", KEYS)
@pytest.mark.parametrize("plain", PLAINS)
def test_round_trip(plain, key, nation):
    cipher = encode15(plain, key, nation)
    assert cipher is not None
    assert len(cipher) // 2 == len(plain.encode("utf-8"))
    assert decode15(cipher, key, nation) == plain

def test_default_nation_is_korea():
    assert encode15("Hello", "testkey1") == encode15("Hello", "testkey1", NationType.KOREA)
    assert DEFAULT_PARAMS.nation == NationType.KOREA

def test_params_nation_used_when_nation_omitted():
    params = SeedParams(nation=NationType.TAIWAN)
    cipher = encode15("Hello", "k", params=params)
    assert cipher == encode15("Hello", "k", NationType.TAIWAN)
    assert cipher != encode15("Hello", "k")
    assert decode15(cipher, "k", params=params) == "Hello"

def test_explicit_nation_overrides_params():
    params = SeedParams(nation=NationType.TAIWAN)
    assert encode15("Hello", "k", NationType.KOREA, params) == encode15("Hello", "k", NationType.KOREA)

def test_params_fields_are_all_consumed():
    assert [f.name for f in fields(SeedParams)] == ["user_key_len", "data_len", "mode", "padding", "nation"]

def test_nations_use_distinct_ivs():
    assert NATION_IVS[NationType.KOREA] != NATION_IVS[NationType.TAIWAN]
    assert encode15("Hello", "testkey1", NationType.KOREA) != encode15("Hello", "testkey1", NationType.TAIWAN)

def test_nation_accepts_value_and_name():
    expected = encode15("Hello", "testkey1", NationType.TAIWAN)
    assert encode15("Hello", "testkey1", 1) == expected
    assert encode15("Hello", "testkey1", "taiwan") == expected
    assert nation_iv("KOREA") == NATION_IVS[NationType.KOREA]

def test_nation_table_is_read_only():
    with pytest.raises(TypeError):
        NATION_IVS[NationType.KOREA] = bytes(16)

# -----------------------------
# Legacy Output Contract
# -----------------------------
def test_output_is_truncated_keystream_of_padded_block(reference_cfb):
    plain = "Hello"
    iv = NATION_IVS[NationType.KOREA]
    full = reference_cfb(pad_user_key(b"testkey1"), iv, plain.encode().ljust(16, b"\x00"))
    assert encode15(plain, "testkey1") == full[:5].hex()

def test_deterministic():
    first = encode15("user-1234", "secret")
    assert all(encode15("user-1234", "secret") == first for _ in range(5))

def test_failure_is_deterministic():
    assert [encode15("x" * 16, "k") for _ in range(3)] == [None, None, None]
    assert [decode15("zz", "k") for _ in range(3)] == [None, None, None]

def test_hex_output_is_lowercase():
    cipher = encode15("Hello World", "testkey1")
    assert cipher == cipher.lower()

def test_decode_accepts_uppercase_hex():
    cipher = encode15("Hello", "testkey1")
    assert decode15(cipher.upper(), "testkey1") == "Hello"

def test_empty_plaintext_encodes_to_empty_string():
    assert encode15("", "testkey1") == ""
    # ...which the decoder refuses, as the native API did
    assert decode15("", "testkey1") is None

def test_decode_full_block():
    cipher = "00" * 16
    plain = decode15(cipher, "testkey1")
    assert isinstance(plain, str)

def test_decode_invalid_utf8_is_replaced():
    # Flip a bit in a multi-byte sequence so the text is no longer valid UTF-8
    cipher = bytearray.fromhex(encode15("가", "testkey1"))
    cipher[0] ^= 0x80
    plain = decode15(cipher.hex(), "testkey1")
    assert plain is not None
    assert "�" in plain

def test_wrong_key_does_not_recover_plaintext():
    cipher = encode15("Hello", "testkey1")
    assert decode15(cipher, "testkey2") != "Hello"

# -----------------------------
# Validation Failures
# -----------------------------
@pytest.mark.parametrize("plain", ["x" * 16, "x" * 40, "가나다라마바"])
def test_encode_rejects_long_plaintext(plain, caplog):
    with caplog.at_level(logging.ERROR, logger="ioencrypt.core"):
        assert encode15(plain, "testkey1") is None
    assert "Error -1" in caplog.text

@pytest.mark.parametrize("key", ["k" * 16, "k" * 30, "한국어한국어"])
def test_rejects_long_key(key, caplog):
    with caplog.at_level(logging.ERROR, logger="ioencrypt.core"):
        assert encode15("Hello", key) is None
        assert decode15("00", key) is None
    assert "Error -2" in caplog.text

@pytest.mark.parametrize("cipher", ["", "00" * 17, "ab" * 32])
def test_decode_rejects_bad_length(cipher, caplog):
    with caplog.at_level(logging.ERROR, logger="ioencrypt.core"):
        assert decode15(cipher, "testkey1") is None
    assert "Error -1" in caplog.text

@pytest.mark.parametrize("cipher", ["abc", "zz", "0g", "12 4", "０１"])
def test_decode_rejects_invalid_hex(cipher, caplog):
    with caplog.at_level(logging.ERROR, logger="ioencrypt.core"):
        assert decode15(cipher, "testkey1") is None
    assert "Invalid hex" in caplog.text

@pytest.mark.parametrize("nation", [2, -1, "mars", 1.5])
def test_unknown_nation_fails(nation, caplog):
    with caplog.at_level(logging.ERROR, logger="ioencrypt.core"):
        assert encode15("Hello", "testkey1", nation) is None
        assert decode15("0011", "testkey1", nation) is None
    assert "Invalid NationType" in caplog.text

@pytest.mark.parametrize("bad", [None, 42, b"bytes"])
def test_non_text_input_returns_none(bad):
    assert encode15(bad, "testkey1") is None
    assert encode15("Hello", bad) is None
    assert decode15(bad, "testkey1") is None
    assert decode15("0011", bad) is None

def test_reserved_mode_is_reported_not_raised(caplog):
    params = SeedParams(mode=Mode.OFB)
    with caplog.at_level(logging.ERROR, logger="ioencrypt.core"):
        assert encode15("Hello", "testkey1", params=params) is None
    assert "Error -5" in caplog.text
    assert "0x1006" in caplog.text

def test_padded_params_warn_and_cannot_decode(caplog):
    # PKCS Final emits an extra block that the truncation discards
    params = SeedParams(padding=PaddingType.PKCS_PADDING)
    with caplog.at_level(logging.WARNING, logger="ioencrypt.core"):
        cipher = encode15("Hello", "testkey1", params=params)
    assert cipher is not None and len(cipher) == 10
    assert "Unexpected output" in caplog.text
    caplog.clear()
    with caplog.at_level(logging.ERROR, logger="ioencrypt.core"):
        assert decode15(cipher, "testkey1", params=params) is None
    assert "Error -6" in caplog.text
    assert "0x1005" in caplog.text

# -----------------------------
# CLI
# -----------------------------
def test_cli_encode_decode(capsys):
    assert main(["encode", "--plain", "Hello", "--key", "testkey1"]) == 0
    cipher = capsys.readouterr().out.strip()
    assert cipher == encode15("Hello", "testkey1")

    assert main(["decode", "--cipher", cipher, "--key", "testkey1"]) == 0
    assert capsys.readouterr().out.strip() == "Hello"

def test_cli_nation_option(capsys):
    assert main(["encode", "--plain", "Hello", "--key", "testkey1", "--nation", "taiwan"]) == 0
    assert capsys.readouterr().out.strip() == encode15("Hello", "testkey1", NationType.TAIWAN)

def test_cli_failure_exit_status(capsys):
    assert main(["decode", "--cipher", "abc", "--key", "testkey1"]) == 1
    assert "failed" in capsys.readouterr().err
