import pytest
from hypothesis import given
from hypothesis import strategies as st

from brainkeys.bech32 import (
    Bech32Error,
    bech32_decode,
    bech32_encode,
    convert_bits,
    decode_nocheck,
    decode_witness_program,
    polymod_step,
    segwit_decode,
    segwit_encode,
)

CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"


def test_known_minimal_string_decodes():
    assert bech32_decode("A12UEL5L") == ("a", [])
    assert bech32_decode("a12uel5l") == ("a", [])


def test_encode_minimal_string():
    assert bech32_encode("a", []) == "a12uel5l"


def test_polymod_step_small_value_shifts():
    assert polymod_step(1) == 1 << 5
    assert polymod_step(0) == 0


def test_polymod_step_applies_generator():
    assert polymod_step(1 << 25) == 0x3B6A57B2


@given(st.lists(st.integers(0, 31), max_size=40), st.sampled_from(["bc", "tb", "a", "x1y"]))
def test_encode_decode_round_trip(data, hrp):
    text = bech32_encode(hrp, data)
    assert bech32_decode(text) == (hrp, data)
    assert bech32_decode(text.upper()) == (hrp, data)


def test_mixed_case_rejected():
    text = bech32_encode("bc", [1, 2, 3])
    mixed = text[:-1] + text[-1].upper() if text[-1].isalpha() else "B" + text[1:]
    with pytest.raises(Bech32Error):
        bech32_decode(mixed)


def test_bad_checksum_rejected():
    text = bech32_encode("bc", [0, 1, 2, 3])
    last = text[-1]
    replacement = "q" if last != "q" else "p"
    with pytest.raises(Bech32Error):
        bech32_decode(text[:-1] + replacement)


@pytest.mark.parametrize(
    "text",
    ["a1qqqq", "x" * 91, "abcdefgh", "1qqqqqqqq", "a1qqqqb", "a\x7f1qqqqqq"],
)
def test_malformed_strings_rejected(text):
    with pytest.raises(Bech32Error):
        bech32_decode(text)


def test_encode_rejects_uppercase_hrp():
    with pytest.raises(Bech32Error):
        bech32_encode("BC", [0])


def test_encode_rejects_non_5bit_value():
    with pytest.raises(Bech32Error):
        bech32_encode("bc", [32])


def test_encode_rejects_too_long():
    with pytest.raises(Bech32Error):
        bech32_encode("bc", [0] * 82)
    assert len(bech32_encode("bc", [0] * 81)) == 90


@given(st.binary(max_size=40))
def test_convert_bits_round_trip(data):
    five = convert_bits(data, 8, 5, True)
    assert all(0 <= v < 32 for v in five)
    assert bytes(convert_bits(five, 5, 8, False)) == data


def test_convert_bits_rejects_bad_padding():
    with pytest.raises(Bech32Error):
        convert_bits([31], 5, 8, False)


def test_convert_bits_rejects_oversized_input():
    with pytest.raises(Bech32Error):
        convert_bits([256], 8, 5, True)


@given(st.binary(min_size=2, max_size=40), st.integers(1, 16))
def test_segwit_round_trip(program, version):
    addr = segwit_encode("bc", version, program)
    assert segwit_decode("bc", addr) == (version, program)
    assert decode_witness_program(addr) == program


@pytest.mark.parametrize("size", [20, 32])
def test_segwit_version_zero_round_trip(size):
    program = bytes(range(size))
    addr = segwit_encode("tb", 0, program)
    assert addr.startswith("tb1q")
    assert segwit_decode("tb", addr) == (0, program)


def test_segwit_version_zero_wrong_length():
    with pytest.raises(Bech32Error):
        segwit_encode("bc", 0, bytes(21))


@pytest.mark.parametrize("program", [b"\x00", bytes(41)])
def test_segwit_program_length_limits(program):
    with pytest.raises(Bech32Error):
        segwit_encode("bc", 1, program)


def test_segwit_version_too_high():
    with pytest.raises(Bech32Error):
        segwit_encode("bc", 17, bytes(20))


def test_segwit_decode_wrong_hrp():
    addr = segwit_encode("bc", 0, bytes(20))
    with pytest.raises(Bech32Error):
        segwit_decode("tb", addr)


def test_segwit_decode_version_above_16():
    text = bech32_encode("bc", [17, *convert_bits(bytes(20), 8, 5, True)])
    with pytest.raises(Bech32Error):
        segwit_decode("bc", text)


def test_segwit_decode_empty_data():
    with pytest.raises(Bech32Error):
        segwit_decode("bc", bech32_encode("bc", []))


def test_decode_witness_program_empty_data():
    with pytest.raises(Bech32Error):
        decode_witness_program(bech32_encode("bc", []))


@given(st.binary(max_size=40).filter(lambda b: len(b) % 5 == 0 and b))
def test_decode_nocheck_packs_groups_of_eight(data):
    text = "".join(CHARSET[v] for v in convert_bits(data, 8, 5, True))
    assert decode_nocheck(text) == data
    assert decode_nocheck(text.upper()) == data


def test_decode_nocheck_emits_trailing_byte():
    assert decode_nocheck("") == b"\x00"
    assert decode_nocheck("q" * 8) == bytes(5)


@pytest.mark.parametrize("text", ["qqb", "qq1", "qq\u00e9"])
def test_decode_nocheck_rejects_invalid_characters(text):
    with pytest.raises(Bech32Error):
        decode_nocheck(text)