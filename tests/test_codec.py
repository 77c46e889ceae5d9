"""Hex share encoding and share-set framing."""

import json
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from gf_shamir import codec, shamir


def test_encode_is_lowercase_hex():
    assert codec.encode_share(bytes([0xAB, 0x01, 0xFF])) == "ab01ff"
    assert codec.encode_share([1, 2]) == "0102"


def test_decode_accepts_either_case_and_surrounding_whitespace():
    assert codec.decode_share("AB01ff") == bytes([0xAB, 0x01, 0xFF])
    assert codec.decode_share("  ab01\n") == bytes([0xAB, 0x01])


@pytest.mark.parametrize('text', ["abc", "zz", "ab cd", "0x01", "ab-c", "é0"])
def test_decode_is_strict(text):
    with pytest.raises(codec.ShareFormatError):
        codec.decode_share(text)


def test_share_format_error_is_value_error():
    assert issubclass(codec.ShareFormatError, ValueError)


def test_dump_and_load_lines():
    shares = shamir.split(b"framing", n=3, k=2)
    text = codec.dump_shares(shares)
    assert text.count('\n') == 3
    assert codec.load_shares(text) == shares


def test_dump_and_load_json():
    shares = shamir.split(b"framing", n=3, k=2)
    text = codec.dump_shares(shares, 'json')
    assert json.loads(text) == [s.hex() for s in shares]
    assert codec.load_shares(text) == shares


def test_load_skips_blank_lines():
    assert codec.load_shares("\n0102\n\n  0304  \n") == [b"\x01\x02", b"\x03\x04"]


def test_load_reports_which_share_failed():
    with pytest.raises(codec.ShareFormatError, match="Share 2"):
        codec.load_shares("0102\nxyz1\n")


def test_load_invalid_json():
    with pytest.raises(codec.ShareFormatError):
        codec.load_shares("[\"0102\", ")


def test_load_json_non_strings():
    with pytest.raises(codec.ShareFormatError):
        codec.load_shares("[1, 2]")


def test_dump_unknown_format():
    with pytest.raises(ValueError):
        codec.dump_shares([b"\x01\x02"], 'yaml')


def test_decoded_shares_combine():
    shares = shamir.split("over the wire", n=4, k=3)
    lines = codec.dump_shares(shares).splitlines()
    received = [codec.decode_share(line) for line in lines[1:]]
    assert shamir.combine(received) == b"over the wire"
