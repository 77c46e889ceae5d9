"""
Text transport for shares.

Each share travels as lowercase hex. A share set is either one hex string
per line or a JSON array of hex strings. Decoding is strict: even length,
hex digits only.
"""

import json
import re
from typing import Iterable, List

_HEX_RE = re.compile(r'^(?:[0-9a-fA-F]{2})*$')

FORMATS = ('lines', 'json')


class ShareFormatError(ValueError):
    """A share string or share set could not be decoded."""


def encode_share(share) -> str:
    """Hex-encode one share (lowercase)."""
    return bytes(share).hex()


def decode_share(text: str) -> bytes:
    """
    Decode one hex share.

    Surrounding whitespace is ignored; anything else that is not a pair of
    hex digits is rejected.

    Raises:
        ShareFormatError: On odd length or a non-hex character
    """
    text = text.strip()
    if len(text) % 2:
        raise ShareFormatError(f"Share hex has odd length {len(text)}")
    if not _HEX_RE.match(text):
        raise ShareFormatError("Share contains non-hex characters")
    return bytes.fromhex(text)


def dump_shares(shares: Iterable, fmt: str = 'lines') -> str:
    """
    Serialize a share set.

    Args:
        shares: Shares as returned by `split`
        fmt: 'lines' (one hex share per line) or 'json' (array of hex strings)
    """
    encoded = [encode_share(share) for share in shares]
    if fmt == 'lines':
        return '\n'.join(encoded) + '\n'
    if fmt == 'json':
        return json.dumps(encoded)
    raise ValueError(f"Unknown share format {fmt!r}, expected one of {FORMATS}")


def load_shares(text: str) -> List[bytes]:
    """
    Parse a share set written by `dump_shares`.

    Text starting with '[' is read as a JSON array; otherwise every
    non-blank line is one share.

    Raises:
        ShareFormatError: If the JSON is invalid or any share fails to decode
    """
    stripped = text.strip()
    if stripped.startswith('['):
        try:
            items = json.loads(stripped)
        except json.JSONDecodeError as e:
            raise ShareFormatError(f"Invalid JSON share set: {e}") from e
        if not all(isinstance(item, str) for item in items):
            raise ShareFormatError("JSON share set must be an array of hex strings")
    else:
        items = [line for line in stripped.splitlines() if line.strip()]

    shares = []
    for i, item in enumerate(items, 1):
        try:
            shares.append(decode_share(item))
        except ShareFormatError as e:
            raise ShareFormatError(f"Share {i}: {e}") from e
    return shares
