"""gf_shamir: Shamir's Secret Sharing over GF(2^8) for secrets of any length."""

from .shamir import split, combine, validate_shares
from .errors import (
    ErrorKind, SecretSharingError, InvalidParameters, InsufficientShares,
    MalformedShare, InconsistentShareLength, DuplicateShare,
)
from .secret import Secret, SecretBytes, as_secret, wipe
from .codec import encode_share, decode_share, dump_shares, load_shares, ShareFormatError

__version__ = '1.0.0'

__all__ = [
    'split', 'combine', 'validate_shares',
    'ErrorKind', 'SecretSharingError', 'InvalidParameters', 'InsufficientShares',
    'MalformedShare', 'InconsistentShareLength', 'DuplicateShare',
    'Secret', 'SecretBytes', 'as_secret', 'wipe',
    'encode_share', 'decode_share', 'dump_shares', 'load_shares', 'ShareFormatError',
]
