"""Errors raised by split and combine."""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Closed set of input-validation failures, each with a stable message."""

    INVALID_PARAMETERS = "invalid input parameters"
    INSUFFICIENT_SHARES = "at least two shares are required"
    MALFORMED_SHARE = "share is malformed"
    INCONSISTENT_SHARE_LENGTH = "all shares must be the same length"
    DUPLICATE_SHARE = "duplicate share detected"

    @property
    def message(self) -> str:
        return self.value


class SecretSharingError(ValueError):
    """
    Base class for split/combine failures.

    Subclasses pin `kind`; `str(err)` is the kind's message, followed by
    the optional detail.
    """

    kind: ErrorKind

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail
        message = self.kind.message
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class InvalidParameters(SecretSharingError):
    kind = ErrorKind.INVALID_PARAMETERS


class InsufficientShares(SecretSharingError):
    kind = ErrorKind.INSUFFICIENT_SHARES


class MalformedShare(SecretSharingError):
    kind = ErrorKind.MALFORMED_SHARE


class InconsistentShareLength(SecretSharingError):
    kind = ErrorKind.INCONSISTENT_SHARE_LENGTH


class DuplicateShare(SecretSharingError):
    kind = ErrorKind.DUPLICATE_SHARE
