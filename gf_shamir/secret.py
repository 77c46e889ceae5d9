"""
Secret inputs and secret buffers.

`split` takes anything byte-like through `as_secret`: raw buffers are
viewed without copying, text is encoded, and sequences of ints are packed.
Callers with their own container can implement the `Secret` protocol
directly.
"""

import ctypes
from typing import Iterator, Protocol, runtime_checkable


@runtime_checkable
class Secret(Protocol):
    """What split needs from a secret: emptiness, length, and its bytes in order."""

    def is_empty(self) -> bool:
        ...

    def __len__(self) -> int:
        ...

    def __iter__(self) -> Iterator[int]:
        ...


class SecretBytes:
    """Read-only, zero-copy view over a contiguous byte buffer."""

    __slots__ = ('_view',)

    def __init__(self, buffer):
        view = memoryview(buffer)
        if not view.c_contiguous:
            raise ValueError("Secret buffer must be contiguous")
        if view.format != 'B' or view.ndim != 1:
            view = view.cast('B')
        self._view = view.toreadonly()

    def is_empty(self) -> bool:
        return self._view.nbytes == 0

    def __len__(self) -> int:
        return self._view.nbytes

    def __iter__(self) -> Iterator[int]:
        return iter(self._view)

    def __repr__(self) -> str:
        # Never echo the contents.
        return f"SecretBytes(<{len(self)} bytes>)"


def as_secret(value, encoding: str = 'utf-8') -> Secret:
    """
    Adapt `value` to the `Secret` protocol.

    Args:
        value: bytes, bytearray, memoryview or any other buffer object;
            a str; a sequence of ints in 0..255; or a `Secret`.
        encoding: Text encoding applied to str values.

    Raises:
        TypeError: If `value` is none of the above.
        ValueError: If a sequence holds values outside 0..255.
    """
    if isinstance(value, SecretBytes):
        return value
    if isinstance(value, str):
        return SecretBytes(value.encode(encoding))
    try:
        return SecretBytes(value)
    except TypeError:
        pass
    if isinstance(value, Secret):
        return value
    if isinstance(value, (list, tuple, range)):
        return SecretBytes(bytes(value))
    raise TypeError(f"Cannot use {type(value).__name__} as a secret")


def wipe(buffer) -> None:
    """Overwrite a writable buffer (bytearray, writable memoryview) with zeros."""
    with memoryview(buffer) as view:
        size = view.nbytes
    if size == 0:
        return
    raw = (ctypes.c_char * size).from_buffer(buffer)
    ctypes.memset(raw, 0, size)
