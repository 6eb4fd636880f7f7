# gostpay/string_types.py
"""
Text types with a character-count bound.

Both types are ``str`` subclasses, so they compare, sort and hash exactly like
the text they wrap. Lengths are counted in code points, not bytes.
"""
from __future__ import annotations

from gostpay.errors import LengthMismatch, TooShort


class ExactSizeText(str):
    """Text of exactly ``size`` characters."""

    size: int

    def __new__(cls, text: str, size: int):
        text = str(text)
        if len(text) != size:
            raise LengthMismatch(text, size, exact=True)
        return cls._make(text, size)

    @classmethod
    def _make(cls, text: str, size: int) -> "ExactSizeText":
        obj = str.__new__(cls, text)
        obj.size = size
        return obj

    @classmethod
    def new(cls, text: str, size: int) -> "ExactSizeText":
        return cls(text, size)

    @classmethod
    def new_truncating(cls, text: str, size: int) -> "ExactSizeText":
        """Cut longer text down to ``size``; shorter text raises TooShort."""
        text = str(text)
        if len(text) < size:
            raise TooShort(text, size, exact=True)
        return cls._make(text[:size], size)

    @classmethod
    def new_unchecked(cls, text: str, size: int) -> "ExactSizeText":
        assert len(text) == size, f"{text!r} is not {size} characters long"
        return cls._make(str(text), size)

    def __repr__(self):
        return f"{type(self).__name__}({str(self)!r}, {self.size})"

    def __reduce__(self):
        return (type(self)._make, (str(self), self.size))


class MaxSizeText(str):
    """Text of at most ``size`` characters."""

    size: int

    def __new__(cls, text: str, size: int):
        text = str(text)
        if len(text) > size:
            raise LengthMismatch(text, size, exact=False)
        return cls._make(text, size)

    @classmethod
    def _make(cls, text: str, size: int) -> "MaxSizeText":
        obj = str.__new__(cls, text)
        obj.size = size
        return obj

    @classmethod
    def new(cls, text: str, size: int) -> "MaxSizeText":
        return cls(text, size)

    @classmethod
    def new_truncating(cls, text: str, size: int) -> "MaxSizeText":
        return cls._make(str(text)[:size], size)

    @classmethod
    def new_unchecked(cls, text: str, size: int) -> "MaxSizeText":
        assert len(text) <= size, f"{text!r} is longer than {size} characters"
        return cls._make(str(text), size)

    def __repr__(self):
        return f"{type(self).__name__}({str(self)!r}, {self.size})"

    def __reduce__(self):
        return (type(self)._make, (str(self), self.size))


def to_exact_size(text: str, size: int) -> ExactSizeText:
    return ExactSizeText(text, size)


def to_max_size(text: str, size: int) -> MaxSizeText:
    return MaxSizeText(text, size)
