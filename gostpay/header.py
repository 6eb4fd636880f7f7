# gostpay/header.py
"""
Fixed 8-byte preamble of a payment string:

    0-1  format id   "ST"
    2-5  version     "0001"
    6    charset     '1' Windows-1251, '2' UTF-8, '3' KOI8-R
    7    separator   '|' by default
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from gostpay.charset import PaymentEncoding
from gostpay.errors import CorruptedHeader, UnsupportedVersion, WrongFormatId

FORMAT_ID = b"ST"
VERSION_0001 = b"0001"
HEADER_SIZE = 8
DEFAULT_SEPARATOR = "|"


def normalize_version(version: Union[str, bytes]) -> bytes:
    """Accept "0001" or b"0001"; anything but 4 ASCII characters is a ValueError."""
    if isinstance(version, str):
        try:
            version = version.encode("ascii")
        except UnicodeEncodeError:
            raise ValueError(f"version must be ASCII, got {version!r}") from None
    version = bytes(version)
    if len(version) != 4 or not version.isascii():
        raise ValueError(f"version must be 4 ASCII characters, got {version!r}")
    return version


@dataclass(frozen=True)
class PaymentHeader:
    version: str = VERSION_0001.decode("ascii")
    encoding: PaymentEncoding = PaymentEncoding.UTF8
    separator: str = DEFAULT_SEPARATOR
    format_id: str = FORMAT_ID.decode("ascii")

    def preamble(self) -> bytes:
        """Format id, version and charset code. The separator goes before every pair."""
        return FORMAT_ID + self.version.encode("latin-1") + bytes([self.encoding.code])

    def separator_bytes(self) -> bytes:
        return self.separator.encode("latin-1")


def read_header(data: bytes, version: bytes = VERSION_0001) -> PaymentHeader:
    if len(data) < HEADER_SIZE:
        raise CorruptedHeader(f"header needs {HEADER_SIZE} bytes, got {len(data)}")

    format_id = bytes(data[0:2])
    if format_id != FORMAT_ID:
        raise WrongFormatId(format_id.decode("latin-1"))

    passed = bytes(data[2:6])
    if passed != version:
        raise UnsupportedVersion(passed=passed.decode("latin-1"), current=version.decode("latin-1"))

    encoding = PaymentEncoding.from_code(data[6])
    separator = chr(data[7])

    return PaymentHeader(
        version=version.decode("ascii"),
        encoding=encoding,
        separator=separator,
    )


def read_header_text(text: str, version: bytes = VERSION_0001, require_utf8: bool = True) -> PaymentHeader:
    """
    Read the header of an already decoded payment string.

    Text input implies the body went through UTF-8 upstream, so unless
    ``require_utf8`` is off, any other declared charset is rejected.
    """
    head = text[:HEADER_SIZE]
    if not head.isascii():
        raise CorruptedHeader(f"header contains non-ASCII characters: {head!r}")

    header = read_header(head.encode("ascii"), version)

    if require_utf8 and header.encoding is not PaymentEncoding.UTF8:
        raise CorruptedHeader(f"text payload must declare UTF-8, got {header.encoding}")

    return header
