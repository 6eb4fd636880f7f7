# gostpay/charset.py
import enum

from gostpay.errors import DecodingError, EncodingError, UnknownEncodingCode


class PaymentEncoding(enum.Enum):
    """Charset code of the header (byte 6) and the Python codec behind it."""

    WIN1251 = (ord("1"), "cp1251", "Windows-1251")
    UTF8 = (ord("2"), "utf-8", "UTF-8")
    KOI8R = (ord("3"), "koi8_r", "KOI8-R")

    def __init__(self, code: int, codec: str, title: str):
        self.code = code
        self.codec = codec
        self.title = title

    @classmethod
    def from_code(cls, code: int) -> "PaymentEncoding":
        for encoding in cls:
            if encoding.code == code:
                return encoding
        raise UnknownEncodingCode(code)

    def __str__(self):
        return self.title


def decode_body(encoding: PaymentEncoding, data: bytes, lossy: bool = False) -> str:
    """Decode the payment body; lossy decoding puts U+FFFD in place of bad bytes."""
    if lossy:
        return bytes(data).decode(encoding.codec, errors="replace")
    try:
        return bytes(data).decode(encoding.codec, errors="strict")
    except UnicodeDecodeError as e:
        raise DecodingError(encoding.title) from e


def encode_text(encoding: PaymentEncoding, text: str) -> bytes:
    try:
        return text.encode(encoding.codec, errors="strict")
    except UnicodeEncodeError as e:
        raise EncodingError(encoding.title) from e
