# gostpay/errors.py
"""
Errors raised by the payment string codec.

Everything the codec rejects is a PaymentError (a ValueError), so callers can
catch one type and decide whether to retry with a more tolerant parser.
Length errors from the sized text types are kept apart: they come from
application input, not from the wire.
"""


class LengthMismatch(ValueError):
    def __init__(self, text: str, size: int, exact: bool):
        self.text = text
        self.size = size
        self.exact = exact
        bound = "exactly" if exact else "at most"
        super().__init__(f"expected {bound} {size} characters, got {len(text)}: {text!r}")


class TooShort(LengthMismatch):
    pass


class PaymentError(ValueError):
    pass


# structural


class CorruptedHeader(PaymentError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"corrupted header: {reason}")


class WrongFormatId(PaymentError):
    def __init__(self, format_id: str):
        self.format_id = format_id
        super().__init__(f"wrong format id {format_id!r}")


class UnsupportedVersion(PaymentError):
    def __init__(self, passed: str, current: str):
        self.passed = passed
        self.current = current
        super().__init__(f"version {passed} is not supported, current version is {current}")


class UnknownEncodingCode(PaymentError):
    def __init__(self, code: int):
        self.code = code
        super().__init__(f"unknown encoding code {chr(code)!r}")


# body-level


class WrongPair(PaymentError):
    def __init__(self, key: str, value: str):
        self.key = key
        self.value = value
        super().__init__(f"wrong value for pair {key}={value}")


class UnknownPair(PaymentError):
    def __init__(self, key: str, value: str):
        self.key = key
        self.value = value
        super().__init__(f"unknown requisite {key}={value}")


class UnknownTechCode(PaymentError):
    def __init__(self, code: str):
        self.code = code
        super().__init__(f"unknown tech code {code!r}")


class DecodingError(PaymentError):
    def __init__(self, encoding: str = ""):
        self.encoding = encoding
        super().__init__(f"failed to decode payment body as {encoding}" if encoding else "failed to decode payment body")


class EncodingError(PaymentError):
    def __init__(self, encoding: str = ""):
        self.encoding = encoding
        super().__init__(f"failed to encode payment body as {encoding}" if encoding else "failed to encode payment body")


# semantic


class RequiredRequisiteNotPresented(PaymentError):
    def __init__(self, field: str = ""):
        self.field = field
        super().__init__(f"required requisite {field} is not presented" if field else "required requisites are not presented")


class WrongRequiredRequisiteOrder(PaymentError):
    def __init__(self, passed: str, expected: str):
        self.passed = passed
        self.expected = expected
        super().__init__(f"wrong order of required requisites: expected {expected}, found {passed}")
