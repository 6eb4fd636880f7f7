# gostpay/payment.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple, Type, Union

from gostpay.charset import PaymentEncoding, encode_text
from gostpay.errors import RequiredRequisiteNotPresented
from gostpay.extensions import CustomRequisites, NoCustomRequisites
from gostpay.header import DEFAULT_SEPARATOR, VERSION_0001, PaymentHeader, normalize_version
from gostpay.requisites import REQUIRED_KINDS, Requisite
from gostpay.string_types import ExactSizeText, MaxSizeText

LOG = logging.getLogger("gostpay.payment")
LOG.addHandler(logging.NullHandler())


@dataclass(frozen=True)
class RequiredRequisites:
    """
    The five requisites every payment starts with.

    Values are checked against their size constraints here, before any payment
    is built: a missing value raises RequiredRequisiteNotPresented, a value of
    the wrong length raises LengthMismatch.
    """

    name: MaxSizeText
    personal_acc: ExactSizeText
    bank_name: MaxSizeText
    bic: ExactSizeText
    corresp_acc: MaxSizeText

    def __post_init__(self):
        for attr, kind in zip(_REQUIRED_ATTRS, REQUIRED_KINDS):
            raw = getattr(self, attr)
            if raw is None:
                raise RequiredRequisiteNotPresented(kind.key)
            object.__setattr__(self, attr, Requisite(kind, raw).content)

    def to_requisites(self) -> List[Requisite]:
        return [Requisite(kind, getattr(self, attr)) for attr, kind in zip(_REQUIRED_ATTRS, REQUIRED_KINDS)]


_REQUIRED_ATTRS = ("name", "personal_acc", "bank_name", "bic", "corresp_acc")


@dataclass(frozen=True)
class Payment:
    """
    Header plus ordered requisites of a GOST R 56042 payment string.

    Build one with ``Payment.builder`` or get one from a parser. Payments are
    immutable; encoding produces new bytes and leaves the payment untouched.
    """

    header: PaymentHeader
    requisites: Tuple[Requisite, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "requisites", tuple(self.requisites))

    @staticmethod
    def builder(required: RequiredRequisites) -> "PaymentBuilder":
        return PaymentBuilder(required)

    @staticmethod
    def parser(extensions: Type[CustomRequisites] = NoCustomRequisites):
        from gostpay.parser import StrictParser

        return StrictParser(extensions=extensions)

    @staticmethod
    def requisite_tolerance_parser(extensions: Type[CustomRequisites] = NoCustomRequisites):
        from gostpay.parser import RequisiteToleranceParser

        return RequisiteToleranceParser(extensions=extensions)

    @staticmethod
    def loose_parser(extensions: Type[CustomRequisites] = NoCustomRequisites):
        from gostpay.parser import LooseParser

        return LooseParser(extensions=extensions)

    def get(self, key: str) -> Optional[str]:
        """Value of the first requisite with this key."""
        for requisite in self.requisites:
            if requisite.key == key:
                return requisite.value
        return None

    def to_bytes(self) -> bytes:
        buffer = bytearray()
        self.write_to(buffer)
        return bytes(buffer)

    def write_to(self, buffer: bytearray) -> None:
        """Append the encoded payment to ``buffer``; raises EncodingError on unrepresentable text."""
        separator = self.header.separator_bytes()
        out = bytearray(self.header.preamble())
        for requisite in self.requisites:
            out += separator
            out += encode_text(self.header.encoding, requisite.to_pair())
        # buffer is untouched unless every pair encoded
        buffer += out

    def to_utf8_lossy(self) -> str:
        return self.to_bytes().decode("utf-8", errors="replace")


class PaymentBuilder:
    def __init__(self, required: RequiredRequisites):
        self._version = VERSION_0001.decode("ascii")
        self._encoding = PaymentEncoding.UTF8
        self._separator = DEFAULT_SEPARATOR
        self._requisites: List[Requisite] = required.to_requisites()

    def with_version(self, version: Union[str, bytes]) -> "PaymentBuilder":
        self._version = normalize_version(version).decode("ascii")
        return self

    def with_encoding(self, encoding: PaymentEncoding) -> "PaymentBuilder":
        self._encoding = PaymentEncoding(encoding)
        return self

    def with_separator(self, separator: str) -> "PaymentBuilder":
        if len(separator) != 1 or not separator.isascii():
            raise ValueError(f"separator must be a single ASCII character, got {separator!r}")
        if separator == "=":
            raise ValueError("separator cannot be '=', it splits keys from values")
        self._separator = separator
        return self

    def add_requisite(self, requisite: Requisite) -> "PaymentBuilder":
        if requisite.is_required:
            raise ValueError(f"{requisite.key} is a required requisite and is already set by the builder")
        self._requisites.append(requisite)
        return self

    def with_additional_requisites(self, requisites: Iterable[Requisite]) -> "PaymentBuilder":
        for requisite in requisites:
            self.add_requisite(requisite)
        return self

    def build(self) -> Payment:
        for requisite in self._requisites:
            if self._separator in requisite.value or self._separator in requisite.key or "=" in requisite.key:
                raise ValueError(
                    f"{requisite.key}={requisite.value} cannot be written with separator {self._separator!r}"
                )
        header = PaymentHeader(version=self._version, encoding=self._encoding, separator=self._separator)
        LOG.debug("built payment with %d requisites (encoding=%s)", len(self._requisites), header.encoding)
        return Payment(header=header, requisites=self._requisites)
