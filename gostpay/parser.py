# gostpay/parser.py
"""
Parsers for GOST R 56042 payment strings.

Three policies share the header checks and differ in how they treat the body:

  StrictParser               any bad pair fails the whole decode; required
                             requisites must come first, in order
  RequisiteToleranceParser   bad pairs are dropped; required order enforced
  LooseParser                bad pairs are dropped; no order check; lossy
                             body decoding; text input may declare any charset
"""
from __future__ import annotations

import enum
import logging
from typing import List, Sequence, Type, Union

from gostpay.charset import decode_body
from gostpay.errors import PaymentError, WrongPair, WrongRequiredRequisiteOrder
from gostpay.extensions import CustomRequisites, NoCustomRequisites
from gostpay.header import HEADER_SIZE, VERSION_0001, normalize_version, read_header, read_header_text
from gostpay.payment import Payment
from gostpay.requisites import REQUIRED_KINDS, Requisite

LOG = logging.getLogger("gostpay.parser")
LOG.addHandler(logging.NullHandler())

EMPTY_PLACEHOLDER = "empty"


class ParserPolicy(str, enum.Enum):
    STRICT = "strict"
    REQUISITE_TOLERANT = "requisite_tolerant"
    LOOSE = "loose"


class PaymentParser:
    policy: ParserPolicy
    # drop pairs that fail to parse instead of failing the decode
    tolerant = False
    check_order = True
    # text input must declare UTF-8
    require_utf8 = True
    lossy = False

    def __init__(
        self,
        version: Union[str, bytes] = VERSION_0001,
        extensions: Type[CustomRequisites] = NoCustomRequisites,
    ):
        self.version = normalize_version(version)
        self.extensions = extensions

    def __repr__(self):
        return f"{type(self).__name__}(version={self.version!r}, extensions={self.extensions.__name__})"

    def with_version(self, version: Union[str, bytes]) -> "PaymentParser":
        self.version = normalize_version(version)
        return self

    def parse_from_str(self, text: str) -> Payment:
        """Parse a payment string whose body is already decoded text."""
        header = read_header_text(text, self.version, require_utf8=self.require_utf8)
        requisites = self.read_requisites(text[HEADER_SIZE:], header.separator)
        if self.check_order:
            validate_required_requisites(requisites)
        return Payment(header=header, requisites=requisites)

    def parse_from_bytes(self, data: bytes) -> Payment:
        header = read_header(data, self.version)
        body = decode_body(header.encoding, data[HEADER_SIZE:], lossy=self.lossy)
        requisites = self.read_requisites(body, header.separator)
        if self.check_order:
            validate_required_requisites(requisites)
        return Payment(header=header, requisites=requisites)

    def read_requisites(self, body: str, separator: str) -> List[Requisite]:
        requisites = []
        for chunk in body.split(separator):
            try:
                requisites.append(self._parse_chunk(chunk))
            except PaymentError as e:
                if not self.tolerant:
                    raise
                LOG.debug("dropping pair %r: %s", chunk, e)
        return requisites

    def _parse_chunk(self, chunk: str) -> Requisite:
        key, eq, value = chunk.partition("=")
        if not eq:
            raise WrongPair(chunk, "")
        return Requisite.from_pair(key, value, self.extensions)


class StrictParser(PaymentParser):
    policy = ParserPolicy.STRICT


class RequisiteToleranceParser(PaymentParser):
    policy = ParserPolicy.REQUISITE_TOLERANT
    tolerant = True


class LooseParser(PaymentParser):
    policy = ParserPolicy.LOOSE
    tolerant = True
    check_order = False
    require_utf8 = False
    lossy = True


_PARSERS = {
    ParserPolicy.STRICT: StrictParser,
    ParserPolicy.REQUISITE_TOLERANT: RequisiteToleranceParser,
    ParserPolicy.LOOSE: LooseParser,
}


def make_parser(
    policy: Union[ParserPolicy, str] = ParserPolicy.STRICT,
    version: Union[str, bytes] = VERSION_0001,
    extensions: Type[CustomRequisites] = NoCustomRequisites,
) -> PaymentParser:
    return _PARSERS[ParserPolicy(policy)](version=version, extensions=extensions)


def validate_required_requisites(requisites: Sequence[Requisite]) -> None:
    """First five requisites must be Name, PersonalAcc, BankName, BIC, CorrespAcc."""
    for position, expected in enumerate(REQUIRED_KINDS):
        found = requisites[position] if position < len(requisites) else None
        if found is None or found.kind is not expected:
            raise WrongRequiredRequisiteOrder(
                passed=found.key if found is not None else EMPTY_PLACEHOLDER,
                expected=expected.key,
            )
