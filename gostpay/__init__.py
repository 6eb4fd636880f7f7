# gostpay/__init__.py
# Codec for GOST R 56042 payment strings ("ST00012|Name=...|PersonalAcc=...").
from gostpay.charset import PaymentEncoding
from gostpay.errors import (
    CorruptedHeader,
    DecodingError,
    EncodingError,
    LengthMismatch,
    PaymentError,
    RequiredRequisiteNotPresented,
    TooShort,
    UnknownEncodingCode,
    UnknownPair,
    UnknownTechCode,
    UnsupportedVersion,
    WrongFormatId,
    WrongPair,
    WrongRequiredRequisiteOrder,
)
from gostpay.extensions import CustomRequisites, NoCustomRequisites
from gostpay.header import FORMAT_ID, VERSION_0001, PaymentHeader
from gostpay.parser import (
    LooseParser,
    ParserPolicy,
    PaymentParser,
    RequisiteToleranceParser,
    StrictParser,
    make_parser,
)
from gostpay.payment import Payment, PaymentBuilder, RequiredRequisites
from gostpay.requisites import REQUIRED_KINDS, Requisite, RequisiteKind, TechCode
from gostpay.string_types import ExactSizeText, MaxSizeText, to_exact_size, to_max_size

__all__ = [
    "CorruptedHeader",
    "CustomRequisites",
    "DecodingError",
    "EncodingError",
    "ExactSizeText",
    "FORMAT_ID",
    "LengthMismatch",
    "LooseParser",
    "MaxSizeText",
    "NoCustomRequisites",
    "ParserPolicy",
    "Payment",
    "PaymentBuilder",
    "PaymentEncoding",
    "PaymentError",
    "PaymentHeader",
    "PaymentParser",
    "REQUIRED_KINDS",
    "RequiredRequisiteNotPresented",
    "RequiredRequisites",
    "Requisite",
    "RequisiteKind",
    "RequisiteToleranceParser",
    "StrictParser",
    "TechCode",
    "TooShort",
    "UnknownEncodingCode",
    "UnknownPair",
    "UnknownTechCode",
    "UnsupportedVersion",
    "VERSION_0001",
    "WrongFormatId",
    "WrongPair",
    "WrongRequiredRequisiteOrder",
    "make_parser",
    "to_exact_size",
    "to_max_size",
]
