# gostpay/requisites.py
"""
Requisite dictionary of GOST R 56042.

Every built-in requisite is a member of RequisiteKind, which carries the wire
key and the size constraint of its value. A Requisite is one kind plus its
content; the only open kind is CUSTOM, whose key and value come from a host
CustomRequisites object.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Optional, Type

from gostpay.errors import LengthMismatch, PaymentError, UnknownTechCode, WrongPair
from gostpay.extensions import CustomRequisites, NoCustomRequisites
from gostpay.string_types import ExactSizeText, MaxSizeText


class TechCode(str, enum.Enum):
    """Payment purpose classification used by the receiving organisation."""

    MOBILE = "01"
    HOUSING_AND_UTILITIES = "02"
    TAXES = "03"
    SECURITY_SERVICES = "04"
    FMS = "05"
    PFR = "06"
    LOAN_REPAYMENTS = "07"
    EDUCATIONAL_INSTITUTIONS = "08"
    INTERNET_TV = "09"
    EMONEY = "10"
    VACATION = "11"
    INVESTMENT_INSURANCE = "12"
    SPORT_HEALTH = "13"
    CHARITY = "14"
    OTHER = "15"

    @classmethod
    def from_code(cls, code: str) -> "TechCode":
        try:
            return cls(code)
        except ValueError:
            raise UnknownTechCode(code) from None


class RequisiteKind(enum.Enum):
    # required, in wire order
    NAME = ("Name", MaxSizeText, 160)
    PERSONAL_ACC = ("PersonalAcc", ExactSizeText, 20)
    BANK_NAME = ("BankName", MaxSizeText, 45)
    BIC = ("BIC", ExactSizeText, 9)
    CORRESP_ACC = ("CorrespAcc", MaxSizeText, 20)

    # additional
    SUM = ("Sum", MaxSizeText, 18)  # kopecks
    PURPOSE = ("Purpose", MaxSizeText, 210)
    PAYEE_INN = ("PayeeINN", MaxSizeText, 12)
    PAYER_INN = ("PayerINN", MaxSizeText, 12)
    DRAWER_STATUS = ("DrawerStatus", MaxSizeText, 2)
    KPP = ("KPP", MaxSizeText, 9)
    CBC = ("CBC", MaxSizeText, 20)
    OKTMO = ("OKTMO", MaxSizeText, 11)
    PAYT_REASON = ("PaytReason", MaxSizeText, 2)
    TAX_PERIOD = ("TaxPeriod", MaxSizeText, 10)
    DOC_NO = ("DocNo", MaxSizeText, 15)
    DOC_DATE = ("DocDate", MaxSizeText, 10)
    TAX_PAY_KIND = ("TaxPayKind", MaxSizeText, 2)

    # other, free text
    LAST_NAME = ("LastName",)
    FIRST_NAME = ("FirstName",)
    MIDDLE_NAME = ("MiddleName",)
    PAYER_ADDRESS = ("PayerAddress",)
    PERSONAL_ACCOUNT = ("PersonalAccount",)
    DOC_IDX = ("DocIdx",)
    PENS_ACC = ("PensAcc",)
    CONTRACT = ("Contract",)
    PERS_ACC = ("PersAcc",)
    FLAT = ("Flat",)
    PHONE = ("Phone",)
    PAYER_ID_TYPE = ("PayerIdType",)
    PAYER_ID_NUM = ("PayerIdNum",)
    CHILD_FIO = ("ChildFio",)
    BIRTH_DATE = ("BirthDate",)
    PAYM_TERM = ("PaymTerm",)
    PAYM_PERIOD = ("PaymPeriod",)
    CATEGORY = ("Category",)
    SERVICE_NAME = ("ServiceName",)
    COUNTER_ID = ("CounterId",)
    COUNTER_VAL = ("CounterVal",)
    QUITT_ID = ("QuittId",)
    QUITT_DATE = ("QuittDate",)
    INST_NUM = ("InstNum",)
    CLASS_NUM = ("ClassNum",)
    SPEC_FIO = ("SpecFio",)
    ADD_AMOUNT = ("AddAmount",)  # kopecks
    RULE_ID = ("RuleId",)
    EXEC_ID = ("ExecId",)
    REG_TYPE = ("RegType",)
    UIN = ("UIN",)

    TECH_CODE = ("TechCode",)
    CUSTOM = (None,)

    def __init__(self, key: Optional[str], text_type: Optional[type] = None, size: Optional[int] = None):
        self.key = key
        self.text_type = text_type
        self.size = size

    @property
    def is_required(self) -> bool:
        return self in REQUIRED_KINDS

    @classmethod
    def from_key(cls, key: str) -> Optional["RequisiteKind"]:
        return _KINDS_BY_KEY.get(key)


REQUIRED_KINDS = (
    RequisiteKind.NAME,
    RequisiteKind.PERSONAL_ACC,
    RequisiteKind.BANK_NAME,
    RequisiteKind.BIC,
    RequisiteKind.CORRESP_ACC,
)

_KINDS_BY_KEY = {kind.key: kind for kind in RequisiteKind if kind.key is not None}


@dataclass(frozen=True)
class Requisite:
    """
    One key/value element of a payment.

    ``content`` is coerced on construction: plain text for a sized kind becomes
    the matching ExactSizeText/MaxSizeText (LengthMismatch if it does not fit),
    a TechCode may be given as its two-digit string, and CUSTOM requires a
    CustomRequisites instance.
    """

    kind: RequisiteKind
    content: Any

    def __post_init__(self):
        object.__setattr__(self, "content", _coerce(self.kind, self.content))

    @classmethod
    def custom(cls, payload: CustomRequisites) -> "Requisite":
        return cls(RequisiteKind.CUSTOM, payload)

    @classmethod
    def from_pair(
        cls,
        key: str,
        value: str,
        extensions: Type[CustomRequisites] = NoCustomRequisites,
    ) -> "Requisite":
        kind = RequisiteKind.from_key(key)
        if kind is None:
            try:
                payload = extensions.from_pair(key, value)
            except PaymentError:
                raise
            except ValueError:
                # host code may build its value with the sized text types
                raise WrongPair(key, value) from None
            return cls(RequisiteKind.CUSTOM, payload)
        try:
            return cls(kind, value)
        except LengthMismatch:
            raise WrongPair(key, value) from None

    @property
    def key(self) -> str:
        if self.kind is RequisiteKind.CUSTOM:
            return self.content.key
        return self.kind.key

    @property
    def value(self) -> str:
        if self.kind is RequisiteKind.CUSTOM:
            return self.content.value
        if self.kind is RequisiteKind.TECH_CODE:
            return self.content.value
        return str(self.content)

    @property
    def is_required(self) -> bool:
        return self.kind.is_required

    def to_pair(self) -> str:
        return f"{self.key}={self.value}"


def _coerce(kind: RequisiteKind, content):
    if kind is RequisiteKind.CUSTOM:
        if not isinstance(content, CustomRequisites):
            raise TypeError(f"custom requisite must be a CustomRequisites instance, got {type(content).__name__}")
        return content
    if kind is RequisiteKind.TECH_CODE:
        if isinstance(content, TechCode):
            return content
        return TechCode.from_code(content)
    if kind.text_type is None:
        return str(content)
    if isinstance(content, kind.text_type) and content.size == kind.size:
        return content
    return kind.text_type(content, kind.size)
