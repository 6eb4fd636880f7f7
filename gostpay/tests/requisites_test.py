# gostpay/tests/requisites_test.py
import dataclasses

import pytest

from gostpay.errors import LengthMismatch, UnknownPair, UnknownTechCode, WrongPair
from gostpay.requisites import REQUIRED_KINDS, Requisite, RequisiteKind, TechCode
from gostpay.string_types import ExactSizeText, MaxSizeText

BUILT_IN = [kind for kind in RequisiteKind if kind is not RequisiteKind.CUSTOM]


def test_every_built_in_kind_has_a_unique_key():
    keys = [kind.key for kind in BUILT_IN]
    assert len(keys) == len(set(keys))
    assert all(key.isascii() for key in keys)
    assert RequisiteKind.CUSTOM.key is None


@pytest.mark.parametrize("kind", BUILT_IN, ids=lambda k: k.key)
def test_key_lookup_is_inverse_of_key(kind):
    assert RequisiteKind.from_key(kind.key) is kind


@pytest.mark.parametrize("kind", [k for k in BUILT_IN if k is not RequisiteKind.TECH_CODE], ids=lambda k: k.key)
def test_every_text_kind_parses_from_its_pair(kind):
    value = "1" * (kind.size or 5)
    requisite = Requisite.from_pair(kind.key, value)
    assert requisite.kind is kind
    assert requisite.key == kind.key
    assert requisite.value == value


def test_required_kinds_in_wire_order():
    assert [kind.key for kind in REQUIRED_KINDS] == ["Name", "PersonalAcc", "BankName", "BIC", "CorrespAcc"]
    assert all(kind.is_required for kind in REQUIRED_KINDS)
    assert not RequisiteKind.SUM.is_required


def test_unknown_key_is_none():
    assert RequisiteKind.from_key("Тест") is None


def test_sized_content_is_coerced():
    name = Requisite(RequisiteKind.NAME, "ACME")
    assert isinstance(name.content, MaxSizeText)
    assert name.content.size == 160

    bic = Requisite(RequisiteKind.BIC, "044525225")
    assert isinstance(bic.content, ExactSizeText)
    assert bic.content.size == 9

    last_name = Requisite(RequisiteKind.LAST_NAME, "Иванов")
    assert type(last_name.content) is str


def test_sized_content_is_checked():
    with pytest.raises(LengthMismatch):
        Requisite(RequisiteKind.SUM, "1" * 19)
    with pytest.raises(LengthMismatch):
        Requisite(RequisiteKind.BIC, MaxSizeText("0445", 9))


def test_wrong_size_from_wire_is_wrong_pair():
    with pytest.raises(WrongPair) as exc_info:
        Requisite.from_pair("PersonalAcc", "123")
    assert exc_info.value.key == "PersonalAcc"
    assert exc_info.value.value == "123"

    with pytest.raises(WrongPair):
        Requisite.from_pair("Purpose", "x" * 211)


def test_unknown_key_without_extension():
    with pytest.raises(UnknownPair) as exc_info:
        Requisite.from_pair("Тест", "42")
    assert (exc_info.value.key, exc_info.value.value) == ("Тест", "42")


def test_contract_and_pers_acc_are_recognised():
    assert Requisite.from_pair("Contract", "Д-42").kind is RequisiteKind.CONTRACT
    assert Requisite.from_pair("PersAcc", "1001").kind is RequisiteKind.PERS_ACC


def test_tech_code_codes():
    assert [code.value for code in TechCode] == [f"{i:02d}" for i in range(1, 16)]
    assert TechCode.from_code("03") is TechCode.TAXES
    for bad in ("00", "16", "1", "", "ab"):
        with pytest.raises(UnknownTechCode):
            TechCode.from_code(bad)


def test_tech_code_requisite():
    requisite = Requisite.from_pair("TechCode", "02")
    assert requisite.content is TechCode.HOUSING_AND_UTILITIES
    assert requisite.value == "02"
    assert requisite.to_pair() == "TechCode=02"
    assert Requisite(RequisiteKind.TECH_CODE, TechCode.OTHER).value == "15"

    with pytest.raises(UnknownTechCode):
        Requisite.from_pair("TechCode", "99")


def test_custom_requires_extension_object():
    with pytest.raises(TypeError):
        Requisite(RequisiteKind.CUSTOM, "Foo")


def test_requisites_are_immutable_values():
    a = Requisite(RequisiteKind.PURPOSE, "Оплата")
    b = Requisite.from_pair("Purpose", "Оплата")
    assert a == b
    assert hash(a) == hash(b)
    with pytest.raises(dataclasses.FrozenInstanceError):
        a.content = "other"
