# gostpay/tests/conftest.py
import pytest

from gostpay.payment import RequiredRequisites

SCENARIO_A = (
    "ST00012|Name=ACME|PersonalAcc=12345678901234567890|BankName=Bank"
    "|BIC=044525225|CorrespAcc=30101810400000000225"
)

THREE_WHALES = (
    "ST00012|Name=ООО «Три кита»|PersonalAcc=40702810138250123017|BankName=ОАО \"БАНК\""
    "|BIC=044525225|CorrespAcc=30101810400000000225"
)


@pytest.fixture
def scenario_a() -> str:
    return SCENARIO_A


@pytest.fixture
def three_whales() -> str:
    return THREE_WHALES


@pytest.fixture
def acme() -> RequiredRequisites:
    return RequiredRequisites(
        name="ACME",
        personal_acc="12345678901234567890",
        bank_name="Bank",
        bic="044525225",
        corresp_acc="30101810400000000225",
    )


@pytest.fixture
def whales() -> RequiredRequisites:
    return RequiredRequisites(
        name="ООО «Три кита»",
        personal_acc="40702810138250123017",
        bank_name="ОАО \"БАНК\"",
        bic="044525225",
        corresp_acc="30101810400000000225",
    )


@pytest.fixture
def whales_plain() -> RequiredRequisites:
    """Same payee without guillemets, so it fits KOI8-R as well."""
    return RequiredRequisites(
        name="ООО Три кита",
        personal_acc="40702810138250123017",
        bank_name="ОАО \"БАНК\"",
        bic="044525225",
        corresp_acc="30101810400000000225",
    )
