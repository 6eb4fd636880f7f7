# gostpay/api/payments.py
import base64
import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from gostpay.charset import PaymentEncoding
from gostpay.config import settings
from gostpay.errors import LengthMismatch, PaymentError
from gostpay.parser import ParserPolicy, make_parser
from gostpay.payment import Payment, RequiredRequisites
from gostpay.requisites import Requisite

LOG = logging.getLogger("gostpay.api.payments")
router = APIRouter(prefix="/payments", tags=["payments"])

ENCODINGS = {
    "win1251": PaymentEncoding.WIN1251,
    "utf8": PaymentEncoding.UTF8,
    "koi8r": PaymentEncoding.KOI8R,
}


class RequisitePair(BaseModel):
    key: str
    value: str


class HeaderModel(BaseModel):
    format_id: str
    version: str
    encoding: str
    separator: str


class PaymentResponse(BaseModel):
    policy: ParserPolicy
    header: HeaderModel
    requisites: List[RequisitePair]


class DecodeTextRequest(BaseModel):
    payload: str
    policy: Optional[ParserPolicy] = None


class EncodeRequest(BaseModel):
    name: str
    personal_acc: str
    bank_name: str
    bic: str
    corresp_acc: str
    additional: List[RequisitePair] = []
    encoding: str = "utf8"
    separator: Optional[str] = None
    version: Optional[str] = None


class EncodeResponse(BaseModel):
    payload: str
    payload_base64: str
    size: int


def codec_error(e: Exception) -> HTTPException:
    LOG.info("payment rejected: %s: %s", type(e).__name__, e)
    return HTTPException(status_code=422, detail={"error": type(e).__name__, "detail": str(e)})


def to_response(payment: Payment, policy: ParserPolicy) -> PaymentResponse:
    header = payment.header
    return PaymentResponse(
        policy=policy,
        header=HeaderModel(
            format_id=header.format_id,
            version=header.version,
            encoding=header.encoding.name.lower(),
            separator=header.separator,
        ),
        requisites=[RequisitePair(key=r.key, value=r.value) for r in payment.requisites],
    )


@router.post("/decode", response_model=PaymentResponse)
async def decode_payment(request: Request, policy: Optional[ParserPolicy] = None):
    """Decode a raw payment string sent as the request body."""
    policy = policy or settings.PARSER_POLICY
    data = await request.body()
    parser = make_parser(policy, version=settings.FORMAT_VERSION)
    try:
        payment = parser.parse_from_bytes(data)
    except PaymentError as e:
        raise codec_error(e) from e
    LOG.info("decoded payment (policy=%s, requisites=%d)", policy.value, len(payment.requisites))
    return to_response(payment, policy)


@router.post("/decode-text", response_model=PaymentResponse)
async def decode_payment_text(req: DecodeTextRequest):
    policy = req.policy or settings.PARSER_POLICY
    parser = make_parser(policy, version=settings.FORMAT_VERSION)
    try:
        payment = parser.parse_from_str(req.payload)
    except PaymentError as e:
        raise codec_error(e) from e
    LOG.info("decoded payment text (policy=%s, requisites=%d)", policy.value, len(payment.requisites))
    return to_response(payment, policy)


@router.post("/encode", response_model=EncodeResponse)
async def encode_payment(req: EncodeRequest):
    encoding = ENCODINGS.get(req.encoding.lower())
    if encoding is None:
        raise HTTPException(status_code=400, detail={"error": "UnknownEncoding", "detail": f"choose one of {sorted(ENCODINGS)}"})

    try:
        required = RequiredRequisites(
            name=req.name,
            personal_acc=req.personal_acc,
            bank_name=req.bank_name,
            bic=req.bic,
            corresp_acc=req.corresp_acc,
        )
        additional = [Requisite.from_pair(p.key, p.value) for p in req.additional]
    except (PaymentError, LengthMismatch) as e:
        raise codec_error(e) from e

    try:
        payment = (
            Payment.builder(required)
            .with_version(req.version or settings.FORMAT_VERSION)
            .with_encoding(encoding)
            .with_separator(req.separator or settings.DEFAULT_SEPARATOR)
            .with_additional_requisites(additional)
            .build()
        )
    except ValueError as e:
        LOG.info("payment request refused: %s", e)
        raise HTTPException(status_code=400, detail={"error": type(e).__name__, "detail": str(e)}) from e

    try:
        data = payment.to_bytes()
    except PaymentError as e:
        raise codec_error(e) from e

    return EncodeResponse(
        payload=data.decode("utf-8", errors="replace"),
        payload_base64=base64.b64encode(data).decode("ascii"),
        size=len(data),
    )
