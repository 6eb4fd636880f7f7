# gostpay/server.py
# FastAPI app exposing the codec; run with `uvicorn gostpay.server:app`.
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gostpay.api.payments import router as payments_router
from gostpay.config import settings
from gostpay.telemetry import configure_logging

configure_logging(settings)
LOG = logging.getLogger("gostpay.server")

app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(payments_router)


@app.get("/health")
async def health():
    return {"status": "ok", "service": settings.APP_NAME}


LOG.info("payment codec service ready (version=%s, policy=%s)", settings.FORMAT_VERSION, settings.PARSER_POLICY.value)
