# gostpay/telemetry.py
"""
JSON logging for the codec service.

Every record of the ``gostpay`` logger tree is written as one JSON object that
also names the service, the accepted format version and the default parsing
policy, so decode failures can be told apart across deployments. Handlers of
the root logger are left to the host process.
"""
import logging

from pythonjsonlogger.json import JsonFormatter

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
HANDLER_NAME = "gostpay-json"


def configure_logging(settings) -> logging.Logger:
    logger = logging.getLogger("gostpay")
    # calling twice must not double every record
    for h in list(logger.handlers):
        if h.get_name() == HANDLER_NAME:
            logger.removeHandler(h)

    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        JsonFormatter(
            fmt=LOG_FORMAT,
            static_fields={
                "service": settings.APP_NAME,
                "format_version": settings.FORMAT_VERSION,
                "parser_policy": settings.PARSER_POLICY.value,
            },
        )
    )
    logger.addHandler(handler)
    logger.setLevel(settings.LOG_LEVEL)
    logger.propagate = False
    return logger
