"""Structured JSON logging with request context fields."""

import logging
import sys
from contextvars import ContextVar

from pythonjsonlogger.json import JsonFormatter

from paygate.common.config import GatewaySettings


request_id_ctx: ContextVar[str] = ContextVar("request_id", default="")


class ContextFilter(logging.Filter):
    """Inject service name and request id into every log record."""

    def __init__(self, service_name: str) -> None:
        super().__init__()
        self.service_name = service_name

    def filter(self, record: logging.LogRecord) -> bool:
        record.service_name = self.service_name
        record.request_id = request_id_ctx.get()
        return True


def configure_logging(settings: GatewaySettings) -> None:
    """Configure root logger once per process."""

    handler = logging.StreamHandler(sys.stdout)
    context_filter = ContextFilter(settings.service_name)
    handler.addFilter(context_filter)
    formatter = JsonFormatter(
        "%(asctime)s %(levelname)s %(service_name)s %(request_id)s %(message)s"
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(settings.log_level)


logger = logging.getLogger("paygate")
