import logging
import sys
import time

from pythonjsonlogger.json import JsonFormatter


class UTCJsonFormatter(JsonFormatter):
    converter = time.gmtime


class StoreContextFilter(logging.Filter):
    """Stamp every record with the service name and the active storage backend."""

    def __init__(self, backend: str | None) -> None:
        super().__init__()
        self.backend = backend

    def filter(self, record: logging.LogRecord) -> bool:
        record.service = "burnread"
        if self.backend and not hasattr(record, "backend"):
            record.backend = self.backend
        return True


def setup_logging(level: str = "INFO", *, backend: str | None = None) -> None:
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level.upper())

    handler = logging.StreamHandler(sys.stdout)
    fmt = "%(asctime)s %(levelname)s %(name)s %(message)s"
    handler.setFormatter(UTCJsonFormatter(fmt))
    handler.addFilter(StoreContextFilter(backend))
    root.addHandler(handler)

    # message ids travel in URLs; keep them out of access logs
    logging.getLogger("uvicorn.access").setLevel("WARNING")
