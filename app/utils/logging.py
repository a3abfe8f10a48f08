import logging
import sys

from pythonjsonlogger import jsonlogger

# Stable JSON keys for log shippers: "timestamp", "logger" and "level"
_RENAMED_FIELDS = {"asctime": "timestamp", "name": "logger", "levelname": "level"}


def build_formatter(service_name: str) -> jsonlogger.JsonFormatter:
    return jsonlogger.JsonFormatter(
        fmt="%(asctime)s %(name)s %(levelname)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
        rename_fields=_RENAMED_FIELDS,
        static_fields={"service": service_name},
    )


def setup_logging(log_level: str = "INFO", service_name: str = "eatmore-graphql") -> None:
    """Route every logger through one JSON handler on stdout, tagged with the service name."""
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    if root_logger.handlers:
        root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(build_formatter(service_name))
    root_logger.addHandler(handler)

    # SQL statements are traced by the SQLAlchemy instrumentor instead
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
