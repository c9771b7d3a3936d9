# io/route_logging.py
import json
import logging
import sys

ROOT = "route_kit"


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload, default=str)


def get_logger(name: str = ROOT, level: str | None = None) -> logging.Logger:
    """
    Package logger with a JSON stdout handler installed on the root ``route_kit`` logger.
    Child names ("concat", "route_kit.geometry") share that handler.
    """
    root = logging.getLogger(ROOT)
    if not root.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(_JsonFormatter())
        root.addHandler(h)
        root.setLevel(level or "INFO")
    elif level:
        root.setLevel(level)
    if name == ROOT:
        return root
    return logging.getLogger(name if name.startswith(ROOT + ".") else f"{ROOT}.{name}")


def emit(log: logging.Logger, level: str, msg: str, **extra) -> None:
    # structured fields ride along under record.extra
    log.log(getattr(logging, level), msg, extra={"extra": extra})
