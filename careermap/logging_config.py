## Logging setup (stdlib logging, one stream handler)
import logging
import re
import sys

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class SensitiveDataFilter(logging.Filter):
    """Mask API keys and bearer tokens in log messages and their arguments."""

    SENSITIVE_PATTERNS = [
        (re.compile(r'(api[_-]?key["\']?\s*[:=]\s*["\']?)[^"\'\s&]+', re.IGNORECASE), r"\1***"),
        (re.compile(r"(x-goog-api-key:\s*)\S+", re.IGNORECASE), r"\1***"),
        (re.compile(r"([?&]key=)[^&\s]+"), r"\1***"),
        (re.compile(r"(Bearer\s+)[^\s\"]+"), r"\1***"),
    ]

    def _mask(self, value: str) -> str:
        for pattern, replacement in self.SENSITIVE_PATTERNS:
            value = pattern.sub(replacement, value)
        return value

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = self._mask(record.msg)
        if isinstance(record.args, tuple):
            record.args = tuple(
                self._mask(arg) if isinstance(arg, str) else arg for arg in record.args
            )
        return True


def configure_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    root.setLevel(level.upper())

    # Idempotent: create_app() may run more than once per process (tests).
    for handler in root.handlers:
        if getattr(handler, "_careermap", False):
            return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    handler.addFilter(SensitiveDataFilter())
    handler._careermap = True
    root.addHandler(handler)
