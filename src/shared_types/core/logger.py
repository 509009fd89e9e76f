import contextvars
import logging
import sys
from typing import Optional

# Context variable naming the document currently being checked (file path, "<stdin>", ...)
_SOURCE: contextvars.ContextVar[str] = contextvars.ContextVar("source", default="-")


class _SourceFilter(logging.Filter):
    """Logging filter that injects the current document source into the record."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        record.source = _SOURCE.get()
        return True


def _build_formatter() -> logging.Formatter:
    return logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | source=%(source)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def configure_root_logger(level: str = "INFO") -> None:
    """
    Configure root logger and the shared_types logger.

    Root logger stays at INFO to keep other libraries quiet. Only the
    shared_types namespace is set to the requested level.

    Args:
        level: Log level for shared_types logs (DEBUG, INFO, WARNING, ERROR).

    Safe to call multiple times; it will not duplicate handlers.
    """
    root = logging.getLogger()
    package_logger = logging.getLogger("shared_types")

    for h in root.handlers:
        if isinstance(h, logging.StreamHandler) and any(isinstance(f, _SourceFilter) for f in h.filters):
            package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
            return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_build_formatter())
    handler.addFilter(_SourceFilter())
    # Handler passes DEBUG so the package logger level decides what shows.
    handler.setLevel(logging.DEBUG)
    root.addHandler(handler)
    root.setLevel(logging.INFO)

    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str = "shared_types") -> logging.Logger:
    """Get a module logger under the shared_types namespace.

    Handlers are left to ``configure_root_logger``; importing a module never
    touches the host application's logging setup.
    """
    return logging.getLogger(name)


def push_source(source: Optional[str]) -> Optional[contextvars.Token]:
    """Set the current document source and return a token for later reset."""
    if not source:
        return None
    return _SOURCE.set(source)


def reset_source(token: Optional[contextvars.Token]) -> None:
    """Reset the source context using the provided token (if any)."""
    if token is None:
        return
    try:
        _SOURCE.reset(token)
    except ValueError:
        # Token created in another context; leave the current value alone.
        pass