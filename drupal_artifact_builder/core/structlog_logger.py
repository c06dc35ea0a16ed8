"""Structlog logger factory and utilities for the artifact builder."""

import logging
from typing import Any

import structlog


def get_struct_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger with the given name.

    Args:
        name: The logger name, usually __name__

    Returns:
        A bound structlog logger instance

    Note: For exception logging with debug stack traces, use this pattern:
        try:
            # some operation
        except Exception as e:
            logger.error("operation_failed", error=str(e), exc_info=debug_enabled())
    """
    return structlog.get_logger(name)  # type: ignore[no-any-return]


def debug_enabled() -> bool:
    """Whether stack traces should accompany error events."""
    return logging.getLogger().isEnabledFor(logging.DEBUG)


class StructlogMixin:
    """Mixin class adding a structured logger bound to the component name.

    Components that expose a ``root`` attribute get it bound as well, so every
    event records which project tree it was about.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._logger: structlog.stdlib.BoundLogger | None = None

    @property
    def logger(self) -> structlog.stdlib.BoundLogger:
        """Get or create a logger for this component with bound context."""
        if getattr(self, "_logger", None) is None:
            base_logger = get_struct_logger(self.__class__.__module__)

            context: dict[str, Any] = {"component": self.__class__.__name__}
            if hasattr(self, "root"):
                context["root"] = str(self.root)

            self._logger = base_logger.bind(**context)

        return self._logger  # type: ignore[return-value]
