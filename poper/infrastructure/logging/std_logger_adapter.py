import logging
from typing import Any, Dict, Optional

from poper.domain.ports.services.logger import LoggerPort


class StdLoggerAdapter(LoggerPort):
    """LoggerPort over the stdlib logging module, prefixing bound context as key=value pairs"""

    def __init__(self, name: Optional[str] = None, context: Optional[Dict[str, Any]] = None):
        self._name = name
        self._logger = logging.getLogger(name)
        self._context = dict(context or {})

    def bind(self, **context: Any) -> "StdLoggerAdapter":
        return StdLoggerAdapter(self._name, {**self._context, **context})

    def _format(self, msg: str) -> str:
        if not self._context:
            return msg
        prefix = " ".join(f"{key}={value}" for key, value in self._context.items())
        return f"[{prefix}] {msg}"

    def debug(self, msg: str, *args, **kwargs) -> None:
        self._logger.debug(self._format(msg), *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        self._logger.info(self._format(msg), *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self._logger.warning(self._format(msg), *args, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        self._logger.error(self._format(msg), *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs) -> None:
        self._logger.exception(self._format(msg), *args, **kwargs)
