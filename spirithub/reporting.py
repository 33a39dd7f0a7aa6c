# spirithub/reporting.py
"""
Raportare centralizată a erorilor peste modulul logging.

capture_exception / capture_message primesc un context opțional
(source, tags, extra) care ajunge în mesajul de log și în `extra`.
"""

from typing import Any, Dict, Optional
import json
import logging

logger = logging.getLogger("spirithub.reporting")
logger.addHandler(logging.NullHandler())


def _format_context(context: Optional[Dict[str, Any]]) -> str:
    if not context or not context.get("extra"):
        return ""
    try:
        return " " + json.dumps(context["extra"], ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        return " " + str(context["extra"])


def capture_exception(error: Any, context: Optional[Dict[str, Any]] = None) -> None:
    """Înregistrează o excepție (sau orice valoare, convertită la Exception)."""
    if not isinstance(error, BaseException):
        error = Exception(str(error))
    source = (context or {}).get("source") or "Unknown"
    logger.error(
        "[%s] %s%s", source, error, _format_context(context),
        exc_info=(type(error), error, error.__traceback__),
        extra={"source": source, "tags": (context or {}).get("tags") or {}},
    )


def capture_message(message: str, context: Optional[Dict[str, Any]] = None) -> None:
    """Avertisment non-critic."""
    source = (context or {}).get("source") or "App"
    logger.warning(
        "[%s] %s%s", source, message, _format_context(context),
        extra={"source": source, "tags": (context or {}).get("tags") or {}},
    )
