# spirithub/settings.py
"""
Setări de rulare citite din mediu (.env încărcat cu python-dotenv).

Variabilele nu sunt citite la import; get_settings() le rezolvă la cerere,
iar configure() permite suprascrierea lor în teste sau la inițializare.
"""

from typing import Dict, Any, Optional
from pathlib import Path
import os
import logging

from dotenv import load_dotenv

logger = logging.getLogger("spirithub.settings")
logger.addHandler(logging.NullHandler())

DEFAULT_TIMEZONE = "Europe/Bucharest"
DEFAULT_DB_PATH = Path.home() / ".spirithub" / "spirithub.db"

_settings: Dict[str, Any] = {
    "convex_url": None,
    "convex_deploy_key": None,
    "convex_timeout": None,
    "db_path": None,
    "timezone": None,
}
_dotenv_loaded = False


def _load_defaults_from_env() -> None:
    """Completează valorile lipsă din variabilele de mediu."""
    global _dotenv_loaded
    if not _dotenv_loaded:
        load_dotenv()
        _dotenv_loaded = True
    if _settings["convex_url"] is None:
        _settings["convex_url"] = os.getenv("CONVEX_URL") or None
    if _settings["convex_deploy_key"] is None:
        _settings["convex_deploy_key"] = os.getenv("CONVEX_DEPLOY_KEY") or None
    if _settings["convex_timeout"] is None:
        try:
            _settings["convex_timeout"] = int(os.getenv("CONVEX_TIMEOUT", "10"))
        except ValueError:
            logger.warning("CONVEX_TIMEOUT invalid; folosesc 10 secunde")
            _settings["convex_timeout"] = 10
    if _settings["db_path"] is None:
        _settings["db_path"] = Path(os.getenv("SPIRITHUB_DB_PATH") or DEFAULT_DB_PATH)
    if _settings["timezone"] is None:
        _settings["timezone"] = os.getenv("SPIRITHUB_TZ") or DEFAULT_TIMEZONE


def configure(convex_url: Optional[str] = None, convex_deploy_key: Optional[str] = None,
              convex_timeout: Optional[int] = None, db_path: Optional[str] = None,
              timezone: Optional[str] = None) -> None:
    """Suprascrie setările globale. Argumentele None sunt ignorate."""
    if convex_url is not None:
        _settings["convex_url"] = convex_url
    if convex_deploy_key is not None:
        _settings["convex_deploy_key"] = convex_deploy_key
    if convex_timeout is not None:
        _settings["convex_timeout"] = int(convex_timeout)
    if db_path is not None:
        _settings["db_path"] = Path(db_path)
    if timezone is not None:
        _settings["timezone"] = timezone


def reset() -> None:
    for key in _settings:
        _settings[key] = None


def get_settings() -> Dict[str, Any]:
    _load_defaults_from_env()
    return dict(_settings)


def get_timezone_name() -> str:
    return get_settings()["timezone"]
