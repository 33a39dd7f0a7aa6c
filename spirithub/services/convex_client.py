# spirithub/services/convex_client.py
"""
Client HTTP simplu pentru deployment-ul Convex (API-ul HTTP /api/query, /api/mutation).

- setările (URL, cheie, timeout) nu se citesc la import, ci din spirithub.settings la prima folosire
- configure() permite suprascrierea globală (teste, inițializare centralizată)
- folosește requests.Session pentru reutilizarea conexiunilor
- health_check() pentru diagnostic în interfață, fără apeluri externe
- ridică ConvexClientError cu mesaje clare
"""

from typing import Dict, Any, Optional
import logging

import requests

from .. import settings

logger = logging.getLogger("spirithub.services.convex_client")
logger.addHandler(logging.NullHandler())


class ConvexClientError(Exception):
    """Erori ale clientului Convex (rețea, HTTP, răspuns invalid, eroare de funcție)."""
    pass


_config: Dict[str, Any] = {
    "url": None,
    "key": None,
    "timeout": None,
    "session": None,
}


def _load_defaults():
    """Completează valorile lipsă din setările aplicației."""
    current = settings.get_settings()
    if _config["url"] is None:
        _config["url"] = current.get("convex_url")
    if _config["key"] is None:
        _config["key"] = current.get("convex_deploy_key")
    if _config["timeout"] is None:
        _config["timeout"] = current.get("convex_timeout") or 10
    if _config["session"] is None:
        _config["session"] = requests.Session()


def configure(url: Optional[str] = None, key: Optional[str] = None, timeout: Optional[int] = None,
              session: Optional[requests.Session] = None) -> None:
    if url is not None:
        _config["url"] = url
    if key is not None:
        _config["key"] = key
    if timeout is not None:
        _config["timeout"] = int(timeout)
    if session is not None:
        _config["session"] = session


def reset() -> None:
    for k in _config:
        _config[k] = None


def is_configured() -> bool:
    _load_defaults()
    return bool(_config.get("url"))


def health_check() -> Dict[str, Any]:
    """Starea configurării clientului. Nu face apeluri externe."""
    _load_defaults()
    return {
        "configured": bool(_config.get("url")),
        "url": _config.get("url"),
        "authenticated": bool(_config.get("key")),
        "timeout": _config.get("timeout"),
    }


def _call(kind: str, path: str, args: Optional[Dict[str, Any]] = None, *,
          url: Optional[str] = None, timeout: Optional[int] = None,
          session: Optional[requests.Session] = None) -> Any:
    _load_defaults()
    base = url or _config.get("url")
    if not base:
        raise ConvexClientError("CONVEX_URL nu este configurat. Setează-l în mediu sau prin convex_client.configure().")
    sess = session or _config.get("session") or requests.Session()
    timeout_final = timeout if timeout is not None else (_config.get("timeout") or 10)

    headers = {"Content-Type": "application/json"}
    if _config.get("key"):
        headers["Authorization"] = f"Convex {_config['key']}"
    endpoint = f"{base.rstrip('/')}/api/{kind}"
    payload = {"path": path, "args": args or {}, "format": "json"}

    try:
        logger.debug("POST %s path=%s", endpoint, path)
        resp = sess.post(endpoint, json=payload, headers=headers, timeout=timeout_final)
        resp.raise_for_status()
        data = resp.json()
    except requests.RequestException as e:
        logger.exception("Eroare la apelul Convex %s", path)
        raise ConvexClientError(str(e)) from e
    except ValueError as e:
        logger.exception("Răspuns Convex care nu este JSON")
        raise ConvexClientError("Răspuns invalid de la Convex: " + str(e)) from e

    if not isinstance(data, dict):
        raise ConvexClientError("Răspuns neașteptat de la Convex (nu este un obiect JSON).")
    if data.get("status") == "error":
        raise ConvexClientError(data.get("errorMessage") or f"Funcția {path} a eșuat")
    if data.get("status") != "success":
        raise ConvexClientError(f"Stare necunoscută în răspunsul Convex: {data.get('status')!r}")
    return data.get("value")


def query(path: str, args: Optional[Dict[str, Any]] = None, **overrides) -> Any:
    """Rulează o funcție query, de ex. query("numerology:getDailyNumber", {"date": "2025-11-14"})."""
    return _call("query", path, args, **overrides)


def mutation(path: str, args: Optional[Dict[str, Any]] = None, **overrides) -> Any:
    return _call("mutation", path, args, **overrides)
