# spirithub/daily.py
"""
Conținutul zilei, determinist după dată (aceeași zi -> același conținut pentru toți).

- numărul zilei: zi + lună + an universal, redus (maestrele se păstrează)
- visul zilei: hash djb2 al datei ISO, modulo numărul de simboluri sortate după slug
- mesajul oracolului: (ziua din an · 31 + an) modulo numărul de mesaje
- energia zilei: după ziua săptămânii (Duminică = 0)
- get_daily_content: agregatul folosit de prima pagină
- get_daily_widget_data: date pentru widgeturi, întâi din Convex (dacă e configurat),
  apoi din baza locală (alegerile salvate), apoi calculate; cache pe dată cu TTL de 12 ore
"""

from datetime import datetime
from pathlib import Path
from typing import Dict, Any, List, Optional, Sequence
import threading
import time
import logging

from .biorhythm import get_biorhythm_hint_for_day
from .config import DAILY_WIDGET_TTL
from .dreams import DreamDictionary
from .exceptions import MissingContentError, ValidationError
from .interpretations import get_interpretation, short_text
from .loaders import load_energy_data, load_oracle_messages
from .moon import get_moon_phase
from .numerology import reduce_to_single_digit
from .reporting import capture_exception
from .services import convex_client
from .settings import get_settings
from .utils import js_weekday, parse_iso_date, today_iso, validate_date

logger = logging.getLogger("spirithub.daily")
logger.addHandler(logging.NullHandler())


# -------------------------
# Numărul zilei
# -------------------------
def calculate_daily_number(date_str: str) -> int:
    """
    '2025-11-14' -> 14 + 11 + reduce(2025)=9 -> 34 -> 7.
    Data se parsează manual, fără fus orar.
    """
    d = parse_iso_date(date_str)
    universal_year = reduce_to_single_digit(d.year)
    return reduce_to_single_digit(d.day + d.month + universal_year)


def get_daily_number(date_str: str) -> Dict[str, Any]:
    """Numărul zilei cu titlul și descrierea din interpretări (cu text generic la nevoie)."""
    number = calculate_daily_number(date_str)
    entry = get_interpretation("daily", number, use_fallback=True)
    return {"number": number, "date": date_str, **short_text(entry), "interpretation": entry}


# -------------------------
# Visul zilei
# -------------------------
def _to_int32(n: int) -> int:
    n &= 0xFFFFFFFF
    return n - 0x100000000 if n & 0x80000000 else n


def djb2_hash(text: str) -> int:
    """
    djb2 cu semantica deplasării pe 32 de biți: doar `hash << 5` se trunchiază,
    suma rămâne întreagă.
    """
    h = 5381
    for ch in text:
        h = _to_int32(_to_int32(h) << 5) + h + ord(ch)
    return h


def daily_dream_index(date_str: str, total: int) -> int:
    if total <= 0:
        raise ValidationError("total must be a positive number")
    return abs(djb2_hash(date_str)) % total


def get_daily_dream(date_str: str, symbols: Sequence[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Simbolul zilei din lista dată (sortată intern după slug); None pentru listă goală."""
    parse_iso_date(date_str)
    if not symbols:
        return None
    ordered = sorted(symbols, key=lambda s: s["slug"])
    return ordered[daily_dream_index(date_str, len(ordered))]


# -------------------------
# Oracol / energia zilei
# -------------------------
def get_daily_oracle(day: Optional[Any] = None,
                     messages: Optional[List[Dict[str, Any]]] = None) -> Dict[str, Any]:
    d = validate_date(day, "date") if day is not None else parse_iso_date(today_iso())
    msgs = messages if messages is not None else load_oracle_messages()
    if not msgs:
        raise ValidationError("Lista de mesaje este goală")
    day_of_year = d.timetuple().tm_yday
    return msgs[(day_of_year * 31 + d.year) % len(msgs)]


def get_energia_zilei(day: Optional[Any] = None,
                      energy: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    d = validate_date(day, "date") if day is not None else parse_iso_date(today_iso())
    data = energy if energy is not None else load_energy_data()
    entry = data.get(str(js_weekday(d)))
    if entry is None:
        logger.warning("Lipsește energia pentru ziua %s; folosesc Duminica", js_weekday(d))
        entry = data["0"]
    return entry


# -------------------------
# Agregat
# -------------------------
def get_daily_content(date_str: Optional[str] = None,
                      dictionary: Optional[DreamDictionary] = None) -> Dict[str, Any]:
    """
    Tot conținutul zilei: data, numărul zilei, visul zilei,
    energia zilei, faza lunii (la miezul nopții UTC) și mesajul oracolului.
    """
    iso = date_str or today_iso()
    d = parse_iso_date(iso)
    dictionary = dictionary or DreamDictionary()
    return {
        "date": iso,
        "daily_number": get_daily_number(iso),
        "daily_dream": get_daily_dream(iso, dictionary.all_symbols()),
        "energia_zilei": get_energia_zilei(d),
        "moon_phase": get_moon_phase(d),
        "oracle": get_daily_oracle(d),
    }


# -------------------------
# Widgeturi (cache pe dată)
# -------------------------
_cache_lock = threading.Lock()
_widget_cache: Dict[str, Dict[str, Any]] = {}


def _cache_get(key: str):
    with _cache_lock:
        entry = _widget_cache.get(key)
        if not entry:
            return None
        if time.time() - entry["ts"] > DAILY_WIDGET_TTL:
            del _widget_cache[key]
            return None
        return entry["value"]


def _cache_set(key: str, value: Any):
    with _cache_lock:
        _widget_cache[key] = {"ts": time.time(), "value": value}


def clear_widget_cache() -> None:
    with _cache_lock:
        _widget_cache.clear()


def _remote_daily_number(iso: str) -> Optional[Dict[str, Any]]:
    try:
        doc = convex_client.query("numerology:getDailyNumber", {"date": iso})
    except convex_client.ConvexClientError as e:
        capture_exception(e, {"source": "DailyWidget", "extra": {"query": "getDailyNumber", "date": iso}})
        return None
    if not doc:
        return None
    return {"number": doc.get("number"), "title": doc.get("title"),
            "description": doc.get("description"), "date": doc.get("date", iso)}


def _remote_daily_dream(iso: str) -> Optional[Dict[str, Any]]:
    try:
        doc = convex_client.query("dreams:getDailyDream", {"date": iso})
    except convex_client.ConvexClientError as e:
        capture_exception(e, {"source": "DailyWidget", "extra": {"query": "getDailyDream", "date": iso}})
        return None
    if not doc:
        return None
    return {"name": doc.get("name"), "category": doc.get("category"),
            "shortDescription": doc.get("shortDescription")}


def _local_store(store=None):
    """Baza locală de conținut, doar dacă există deja pe disc (populată cu scripts/seed_db.py)."""
    if store is not None:
        return store
    path = Path(get_settings()["db_path"])
    if not path.exists():
        return None
    from .store import ContentStore  # store importă acest modul
    return ContentStore(path)


def resolve_daily_number(date_str: str, store=None) -> Dict[str, Any]:
    """
    {number, title, description, date}: din baza locală când are interpretările,
    altfel calculat din fișierele JSON.
    """
    db = _local_store(store)
    if db is not None:
        try:
            return db.get_daily_number(date_str)
        except MissingContentError:
            logger.info("Baza locală nu are interpretări zilnice; calculez numărul zilei")
    info = get_daily_number(date_str)
    return {"number": info["number"], "title": info["title"],
            "description": info["description"], "date": date_str}


def resolve_daily_dream(date_str: str, dictionary: Optional[DreamDictionary] = None,
                        store=None) -> Optional[Dict[str, Any]]:
    """Alegerea salvată în baza locală (dacă e populată), altfel calculul din dicționar."""
    db = _local_store(store)
    if db is not None and db.has_dream_symbols():
        symbol = db.get_daily_dream(date_str)
        if symbol is not None:
            return symbol
    return get_daily_dream(date_str, (dictionary or DreamDictionary()).all_symbols())


def _local_daily_number(iso: str, store=None) -> Optional[Dict[str, Any]]:
    try:
        return resolve_daily_number(iso, store)
    except Exception as e:
        capture_exception(e, {"source": "DailyWidget", "extra": {"date": iso}})
        return None


def _local_daily_dream(iso: str, dictionary: Optional[DreamDictionary],
                       store=None) -> Optional[Dict[str, Any]]:
    try:
        symbol = resolve_daily_dream(iso, dictionary, store)
    except Exception as e:
        capture_exception(e, {"source": "DailyWidget", "extra": {"date": iso}})
        return None
    if symbol is None:
        return None
    return {"name": symbol["name"], "category": symbol["category"],
            "shortDescription": symbol["short_meaning"]}


def get_daily_widget_data(now: Optional[datetime] = None,
                          dictionary: Optional[DreamDictionary] = None,
                          use_remote: Optional[bool] = None,
                          store=None) -> Dict[str, Any]:
    """
    {dailyNumber | None, dailyDream | None, biorhythmHint} pentru data curentă din București.
    Cu Convex configurat, datele vin de acolo; un apel eșuat devine None (și e raportat).
    Fără Convex, se citesc alegerile salvate în baza locală, iar fără bază totul se calculează.
    """
    iso = today_iso(now)
    cached = _cache_get(iso)
    if cached is not None:
        return cached

    remote = convex_client.is_configured() if use_remote is None else use_remote
    if remote:
        daily_number = _remote_daily_number(iso)
        daily_dream = _remote_daily_dream(iso)
    else:
        daily_number = _local_daily_number(iso, store)
        daily_dream = _local_daily_dream(iso, dictionary, store)

    data = {
        "dailyNumber": daily_number,
        "dailyDream": daily_dream,
        "biorhythmHint": get_biorhythm_hint_for_day(parse_iso_date(iso)),
    }
    _cache_set(iso, data)
    return data
