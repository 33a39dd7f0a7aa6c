# spirithub/moon.py
"""
Faza lunii calculată din vârsta lunii față de o lună nouă de referință
(6 ianuarie 2000, 18:14 UTC), modulo luna sinodică.

Funcții publice:
- get_moon_phase(when) -> dict (phase_key, label, emoji, age_days, fraction)
- get_moon_guide(when) -> faza + interpretarea spirituală a fazei
- moon_cache_key(now) -> cheie pe ferestre de 6 ore în fusul București
"""

from datetime import date, datetime, time
from typing import Dict, Any, Optional
import logging

import pytz

from .config import SYNODIC_MONTH, MOON_PHASES, MOON_CACHE_WINDOW_HOURS
from .loaders import load_moon_guide_data
from .utils import bucharest_now

logger = logging.getLogger("spirithub.moon")
logger.addHandler(logging.NullHandler())

KNOWN_NEW_MOON = datetime(2000, 1, 6, 18, 14, tzinfo=pytz.utc)
_SECONDS_PER_DAY = 86400.0


def _to_utc(when: Any) -> datetime:
    # date simplă = miezul nopții UTC; datetime fără fus = UTC
    if isinstance(when, datetime):
        if when.tzinfo is None:
            return pytz.utc.localize(when)
        return when.astimezone(pytz.utc)
    if isinstance(when, date):
        return pytz.utc.localize(datetime.combine(when, time.min))
    raise TypeError(f"Expected date or datetime, got {type(when).__name__}")


def get_moon_phase(when: Optional[Any] = None) -> Dict[str, Any]:
    moment = _to_utc(when) if when is not None else datetime.now(pytz.utc)
    days_since = (moment - KNOWN_NEW_MOON).total_seconds() / _SECONDS_PER_DAY
    # % în Python e deja nenegativ pentru divizor pozitiv
    age = days_since % SYNODIC_MONTH
    fraction = age / SYNODIC_MONTH

    phase = MOON_PHASES[-1]
    for candidate in MOON_PHASES:
        if fraction <= candidate["max"]:
            phase = candidate
            break
    return {
        "phase_key": phase["key"],
        "label": phase["label"],
        "emoji": phase["emoji"],
        "age_days": round(age, 2),
        "fraction": fraction,
    }


def get_moon_guide(when: Optional[Any] = None,
                   guide_data: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Faza lunii îmbinată cu interpretarea ei (title, subtitle, insight, guidance, avoid, mantra)."""
    phase = get_moon_phase(when)
    data = guide_data if guide_data is not None else load_moon_guide_data()
    interpretation = data.get(phase["phase_key"])
    if interpretation is None:
        logger.warning("Lipsește ghidul pentru faza %s; folosesc 'new'", phase["phase_key"])
        interpretation = data.get("new", {})
    return {**phase, **interpretation}


def moon_cache_key(now: Optional[datetime] = None) -> str:
    """YYYY-MM-DD-H, cu H rotunjit în jos la 0, 6, 12 sau 18 (ora Bucureștiului)."""
    local = bucharest_now(now)
    window = (local.hour // MOON_CACHE_WINDOW_HOURS) * MOON_CACHE_WINDOW_HOURS
    return f"{local:%Y-%m-%d}-{window}"
