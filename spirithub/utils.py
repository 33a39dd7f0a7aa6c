# spirithub/utils.py
"""
Utilitare comune:
- validări (dată, nume, număr numerologic)
- normalizarea diacriticelor românești
- data curentă în fusul Europe/Bucharest (pytz)
- formatarea datelor în limba română
"""

from datetime import date, datetime
from typing import Any, Optional
import unicodedata
import re

import pytz

from .config import ALL_VALID_NUMBERS
from .exceptions import ValidationError
from .settings import get_timezone_name

ROMANIAN_MONTHS = [
    "ianuarie", "februarie", "martie", "aprilie", "mai", "iunie",
    "iulie", "august", "septembrie", "octombrie", "noiembrie", "decembrie",
]

# indexat după convenția Duminică = 0
ROMANIAN_DAYS = ["Duminică", "Luni", "Marți", "Miercuri", "Joi", "Vineri", "Sâmbătă"]

DIACRITIC_MAP = {
    "ă": "a", "â": "a", "î": "i", "ș": "s", "ț": "t", "ş": "s", "ţ": "t",
    "Ă": "A", "Â": "A", "Î": "I", "Ș": "S", "Ț": "T", "Ş": "S", "Ţ": "T",
}

_ISO_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")


# -------------------------
# Validări
# -------------------------
def validate_date(value: Any, field_name: str) -> date:
    """
    Acceptă date/datetime sau șir ISO (YYYY-MM-DD) și întoarce un date.
    Lansează ValidationError pentru orice altceva.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return parse_iso_date(value)
        except ValidationError:
            pass
    raise ValidationError(f"{field_name} must be a valid date")


def validate_name(name: Optional[str]) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Name cannot be empty")
    return name.strip()


def validate_numerology_number(num: Any) -> int:
    if isinstance(num, bool) or num not in ALL_VALID_NUMBERS:
        raise ValidationError("Numerology number must be 1-9 or a Master Number (11, 22, 33)")
    return int(num)


def parse_iso_date(value: str) -> date:
    """Parsează strict 'YYYY-MM-DD' (fără oră, fără fus)."""
    m = _ISO_DATE_RE.match(str(value).strip())
    if not m:
        raise ValidationError(f"Data trebuie să fie în formatul YYYY-MM-DD: {value!r}")
    year, month, day = (int(g) for g in m.groups())
    try:
        return date(year, month, day)
    except ValueError as e:
        raise ValidationError(f"Dată inexistentă: {value!r}") from e


# -------------------------
# Text
# -------------------------
def remove_diacritics(text: str) -> str:
    """Înlocuiește diacriticele românești, apoi orice alt semn combinat (NFKD)."""
    s = "".join(DIACRITIC_MAP.get(ch, ch) for ch in text)
    s = unicodedata.normalize("NFKD", s)
    return "".join(ch for ch in s if not unicodedata.combining(ch))


def normalize_text(text: Optional[str]) -> str:
    if text is None:
        return ""
    return remove_diacritics(str(text)).lower().strip()


# -------------------------
# Date și fus orar
# -------------------------
def bucharest_now(now: Optional[datetime] = None) -> datetime:
    """Momentul curent (sau `now`) exprimat în fusul configurat (implicit Europe/Bucharest)."""
    tz = pytz.timezone(get_timezone_name())
    if now is None:
        return datetime.now(tz)
    if now.tzinfo is None:
        now = pytz.utc.localize(now)
    return now.astimezone(tz)


def bucharest_today(now: Optional[datetime] = None) -> date:
    return bucharest_now(now).date()


def today_iso(now: Optional[datetime] = None) -> str:
    return bucharest_today(now).isoformat()


def js_weekday(d: date) -> int:
    """Ziua săptămânii cu Duminică = 0 ... Sâmbătă = 6."""
    return (d.weekday() + 1) % 7


def romanian_day_name(d: date) -> str:
    return ROMANIAN_DAYS[js_weekday(d)]


def format_romanian_date(d: date) -> str:
    """14 noiembrie 2025"""
    return f"{d.day} {ROMANIAN_MONTHS[d.month - 1]} {d.year}"


def format_romanian_long_date(d: date) -> str:
    """Vineri, 14 noiembrie 2025"""
    return f"{romanian_day_name(d)}, {format_romanian_date(d)}"
