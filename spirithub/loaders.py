# spirithub/loaders.py
"""
Leitori pentru datele livrate cu pachetul.

Principale responsabilități:
- citirea dicționarului de vise (data/dream_symbols.csv, separator ';') cu pandas
- citirea interpretărilor JSON (data/interpretations/*.json)
- validarea minimă a tabelelor (coloane obligatorii, sluguri duplicate, categorii)
- păstrarea în memorie a fișierelor deja citite
"""

from typing import Dict, Any, List, Optional, Union
from pathlib import Path
import json
import threading
import logging

import pandas as pd

from .config import DREAM_CATEGORIES
from .exceptions import DataValidationError

logger = logging.getLogger("spirithub.loaders")
logger.addHandler(logging.NullHandler())

DATA_DIR = Path(__file__).parent / "data"
INTERPRETATIONS_DIR = DATA_DIR / "interpretations"
DREAM_SYMBOLS_PATH = DATA_DIR / "dream_symbols.csv"

DREAM_COLUMNS = ["name", "slug", "category", "short_meaning", "full_interpretation"]
INTERPRETATION_TYPES = ("life-path", "destiny", "compatibility", "daily")

# -------------------------
# Cache în memorie
# -------------------------
_cache_lock = threading.Lock()
_cache: Dict[str, Any] = {}


def _cache_get(key: str):
    with _cache_lock:
        return _cache.get(key)


def _cache_set(key: str, value: Any):
    with _cache_lock:
        _cache[key] = value


def clear_cache() -> None:
    with _cache_lock:
        _cache.clear()


# -------------------------
# JSON
# -------------------------
def read_json(path: Union[str, Path]) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise DataValidationError(f"Fișier lipsă: {path}") from e
    except json.JSONDecodeError as e:
        raise DataValidationError(f"JSON invalid în {path}: {e}") from e


def _load_interpretation_file(name: str) -> Any:
    key = f"json:{name}"
    cached = _cache_get(key)
    if cached is not None:
        return cached
    data = read_json(INTERPRETATIONS_DIR / f"{name}.json")
    _cache_set(key, data)
    logger.debug("Încărcat %s.json", name)
    return data


def load_interpretations(interpretation_type: str) -> Dict[str, Any]:
    """Interpretările pentru un tip (life-path, destiny, compatibility, daily), indexate după număr (str)."""
    if interpretation_type not in INTERPRETATION_TYPES:
        raise KeyError(f"Tip de interpretare necunoscut: {interpretation_type}")
    return _load_interpretation_file(interpretation_type)


def load_energy_data() -> Dict[str, Any]:
    """Energia zilei, indexată după ziua săptămânii ('0' = Duminică)."""
    return _load_interpretation_file("energy")


def load_moon_guide_data() -> Dict[str, Any]:
    return _load_interpretation_file("moon-guide")


def load_oracle_messages() -> List[Dict[str, Any]]:
    data = _load_interpretation_file("oracle")
    messages = data.get("messages") if isinstance(data, dict) else None
    if not messages:
        raise DataValidationError("oracle.json nu conține mesaje")
    return messages


# -------------------------
# CSV: simboluri de vis
# -------------------------
def read_dream_symbols_csv(path: Union[str, Path] = DREAM_SYMBOLS_PATH, sep: str = ";",
                           encoding: str = "utf-8") -> pd.DataFrame:
    """
    Citește tabelul de simboluri și curăță spațiile. Nu adaugă coloane derivate.
    Lansează DataValidationError dacă lipsesc coloane obligatorii.
    """
    df = pd.read_csv(path, sep=sep, encoding=encoding, dtype=str, keep_default_na=False)
    missing = [c for c in DREAM_COLUMNS if c not in df.columns]
    if missing:
        raise DataValidationError(f"Coloane lipsă în {path}: {missing}")
    for col in DREAM_COLUMNS:
        df[col] = df[col].str.strip()
    return df[DREAM_COLUMNS].copy()


def load_dream_symbols() -> pd.DataFrame:
    cached = _cache_get("csv:dream_symbols")
    if cached is not None:
        return cached.copy()
    df = read_dream_symbols_csv()
    report = dream_validation_report(df)
    if report["duplicate_slugs"]:
        raise DataValidationError(f"Sluguri duplicate: {report['duplicate_slugs']}")
    if report["unknown_categories"]:
        logger.warning("Categorii necunoscute în dicționar: %s", report["unknown_categories"])
    _cache_set("csv:dream_symbols", df)
    return df.copy()


def dream_validation_report(df: pd.DataFrame) -> Dict[str, Any]:
    """Raport simplu de calitate pentru tabelul de simboluri."""
    known = {c["id"] for c in DREAM_CATEGORIES}
    empty_rows = df[(df["name"] == "") | (df["slug"] == "") | (df["short_meaning"] == "")]
    return {
        "rows": int(len(df)),
        "duplicate_slugs": sorted(df.loc[df["slug"].duplicated(), "slug"].unique().tolist()),
        "unknown_categories": sorted(set(df["category"]) - known),
        "incomplete_rows": empty_rows["slug"].tolist(),
        "per_category": df.groupby("category").size().to_dict(),
    }


def build_search_index(df: Optional[pd.DataFrame] = None) -> List[Dict[str, str]]:
    """Index compact pentru căutare în interfață: [{name, slug, category}], sortat după nume."""
    frame = df if df is not None else load_dream_symbols()
    frame = frame.sort_values("name", key=lambda s: s.str.lower())
    return frame[["name", "slug", "category"]].to_dict(orient="records")
