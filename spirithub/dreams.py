# spirithub/dreams.py
"""
Dicționarul de vise.

- generate_slug: nume de simbol -> slug URL (diacritice eliminate)
- extract_keywords: cuvinte cheie normalizate pentru căutare
- DreamDictionary: interogări peste tabelul de simboluri (pandas)
  toate simbolurile, după slug, recomandate, categorii, index A-Z,
  simboluri înrudite, căutare fără diacritice, interpretare combinată 2-3 simboluri
"""

from typing import Dict, Any, List, Optional, Iterable
import random
import re
import string
import logging

import pandas as pd

from .config import (
    DREAM_CATEGORIES,
    DREAM_SEARCH,
    FEATURED_DREAM_SLUGS,
    MAX_COMBINED_SYMBOLS,
    MIN_COMBINED_SYMBOLS,
    RELATED_SYMBOLS_COUNT,
)
from .exceptions import ValidationError
from .loaders import load_dream_symbols
from .utils import DIACRITIC_MAP, normalize_text

logger = logging.getLogger("spirithub.dreams")
logger.addHandler(logging.NullHandler())

_KEYWORD_SPLIT_RE = re.compile(r"[\s,.;:!?()]+")


def generate_slug(symbol_name: str) -> str:
    """
    "Șarpe veninos" -> "sarpe-veninos"; "A zbura!" -> "a-zbura".
    """
    if not isinstance(symbol_name, str) or not symbol_name.strip():
        raise ValidationError("Symbol name cannot be empty")
    s = "".join(DIACRITIC_MAP.get(ch, ch) for ch in symbol_name).lower()
    s = re.sub(r"\s+", "-", s)
    s = re.sub(r"[^a-z0-9-]", "", s)
    s = re.sub(r"-+", "-", s)
    return s.strip("-")


def extract_keywords(name: str, text: str = "") -> List[str]:
    """Cuvinte de cel puțin 3 litere din nume și text, fără diacritice, unice și sortate."""
    words = _KEYWORD_SPLIT_RE.split(normalize_text(f"{name} {text}"))
    return sorted({w for w in words if len(w) >= 3})


def _category_names() -> Dict[str, str]:
    return {c["id"]: c["name"] for c in DREAM_CATEGORIES}


def _join_ro(items: List[str]) -> str:
    if len(items) <= 1:
        return "".join(items)
    return ", ".join(items[:-1]) + " și " + items[-1]


class DreamDictionary:
    """
    Interogări peste simbolurile de vis. Primește un DataFrame cu coloanele
    name, slug, category, short_meaning, full_interpretation; fără argument
    folosește tabelul livrat cu pachetul.
    """

    def __init__(self, symbols: Optional[pd.DataFrame] = None, rng: Optional[random.Random] = None):
        df = symbols.copy() if symbols is not None else load_dream_symbols()
        df["normalized_name"] = df["name"].map(normalize_text)
        df["search_text"] = [
            " ".join(extract_keywords(n, s))
            for n, s in zip(df["name"], df["short_meaning"])
        ]
        df["letter"] = df["normalized_name"].str[:1].str.upper()
        self._df = df.sort_values("normalized_name").reset_index(drop=True)
        self._rng = rng or random.Random()

    def __len__(self) -> int:
        return len(self._df)

    @staticmethod
    def _records(frame: pd.DataFrame) -> List[Dict[str, str]]:
        cols = ["name", "slug", "category", "short_meaning", "full_interpretation"]
        return frame[cols].to_dict(orient="records")

    # -------------------------
    # Listări
    # -------------------------
    def all_symbols(self) -> List[Dict[str, str]]:
        return self._records(self._df)

    def all_slugs(self) -> List[str]:
        return self._df["slug"].tolist()

    def get_by_slug(self, slug: str) -> Optional[Dict[str, str]]:
        hit = self._df[self._df["slug"] == slug]
        if hit.empty:
            return None
        return self._records(hit)[0]

    def featured(self) -> List[Dict[str, str]]:
        """Simbolurile recomandate, în ordinea fixă; slugurile absente sunt omise."""
        out = []
        for slug in FEATURED_DREAM_SLUGS:
            symbol = self.get_by_slug(slug)
            if symbol is not None:
                out.append(symbol)
        return out

    def categories(self) -> List[Dict[str, Any]]:
        """Categoriile configurate, cu numărul de simboluri din fiecare."""
        counts = self._df.groupby("category").size().to_dict()
        return [{**c, "count": int(counts.get(c["id"], 0))} for c in DREAM_CATEGORIES]

    def by_category(self, category: str) -> List[Dict[str, str]]:
        return self._records(self._df[self._df["category"] == category])

    def letters(self) -> List[Dict[str, Any]]:
        """Indexul A-Z: fiecare literă cu numărul de simboluri (0 = literă inactivă)."""
        counts = self._df.groupby("letter").size().to_dict()
        return [{"letter": ch, "count": int(counts.get(ch, 0))} for ch in string.ascii_uppercase]

    def by_letter(self, letter: str) -> List[Dict[str, str]]:
        key = normalize_text(letter)[:1].upper()
        return self._records(self._df[self._df["letter"] == key])

    def related(self, slug: str, count: int = RELATED_SYMBOLS_COUNT) -> List[Dict[str, str]]:
        """
        Simboluri înrudite: întâi din aceeași categorie (ordine aleatoare),
        apoi completate aleator din celelalte categorii.
        """
        current = self.get_by_slug(slug)
        if current is None:
            return []
        others_mask = self._df["slug"] != slug
        same = self._records(self._df[others_mask & (self._df["category"] == current["category"])])
        rest = self._records(self._df[others_mask & (self._df["category"] != current["category"])])
        self._rng.shuffle(same)
        self._rng.shuffle(rest)
        return (same + rest)[:count]

    # -------------------------
    # Căutare
    # -------------------------
    def search(self, query: str, category: Optional[str] = None,
               limit: int = DREAM_SEARCH["max_results"]) -> List[Dict[str, str]]:
        """
        Căutare fără diacritice în nume și cuvinte cheie.
        Potrivirile de început de nume apar primele, apoi cele din nume, apoi cele din text.
        Interogările mai scurte de min_query_length caractere întorc listă goală.
        """
        q = normalize_text(query)
        if len(q) < DREAM_SEARCH["min_query_length"]:
            return []
        limit = max(1, min(int(limit or DREAM_SEARCH["max_results"]), DREAM_SEARCH["hard_limit"]))

        df = self._df
        if category:
            df = df[df["category"] == category]
        starts = df["normalized_name"].str.startswith(q)
        in_name = df["normalized_name"].str.contains(q, regex=False)
        in_text = df["search_text"].str.contains(q, regex=False)
        ranked = pd.concat([df[starts], df[in_name & ~starts], df[in_text & ~in_name]])
        ranked = ranked.drop_duplicates(subset="slug")
        return self._records(ranked.head(limit))

    # -------------------------
    # Interpretare combinată
    # -------------------------
    def combine_interpretations(self, slugs: Iterable[str]) -> Dict[str, Any]:
        """
        Interpretare pentru 2-3 simboluri apărute în același vis.
        Slugurile duplicate sunt ignorate; slugurile necunoscute ridică ValidationError.
        """
        unique = list(dict.fromkeys(s for s in slugs if s))
        if len(unique) < MIN_COMBINED_SYMBOLS:
            raise ValidationError("Selectează cel puțin 2 simboluri pentru o interpretare combinată.")
        if len(unique) > MAX_COMBINED_SYMBOLS:
            raise ValidationError(
                f"Poți selecta maximum {MAX_COMBINED_SYMBOLS} simboluri pentru o interpretare combinată."
            )
        symbols = []
        for slug in unique:
            symbol = self.get_by_slug(slug)
            if symbol is None:
                raise ValidationError(f"Simbol necunoscut: {slug}")
            symbols.append(symbol)

        names = [s["name"] for s in symbols]
        cat_names = _category_names()
        categories = list(dict.fromkeys(cat_names.get(s["category"], s["category"]) for s in symbols))

        intro = f"Visul tău reunește simbolurile {_join_ro(names)}."
        sections = [
            {"name": s["name"], "slug": s["slug"], "text": s["full_interpretation"] or s["short_meaning"]}
            for s in symbols
        ]
        if len(categories) == 1:
            synthesis = (
                f"Toate simbolurile aparțin categoriei {categories[0]}, așa că mesajul visului "
                "este concentrat pe o singură zonă a vieții tale. Privește-le ca pe o singură poveste."
            )
        else:
            synthesis = (
                f"Simbolurile vin din zone diferite ({_join_ro(categories)}). "
                "Visul leagă aceste teme între ele: "
                + "; ".join(s["short_meaning"].rstrip(".") for s in symbols)
                + "."
            )
        return {
            "symbols": symbols,
            "intro": intro,
            "sections": sections,
            "synthesis": synthesis,
        }
