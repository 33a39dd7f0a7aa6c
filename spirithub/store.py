# spirithub/store.py
"""
Bază de date locală (SQLite) pentru conținut: interpretări, simboluri de vis,
alegerile zilei și evenimente de utilizare.

Tabele:
- interpretations(type, number, title, description, full_text, created_at)
- dream_symbols(name, normalized_name, slug, category, short_meaning,
                full_interpretation, keywords, created_at)
- daily_picks(date, type, content_id, created_at)   type: daily-number | daily-dream
- analytics(event_type, feature, metadata, timestamp)
"""

from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Any, List, Optional, Iterable, Union
import json
import sqlite3
import time
import logging

import pandas as pd

from .config import DREAM_SEARCH
from .daily import calculate_daily_number, daily_dream_index
from .dreams import extract_keywords, generate_slug
from .exceptions import MissingContentError, ValidationError
from .interpretations import get_all_interpretations, short_text
from .numerology import compatibility_level
from .settings import get_settings
from .utils import normalize_text, parse_iso_date, today_iso

logger = logging.getLogger("spirithub.store")
logger.addHandler(logging.NullHandler())

TABLES = ("interpretations", "dream_symbols", "daily_picks", "analytics")

_SCHEMA = """
CREATE TABLE IF NOT EXISTS interpretations (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    type TEXT NOT NULL,
    number INTEGER NOT NULL,
    title TEXT NOT NULL,
    description TEXT NOT NULL,
    full_text TEXT NOT NULL,
    created_at REAL NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_interpretations_type_number ON interpretations(type, number);

CREATE TABLE IF NOT EXISTS dream_symbols (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    normalized_name TEXT NOT NULL,
    slug TEXT NOT NULL UNIQUE,
    category TEXT NOT NULL,
    short_meaning TEXT NOT NULL,
    full_interpretation TEXT NOT NULL,
    keywords TEXT NOT NULL,
    created_at REAL NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_dream_symbols_category ON dream_symbols(category);

CREATE TABLE IF NOT EXISTS daily_picks (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    date TEXT NOT NULL,
    type TEXT NOT NULL,
    content_id TEXT NOT NULL,
    created_at REAL NOT NULL,
    UNIQUE(date, type)
);

CREATE TABLE IF NOT EXISTS analytics (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    event_type TEXT NOT NULL,
    feature TEXT NOT NULL,
    metadata TEXT,
    timestamp REAL NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_analytics_feature ON analytics(feature);
"""

# numele tipurilor din baza de date
_DB_TYPES = {"life-path": "lifePath", "destiny": "destiny", "compatibility": "compatibility", "daily": "daily"}

_SYMBOL_COLUMNS = "name, slug, category, short_meaning, full_interpretation"


class ContentStore:
    """Acces la baza de conținut. Fără cale explicită folosește SPIRITHUB_DB_PATH."""

    def __init__(self, db_path: Optional[Union[str, Path]] = None):
        self.db_path = Path(db_path) if db_path is not None else Path(get_settings()["db_path"])
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.init_schema()

    @contextmanager
    def get_connection(self):
        conn = sqlite3.connect(str(self.db_path))
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def init_schema(self) -> None:
        with self.get_connection() as conn:
            conn.executescript(_SCHEMA)

    def read_table(self, table: str) -> pd.DataFrame:
        if table not in TABLES:
            raise ValueError(f"Tabel necunoscut: {table}")
        with self.get_connection() as conn:
            return pd.read_sql_query(f"SELECT * FROM {table}", conn)

    # -------------------------
    # Interpretări
    # -------------------------
    def seed_interpretations(self) -> Dict[str, Any]:
        """Încarcă interpretările din fișierele JSON o singură dată."""
        with self.get_connection() as conn:
            if conn.execute("SELECT 1 FROM interpretations LIMIT 1").fetchone():
                return {"success": False, "message": "Interpretările au fost deja adăugate în baza de date"}
            now = time.time()
            rows = []
            for kind, db_type in _DB_TYPES.items():
                for number, entry in get_all_interpretations(kind).items():
                    head = short_text(entry)
                    rows.append((db_type, int(number), head["title"], head["description"],
                                 entry.get("content", {}).get("main_text", ""), now))
            conn.executemany(
                "INSERT INTO interpretations (type, number, title, description, full_text, created_at) "
                "VALUES (?, ?, ?, ?, ?, ?)",
                rows,
            )
        logger.info("Adăugate %d interpretări", len(rows))
        return {"success": True, "message": f"Au fost adăugate {len(rows)} interpretări", "inserted": len(rows)}

    def get_interpretation(self, interpretation_type: str, number: int) -> Dict[str, Any]:
        db_type = _DB_TYPES.get(interpretation_type, interpretation_type)
        with self.get_connection() as conn:
            row = conn.execute(
                "SELECT type, number, title, description, full_text FROM interpretations "
                "WHERE type = ? AND number = ? LIMIT 1",
                (db_type, int(number)),
            ).fetchone()
        if row is None:
            raise MissingContentError(f"Nu s-a găsit interpretarea {interpretation_type} pentru numărul {number}")
        return dict(row)

    def get_compatibility_interpretation(self, score: int) -> Dict[str, Any]:
        try:
            return self.get_interpretation("compatibility", score)
        except MissingContentError:
            return self.get_interpretation("compatibility", compatibility_level(score)["anchor"])

    # -------------------------
    # Simboluri de vis
    # -------------------------
    def seed_dream_symbols(self, symbols: Iterable[Dict[str, Any]]) -> Dict[str, int]:
        """
        Adaugă simbolurile lipsă (după slug). Intrările incomplete și cele existente
        sunt numărate la `skipped`.
        """
        inserted = skipped = total = 0
        now = time.time()
        with self.get_connection() as conn:
            existing = {r["slug"] for r in conn.execute("SELECT slug FROM dream_symbols")}
            for symbol in symbols:
                total += 1
                name = (symbol.get("name") or "").strip()
                fields = [symbol.get(k) for k in ("category", "short_meaning", "full_interpretation")]
                if not name or not all(fields):
                    skipped += 1
                    continue
                slug = generate_slug(name)
                if slug in existing:
                    skipped += 1
                    continue
                conn.execute(
                    "INSERT INTO dream_symbols (name, normalized_name, slug, category, short_meaning, "
                    "full_interpretation, keywords, created_at) VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
                    (name, normalize_text(name), slug, symbol["category"], symbol["short_meaning"],
                     symbol["full_interpretation"],
                     json.dumps(extract_keywords(name, symbol["full_interpretation"]), ensure_ascii=False),
                     now),
                )
                existing.add(slug)
                inserted += 1
        logger.info("Simboluri: %d adăugate, %d ignorate", inserted, skipped)
        return {"inserted": inserted, "skipped": skipped, "total": total}

    def get_dream_symbol_by_slug(self, slug: str) -> Optional[Dict[str, Any]]:
        with self.get_connection() as conn:
            row = conn.execute(f"SELECT {_SYMBOL_COLUMNS} FROM dream_symbols WHERE slug = ?", (slug,)).fetchone()
        return dict(row) if row else None

    def search_dream_symbols(self, query: str, category: Optional[str] = None,
                             limit: int = DREAM_SEARCH["max_results"]) -> List[Dict[str, Any]]:
        """Întâi potrivirile în nume, apoi cele din cuvintele cheie; fără duplicate."""
        q = normalize_text(query)
        if len(q) < DREAM_SEARCH["min_query_length"]:
            return []
        limit = max(1, min(int(limit or DREAM_SEARCH["max_results"]), DREAM_SEARCH["hard_limit"]))
        escaped = q.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        pattern = f"%{escaped}%"
        where_cat = " AND category = ?" if category else ""
        params_cat = (category,) if category else ()
        with self.get_connection() as conn:
            by_name = conn.execute(
                f"SELECT {_SYMBOL_COLUMNS} FROM dream_symbols WHERE normalized_name LIKE ? ESCAPE '\\'{where_cat} "
                "ORDER BY normalized_name LIMIT ?",
                (pattern, *params_cat, limit),
            ).fetchall()
            by_keyword = conn.execute(
                f"SELECT {_SYMBOL_COLUMNS} FROM dream_symbols WHERE keywords LIKE ? ESCAPE '\\'{where_cat} "
                "ORDER BY normalized_name LIMIT ?",
                (pattern, *params_cat, limit),
            ).fetchall()
        seen, results = set(), []
        for row in list(by_name) + list(by_keyword):
            if row["slug"] in seen:
                continue
            seen.add(row["slug"])
            results.append(dict(row))
        return results[:limit]

    def has_dream_symbols(self) -> bool:
        with self.get_connection() as conn:
            return conn.execute("SELECT 1 FROM dream_symbols LIMIT 1").fetchone() is not None

    def _sorted_symbols(self, conn) -> List[sqlite3.Row]:
        return conn.execute(f"SELECT {_SYMBOL_COLUMNS} FROM dream_symbols ORDER BY slug").fetchall()

    # -------------------------
    # Alegerile zilei
    # -------------------------
    def _get_pick(self, conn, date_str: str, pick_type: str) -> Optional[str]:
        row = conn.execute(
            "SELECT content_id FROM daily_picks WHERE date = ? AND type = ?", (date_str, pick_type)
        ).fetchone()
        return row["content_id"] if row else None

    def get_daily_dream(self, date_str: Optional[str] = None) -> Optional[Dict[str, Any]]:
        """Alegerea salvată pentru dată, altfel calculul determinist (fără salvare)."""
        iso = date_str or today_iso()
        parse_iso_date(iso)
        with self.get_connection() as conn:
            slug = self._get_pick(conn, iso, "daily-dream")
            if slug:
                row = conn.execute(
                    f"SELECT {_SYMBOL_COLUMNS} FROM dream_symbols WHERE slug = ?", (slug,)
                ).fetchone()
                if row:
                    return dict(row)
                logger.warning("Alegerea zilei %s indică un simbol inexistent: %s", iso, slug)
            symbols = self._sorted_symbols(conn)
        if not symbols:
            return None
        return dict(symbols[daily_dream_index(iso, len(symbols))])

    def ensure_daily_dream(self, date_str: Optional[str] = None) -> Dict[str, Any]:
        iso = date_str or today_iso()
        parse_iso_date(iso)
        with self.get_connection() as conn:
            existing = self._get_pick(conn, iso, "daily-dream")
            if existing:
                return {"date": iso, "persisted": False, "slug": existing}
            symbols = self._sorted_symbols(conn)
            if not symbols:
                return {"date": iso, "persisted": False, "slug": None}
            chosen = symbols[daily_dream_index(iso, len(symbols))]["slug"]
            conn.execute(
                "INSERT INTO daily_picks (date, type, content_id, created_at) VALUES (?, ?, ?, ?)",
                (iso, "daily-dream", chosen, time.time()),
            )
        return {"date": iso, "persisted": True, "slug": chosen}

    def ensure_daily_number(self, date_str: Optional[str] = None) -> Dict[str, Any]:
        iso = date_str or today_iso()
        number = calculate_daily_number(iso)
        with self.get_connection() as conn:
            existing = self._get_pick(conn, iso, "daily-number")
            if existing:
                return {"date": iso, "persisted": False, "number": int(existing)}
            conn.execute(
                "INSERT INTO daily_picks (date, type, content_id, created_at) VALUES (?, ?, ?, ?)",
                (iso, "daily-number", str(number), time.time()),
            )
        return {"date": iso, "persisted": True, "number": number}

    def get_daily_number(self, date_str: Optional[str] = None) -> Dict[str, Any]:
        """Numărul zilei (alegerea salvată, dacă există) cu titlul și descrierea din tabelul de interpretări."""
        iso = date_str or today_iso()
        number = calculate_daily_number(iso)
        with self.get_connection() as conn:
            saved = self._get_pick(conn, iso, "daily-number")
        if saved:
            number = int(saved)
        row = self.get_interpretation("daily", number)
        return {"number": number, "title": row["title"], "description": row["description"], "date": iso}

    # -------------------------
    # Evenimente
    # -------------------------
    def record_event(self, event_type: str, feature: str,
                     metadata: Optional[Dict[str, Any]] = None) -> None:
        if not event_type or not feature:
            raise ValidationError("event_type și feature sunt obligatorii")
        with self.get_connection() as conn:
            conn.execute(
                "INSERT INTO analytics (event_type, feature, metadata, timestamp) VALUES (?, ?, ?, ?)",
                (event_type, feature,
                 json.dumps(metadata, ensure_ascii=False, default=str) if metadata is not None else None,
                 time.time()),
            )

    def feature_usage(self) -> pd.DataFrame:
        """Numărul de evenimente pe (feature, event_type)."""
        df = self.read_table("analytics")
        if df.empty:
            return pd.DataFrame(columns=["feature", "event_type", "count"])
        return df.groupby(["feature", "event_type"]).size().reset_index(name="count")
