# scripts/seed_db.py
"""
Populează baza de conținut: interpretările, simbolurile de vis și alegerile zilei.

Utilizare:
    python scripts/seed_db.py [--db cale/spre/spirithub.db] [--date 2025-11-14]
"""

import argparse
import logging

from dotenv import load_dotenv

from spirithub.dreams import DreamDictionary
from spirithub.loaders import dream_validation_report, load_dream_symbols
from spirithub.store import ContentStore

logger = logging.getLogger("spirithub.scripts.seed_db")


def seed(db_path=None, date_str=None) -> dict:
    store = ContentStore(db_path)
    interpretations = store.seed_interpretations()
    logger.info(interpretations.get("message", interpretations))

    report = dream_validation_report(load_dream_symbols())
    for category, count in sorted(report["per_category"].items()):
        logger.info("  %s: %d simboluri", category, count)
    symbols = store.seed_dream_symbols(DreamDictionary().all_symbols())
    logger.info("Simboluri: %d adăugate, %d existente", symbols["inserted"], symbols["skipped"])

    dream = store.ensure_daily_dream(date_str)
    number = store.ensure_daily_number(date_str)
    logger.info("Visul zilei %s: %s; numărul zilei: %s", dream["date"], dream["slug"], number["number"])
    return {"interpretations": interpretations, "symbols": symbols, "daily_dream": dream, "daily_number": number}


def main() -> None:
    load_dotenv()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    parser = argparse.ArgumentParser(description="Populează baza de conținut SpiritHub")
    parser.add_argument("--db", default=None, help="calea bazei SQLite (implicit SPIRITHUB_DB_PATH)")
    parser.add_argument("--date", default=None, help="data pentru alegerile zilei (YYYY-MM-DD)")
    args = parser.parse_args()
    seed(args.db, args.date)


if __name__ == "__main__":
    main()
