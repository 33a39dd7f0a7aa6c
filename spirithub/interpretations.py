# spirithub/interpretations.py
"""
Texte de interpretare pre-scrise (Calea Vieții, Destin, Compatibilitate, Numărul zilei).

Structura unei intrări:
    theme {primary, accent, bg_soft}, hero {icon, title, subtitle, headline},
    tags [...], content {main_text, dos [...], donts [...]}, mantra
"""

from typing import Dict, Any, Optional
import copy
import logging

from .loaders import load_interpretations, INTERPRETATION_TYPES
from .numerology import compatibility_level

logger = logging.getLogger("spirithub.interpretations")
logger.addHandler(logging.NullHandler())

_DEFAULT_THEME = {"primary": "#9F2BFF", "accent": "#E0E0E0", "bg_soft": "rgba(159,43,255,0.1)"}

FALLBACK_INTERPRETATIONS: Dict[str, Dict[str, Any]] = {
    "life-path": {
        "theme": _DEFAULT_THEME,
        "hero": {
            "icon": "✨",
            "title": "Calea Ta",
            "subtitle": "Descoperă-ți drumul",
            "headline": "Fiecare suflet are o cale unică de urmat.",
        },
        "tags": ["Introspecție", "Creștere personală"],
        "content": {
            "main_text": (
                "Interpretarea detaliată pentru acest număr este în curs de pregătire. "
                "Până atunci, ia-ți un moment să reflectezi asupra călătoriei tale personale. "
                "Fiecare experiență, fie ea un succes sau o provocare, te aduce mai aproape "
                "de înțelegerea misiunii tale interioare."
            ),
            "dos": [
                "Reflectează asupra valorilor tale fundamentale",
                "Fii deschis la lecțiile vieții",
                "Urmează-ți intuiția",
            ],
            "donts": [
                "Nu te compara cu alții",
                "Nu te grăbi în decizii importante",
                "Nu ignora semnalele interioare",
            ],
        },
        "mantra": "Fiecare pas al meu este ghidat de înțelepciune interioară.",
    },
    "daily": {
        "theme": _DEFAULT_THEME,
        "hero": {
            "icon": "🌟",
            "title": "Energia Zilei",
            "subtitle": "Ghidul tău pentru astăzi",
            "headline": "Fiecare zi aduce oportunități noi.",
        },
        "tags": ["Prezent", "Oportunități"],
        "content": {
            "main_text": (
                "Astăzi este o zi pentru a fi prezent și conștient. Indiferent de ce îți rezervă ziua, "
                "abordează fiecare moment cu deschidere și curiozitate. "
                "Energia universală te susține în tot ce faci."
            ),
            "dos": [
                "Fii prezent în fiecare moment",
                "Arată recunoștință pentru micile bucurii",
                "Conectează-te cu cei dragi",
            ],
            "donts": [
                "Nu te lăsa copleșit de griji",
                "Nu amâna bucuria pentru mâine",
                "Nu ignora nevoile tale",
            ],
        },
        "mantra": "Astăzi aleg să fiu prezent și recunoscător.",
    },
}


def get_interpretation(interpretation_type: str, number: Any,
                       use_fallback: bool = False) -> Optional[Dict[str, Any]]:
    """
    Interpretarea pentru (tip, număr). Cu use_fallback=True întoarce textul generic
    acolo unde există unul (life-path, daily); altfel None.
    """
    if interpretation_type not in INTERPRETATION_TYPES:
        return None
    dataset = load_interpretations(interpretation_type)
    entry = dataset.get(str(number))
    if entry is not None:
        return copy.deepcopy(entry)
    if use_fallback and interpretation_type in FALLBACK_INTERPRETATIONS:
        logger.info("Interpretare lipsă pentru %s/%s; folosesc textul generic", interpretation_type, number)
        return copy.deepcopy(FALLBACK_INTERPRETATIONS[interpretation_type])
    return None


def get_compatibility_interpretation(score: int) -> Optional[Dict[str, Any]]:
    """Scorul exact dacă există, altfel intrarea nivelului (100 / 75 / 50 / 25)."""
    entry = get_interpretation("compatibility", score)
    if entry is not None:
        return entry
    return get_interpretation("compatibility", compatibility_level(score)["anchor"])


def get_all_interpretations(interpretation_type: str) -> Dict[str, Any]:
    if interpretation_type not in INTERPRETATION_TYPES:
        return {}
    return copy.deepcopy(load_interpretations(interpretation_type))


def short_text(entry: Dict[str, Any]) -> Dict[str, str]:
    """Titlu și descriere scurtă ale unei intrări, pentru widgeturi și baza de date."""
    hero = entry.get("hero", {})
    return {
        "title": hero.get("title", ""),
        "description": hero.get("headline") or hero.get("subtitle", ""),
    }
