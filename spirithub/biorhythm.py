# spirithub/biorhythm.py
"""
Bioritm: trei cicluri sinusoidale care pornesc din ziua nașterii.

- fizic 23 zile, emoțional 28 zile, intelectual 33 zile
- valoare = sin(2π · zile_trăite / lungime_ciclu), în intervalul [-1, 1]
- zi critică: |valoare| <= CRITICAL_THRESHOLD (trecerea prin zero)
- rezumat în limba română, perspectiva săptămânii, serie pandas pentru grafic
"""

from datetime import date, timedelta
from typing import Dict, List, Any, Optional
import math
import logging

import pandas as pd

from .config import (
    BIORHYTHM_CYCLES,
    CYCLE_ORDER,
    CRITICAL_THRESHOLD,
    DEFAULT_FORECAST_DAYS,
    INTERPRETATION_RANGES,
    SUMMARY_HIGH,
    SUMMARY_LOW,
)
from .exceptions import ValidationError
from .loaders import load_energy_data
from .utils import validate_date, js_weekday, romanian_day_name, bucharest_today

logger = logging.getLogger("spirithub.biorhythm")
logger.addHandler(logging.NullHandler())


# -------------------------
# Calcul de bază
# -------------------------
def days_lived(birth_date: Any, target_date: Any) -> int:
    birth = validate_date(birth_date, "birthDate")
    target = validate_date(target_date, "targetDate")
    if target < birth:
        raise ValidationError("targetDate cannot be before birthDate")
    return (target - birth).days


def calculate_cycle(birth_date: Any, target_date: Any, cycle_days: int) -> float:
    """sin(2π · zile trăite / cycle_days)"""
    lived = days_lived(birth_date, target_date)
    return math.sin(2 * math.pi * lived / cycle_days)


def get_cycles(birth_date: Any, target_date: Any) -> Dict[str, float]:
    """Cele trei valori pentru o zi, în ordinea fizic, emoțional, intelectual."""
    lived = days_lived(birth_date, target_date)
    return {
        key: math.sin(2 * math.pi * lived / BIORHYTHM_CYCLES[key]["days"])
        for key in CYCLE_ORDER
    }


def is_critical(value: float) -> bool:
    return abs(value) <= CRITICAL_THRESHOLD


# -------------------------
# Zile critice
# -------------------------
def get_critical_days(birth_date: Any, start_date: Any,
                      days: int = DEFAULT_FORECAST_DAYS) -> List[Dict[str, Any]]:
    """
    Parcurge `days` zile consecutive începând cu start_date și întoarce
    zilele în care cel puțin un ciclu e critic: [{"date": date, "cycles": [...]}].
    """
    birth = validate_date(birth_date, "birthDate")
    start = validate_date(start_date, "startDate")
    if days < 0:
        raise ValidationError("days must be a positive number")

    critical = []
    for i in range(days):
        current = start + timedelta(days=i)
        values = get_cycles(birth, current)
        affected = [key for key in CYCLE_ORDER if is_critical(values[key])]
        if affected:
            critical.append({"date": current, "cycles": affected})
    return critical


# -------------------------
# Interpretare
# -------------------------
def interpret_cycle_value(value: float) -> Dict[str, str]:
    """
    Nivelul unei valori: critic (±0.1), scăzut (0.1..0.4 și orice valoare negativă),
    mediu (0.4..0.7), ridicat (peste 0.7).
    """
    if is_critical(value):
        band = INTERPRETATION_RANGES[0]
    else:
        # primul interval după cel critic; negativele cad în "scăzut"
        band = next((r for r in INTERPRETATION_RANGES[1:] if value < r["max"]), INTERPRETATION_RANGES[-1])
    return {"level": band["level"], "key": band["key"]}


def get_biorhythm_summary(physical: float, emotional: float, intellectual: float) -> str:
    """Text de ghidaj în limba română pe baza celor trei valori."""
    high = {k: v > SUMMARY_HIGH for k, v in
            (("physical", physical), ("emotional", emotional), ("intellectual", intellectual))}
    low = {k: v < SUMMARY_LOW for k, v in
           (("physical", physical), ("emotional", emotional), ("intellectual", intellectual))}

    if all(high.values()):
        return (
            "Zi excelentă pentru activități complexe! Toate ciclurile tale sunt în fază pozitivă. "
            "Este momentul ideal pentru proiecte importante, decizii majore și activități care necesită "
            "energie fizică, claritate mentală și stabilitate emotională."
        )
    if all(low.values()):
        return (
            "Zi de odihnă și recuperare. Toate ciclurile tale sunt în fază negativă. "
            "Evită deciziile importante, efortul fizic intens și sarcinile mentale complexe. "
            "Concentrează-te pe relaxare, meditație și activități simple."
        )

    parts = []
    if high["physical"]:
        parts.append("Energia fizică este ridicată - zi bună pentru sport, exerciții și activități fizice")
    elif low["physical"]:
        parts.append("Energia fizică este scăzută - evită efortul fizic intens și odihnește-te mai mult")
    elif is_critical(physical):
        parts.append("Ciclul fizic este în fază critică - fii atent la sănătatea ta și evită riscurile fizice")

    if high["emotional"]:
        parts.append("starea emoțională este pozitivă - moment bun pentru relații și comunicare")
    elif low["emotional"]:
        parts.append("starea emoțională este fragilă - evită conflictele și deciziile emoționale importante")
    elif is_critical(emotional):
        parts.append("ciclul emoțional este în fază critică - fii prudent în relațiile interpersonale")

    if high["intellectual"]:
        parts.append("claritatea mentală este excelentă - zi ideală pentru studiu, analiză și rezolvarea problemelor")
    elif low["intellectual"]:
        parts.append("claritatea mentală este redusă - amână deciziile complexe și sarcinile analitice")
    elif is_critical(intellectual):
        parts.append("ciclul intelectual este în fază critică - verifică de două ori informațiile importante")

    if not parts:
        return (
            "Zi echilibrată cu cicluri în fază neutră. Poți desfășura activități normale, "
            "dar fără a forța limitele. Ascultă-ți corpul și emoțiile."
        )
    summary = ", ".join(parts)
    return summary[0].upper() + summary[1:] + "."


# -------------------------
# Agregate
# -------------------------
def get_biorhythm(birth_date: Any, target_date: Any) -> Dict[str, Any]:
    """Rezultatul complet pentru o zi: valori, niveluri, ciclurile critice și rezumatul."""
    birth = validate_date(birth_date, "birthDate")
    target = validate_date(target_date, "targetDate")
    values = get_cycles(birth, target)
    cycles = {}
    for key in CYCLE_ORDER:
        v = values[key]
        cfg = BIORHYTHM_CYCLES[key]
        cycles[key] = {
            "name": cfg["name"],
            "days": cfg["days"],
            "color": cfg["color"],
            "value": v,
            "percent": round(v * 100),
            "critical": is_critical(v),
            **interpret_cycle_value(v),
        }
    return {
        "birth_date": birth,
        "date": target,
        "days_lived": (target - birth).days,
        "cycles": cycles,
        "critical_cycles": [k for k in CYCLE_ORDER if cycles[k]["critical"]],
        "summary": get_biorhythm_summary(values["physical"], values["emotional"], values["intellectual"]),
    }


def _overall_status(values: Dict[str, float], critical_cycles: List[str]) -> str:
    if critical_cycles:
        return "critical"
    if all(v > 0 for v in values.values()):
        return "positive"
    if all(v < 0 for v in values.values()):
        return "negative"
    return "mixed"


def get_week_outlook(birth_date: Any, start_date: Any, days: int = 7) -> List[Dict[str, Any]]:
    """
    Perspectiva pe `days` zile: pentru fiecare zi valorile, starea generală
    (positive / mixed / negative / critical), ciclul cel mai puternic și ciclurile critice.
    """
    birth = validate_date(birth_date, "birthDate")
    start = validate_date(start_date, "startDate")
    if days < 0:
        raise ValidationError("days must be a positive number")

    outlook = []
    for i in range(days):
        current = start + timedelta(days=i)
        values = get_cycles(birth, current)
        critical_cycles = [k for k in CYCLE_ORDER if is_critical(values[k])]
        outlook.append({
            "date": current,
            "day_name": romanian_day_name(current),
            "values": values,
            "overall_status": _overall_status(values, critical_cycles),
            # la egalitate câștigă primul în ordinea fizic, emoțional, intelectual
            "best_cycle": max(CYCLE_ORDER, key=lambda k: values[k]),
            "critical_cycles": critical_cycles,
        })
    return outlook


def biorhythm_series(birth_date: Any, start_date: Any,
                     days: int = DEFAULT_FORECAST_DAYS) -> pd.DataFrame:
    """
    Serie zilnică pentru grafic: coloanele date, physical, emotional, intellectual
    (valori în procente, -100..100).
    """
    birth = validate_date(birth_date, "birthDate")
    start = validate_date(start_date, "startDate")
    if days < 0:
        raise ValidationError("days must be a positive number")
    rows = []
    for i in range(days):
        current = start + timedelta(days=i)
        values = get_cycles(birth, current)
        rows.append({"date": current, **{k: round(v * 100, 1) for k, v in values.items()}})
    return pd.DataFrame(rows, columns=["date", *CYCLE_ORDER])


# -------------------------
# Indiciu pentru widgetul de pe prima pagină
# -------------------------
def get_biorhythm_hint_for_day(day: Optional[date] = None,
                               energy: Optional[Dict[str, Any]] = None) -> Dict[str, str]:
    """
    Indiciu general (nepersonalizat) pentru ziua săptămânii,
    luat din datele „Energia zilei”: {title, hint, dayOfWeek}.
    """
    d = day or bucharest_today()
    data = energy if energy is not None else load_energy_data()
    entry = data.get(str(js_weekday(d))) or data.get("0") or {}
    return {
        "title": entry.get("theme", "Energia zilei"),
        "hint": entry.get("shortHint", ""),
        "dayOfWeek": entry.get("dayName") or romanian_day_name(d),
    }
