# spirithub/numerology.py
"""
Numerologie pitagoreică pentru alfabetul românesc.

- reducerea la o cifră cu păstrarea numerelor maestre (11, 22, 33)
- Calea Vieții (data nașterii) și Numărul Destinului (numele complet)
- scorul de compatibilitate între două numere
- descompunerea numelui literă cu literă, pentru afișare
"""

from datetime import date
from typing import Dict, List, Any, Optional

from .config import (
    LETTER_TO_NUMBER,
    MASTER_NUMBERS,
    MASTER_ROOTS,
    LIFE_PATH_NUMBERS,
    DESTINY_NUMBERS,
    MASTER_NUMBER_PROFILES,
    COMPLEMENTARY_PAIRS,
    NEUTRAL_PAIRS,
    CHALLENGING_PAIRS,
    COMPATIBILITY_SCORES,
    COMPATIBILITY_RANGES,
)
from .exceptions import ValidationError
from .utils import validate_date, validate_name, validate_numerology_number


# -------------------------
# Reducere
# -------------------------
def reduce_to_single_digit(num: int) -> int:
    """
    Reduce un întreg pozitiv prin suma cifrelor până la 1..9.
    Numerele maestre 11, 22 și 33 se opresc din reducere.

    >>> reduce_to_single_digit(1985)
    5
    >>> reduce_to_single_digit(29)
    11
    """
    if isinstance(num, bool) or not isinstance(num, int) or num <= 0:
        raise ValidationError("Input must be a positive integer")
    if num <= 9 or num in MASTER_NUMBERS:
        return num
    return reduce_to_single_digit(sum(int(d) for d in str(num)))


# -------------------------
# Litere
# -------------------------
def letter_value(letter: str) -> int:
    """Valoarea pitagoreică a unui caracter; 0 pentru cifre, spații, punctuație."""
    return LETTER_TO_NUMBER.get(letter, 0)


def letter_value_breakdown(name: str) -> List[Dict[str, Any]]:
    """
    Descompune numele în litere cu valorile lor (caracterele cu valoare 0 sunt omise).
    Ex.: "Ion" -> [{"letter": "I", "value": 9}, {"letter": "O", "value": 6}, {"letter": "N", "value": 5}]
    """
    out = []
    for ch in name.strip():
        v = letter_value(ch)
        if v:
            out.append({"letter": ch.upper(), "value": v})
    return out


def name_letter_sum(name: str) -> int:
    return sum(letter_value(ch) for ch in name.strip())


# -------------------------
# Calea Vieții / Destin
# -------------------------
def calculate_life_path(birth_date: Any) -> int:
    """
    Ziua, luna și anul se reduc separat (păstrând maestrele),
    apoi suma lor se reduce din nou.
    14.11.1985 -> 5 + 11 + 5 = 21 -> 3
    """
    d = validate_date(birth_date, "birthDate")
    total = (
        reduce_to_single_digit(d.day)
        + reduce_to_single_digit(d.month)
        + reduce_to_single_digit(d.year)
    )
    return reduce_to_single_digit(total)


def calculate_destiny_number(name: str) -> int:
    full_name = validate_name(name)
    total = name_letter_sum(full_name)
    if total == 0:
        raise ValidationError("Name must contain at least one letter")
    return reduce_to_single_digit(total)


# -------------------------
# Compatibilitate
# -------------------------
def _pair_in(a: int, b: int, pairs) -> bool:
    return (a, b) in pairs or (b, a) in pairs


def calculate_compatibility(num1: int, num2: int) -> int:
    """
    Scor 0..100 între două numere numerologice.
    Ordinea regulilor: identice, ambele maestre, maestru cu rădăcina lui,
    perechi complementare, neutre, dificile, apoi valoarea implicită.
    """
    a = validate_numerology_number(num1)
    b = validate_numerology_number(num2)

    if a == b:
        return COMPATIBILITY_SCORES["same"]

    a_master = a in MASTER_NUMBERS
    b_master = b in MASTER_NUMBERS
    if a_master and b_master:
        return COMPATIBILITY_SCORES["both_master"]
    if (a_master and MASTER_ROOTS[a] == b) or (b_master and MASTER_ROOTS[b] == a):
        return COMPATIBILITY_SCORES["master_root"]

    if _pair_in(a, b, COMPLEMENTARY_PAIRS):
        return COMPATIBILITY_SCORES["complementary"]
    if _pair_in(a, b, NEUTRAL_PAIRS):
        return COMPATIBILITY_SCORES["neutral"]
    if _pair_in(a, b, CHALLENGING_PAIRS):
        return COMPATIBILITY_SCORES["challenging"]
    return COMPATIBILITY_SCORES["default"]


def compatibility_level(score: int) -> Dict[str, Any]:
    """Intervalul de compatibilitate (scăzută/medie/bună/excelentă) pentru un scor."""
    if score < 0 or score > 100:
        raise ValidationError("Compatibility score must be between 0 and 100")
    for r in COMPATIBILITY_RANGES:
        if score <= r["max"]:
            return dict(r)
    return dict(COMPATIBILITY_RANGES[-1])


def calculate_compatibility_report(name1: str, birth_date1: Any,
                                   name2: str, birth_date2: Any) -> Dict[str, Any]:
    """
    Compatibilitatea completă a două persoane: Calea Vieții și Destinul fiecăreia,
    scorurile pe fiecare axă și media lor rotunjită.
    """
    lp1, lp2 = calculate_life_path(birth_date1), calculate_life_path(birth_date2)
    dn1, dn2 = calculate_destiny_number(name1), calculate_destiny_number(name2)
    lp_score = calculate_compatibility(lp1, lp2)
    dn_score = calculate_compatibility(dn1, dn2)
    # rotunjire .5 în sus, ca pe site
    overall = int((lp_score + dn_score) / 2 + 0.5)
    return {
        "person1": {"name": name1.strip(), "life_path": lp1, "destiny": dn1},
        "person2": {"name": name2.strip(), "life_path": lp2, "destiny": dn2},
        "life_path_score": lp_score,
        "destiny_score": dn_score,
        "score": overall,
        "level": compatibility_level(overall),
    }


# -------------------------
# Profiluri scurte
# -------------------------
def get_number_profile(kind: str, number: int) -> Optional[Dict[str, Any]]:
    """
    kind: "life-path" sau "destiny". Numerele maestre au profil comun.
    Întoarce None pentru numere fără profil.
    """
    if number in MASTER_NUMBER_PROFILES:
        return {"number": number, "is_master": True, **MASTER_NUMBER_PROFILES[number]}
    table = LIFE_PATH_NUMBERS if kind == "life-path" else DESTINY_NUMBERS
    profile = table.get(number)
    if profile is None:
        return None
    return {"number": number, "is_master": False, **profile}


def is_master_number(number: int) -> bool:
    return number in MASTER_NUMBERS


if __name__ == "__main__":
    # verificare rapidă
    print(calculate_life_path(date(1985, 11, 14)))  # 3
    print(calculate_destiny_number("Ion Popescu"))  # 7
    print(calculate_compatibility(11, 2))  # 95
