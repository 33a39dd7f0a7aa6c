# spirithub/config.py
"""
Configurație statică SpiritHub.

Responsabilități:
- tabela pitagoreică litere -> cifre pentru alfabetul românesc (cu diacritice)
- chei și descrieri scurte pentru Calea Vieții, Destin și numerele maestre
- intervalele de compatibilitate
- ciclurile de bioritm, pragul critic și intervalele de interpretare
- categoriile de vise și limitele de căutare
- metadatele site-ului (nume, navigație, SEO)
"""

from typing import Dict, List, Any

# -------------------------
# Numerologie
# -------------------------
_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# A=1..I=9, J=1..R=9, S=1..Z=8
LETTER_TO_NUMBER: Dict[str, int] = {
    **{ch: (i % 9) + 1 for i, ch in enumerate(_ALPHABET)},
    **{ch.lower(): (i % 9) + 1 for i, ch in enumerate(_ALPHABET)},
    # diacritice românești (virgulă dedesubt și formele vechi cu sedilă)
    "Ă": 1, "Â": 1, "Î": 9, "Ș": 1, "Ț": 2, "Ş": 1, "Ţ": 2,
    "ă": 1, "â": 1, "î": 9, "ș": 1, "ț": 2, "ş": 1, "ţ": 2,
}

VALID_NUMBERS: List[int] = [1, 2, 3, 4, 5, 6, 7, 8, 9]
MASTER_NUMBERS: List[int] = [11, 22, 33]
ALL_VALID_NUMBERS: List[int] = VALID_NUMBERS + MASTER_NUMBERS

# rădăcina fiecărui număr maestru
MASTER_ROOTS: Dict[int, int] = {11: 2, 22: 4, 33: 6}

LIFE_PATH_NUMBERS: Dict[int, Dict[str, str]] = {
    1: {"key": "lider", "short": "Lider natural, independent și inovator"},
    2: {"key": "diplomat", "short": "Diplomat, cooperant și sensibil"},
    3: {"key": "creator", "short": "Creator, expresiv și optimist"},
    4: {"key": "constructor", "short": "Constructor, practic și disciplinat"},
    5: {"key": "aventurier", "short": "Aventurier, liber și adaptabil"},
    6: {"key": "protector", "short": "Protector, responsabil și armonios"},
    7: {"key": "cautator", "short": "Căutător spiritual, analitic și înțelept"},
    8: {"key": "realizator", "short": "Realizator, ambițios și puternic"},
    9: {"key": "umanitar", "short": "Umanitar, generos și vizionar"},
}

DESTINY_NUMBERS: Dict[int, Dict[str, str]] = {
    1: {"key": "pionier", "short": "Destinat să conducă și să inoveze"},
    2: {"key": "mediator", "short": "Destinat să aducă pace și echilibru"},
    3: {"key": "artist", "short": "Destinat să creeze și să inspire"},
    4: {"key": "organizator", "short": "Destinat să construiască și să stabilizeze"},
    5: {"key": "explorator", "short": "Destinat să exploreze și să schimbe"},
    6: {"key": "ingrijitor", "short": "Destinat să îngrijească și să armonizeze"},
    7: {"key": "intelept", "short": "Destinat să înțeleagă și să învețe"},
    8: {"key": "magnat", "short": "Destinat să realizeze și să prospere"},
    9: {"key": "filantrop", "short": "Destinat să servească și să transforme"},
}

MASTER_NUMBER_PROFILES: Dict[int, Dict[str, str]] = {
    11: {"key": "iluminat", "short": "Iluminat spiritual, intuitiv și inspirațional"},
    22: {"key": "constructor-maestru", "short": "Constructor maestru, vizionar și realizator de mari proiecte"},
    33: {"key": "invatator-maestru", "short": "Învățător maestru, compasiune universală și vindecare"},
}

# perechi simetrice; ordinea verificării: complementare, neutre, dificile
COMPLEMENTARY_PAIRS = [
    (1, 2), (1, 5), (1, 7),
    (2, 4), (2, 6), (2, 8),
    (3, 6), (3, 9),
    (4, 8),
    (5, 7),
]
NEUTRAL_PAIRS = [
    (1, 3), (1, 4), (1, 6), (1, 9),
    (2, 3), (2, 5), (2, 7), (2, 9),
    (3, 4), (3, 5), (3, 7), (3, 8),
    (4, 5), (4, 6), (4, 7), (4, 9),
    (5, 6), (5, 8), (5, 9),
    (6, 7), (6, 8), (6, 9),
    (7, 8), (7, 9),
    (8, 9),
]
# (4, 3) apare și la neutre, deci rămâne 60
CHALLENGING_PAIRS = [(1, 8), (4, 3)]

COMPATIBILITY_SCORES: Dict[str, int] = {
    "same": 100,
    "master_root": 95,
    "both_master": 90,
    "complementary": 85,
    "neutral": 60,
    "challenging": 30,
    "default": 55,
}

COMPATIBILITY_RANGES: List[Dict[str, Any]] = [
    {"min": 0, "max": 25, "level": "scăzută", "key": "low", "anchor": 25},
    {"min": 26, "max": 50, "level": "medie", "key": "medium", "anchor": 50},
    {"min": 51, "max": 75, "level": "bună", "key": "good", "anchor": 75},
    {"min": 76, "max": 100, "level": "excelentă", "key": "excellent", "anchor": 100},
]

# -------------------------
# Bioritm
# -------------------------
BIORHYTHM_CYCLES: Dict[str, Dict[str, Any]] = {
    "physical": {
        "name": "Fizic",
        "days": 23,
        "color": "#ef4444",
        "description": "Ciclul fizic influențează energia, rezistența și coordonarea fizică",
    },
    "emotional": {
        "name": "Emoțional",
        "days": 28,
        "color": "#3b82f6",
        "description": "Ciclul emoțional influențează starea de spirit, creativitatea și sensibilitatea",
    },
    "intellectual": {
        "name": "Intelectual",
        "days": 33,
        "color": "#10b981",
        "description": "Ciclul intelectual influențează claritatea mentală, memoria și gândirea analitică",
    },
}
CYCLE_ORDER = ("physical", "emotional", "intellectual")

CRITICAL_THRESHOLD = 0.1
DEFAULT_FORECAST_DAYS = 30

# valorile negative sunt tratate ca fază scăzută (recuperare)
INTERPRETATION_RANGES: List[Dict[str, Any]] = [
    {"min": -0.1, "max": 0.1, "level": "critic", "key": "critical"},
    {"min": 0.1, "max": 0.4, "level": "scăzut", "key": "low"},
    {"min": 0.4, "max": 0.7, "level": "mediu", "key": "medium"},
    {"min": 0.7, "max": 1.0, "level": "ridicat", "key": "high"},
]

# praguri folosite de rezumatul zilei
SUMMARY_HIGH = 0.3
SUMMARY_LOW = -0.3

# -------------------------
# Vise
# -------------------------
DREAM_CATEGORIES: List[Dict[str, str]] = [
    {"id": "animale", "name": "Animale",
     "description": "Simboluri legate de animale: șarpe, pisică, câine, pasăre, etc."},
    {"id": "natura", "name": "Natură",
     "description": "Elemente naturale: apă, foc, pădure, munte, mare, etc."},
    {"id": "obiecte", "name": "Obiecte",
     "description": "Obiecte comune: casă, mașină, cheie, carte, telefon, etc."},
    {"id": "emotii", "name": "Emoții",
     "description": "Stări emoționale: frică, bucurie, tristețe, furie, iubire, etc."},
    {"id": "persoane", "name": "Persoane",
     "description": "Figuri umane: mamă, tată, străin, copil, prieten, etc."},
    {"id": "actiuni", "name": "Acțiuni",
     "description": "Acțiuni și activități: zbor, cădere, fugă, dans, vorbire, etc."},
    {"id": "locuri", "name": "Locuri",
     "description": "Locații și spații: școală, biserică, cimitir, piață, drum, etc."},
]

DREAM_SEARCH: Dict[str, int] = {
    "min_query_length": 2,
    "max_results": 20,
    "hard_limit": 50,
}
MAX_COMBINED_SYMBOLS = 3
MIN_COMBINED_SYMBOLS = 2
RELATED_SYMBOLS_COUNT = 5

FEATURED_DREAM_SLUGS = ["sarpe", "apa", "casa", "a-zbura", "iubire", "mama", "biserica"]

DREAM_FALLBACK_MESSAGE = (
    "Nu am găsit simboluri care să corespundă căutării tale. "
    "Încearcă cu alte cuvinte sau verifică ortografia."
)

# -------------------------
# Lună
# -------------------------
SYNODIC_MONTH = 29.53058867
MOON_PHASES: List[Dict[str, Any]] = [
    {"key": "new", "max": 0.0625, "label": "Lună nouă – un nou început", "emoji": "🌑"},
    {"key": "waxing_crescent", "max": 0.1875, "label": "Semilună în creștere – intenții și primii pași", "emoji": "🌒"},
    {"key": "first_quarter", "max": 0.3125, "label": "Primul pătrar – acțiune și hotărâre", "emoji": "🌓"},
    {"key": "waxing_gibbous", "max": 0.4375, "label": "Lună aproape plină – ajustări și progres", "emoji": "🌔"},
    {"key": "full", "max": 0.5625, "label": "Lună plină – claritate și intensitate", "emoji": "🌕"},
    {"key": "waning_gibbous", "max": 0.6875, "label": "Lună în descreștere – lecții și recunoștință", "emoji": "🌖"},
    {"key": "last_quarter", "max": 0.8125, "label": "Ultimul pătrar – curățare și clarificare", "emoji": "🌗"},
    {"key": "waning_crescent", "max": 0.9375, "label": "Semilună în descreștere – odihnă și vindecare", "emoji": "🌘"},
    {"key": "new", "max": 1.0, "label": "Lună nouă – un nou început", "emoji": "🌑"},
]
MOON_CACHE_WINDOW_HOURS = 6
MOON_CACHE_TTL = 6 * 3600
DAILY_WIDGET_TTL = 12 * 3600

# -------------------------
# Site
# -------------------------
SITE_CONFIG: Dict[str, Any] = {
    "name": "SpiritHub.ro",
    "description": "Platformă spirituală românească pentru numerologie, interpretare vise și bioritm",
    "url": "https://spirithub.ro",
    "main_nav": [
        {"title": "Numerologie", "page": "pages/01_Numerologie.py", "icon": "🔢",
         "description": "Descoperă-ți calea vieții, numărul destinului și compatibilitatea"},
        {"title": "Bioritm", "page": "pages/02_Bioritm.py", "icon": "📈",
         "description": "Calculează ciclurile tale fizice, emoționale și intelectuale"},
        {"title": "Vise", "page": "pages/03_Vise.py", "icon": "🌙",
         "description": "Dicționar de vise cu interpretări pentru simbolurile cele mai comune"},
        {"title": "Mesaj zilnic", "page": "pages/04_Mesaj_zilnic.py", "icon": "🔮",
         "description": "Mesajul oracolului pentru ziua de azi"},
    ],
}
