# pages/03_Vise.py
import logging
from typing import Dict, List

import streamlit as st

from spirithub.config import DREAM_FALLBACK_MESSAGE, MAX_COMBINED_SYMBOLS
from spirithub.daily import resolve_daily_dream
from spirithub.dreams import DreamDictionary
from spirithub.exceptions import DataValidationError, ValidationError
from spirithub.loaders import build_search_index
from spirithub.store import ContentStore
from spirithub.utils import bucharest_today, format_romanian_date

logger = logging.getLogger("spirithub.pages.vise")

st.set_page_config(page_title="Dicționar de vise | SpiritHub.ro", page_icon="🌙", layout="wide")
st.title("Dicționar de vise 🌙")
st.markdown("Caută un simbol din visul tău, răsfoiește categoriile sau combină până la trei simboluri.")


@st.cache_resource
def load_dictionary() -> DreamDictionary:
    return DreamDictionary()


@st.cache_resource
def get_store() -> ContentStore:
    return ContentStore()


try:
    dictionary = load_dictionary()
except DataValidationError as e:
    logger.exception("Dicționarul de vise nu a putut fi încărcat")
    st.error(f"Dicționarul de vise nu a putut fi încărcat: {e}")
    st.stop()

st.session_state.setdefault("selected_dream", None)


def _select(slug: str) -> None:
    st.session_state["selected_dream"] = slug


def _symbol_list(symbols: List[Dict[str, str]], key_prefix: str) -> None:
    for s in symbols:
        c1, c2 = st.columns([4, 1])
        c1.markdown(f"**{s['name']}**: {s['short_meaning']}")
        c2.button("Citește", key=f"{key_prefix}_{s['slug']}", on_click=_select, args=(s["slug"],))


# -------------------------
# Visul zilei
# -------------------------
today = bucharest_today()
daily = resolve_daily_dream(today.isoformat(), dictionary)
if daily:
    with st.container(border=True):
        st.caption(f"Visul zilei · {format_romanian_date(today)}")
        st.markdown(f"### {daily['name']}")
        st.write(daily["short_meaning"])
        st.button("Interpretarea completă", key="daily_dream_open", on_click=_select, args=(daily["slug"],))

tab_search, tab_cat, tab_az, tab_combo = st.tabs(
    ["Căutare", "Categorii", "A-Z", "Interpretare combinată"]
)

with tab_search:
    c1, c2 = st.columns([3, 1])
    query = c1.text_input("Ce ai visat?", placeholder="ex: șarpe, apă, a zbura")
    categories = dictionary.categories()
    cat_options = ["Toate"] + [c["id"] for c in categories]
    cat_labels = {c["id"]: c["name"] for c in categories}
    chosen_cat = c2.selectbox("Categorie", cat_options,
                              format_func=lambda c: cat_labels.get(c, c))
    if query:
        category = None if chosen_cat == "Toate" else chosen_cat
        results = dictionary.search(query, category=category)
        if not results and get_store().has_dream_symbols():
            results = get_store().search_dream_symbols(query, category=category)
        if results:
            _symbol_list(results, "search")
        elif len(query.strip()) >= 2:
            st.info(DREAM_FALLBACK_MESSAGE)
    else:
        st.markdown("**Simboluri populare**")
        _symbol_list(dictionary.featured(), "featured")

with tab_cat:
    for cat in dictionary.categories():
        with st.expander(f"{cat['name']} ({cat['count']})"):
            st.caption(cat["description"])
            _symbol_list(dictionary.by_category(cat["id"]), f"cat_{cat['id']}")

with tab_az:
    active = [l["letter"] for l in dictionary.letters() if l["count"] > 0]
    if active:
        letter = st.radio("Literă", active, horizontal=True)
        _symbol_list(dictionary.by_letter(letter), "az")

with tab_combo:
    options = {s["slug"]: s["name"] for s in build_search_index()}
    chosen = st.multiselect("Alege 2-3 simboluri", list(options), format_func=options.get,
                            max_selections=MAX_COMBINED_SYMBOLS)
    if st.button("Interpretează", key="combo_btn"):
        try:
            combo = dictionary.combine_interpretations(chosen)
        except ValidationError as e:
            st.warning(str(e))
        else:
            st.markdown(f"**{combo['intro']}**")
            for section in combo["sections"]:
                st.markdown(f"#### {section['name']}")
                st.write(section["text"])
            st.info(combo["synthesis"])

# -------------------------
# Detaliu simbol
# -------------------------
slug = st.session_state.get("selected_dream")
if slug:
    symbol = dictionary.get_by_slug(slug) or get_store().get_dream_symbol_by_slug(slug)
    if symbol is None:
        st.warning(f"Simbolul „{slug}” nu există în dicționar.")
    else:
        st.divider()
        st.header(f"Ce înseamnă când visezi {symbol['name'].lower()}")
        st.caption(f"Categoria: {cat_labels.get(symbol['category'], symbol['category'])}")
        st.markdown(f"*{symbol['short_meaning']}*")
        st.write(symbol["full_interpretation"])
        st.markdown("**Simboluri înrudite**")
        _symbol_list(dictionary.related(slug), "related")
