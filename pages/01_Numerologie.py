# pages/01_Numerologie.py
import logging
from datetime import date
from typing import Any, Dict, Optional

import streamlit as st

from spirithub.daily import get_daily_number
from spirithub.exceptions import MissingContentError, ValidationError
from spirithub.interpretations import get_compatibility_interpretation, get_interpretation
from spirithub.numerology import (
    calculate_compatibility_report,
    calculate_destiny_number,
    calculate_life_path,
    get_number_profile,
    is_master_number,
    letter_value_breakdown,
)
from spirithub.services import share_card
from spirithub.store import ContentStore
from spirithub.utils import bucharest_today, format_romanian_date

logger = logging.getLogger("spirithub.pages.numerologie")

st.set_page_config(page_title="Numerologie | SpiritHub.ro", page_icon="🔢", layout="wide")
st.title("Numerologie 🔢")
st.markdown(
    "Numerele tale personale, calculate din data nașterii și din nume. "
    "Numerele maestre 11, 22 și 33 nu se reduc."
)


@st.cache_resource
def get_store() -> ContentStore:
    return ContentStore()


def _track(feature: str, metadata: Optional[Dict[str, Any]] = None) -> None:
    try:
        get_store().record_event("calculation", feature, metadata)
    except Exception:
        logger.exception("Evenimentul %s nu a fost salvat", feature)


def _render_interpretation(entry: Optional[Dict[str, Any]]) -> None:
    if not entry:
        st.warning("Interpretarea pentru acest număr nu este disponibilă.")
        return
    hero = entry.get("hero", {})
    content = entry.get("content", {})
    st.markdown(f"### {hero.get('icon', '')} {hero.get('title', '')}")
    st.caption(hero.get("subtitle", ""))
    st.markdown(f"*{hero.get('headline', '')}*")
    if entry.get("tags"):
        st.write(" · ".join(entry["tags"]))
    st.write(content.get("main_text", ""))
    c1, c2 = st.columns(2)
    with c1:
        st.markdown("**Ce să faci**")
        for item in content.get("dos", []):
            st.markdown(f"- {item}")
    with c2:
        st.markdown("**Ce să eviți**")
        for item in content.get("donts", []):
            st.markdown(f"- {item}")
    if entry.get("mantra"):
        st.info(entry["mantra"])


def _share_button(svg: str, file_name: str, key: str) -> None:
    st.download_button("Descarcă imaginea pentru distribuire", data=svg.encode("utf-8"),
                       file_name=file_name, mime="image/svg+xml", key=key)


# -------------------------
# Sidebar: datele consultantului
# -------------------------
st.sidebar.header("Datele tale")
st.session_state.setdefault("birth_date", date(1990, 1, 1))
st.session_state.setdefault("full_name", "")
birth_date = st.sidebar.date_input("Data nașterii", key="birth_date",
                                   min_value=date(1900, 1, 1), max_value=bucharest_today())
full_name = st.sidebar.text_input("Numele complet", key="full_name")

tab_lp, tab_dn, tab_cp, tab_day = st.tabs(
    ["Calea vieții", "Numele destinului", "Compatibilitate", "Numărul zilei"]
)

with tab_lp:
    st.subheader("Calea vieții")
    if st.button("Calculează calea vieții", key="btn_lp"):
        try:
            number = calculate_life_path(birth_date)
        except ValidationError as e:
            st.error(str(e))
        else:
            _track("life-path", {"number": number})
            st.metric(f"Născut(ă) pe {format_romanian_date(birth_date)}", number)
            if is_master_number(number):
                st.success(f"{number} este un număr maestru și nu se reduce mai departe.")
            profile = get_number_profile("life-path", number)
            if profile:
                st.caption(profile["short"])
            _render_interpretation(get_interpretation("life-path", number, use_fallback=True))
            _share_button(share_card.life_path_card(number), f"calea-vietii-{number}.svg", "share_lp")

with tab_dn:
    st.subheader("Numele destinului")
    if st.button("Calculează numărul destinului", key="btn_dn"):
        try:
            number = calculate_destiny_number(full_name)
        except ValidationError as e:
            st.error(str(e))
        else:
            _track("destiny", {"number": number})
            st.metric(full_name.strip(), number)
            breakdown = letter_value_breakdown(full_name)
            st.dataframe({"Literă": [b["letter"] for b in breakdown],
                          "Valoare": [b["value"] for b in breakdown]},
                         hide_index=True, use_container_width=True)
            entry = get_interpretation("destiny", number)
            _render_interpretation(entry)
            if entry:
                _share_button(share_card.destiny_card(number), f"destin-{number}.svg", "share_dn")

with tab_cp:
    st.subheader("Compatibilitate")
    c1, c2 = st.columns(2)
    with c1:
        name1 = st.text_input("Numele tău", value=full_name, key="cp_name1")
        date1 = st.date_input("Data ta de naștere", value=birth_date, key="cp_date1",
                              min_value=date(1900, 1, 1))
    with c2:
        name2 = st.text_input("Numele partenerului", key="cp_name2")
        date2 = st.date_input("Data de naștere a partenerului", value=date(1990, 1, 1), key="cp_date2",
                              min_value=date(1900, 1, 1))
    if st.button("Calculează compatibilitatea", key="btn_cp"):
        try:
            report = calculate_compatibility_report(name1, date1, name2, date2)
        except ValidationError as e:
            st.error(str(e))
        else:
            _track("compatibility", {"score": report["score"]})
            p1, p2 = report["person1"], report["person2"]
            m1, m2, m3 = st.columns(3)
            m1.metric("Scor general", f"{report['score']}%")
            m2.metric("Calea vieții", f"{report['life_path_score']}%",
                      help=f"{p1['life_path']} și {p2['life_path']}")
            m3.metric("Destin", f"{report['destiny_score']}%",
                      help=f"{p1['destiny']} și {p2['destiny']}")
            st.progress(report["score"] / 100, text=f"Compatibilitate {report['level']['level']}")
            entry = get_compatibility_interpretation(report["score"])
            _render_interpretation(entry)
            if entry:
                st.caption(f"Compatibilitatea noastră este {report['score']}% - {entry['hero']['title']}")
            _share_button(share_card.compatibility_card(report["score"], p1["name"], p2["name"]),
                          f"compatibilitate-{report['score']}.svg", "share_cp")

with tab_day:
    st.subheader("Numărul zilei")
    day = st.date_input("Ziua", value=bucharest_today(), key="day_number_date")
    try:
        info = get_daily_number(day.isoformat())
    except (ValidationError, MissingContentError) as e:
        st.error(str(e))
    else:
        st.metric(format_romanian_date(day), info["number"])
        _render_interpretation(info["interpretation"])
        _share_button(share_card.daily_number_card(day.isoformat()),
                      f"numarul-zilei-{day.isoformat()}.svg", "share_day")
