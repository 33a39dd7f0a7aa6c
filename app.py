# app.py
"""Prima pagină SpiritHub.ro: data zilei, faza Lunii și widgeturile zilnice."""

import logging
from datetime import datetime
from typing import Any, Dict

import streamlit as st
from dotenv import load_dotenv

from spirithub import settings
from spirithub.config import DAILY_WIDGET_TTL, MOON_CACHE_TTL, SITE_CONFIG
from spirithub.daily import get_daily_oracle, get_daily_widget_data, get_energia_zilei
from spirithub.moon import get_moon_guide, moon_cache_key
from spirithub.services import convex_client
from spirithub.utils import bucharest_now, bucharest_today, format_romanian_long_date

logger = logging.getLogger("spirithub.app")


@st.cache_data(ttl=MOON_CACHE_TTL)
def load_moon(cache_key: str) -> Dict[str, Any]:
    # cache_key schimbă intrarea la fiecare fereastră de 6 ore
    return get_moon_guide(bucharest_now())


@st.cache_data(ttl=DAILY_WIDGET_TTL)
def load_widgets(date_iso: str) -> Dict[str, Any]:
    return get_daily_widget_data()


def _load_config_from_secrets() -> None:
    """Secrets Streamlit (CONVEX_URL, CONVEX_DEPLOY_KEY) au prioritate față de mediu."""
    try:
        url = st.secrets.get("CONVEX_URL")
        key = st.secrets.get("CONVEX_DEPLOY_KEY")
    except FileNotFoundError:
        return
    settings.configure(convex_url=url, convex_deploy_key=key)


def _render_header(now: datetime) -> None:
    moon = load_moon(moon_cache_key(now))
    left, right = st.columns([3, 2])
    with left:
        st.title(SITE_CONFIG["name"])
        st.caption(SITE_CONFIG["description"])
        st.markdown(f"**{format_romanian_long_date(now.date())}**")
    with right:
        st.markdown(f"### {moon['emoji']} {moon['label']}")
        st.caption(f"Vârsta Lunii: {moon['age_days']:.1f} zile")
        with st.expander(moon["title"]):
            st.write(moon["insight"])
            st.markdown("**Ghidaj:** " + " · ".join(moon["guidance"]))
            st.markdown("**Evită:** " + " · ".join(moon["avoid"]))
            st.info(moon["mantra"])


def _render_widgets(widgets: Dict[str, Any]) -> None:
    col1, col2, col3 = st.columns(3)
    with col1:
        st.subheader("🔢 Numărul zilei")
        number = widgets.get("dailyNumber")
        if number:
            st.metric(number.get("title") or "", number["number"])
            st.write(number.get("description") or "")
        else:
            st.warning("Numărul zilei nu este disponibil momentan.")
    with col2:
        st.subheader("🌙 Visul zilei")
        dream = widgets.get("dailyDream")
        if dream:
            st.markdown(f"**{dream['name']}**")
            st.write(dream.get("shortDescription") or "")
        else:
            st.warning("Visul zilei nu este disponibil momentan.")
    with col3:
        st.subheader("📈 Bioritm")
        hint = widgets["biorhythmHint"]
        st.markdown(f"**{hint['dayOfWeek']}: {hint['title']}**")
        st.write(hint["hint"])


def main() -> None:
    load_dotenv()
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    st.set_page_config(page_title=SITE_CONFIG["name"], page_icon="✨", layout="wide")
    _load_config_from_secrets()

    now = bucharest_now()
    today = bucharest_today()
    _render_header(now)
    st.divider()

    try:
        widgets = load_widgets(today.isoformat())
    except Exception as e:
        logger.exception("Widgeturile zilnice nu au putut fi încărcate")
        st.error(f"Conținutul zilei nu a putut fi încărcat: {e}")
        widgets = None
    if widgets:
        _render_widgets(widgets)

    st.divider()
    oracle = get_daily_oracle(today)
    energy = get_energia_zilei(today)
    left, right = st.columns(2)
    with left:
        st.subheader(f"{oracle['theme']['icon']} Mesajul zilei: {oracle['title']}")
        st.write(oracle["insight"])
        st.caption(oracle["action"])
    with right:
        st.subheader(f"{energy['planetSymbol']} Energia zilei: {energy['theme']}")
        st.write(energy["shortHint"])
        st.progress(int(energy["energyLevel"]) / 100, text=f"Nivel energetic {energy['energyLevel']}%")

    status = convex_client.health_check()
    st.sidebar.caption("Sursa datelor: " + ("Convex" if status["configured"] else "calcul local"))

    st.divider()
    st.subheader("Instrumente rapide")
    cols = st.columns(len(SITE_CONFIG["main_nav"]))
    for col, item in zip(cols, SITE_CONFIG["main_nav"]):
        with col:
            st.page_link(item["page"], label=item["title"], icon=item.get("icon"))


if __name__ == "__main__":
    main()
