# pages/02_Bioritm.py
import logging
from datetime import date, timedelta

import pandas as pd
import streamlit as st

from spirithub.biorhythm import (
    biorhythm_series,
    get_biorhythm,
    get_critical_days,
    get_week_outlook,
)
from spirithub.config import BIORHYTHM_CYCLES, CYCLE_ORDER, DEFAULT_FORECAST_DAYS
from spirithub.daily import get_energia_zilei
from spirithub.exceptions import ValidationError
from spirithub.services.charts import biorhythm_figure
from spirithub.utils import bucharest_today, format_romanian_date

logger = logging.getLogger("spirithub.pages.bioritm")

STATUS_LABELS = {
    "positive": "🟢 Pozitivă",
    "mixed": "🟡 Mixtă",
    "negative": "🔵 Scăzută",
    "critical": "🔴 Critică",
}

st.set_page_config(page_title="Bioritm | SpiritHub.ro", page_icon="📈", layout="wide")
st.title("Bioritm 📈")
st.markdown(
    "Trei cicluri care pornesc din ziua nașterii: **fizic** (23 de zile), "
    "**emoțional** (28 de zile) și **intelectual** (33 de zile). "
    "Zilele în care un ciclu trece prin zero sunt considerate critice."
)


@st.cache_data
def load_series(birth: date, start: date, days: int) -> pd.DataFrame:
    return biorhythm_series(birth, start, days)


# -------------------------
# Sidebar
# -------------------------
st.sidebar.header("Datele tale")
st.session_state.setdefault("birth_date", date(1990, 1, 1))
birth_date = st.sidebar.date_input("Data nașterii", key="birth_date",
                                   min_value=date(1900, 1, 1), max_value=bucharest_today())
target_date = st.sidebar.date_input("Ziua analizată", value=bucharest_today(), key="bio_target")
forecast_days = st.sidebar.slider("Zile în grafic", min_value=7, max_value=90,
                                  value=DEFAULT_FORECAST_DAYS, step=1)

try:
    result = get_biorhythm(birth_date, target_date)
except ValidationError as e:
    st.error(str(e))
    st.stop()

# -------------------------
# Ziua analizată
# -------------------------
st.subheader(f"{format_romanian_date(target_date)} · ziua {result['days_lived']} de viață")
cols = st.columns(len(CYCLE_ORDER))
for col, key in zip(cols, CYCLE_ORDER):
    cycle = result["cycles"][key]
    badge = " ⚠️" if cycle["critical"] else ""
    col.metric(f"{cycle['name']}{badge}", f"{cycle['percent']}%", help=f"Nivel {cycle['level']}")
st.info(result["summary"])

chart_start = max(birth_date, target_date - timedelta(days=3))
series = load_series(birth_date, chart_start, forecast_days)
st.plotly_chart(biorhythm_figure(series, highlight=target_date), use_container_width=True)

# -------------------------
# Săptămâna următoare și zilele critice
# -------------------------
left, right = st.columns(2)
with left:
    st.subheader("Următoarele 7 zile")
    outlook = get_week_outlook(birth_date, target_date)
    week_df = pd.DataFrame([
        {
            "Zi": f"{d['day_name']} {d['date']:%d.%m}",
            "Stare": STATUS_LABELS[d["overall_status"]],
            "Cel mai puternic": BIORHYTHM_CYCLES[d["best_cycle"]]["name"],
            **{BIORHYTHM_CYCLES[k]["name"]: f"{round(d['values'][k] * 100)}%" for k in CYCLE_ORDER},
        }
        for d in outlook
    ])
    st.dataframe(week_df, hide_index=True, use_container_width=True)

with right:
    st.subheader("Zile critice")
    critical = get_critical_days(birth_date, target_date, forecast_days)
    if not critical:
        st.write("Nicio zi critică în perioada selectată.")
    for item in critical:
        names = ", ".join(BIORHYTHM_CYCLES[k]["name"] for k in item["cycles"])
        st.markdown(f"- **{format_romanian_date(item['date'])}**: {names}")

# -------------------------
# Energia zilei
# -------------------------
st.divider()
energy = get_energia_zilei(target_date)
st.subheader(f"{energy['planetSymbol']} Energia zilei · {energy['dayName']}: {energy['theme']}")
st.caption(f"Planeta zilei: {energy['planet']} · energie dominantă: {energy['dominantEnergy']}")
st.progress(int(energy["energyLevel"]) / 100, text=f"{energy['energyLevel']}%")
st.write(energy["description"])
e1, e2, e3 = st.columns(3)
with e1:
    st.markdown("**Sfaturi**")
    for tip in energy["tips"]:
        st.markdown(f"- {tip}")
with e2:
    st.markdown("**De îmbrățișat**")
    for item in energy["toEmbrace"]:
        st.markdown(f"- {item}")
with e3:
    st.markdown("**De evitat**")
    for item in energy["toAvoid"]:
        st.markdown(f"- {item}")
