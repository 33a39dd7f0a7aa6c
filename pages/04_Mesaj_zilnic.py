# pages/04_Mesaj_zilnic.py
import streamlit as st

from spirithub.daily import get_daily_oracle
from spirithub.services import share_card
from spirithub.utils import bucharest_today, format_romanian_long_date

st.set_page_config(page_title="Mesajul zilei | SpiritHub.ro", page_icon="🔮", layout="centered")

today = bucharest_today()
message = get_daily_oracle(today)
theme = message.get("theme", {})

st.caption(format_romanian_long_date(today))
st.title(f"{theme.get('icon', '🔮')} {message['title']}")
st.write(message["insight"])
st.markdown(f"**Acțiunea zilei:** {message['action']}")
st.info(message["mantra"])

st.download_button(
    "Descarcă imaginea pentru distribuire",
    data=share_card.oracle_card(message["id"]).encode("utf-8"),
    file_name=f"mesajul-zilei-{message['slug']}.svg",
    mime="image/svg+xml",
)
st.caption("Mesajul se schimbă în fiecare zi și este același pentru toți vizitatorii.")
