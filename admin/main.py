# admin/main.py

import streamlit as st
from dotenv import load_dotenv

load_dotenv()

st.set_page_config(page_title="Cards Admin", layout="wide")

from admin.ui.login import get_state, login_page  # noqa: E402
from admin.ui.cards import cards_page  # noqa: E402


if get_state().logged_in:
    cards_page()
else:
    login_page()
