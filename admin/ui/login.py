# admin/ui/login.py

import os
import streamlit as st
from dotenv import load_dotenv
from streamlit_cookies_manager import EncryptedCookieManager

from admin.services.api import ApiError, get_user_info, login_user
from admin.state import AdminState

load_dotenv()

COOKIE_PASSWORD = os.getenv("COOKIE_PASSWORD", "")
VERIFY_TOKEN_ON_LOAD = os.getenv("VERIFY_TOKEN_ON_LOAD", "").lower() in ("1", "true", "yes")

cookies = EncryptedCookieManager(prefix="cards-admin/", password=COOKIE_PASSWORD)
if not cookies.ready():
    st.stop()


def get_state() -> AdminState:
    """
    Returns the session's AdminState, restoring a stored token on first load.
    A restored token is trusted until a request fails, unless
    VERIFY_TOKEN_ON_LOAD is set.
    """
    if "admin" not in st.session_state:
        token = cookies.get("adminToken")
        if token and VERIFY_TOKEN_ON_LOAD:
            try:
                get_user_info(token)
            except ApiError:
                token = None
                forget_token()
        st.session_state["admin"] = AdminState(token)
    return st.session_state["admin"]


def forget_token():
    if "adminToken" in cookies:
        del cookies["adminToken"]
    cookies.save()


def logout():
    forget_token()
    get_state().logout()
    st.toast("Logged out successfully!")


def login_page():
    st.title("🔐 Admin Login")

    with st.form("login_form"):
        username = st.text_input("Username")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Login")

    if submitted:
        with st.spinner("Logging in..."):
            try:
                token = login_user(username, password)
            except ApiError as e:
                message = e.message if e.status_code else "No response from server. Please try again."
                st.error(f"❌ {message}")
                return

        cookies["adminToken"] = token
        cookies.save()
        get_state().login(token)
        st.toast("Logged in successfully")
        st.rerun()
