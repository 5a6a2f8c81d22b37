# admin/ui/cards.py

import os
import streamlit as st

from admin.services.api import ApiError, create_card, delete_card, list_cards, update_card
from admin.state import AdminState, Mode
from admin.ui.login import get_state, logout

CARD_AUTHOR = os.getenv("CARD_AUTHOR", "SPAM")
IMAGE_TYPES = ["png", "jpg", "jpeg", "gif", "webp"]


def _report(error: ApiError):
    st.toast(f"❌ {error.message}")
    if error.is_auth_error:
        logout()
        st.rerun()


def cards_page():
    state = get_state()

    st.title("📰 Blog Cards")

    if st.sidebar.button("🔓 Logout"):
        logout()
        st.rerun()

    if not state.cards and not state.exhausted:
        load_next_page(state)

    if state.mode is Mode.LISTING and st.button("➕ Add Card"):
        state.open_add()
        st.rerun()

    if state.mode is Mode.ADDING:
        handle_add(state)
    elif state.mode is Mode.EDITING:
        handle_edit(state)
    elif state.mode is Mode.CONFIRM_DELETE:
        handle_delete(state)

    show_cards(state)

    if not state.exhausted and st.button("Load more"):
        load_next_page(state)
        st.rerun()


def load_next_page(state: AdminState):
    try:
        cards = list_cards(state.token, state.next_page)
    except ApiError as e:
        state.stop_paging()
        _report(e)
        return
    if state.merge_page(cards) == 0 and state.exhausted:
        st.toast("No more cards to load.")


def show_cards(state: AdminState):
    if not state.cards:
        st.info("No cards yet.")
        return

    for card in state.cards:
        with st.container(border=True):
            col1, col2 = st.columns([1, 3])
            with col1:
                st.image(card["image"])
            with col2:
                st.subheader(card["title"])
                st.caption(f"{card['category']} · {card['readTime']} · {card['author']} · /{card['slug']}")
                st.write(card["content"])
                listing = state.mode is Mode.LISTING
                if st.button("✏️ Edit", key=f"edit-{card['_id']}", disabled=not listing):
                    state.open_edit(card)
                    st.rerun()
                if st.button("🗑️ Delete", key=f"delete-{card['_id']}", disabled=not listing):
                    state.open_delete(card)
                    st.rerun()


def handle_add(state: AdminState):
    st.subheader("Add Card")
    with st.form("add_card_form"):
        title = st.text_input("Title")
        content = st.text_area("Content")
        category = st.text_input("Category")
        read_time = st.text_input("Read time", placeholder="5 min")
        image = st.file_uploader("Image", type=IMAGE_TYPES)
        submitted = st.form_submit_button("Add", disabled=state.busy)
        cancelled = st.form_submit_button("Cancel", disabled=state.busy)

    if cancelled:
        state.cancel()
        st.rerun()

    if submitted:
        if not all([title, content, category, read_time, image]):
            st.error("All fields are required.")
            return
        if not state.begin_request():
            return
        fields = {
            "title": title,
            "content": content,
            "category": category,
            "author": CARD_AUTHOR,
            "readTime": read_time,
        }
        try:
            with st.spinner("Uploading..."):
                card = create_card(state.token, fields, image)
        except ApiError as e:
            _report(e)
            return
        finally:
            state.end_request()
        state.card_added(card)
        st.toast("Blog added successfully!")
        st.rerun()


def handle_edit(state: AdminState):
    card = state.target
    st.subheader(f"Edit: {card['title']}")
    with st.form("edit_card_form"):
        title = st.text_input("Title", value=card["title"])
        content = st.text_area("Content", value=card["content"])
        category = st.text_input("Category", value=card["category"])
        read_time = st.text_input("Read time", value=card["readTime"])
        image = st.file_uploader("Replace image (optional)", type=IMAGE_TYPES)
        submitted = st.form_submit_button("Save", disabled=state.busy)
        cancelled = st.form_submit_button("Cancel", disabled=state.busy)

    if cancelled:
        state.cancel()
        st.rerun()

    if submitted:
        if not state.begin_request():
            return
        fields = {
            "title": title,
            "content": content,
            "category": category,
            "readTime": read_time,
        }
        try:
            with st.spinner("Saving..."):
                updated = update_card(state.token, card["_id"], fields, image)
        except ApiError as e:
            _report(e)
            return
        finally:
            state.end_request()
        state.card_updated(updated)
        st.toast("Blog updated successfully!")
        st.rerun()


def handle_delete(state: AdminState):
    card = state.target
    st.warning(f"⚠️ Delete '{card['title']}'? This cannot be undone.")
    col1, col2 = st.columns(2)
    confirmed = col1.button("🗑️ Delete", key="confirm_delete", disabled=state.busy)
    cancelled = col2.button("Cancel", key="cancel_delete", disabled=state.busy)

    if cancelled:
        state.cancel()
        st.rerun()

    if confirmed:
        if not state.begin_request():
            return
        try:
            delete_card(state.token, card["_id"])
        except ApiError as e:
            state.end_request()
            state.cancel()
            _report(e)
            st.rerun()
            return
        state.end_request()
        state.card_deleted(card["_id"])
        st.toast("Blog deleted successfully!")
        st.rerun()
