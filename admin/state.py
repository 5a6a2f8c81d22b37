# admin/state.py

"""
Client-side state for the admin UI.

One ``AdminState`` lives in ``st.session_state``. It holds the authoritative
card list and exactly one mode at a time; dialogs are modes, not flags.

    LOGGED_OUT --login--> LISTING
    LISTING <--> ADDING | EDITING | CONFIRM_DELETE
    any --logout--> LOGGED_OUT
"""

from enum import Enum


class Mode(str, Enum):
    LOGGED_OUT = "logged_out"
    LISTING = "listing"
    ADDING = "adding"
    EDITING = "editing"
    CONFIRM_DELETE = "confirm_delete"


class InvalidTransition(Exception):
    pass


class AdminState:

    def __init__(self, token=None):
        self.logout()
        if token:
            self.login(token)

    # -------------------------------
    # Session
    # -------------------------------

    @property
    def logged_in(self):
        return self.mode is not Mode.LOGGED_OUT

    def login(self, token):
        self.token = token
        self.mode = Mode.LISTING

    def logout(self):
        self.token = None
        self.mode = Mode.LOGGED_OUT
        self.cards = []
        self.target = None
        self.busy = False
        self.next_page = 1
        self.exhausted = False

    # -------------------------------
    # Dialogs
    # -------------------------------

    def _require(self, *modes):
        if self.mode not in modes:
            raise InvalidTransition(f"cannot leave {self.mode.value} this way")

    def open_add(self):
        self._require(Mode.LISTING)
        self.mode = Mode.ADDING

    def open_edit(self, card):
        self._require(Mode.LISTING)
        self.target = card
        self.mode = Mode.EDITING

    def open_delete(self, card):
        self._require(Mode.LISTING)
        self.target = card
        self.mode = Mode.CONFIRM_DELETE

    def cancel(self):
        """Closes the open dialog without touching the card list."""
        if self.busy:
            return
        self._require(Mode.ADDING, Mode.EDITING, Mode.CONFIRM_DELETE)
        self.target = None
        self.mode = Mode.LISTING

    # -------------------------------
    # Requests
    # -------------------------------

    def begin_request(self):
        """
        Marks a write as in flight. Returns False if one already is, so the
        caller can drop a second submit.
        """
        if self.busy:
            return False
        self.busy = True
        return True

    def end_request(self):
        self.busy = False

    # -------------------------------
    # Results
    # -------------------------------

    def merge_page(self, cards):
        """
        Appends a fetched page, skipping cards already listed.
        An empty page ends pagination. Returns the number of cards added.
        """
        if not cards:
            self.exhausted = True
            return 0
        known = {c["_id"] for c in self.cards}
        fresh = [c for c in cards if c["_id"] not in known]
        self.cards.extend(fresh)
        self.next_page += 1
        return len(fresh)

    def stop_paging(self):
        self.exhausted = True

    def card_added(self, card):
        self._require(Mode.ADDING)
        if all(c["_id"] != card["_id"] for c in self.cards):
            self.cards.append(card)
        self.mode = Mode.LISTING

    def card_updated(self, card):
        self._require(Mode.EDITING)
        self.cards = [card if c["_id"] == card["_id"] else c for c in self.cards]
        self.target = None
        self.mode = Mode.LISTING

    def card_deleted(self, card_id):
        self._require(Mode.CONFIRM_DELETE)
        # Later pages shifted back by one; re-read from the previous page
        if not self.exhausted:
            self.next_page = max(1, self.next_page - 1)
        self.cards = [c for c in self.cards if c["_id"] != card_id]
        self.target = None
        self.mode = Mode.LISTING
