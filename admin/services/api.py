# admin/services/api.py

import os
import requests
from dotenv import load_dotenv


load_dotenv()

# Base URL of the FastAPI backend
API_URL = os.getenv("API_URL", "http://localhost:8000").rstrip("/")

TIMEOUT = 30


class ApiError(Exception):
    """
    A failed API call. ``status_code`` is None when the server was never reached.
    """

    def __init__(self, message, status_code=None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    @property
    def is_auth_error(self):
        return self.status_code in (400, 401) and self.message in (
            "Access denied", "Invalid token", "User not found"
        )


def _auth_header(token):
    return {"Authorization": f"Bearer {token}"} if token else {}


def _request(method, path, token=None, **kwargs):
    try:
        res = requests.request(
            method,
            f"{API_URL}{path}",
            headers=_auth_header(token),
            timeout=TIMEOUT,
            **kwargs,
        )
    except requests.RequestException as e:
        raise ApiError("No response from server. Please try again.") from e

    if res.ok:
        return res.json()

    try:
        message = res.json().get("error") or f"Request failed ({res.status_code})"
    except ValueError:
        message = f"Request failed ({res.status_code})"
    raise ApiError(message, res.status_code)


def _image_part(image):
    """
    Builds the multipart file tuple for a Streamlit UploadedFile.
    """
    return {"image": (image.name, image.getvalue(), image.type or "application/octet-stream")}


# -------------------------------
# Authentication
# -------------------------------

def login_user(username, password):
    """
    Logs in and returns the bearer token.
    """
    data = _request("POST", "/api/login", json={"username": username, "password": password})
    token = data.get("token")
    if not token:
        raise ApiError("Authentication failed")
    return token


def get_user_info(token):
    """
    Retrieves the account the token belongs to.
    """
    return _request("GET", "/api/me", token)


# -------------------------------
# Cards
# -------------------------------

def list_cards(token, page):
    return _request("GET", "/api/cards", token, params={"page": page})


def create_card(token, fields, image):
    return _request("POST", "/api/cards", token, data=fields, files=_image_part(image))


def update_card(token, card_id, fields, image=None):
    """
    Sends only non-empty fields; the image is optional.
    """
    data = {k: v for k, v in fields.items() if v}
    files = _image_part(image) if image is not None else None
    return _request("PUT", f"/api/cards/{card_id}", token, data=data, files=files)


def delete_card(token, card_id):
    return _request("DELETE", f"/api/cards/{card_id}", token)
