# server/core/utils.py

import re
import shutil
import tempfile
from pathlib import Path
from fastapi import UploadFile


_NON_SLUG_CHARS = re.compile(r"[^a-z0-9\s]")
_WHITESPACE_RUN = re.compile(r"\s+")


def slugify(title: str) -> str:
    """
    Derives the URL slug of a card title.

    Lowercases, drops everything but ASCII letters, digits and whitespace,
    trims, then joins the remaining words with single hyphens:
    ``"Hello, World!  Foo"`` -> ``"hello-world-foo"``.
    """
    slug = _NON_SLUG_CHARS.sub("", title.lower())
    return _WHITESPACE_RUN.sub("-", slug.strip())


def save_temp_upload(uploaded_file: UploadFile) -> Path:
    suffix = Path(uploaded_file.filename or "").suffix
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as tmp:
        shutil.copyfileobj(uploaded_file.file, tmp)
        return Path(tmp.name)
