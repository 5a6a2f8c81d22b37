"""Tests for the media host adapter."""

import io
from pathlib import Path
from unittest.mock import patch

import pytest
from fastapi import UploadFile

from server.core.errors import UploadError
from server.core.media import upload_image


def _image():
    return UploadFile(file=io.BytesIO(b"jpeg-bytes"), filename="cover.jpg")


class TestUploadImage:

    def test_returns_secure_url_and_uses_cards_folder(self):
        url = "https://res.cloudinary.com/demo/image/upload/v1/cards/abc.jpg"
        with patch("server.core.media.cloudinary.uploader.upload", return_value={"secure_url": url}) as upload:
            assert upload_image(_image()) == url

        args, kwargs = upload.call_args
        assert kwargs["folder"] == "cards"
        assert not Path(args[0]).exists(), "temporary file should be removed"

    def test_host_failure_raises_upload_error(self):
        """Network or quota failures surface as UploadError and still clean up."""
        with patch("server.core.media.cloudinary.uploader.upload", side_effect=RuntimeError("quota")) as upload:
            with pytest.raises(UploadError):
                upload_image(_image())

        assert not Path(upload.call_args[0][0]).exists()

    def test_missing_url_raises_upload_error(self):
        with patch("server.core.media.cloudinary.uploader.upload", return_value={}):
            with pytest.raises(UploadError):
                upload_image(_image())
