# server/core/media.py

import logging
import cloudinary
import cloudinary.uploader
from fastapi import UploadFile

from server.core import config
from server.core.errors import UploadError
from server.core.utils import save_temp_upload


logger = logging.getLogger(__name__)


cloudinary.config(
    cloud_name=config.CLOUDINARY_CLOUD_NAME,
    api_key=config.CLOUDINARY_API_KEY,
    api_secret=config.CLOUDINARY_API_SECRET,
    secure=True,
)


def upload_image(image: UploadFile, folder: str = config.CLOUDINARY_FOLDER) -> str:
    """
    Uploads an image to the media host and returns its public HTTPS URL.

    The upload is spooled to a temporary file first; the file is removed
    whether or not the upload succeeds. Any failure is raised as UploadError.
    """
    temp_path = save_temp_upload(image)
    try:
        response = cloudinary.uploader.upload(str(temp_path), folder=folder)
        url = response.get("secure_url")
        if not url:
            raise UploadError("Image upload returned no URL.")
        logger.info("Uploaded %s to %s", image.filename, url)
        return url
    except UploadError:
        raise
    except Exception as e:
        logger.error("Image upload failed for %s: %s", image.filename, e)
        raise UploadError("Image upload failed.") from e
    finally:
        if temp_path.exists():
            temp_path.unlink()
