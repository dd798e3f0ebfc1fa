# app/services/catbox.py
import logging

import httpx
from starlette.datastructures import UploadFile

from ..core.config import settings
from ..core.errors import ImageUploadError
from ..utils.http import post_form

logger = logging.getLogger(__name__)


async def upload_to_catbox(file: UploadFile) -> str:
    """
    Upload the file to catbox.moe and return its public URL.

    Catbox answers with the URL as plain text on success and with an error
    message (sometimes with a 200) otherwise.
    """
    content = await file.read()
    files = {"fileToUpload": (file.filename or "upload", content, file.content_type)}

    try:
        r = await post_form(
            settings.catbox_api_url,
            data={"reqtype": "fileupload"},
            files=files,
            timeout=settings.upload_timeout,
        )
    except httpx.HTTPError as e:
        raise ImageUploadError(f"Catbox upload failed: {e!r}") from e

    if not r.is_success:
        raise ImageUploadError(f"Catbox upload failed with status {r.status_code}")

    text = r.text.strip()
    if not text.startswith("http"):
        raise ImageUploadError(f"Catbox upload failed: {text}")

    logger.debug("Uploaded %s (%d bytes) to %s", file.filename, len(content), text)
    return text


def get_image_uploader():
    return upload_to_catbox
