from __future__ import annotations

from typing import Any

import httpx
import pytest

from app.core.config import settings
from app.core.errors import ImageUploadError
from app.services import catbox
from conftest import CATBOX_URL, make_upload


class RecordingPost:
    def __init__(self, response: httpx.Response | None = None, error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def __call__(self, url: str, data=None, files=None, timeout: float = 30.0) -> httpx.Response:
        self.calls.append({"url": url, "data": data, "files": files, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.mark.asyncio
async def test_upload_returns_trimmed_url(monkeypatch: pytest.MonkeyPatch) -> None:
    post = RecordingPost(httpx.Response(200, text=f"  {CATBOX_URL}\n"))
    monkeypatch.setattr(catbox, "post_form", post)

    url = await catbox.upload_to_catbox(make_upload("image/jpeg", "bus.jpg", b"jpegbytes"))

    assert url == CATBOX_URL
    call = post.calls[0]
    assert call["url"] == settings.catbox_api_url
    assert call["data"] == {"reqtype": "fileupload"}
    assert call["files"] == {"fileToUpload": ("bus.jpg", b"jpegbytes", "image/jpeg")}


@pytest.mark.asyncio
async def test_non_success_status_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(catbox, "post_form", RecordingPost(httpx.Response(412, text="Precondition failed")))

    with pytest.raises(ImageUploadError, match="status 412"):
        await catbox.upload_to_catbox(make_upload())


@pytest.mark.asyncio
async def test_body_without_url_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(catbox, "post_form", RecordingPost(httpx.Response(200, text="error: too large")))

    with pytest.raises(ImageUploadError, match="too large"):
        await catbox.upload_to_catbox(make_upload())


@pytest.mark.asyncio
async def test_transport_error_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(catbox, "post_form", RecordingPost(error=httpx.ConnectError("connection refused")))

    with pytest.raises(ImageUploadError):
        await catbox.upload_to_catbox(make_upload())
