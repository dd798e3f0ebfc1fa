"""Shared fakes for the data store gateway and the image host."""

from __future__ import annotations

import io
from typing import Any

import pytest
from mongomock_motor import AsyncMongoMockClient
from pymongo.errors import PyMongoError
from starlette.datastructures import Headers, UploadFile

CATBOX_URL = "https://files.catbox.moe/k3x9qa.jpg"


class RecordingCollection:
    """Collects inserted documents; optionally fails every insert."""

    def __init__(self, fail_insert: bool = False) -> None:
        self.inserted: list[dict[str, Any]] = []
        self.fail_insert = fail_insert

    async def insert_one(self, document: dict[str, Any]) -> None:
        if self.fail_insert:
            raise PyMongoError("write concern error")
        self.inserted.append(document)


class StubGateway:
    def __init__(self, collection: Any = None, error: Exception | None = None) -> None:
        self._collection = collection
        self._error = error

    async def collection(self) -> Any:
        if self._error is not None:
            raise self._error
        return self._collection


class FakeUploader:
    def __init__(self, url: str = CATBOX_URL, error: Exception | None = None) -> None:
        self.url = url
        self.error = error
        self.calls: list[str | None] = []
        self.files: list[UploadFile] = []

    async def __call__(self, file: UploadFile) -> str:
        self.calls.append(file.filename)
        self.files.append(file)
        if self.error is not None:
            raise self.error
        return self.url


def make_upload(content_type: str = "image/jpeg", filename: str = "bus.jpg", data: bytes = b"\xff\xd8\xff") -> UploadFile:
    return UploadFile(
        file=io.BytesIO(data),
        filename=filename,
        headers=Headers({"content-type": content_type}),
    )


@pytest.fixture
def recording_collection() -> RecordingCollection:
    return RecordingCollection()


@pytest.fixture
def uploader() -> FakeUploader:
    return FakeUploader()


@pytest.fixture
def mongo_collection():
    return AsyncMongoMockClient()["main"]["Vehicles"]
