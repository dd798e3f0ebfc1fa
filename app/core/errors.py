# app/core/errors.py
"""
Error taxonomy.

Collaborators (upload client, data store gateway) raise exceptions. The
record handlers catch them at the call site and return one of the result
values below, which the routers translate to an HTTP response.
"""
from dataclasses import dataclass
from urllib.parse import quote


class ImageUploadError(Exception):
    """The image host rejected the upload or answered with something that is not a URL."""


class DataStoreConnectionError(Exception):
    """The database session could not be established."""


@dataclass(frozen=True)
class ValidationError:
    message: str
    status_code: int = 400


@dataclass(frozen=True)
class UploadError:
    message: str = "Image upload failed."
    status_code: int = 500


@dataclass(frozen=True)
class PersistenceError:
    message: str = "Database insert failed."
    status_code: int = 500


def encode_uri_component(value: str) -> str:
    # same unreserved set as JavaScript's encodeURIComponent
    return quote(value, safe="!~*'()")


@dataclass(frozen=True)
class RecordCreated:
    vehicle_id: str
    agency: str
    status_code: int = 303

    @property
    def location(self) -> str:
        return f"/vehicles/{encode_uri_component(self.vehicle_id)}?agency={encode_uri_component(self.agency)}"


SubmissionResult = RecordCreated | ValidationError | UploadError | PersistenceError
