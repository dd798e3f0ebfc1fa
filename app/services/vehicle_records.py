# app/services/vehicle_records.py
import logging
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional

from pymongo.errors import PyMongoError
from starlette.datastructures import UploadFile

from ..core.database import DataStoreGateway
from ..core.errors import (
    DataStoreConnectionError,
    ImageUploadError,
    PersistenceError,
    RecordCreated,
    SubmissionResult,
    UploadError,
    ValidationError,
)
from ..utils.time import utc_now
from .validation import require_non_empty_string, validate_image, validate_lat_long

logger = logging.getLogger(__name__)

ImageUploader = Callable[[UploadFile], Awaitable[str]]

RECORD_PROJECTION = {"_id": 0, "imgURL": 1, "location": 1, "agency": 1, "vehicleID": 1, "createdAt": 1}

DISTINCT_IDENTIFIERS_PIPELINE = [
    {"$match": {"vehicleID": {"$type": "string", "$ne": ""}, "agency": {"$type": "string", "$ne": ""}}},
    {"$group": {"_id": {"vehicleID": "$vehicleID", "agency": "$agency"}}},
    {"$project": {"_id": 0, "vehicleID": "$_id.vehicleID", "agency": "$_id.agency"}},
    {"$sort": {"agency": 1, "vehicleID": 1}},
]


# -------- alta de registros --------
async def create_vehicle_record(
    form: Mapping[str, Any],
    upload_image: ImageUploader,
    gateway: DataStoreGateway,
) -> SubmissionResult:
    """
    validate -> upload -> insert, stopping at the first failure.

    If the insert fails after a successful upload the image stays on the host.
    """
    image = validate_image(form.get("image"))
    if isinstance(image, ValidationError):
        return image

    agency = require_non_empty_string(form.get("agency"), "Agency")
    if isinstance(agency, ValidationError):
        return agency

    vehicle_id = require_non_empty_string(form.get("vehicleID"), "Vehicle ID")
    if isinstance(vehicle_id, ValidationError):
        return vehicle_id

    location = validate_lat_long(form.get("lat"), form.get("long"))
    if isinstance(location, ValidationError):
        return location

    try:
        image_url = await upload_image(image)
    except ImageUploadError:
        logger.exception("Catbox upload failed")
        return UploadError()

    try:
        collection = await gateway.collection()
        await collection.insert_one({
            "imgURL": image_url,
            "location": list(location),
            "agency": agency,
            "vehicleID": vehicle_id,
            "createdAt": utc_now(),
        })
    except (DataStoreConnectionError, PyMongoError):
        logger.exception("Database insert failed")
        return PersistenceError()

    logger.info("Stored vehicle record %s / %s", agency, vehicle_id)
    return RecordCreated(vehicle_id=vehicle_id, agency=agency)


# -------- consultas --------
def build_records_filter(vehicle_id: Optional[str] = None, agency: Optional[str] = None) -> Dict[str, str]:
    query: Dict[str, str] = {}
    if vehicle_id:
        query["vehicleID"] = vehicle_id
    if agency:
        query["agency"] = agency
    return query


async def list_vehicle_records(
    gateway: DataStoreGateway,
    vehicle_id: Optional[str] = None,
    agency: Optional[str] = None,
) -> List[Dict[str, Any]] | PersistenceError:
    collection = await gateway.collection()
    try:
        cursor = collection.find(build_records_filter(vehicle_id, agency), RECORD_PROJECTION).sort("createdAt", -1)
        return await cursor.to_list(length=None)
    except PyMongoError:
        logger.exception("Vehicle records query failed")
        return PersistenceError("Database query failed.")


async def list_vehicle_identifiers(gateway: DataStoreGateway) -> List[Dict[str, str]] | PersistenceError:
    collection = await gateway.collection()
    try:
        return await collection.aggregate(DISTINCT_IDENTIFIERS_PIPELINE).to_list(length=None)
    except PyMongoError:
        logger.exception("Vehicle identifiers aggregation failed")
        return PersistenceError("Database query failed.")
