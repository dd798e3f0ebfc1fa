# app/routers/submissions.py
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, RedirectResponse, Response

from ..core.database import DataStoreGateway, get_gateway
from ..core.errors import RecordCreated, SubmissionResult
from ..schemas.common import Message
from ..services.catbox import get_image_uploader
from ..services.vehicle_records import ImageUploader, create_vehicle_record

router = APIRouter(prefix="/add", tags=["submissions"])


def to_response(result: SubmissionResult) -> Response:
    if isinstance(result, RecordCreated):
        return RedirectResponse(result.location, status_code=result.status_code)
    return JSONResponse({"message": result.message}, status_code=result.status_code)


@router.post(
    "",
    status_code=303,
    responses={400: {"model": Message}, 500: {"model": Message}},
)
async def submit_vehicle(
    request: Request,
    upload_image: ImageUploader = Depends(get_image_uploader),
    gateway: DataStoreGateway = Depends(get_gateway),
):
    """
    Multipart form: image, agency, vehicleID, lat, long.
    Redirects (303) to /vehicles/{vehicleID}?agency=... once stored.
    """
    # closes the spooled upload files once the record is handled
    async with request.form() as form:
        result = await create_vehicle_record(form, upload_image, gateway)
    return to_response(result)
