# app/routers/vehicles.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from ..core.database import DataStoreGateway, get_gateway
from ..core.errors import PersistenceError
from ..schemas.common import Message
from ..schemas.vehicles import VehicleIdentifier, VehicleRecord
from ..services.vehicle_records import list_vehicle_identifiers, list_vehicle_records

router = APIRouter(prefix="/api/vehicles", tags=["vehicles"])


# documents are returned as stored (minus _id), not re-validated
@router.get("", responses={200: {"model": List[VehicleRecord]}, 500: {"model": Message}})
async def get_vehicle_records(
    vehicle_id: Optional[str] = Query(None, alias="vehicleID"),
    agency: Optional[str] = Query(None),
    gateway: DataStoreGateway = Depends(get_gateway),
):
    """Newest first. Each given filter must match exactly."""
    records = await list_vehicle_records(gateway, vehicle_id=vehicle_id, agency=agency)
    if isinstance(records, PersistenceError):
        return JSONResponse({"message": records.message}, status_code=records.status_code)
    return records


@router.get("/ids", response_model=List[VehicleIdentifier], responses={500: {"model": Message}})
async def get_vehicle_identifiers(gateway: DataStoreGateway = Depends(get_gateway)):
    rows = await list_vehicle_identifiers(gateway)
    if isinstance(rows, PersistenceError):
        return JSONResponse({"message": rows.message}, status_code=rows.status_code)
    return rows
