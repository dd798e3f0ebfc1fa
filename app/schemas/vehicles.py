# app/schemas/vehicles.py
from datetime import datetime
from typing import Tuple

from pydantic import BaseModel, Field

class VehicleRecord(BaseModel):
    imgURL: str
    location: Tuple[float, float] = Field(..., description="[latitude, longitude]")
    agency: str
    vehicleID: str
    createdAt: datetime

class VehicleIdentifier(BaseModel):
    agency: str
    vehicleID: str
