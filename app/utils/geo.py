from dataclasses import dataclass

@dataclass(frozen=True)
class Bounds:
    low: float
    high: float

    def contains(self, value: float) -> bool:
        return self.low <= value <= self.high

LATITUDE = Bounds(-90.0, 90.0)
LONGITUDE = Bounds(-180.0, 180.0)

def within_bounds(lat: float, lon: float) -> bool:
    return LATITUDE.contains(lat) and LONGITUDE.contains(lon)
