from utils.ksuid import generate_ksuid
from utils.timestamp import now_micros, format_timestamp
from core.errors import BaseGameError, BusError, HealthCheckError

__all__ = [
    "generate_ksuid",
    "now_micros",
    "format_timestamp",
    "BaseGameError",
    "BusError",
    "HealthCheckError",
]
