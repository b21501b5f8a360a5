from enum import StrEnum
from typing import Literal

LogFormats = Literal["plaintext", "json"]
LogLevels = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class FormVariant(StrEnum):
    HERO = "hero"
    LEAD_MAGNET = "lead-magnet"
    BOTTOM = "bottom"
    ASSESSMENT = "assessment"


class FormStatus(StrEnum):
    IDLE = "idle"
    # Only ever set by the browser script while a request is in flight.
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"
