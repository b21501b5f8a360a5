from typing import Literal

from pydantic import BaseModel, ConfigDict, StrictStr


class SubscribeRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    email: StrictStr | None = None
    first_name: StrictStr | None = None
    source: StrictStr | None = None


class SubscribeSuccessResponse(BaseModel):
    success: Literal[True] = True


class ErrorResponse(BaseModel):
    error: str
