from typing import Any

from pydantic import BaseModel


class LedgerEventResponse(BaseModel):
    id: int
    name: str
    subject: str | None
    data: dict[str, Any]
    timestamp: int

    class Config:
        from_attributes = True
