from typing import Any

from pydantic import BaseModel, Field

from app.utils.enums import SessionStatus


class SessionResponse(BaseModel):
    id: str
    user_id: str
    status: SessionStatus
    start_time: int
    last_activity: int
    ended_at: int | None
    action_count: int
    final_state_hash: str

    class Config:
        from_attributes = True


class ActionIn(BaseModel):
    # Free-form tag; RISK_ACKNOWLEDGE triggers the registry lookup
    action_type: str = Field(min_length=1)
    token_id: str | None = None
    payload: dict[str, Any] = Field(default_factory=dict)


class ActionResponse(BaseModel):
    sequence: int
    action_type: str
    token_id: str | None
    timestamp: int
    payload: dict[str, Any] | None

    class Config:
        from_attributes = True


class SettleIn(BaseModel):
    final_state_hash: str = Field(min_length=1)
