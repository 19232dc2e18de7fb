from pydantic import BaseModel, Field


class RiskScoresIn(BaseModel):
    # Range is enforced by the registry so callers get OutOfRange, not a 422
    holder_concentration: int
    liquidity_ownership: int
    governance_capture: int


class RiskRecordResponse(BaseModel):
    token_id: str
    holder_concentration: int
    liquidity_ownership: int
    governance_capture: int
    last_updated: int
    updater: str | None

    class Config:
        from_attributes = True


class RiskReport(BaseModel):
    token_id: str
    exists: bool
    record: RiskRecordResponse
    composite_score: int = Field(ge=0, le=100)
    data_age: int


class AuthorizationIn(BaseModel):
    identity: str
    authorized: bool


class OwnershipTransferIn(BaseModel):
    new_owner: str
