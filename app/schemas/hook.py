from pydantic import BaseModel

from app.utils.enums import HookPolicy


class SwapCheckIn(BaseModel):
    token_a: str
    token_b: str


class SwapDecision(BaseModel):
    should_block: bool
    reason: str
    max_score: int
    riskiest_token: str
    policy: HookPolicy


class PolicyIn(BaseModel):
    policy: HookPolicy


class PolicyResponse(BaseModel):
    policy: HookPolicy
    high_threshold: int
    medium_threshold: int
