from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.api.deps import get_caller_id
from app.core.clock import Clock, get_clock
from app.core.database import get_db
from app.core.errors import OrcaSignalError
from app.schemas.hook import PolicyIn, PolicyResponse, SwapCheckIn, SwapDecision
from app.services.risk_config import RISK_THRESHOLDS
from app.services.risk_hook import decide_swap, get_policy, set_policy

router = APIRouter()


def _policy_response(policy) -> PolicyResponse:
    return PolicyResponse(
        policy=policy,
        high_threshold=RISK_THRESHOLDS["HIGH"],
        medium_threshold=RISK_THRESHOLDS["MEDIUM"],
    )


@router.post("/hook/decide", response_model=SwapDecision)
async def decide(
    body: SwapCheckIn,
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    decision = decide_swap(db, body.token_a, body.token_b, clock.now())
    return SwapDecision(
        should_block=decision.should_block,
        reason=decision.reason,
        max_score=decision.max_score,
        riskiest_token=decision.riskiest_token,
        policy=decision.policy,
    )


@router.get("/hook/policy", response_model=PolicyResponse)
async def read_policy(db: Session = Depends(get_db)):
    return _policy_response(get_policy(db))


@router.put("/hook/policy", response_model=PolicyResponse)
async def change_policy(
    body: PolicyIn,
    caller_id: str = Depends(get_caller_id),
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    try:
        return _policy_response(set_policy(db, body.policy, caller_id, clock.now()))
    except OrcaSignalError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
