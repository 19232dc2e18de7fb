from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.api.deps import get_caller_id, get_token_address
from app.core.clock import Clock, get_clock
from app.core.database import get_db
from app.core.errors import OrcaSignalError
from app.schemas.risk import RiskRecordResponse, RiskReport, RiskScoresIn
from app.services.risk_registry import (
    composite_of,
    get_composite_risk_score,
    get_data_age,
    get_risk_data,
    update_risk_data,
)

router = APIRouter()


@router.post("/risk/{token_id}", response_model=RiskRecordResponse)
async def submit_risk_data(
    scores: RiskScoresIn,
    token_id: str = Depends(get_token_address),
    caller_id: str = Depends(get_caller_id),
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    try:
        return update_risk_data(
            db,
            token_id=token_id,
            holder_concentration=scores.holder_concentration,
            liquidity_ownership=scores.liquidity_ownership,
            governance_capture=scores.governance_capture,
            caller_id=caller_id,
            now=clock.now(),
        )
    except OrcaSignalError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))


@router.get("/risk/{token_id}", response_model=RiskReport)
async def read_risk_data(
    token_id: str = Depends(get_token_address),
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    record = get_risk_data(db, token_id)
    exists = record.last_updated != 0
    return RiskReport(
        token_id=record.token_id,
        exists=exists,
        record=RiskRecordResponse.model_validate(record),
        composite_score=composite_of(record),
        data_age=clock.now() - record.last_updated if exists else 0,
    )


@router.get("/risk/{token_id}/composite")
async def read_composite_score(
    token_id: str = Depends(get_token_address),
    db: Session = Depends(get_db),
):
    return {
        "token_id": token_id,
        "composite_score": get_composite_risk_score(db, token_id),
    }


@router.get("/risk/{token_id}/age")
async def read_data_age(
    token_id: str = Depends(get_token_address),
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    return {
        "token_id": token_id,
        "data_age": get_data_age(db, token_id, clock.now()),
    }
