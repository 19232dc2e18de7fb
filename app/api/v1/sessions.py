from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.api.deps import get_caller_id
from app.core.clock import Clock, get_clock
from app.core.database import get_db
from app.core.errors import OrcaSignalError
from app.schemas.session import ActionIn, ActionResponse, SessionResponse, SettleIn
from app.services.session_service import (
    cleanup_expired_session,
    get_session,
    get_session_actions,
    get_user_active_session,
    is_session_valid,
    record_action,
    settle_session,
    start_session,
)
from app.utils.identifiers import normalize_id

router = APIRouter()


@router.post("/sessions", response_model=SessionResponse)
async def start_gasless_session(
    caller_id: str = Depends(get_caller_id),
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    try:
        return start_session(db, caller_id, clock.now())
    except OrcaSignalError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))


@router.get("/sessions/{session_id}", response_model=SessionResponse)
async def read_session(session_id: str, db: Session = Depends(get_db)):
    session = get_session(db, session_id)
    if not session:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


@router.get("/sessions/{session_id}/actions", response_model=list[ActionResponse])
async def read_session_actions(session_id: str, db: Session = Depends(get_db)):
    return get_session_actions(db, session_id)


@router.get("/sessions/{session_id}/valid")
async def check_session(
    session_id: str,
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    return {
        "session_id": normalize_id(session_id),
        "valid": is_session_valid(db, session_id, clock.now()),
    }


@router.post("/sessions/{session_id}/actions", response_model=ActionResponse)
async def add_session_action(
    session_id: str,
    action: ActionIn,
    caller_id: str = Depends(get_caller_id),
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    try:
        return record_action(
            db,
            session_id=session_id,
            action_type=action.action_type,
            token_id=action.token_id,
            payload=action.payload,
            caller_id=caller_id,
            now=clock.now(),
        )
    except OrcaSignalError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))


@router.post("/sessions/{session_id}/settle", response_model=SessionResponse)
async def settle_gasless_session(
    session_id: str,
    body: SettleIn,
    caller_id: str = Depends(get_caller_id),
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    try:
        return settle_session(db, session_id, body.final_state_hash, caller_id, clock.now())
    except OrcaSignalError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))


@router.post("/sessions/{session_id}/cleanup", response_model=SessionResponse)
async def cleanup_session(
    session_id: str,
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    try:
        return cleanup_expired_session(db, session_id, clock.now())
    except OrcaSignalError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))


@router.get("/users/{user_id}/active-session")
async def read_active_session(user_id: str, db: Session = Depends(get_db)):
    return {
        "user_id": normalize_id(user_id),
        "session_id": get_user_active_session(db, user_id),
    }
