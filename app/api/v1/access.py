from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.api.deps import get_caller_id
from app.core.clock import Clock, get_clock
from app.core.database import get_db
from app.core.errors import OrcaSignalError
from app.schemas.risk import AuthorizationIn, OwnershipTransferIn
from app.services.access_control import (
    get_owner,
    is_authorized,
    set_authorized,
    transfer_ownership,
)
from app.utils.identifiers import normalize_id

router = APIRouter()


@router.get("/access/owner")
async def read_owner(db: Session = Depends(get_db)):
    return {"owner": get_owner(db)}


@router.post("/access/owner")
async def change_owner(
    body: OwnershipTransferIn,
    caller_id: str = Depends(get_caller_id),
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    try:
        row = transfer_ownership(db, body.new_owner, caller_id, clock.now())
        return {"owner": row.owner}
    except OrcaSignalError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))


@router.get("/access/updaters/{identity}")
async def read_updater(identity: str, db: Session = Depends(get_db)):
    return {
        "identity": normalize_id(identity),
        "authorized": is_authorized(db, identity),
    }


@router.post("/access/updaters")
async def change_updater(
    body: AuthorizationIn,
    caller_id: str = Depends(get_caller_id),
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    try:
        row = set_authorized(db, body.identity, body.authorized, caller_id, clock.now())
        return {"identity": row.identity, "authorized": row.authorized}
    except OrcaSignalError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
