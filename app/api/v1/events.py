from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.event import LedgerEventResponse
from app.services.event_service import list_events

router = APIRouter()


@router.get("/events", response_model=list[LedgerEventResponse])
async def read_events(
    name: str | None = None,
    subject: str | None = None,
    limit: int = Query(default=100, ge=1, le=1000),
    db: Session = Depends(get_db),
):
    return list_events(db, name=name, subject=subject, limit=limit)
