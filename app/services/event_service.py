from typing import Any

import structlog
from sqlalchemy.orm import Session

from app.models.event import LedgerEvent
from app.utils.enums import LedgerEventName
from app.utils.identifiers import normalize_id

logger = structlog.get_logger(__name__)


def emit_event(
    db: Session,
    name: LedgerEventName,
    subject: str | None,
    data: dict[str, Any],
    timestamp: int,
) -> LedgerEvent:
    """Append an event to the ledger log.

    The row joins the caller's transaction, so an operation that fails
    before commit leaves no event behind.
    """
    event = LedgerEvent(
        name=name.value,
        subject=subject,
        data=data,
        timestamp=timestamp,
    )
    db.add(event)
    logger.info(name.value, subject=subject, timestamp=timestamp, **data)
    return event


def list_events(
    db: Session,
    name: str | None = None,
    subject: str | None = None,
    limit: int = 100,
) -> list[LedgerEvent]:
    query = db.query(LedgerEvent)
    if name:
        query = query.filter(LedgerEvent.name == name)
    if subject:
        query = query.filter(LedgerEvent.subject == normalize_id(subject))
    return query.order_by(LedgerEvent.id.asc()).limit(limit).all()
