"""Token risk registry.

Each token maps to three scores in [0, 100], the time they were written and
the updater that wrote them. A token that was never written reads as the
zero record rather than failing.
"""

from sqlalchemy.orm import Session

from app.core.errors import InvalidKey, OutOfRange, Unauthorized
from app.core.locks import registry_locks
from app.models.risk_record import RiskRecord
from app.services.access_control import get_owner, is_authorized
from app.services.event_service import emit_event
from app.services.risk_config import MAX_SCORE, MIN_SCORE
from app.utils.enums import LedgerEventName
from app.utils.identifiers import is_null_id, normalize_id


def _empty_record(token_id: str) -> RiskRecord:
    return RiskRecord(
        token_id=token_id,
        holder_concentration=0,
        liquidity_ownership=0,
        governance_capture=0,
        last_updated=0,
        updater=None,
    )


def update_risk_data(
    db: Session,
    token_id: str,
    holder_concentration: int,
    liquidity_ownership: int,
    governance_capture: int,
    caller_id: str,
    now: int,
) -> RiskRecord:
    caller_id = normalize_id(caller_id)
    if caller_id != get_owner(db) and not is_authorized(db, caller_id):
        raise Unauthorized("Not authorized to update risk data")

    for score in (holder_concentration, liquidity_ownership, governance_capture):
        if score < MIN_SCORE or score > MAX_SCORE:
            raise OutOfRange(f"Risk scores must be between {MIN_SCORE} and {MAX_SCORE}")

    token_id = normalize_id(token_id)
    if is_null_id(token_id):
        raise InvalidKey("Invalid token address")

    with registry_locks.hold(token_id):
        record = db.query(RiskRecord).filter_by(token_id=token_id).first()
        if not record:
            record = RiskRecord(token_id=token_id)
            db.add(record)

        # Full replace
        record.holder_concentration = holder_concentration
        record.liquidity_ownership = liquidity_ownership
        record.governance_capture = governance_capture
        record.last_updated = now
        record.updater = caller_id

        emit_event(
            db,
            LedgerEventName.RISK_DATA_UPDATED,
            subject=token_id,
            data={
                "token": token_id,
                "holder_concentration": holder_concentration,
                "liquidity_ownership": liquidity_ownership,
                "governance_capture": governance_capture,
                "updater": caller_id,
            },
            timestamp=now,
        )
        db.commit()
        db.refresh(record)
    return record


def get_risk_data(db: Session, token_id: str) -> RiskRecord:
    token_id = normalize_id(token_id)
    record = db.query(RiskRecord).filter_by(token_id=token_id).first()
    if not record:
        return _empty_record(token_id)
    return record


def has_risk_data(db: Session, token_id: str) -> bool:
    return get_risk_data(db, token_id).last_updated != 0


def composite_of(record: RiskRecord) -> int:
    if record.last_updated == 0:
        return 0
    total = (
        record.holder_concentration
        + record.liquidity_ownership
        + record.governance_capture
    )
    return total // 3


def get_composite_risk_score(db: Session, token_id: str) -> int:
    return composite_of(get_risk_data(db, token_id))


def get_data_age(db: Session, token_id: str, now: int) -> int:
    record = get_risk_data(db, token_id)
    if record.last_updated == 0:
        return 0
    return now - record.last_updated
