"""Gasless sessions.

A session collects off-chain actions for one user and is finalized by a
single settlement hash. Expiry is a clock comparison against the last
activity; nothing runs on a timer, so expired sessions stay ACTIVE until
someone settles them or calls cleanup.
"""

import hashlib
import secrets
from typing import Any

import structlog
from sqlalchemy.orm import Session

from app.core.errors import Expired, InvalidKey, LimitReached, NotActive, NotExpired, Unauthorized
from app.core.locks import session_locks
from app.models.session import GaslessSession, SessionAction, UserActiveSession
from app.services.event_service import emit_event
from app.services.risk_config import SESSION_LIMITS
from app.services.risk_registry import composite_of, get_risk_data
from app.utils.enums import ActionType, LedgerEventName, SessionStatus
from app.utils.identifiers import ZERO_HASH, is_null_id, normalize_id

logger = structlog.get_logger(__name__)


def _generate_session_id(db: Session, user_id: str, now: int) -> str:
    while True:
        seed = f"{user_id}:{now}:".encode() + secrets.token_bytes(32)
        session_id = "0x" + hashlib.sha256(seed).hexdigest()
        if not db.get(GaslessSession, session_id):
            return session_id
        logger.warning("session_id_collision", session_id=session_id)


def _is_expired(session: GaslessSession, now: int) -> bool:
    return now > session.last_activity + SESSION_LIMITS["TIMEOUT_SECONDS"]


def _get_active(db: Session, session_id: str) -> GaslessSession:
    session = db.get(GaslessSession, normalize_id(session_id))
    if not session or session.status != SessionStatus.ACTIVE.value:
        raise NotActive()
    return session


def _close(db: Session, session: GaslessSession, status: SessionStatus, now: int) -> None:
    session.status = status.value
    session.ended_at = now

    pointer = db.get(UserActiveSession, session.user_id)
    if pointer and pointer.session_id == session.id:
        db.delete(pointer)

    db.query(SessionAction).filter(SessionAction.session_id == session.id).delete()


def _end(db: Session, session: GaslessSession, now: int) -> None:
    _close(db, session, SessionStatus.ENDED, now)
    emit_event(
        db,
        LedgerEventName.SESSION_ENDED,
        subject=session.id,
        data={"user": session.user_id, "action_count": session.action_count},
        timestamp=now,
    )


def start_session(db: Session, user_id: str, now: int) -> GaslessSession:
    user_id = normalize_id(user_id)
    if is_null_id(user_id):
        raise InvalidKey("User identity must not be empty or zero")

    with session_locks.hold(user_id):
        pointer = db.get(UserActiveSession, user_id)
        if pointer:
            previous = db.get(GaslessSession, pointer.session_id)
            if previous and previous.status == SessionStatus.ACTIVE.value:
                _end(db, previous, now)
            else:
                db.delete(pointer)
            db.flush()

        session = GaslessSession(
            id=_generate_session_id(db, user_id, now),
            user_id=user_id,
            status=SessionStatus.ACTIVE.value,
            start_time=now,
            last_activity=now,
            action_count=0,
            final_state_hash=ZERO_HASH,
        )
        db.add(session)
        db.add(UserActiveSession(user_id=user_id, session_id=session.id))

        emit_event(
            db,
            LedgerEventName.SESSION_STARTED,
            subject=session.id,
            data={"user": user_id},
            timestamp=now,
        )
        db.commit()
        db.refresh(session)
    return session


def record_action(
    db: Session,
    session_id: str,
    action_type: str,
    token_id: str | None,
    payload: dict[str, Any] | None,
    caller_id: str,
    now: int,
) -> SessionAction:
    session = _get_active(db, session_id)
    caller_id = normalize_id(caller_id)

    with session_locks.hold(session.user_id):
        db.refresh(session)
        if session.status != SessionStatus.ACTIVE.value:
            raise NotActive()
        if caller_id != session.user_id:
            raise Unauthorized("Not session owner")
        if _is_expired(session, now):
            raise Expired()
        if session.action_count >= SESSION_LIMITS["MAX_ACTIONS"]:
            raise LimitReached()

        token_id = normalize_id(token_id) if token_id else None
        action = SessionAction(
            session_id=session.id,
            sequence=session.action_count,
            action_type=action_type,
            token_id=token_id,
            timestamp=now,
            payload=payload or {},
        )
        db.add(action)
        session.action_count += 1
        session.last_activity = now

        emit_event(
            db,
            LedgerEventName.ACTION_RECORDED,
            subject=session.id,
            data={
                "user": session.user_id,
                "action_type": action_type,
                "token": token_id,
                "sequence": action.sequence,
            },
            timestamp=now,
        )

        if action_type == ActionType.RISK_ACKNOWLEDGE.value and token_id:
            record = get_risk_data(db, token_id)
            if record.last_updated != 0:
                emit_event(
                    db,
                    LedgerEventName.RISK_ACKNOWLEDGED,
                    subject=session.id,
                    data={
                        "user": session.user_id,
                        "token": token_id,
                        "risk_score": composite_of(record),
                    },
                    timestamp=now,
                )

        db.commit()
        db.refresh(action)
    return action


def settle_session(
    db: Session,
    session_id: str,
    final_state_hash: str,
    caller_id: str,
    now: int,
) -> GaslessSession:
    session = _get_active(db, session_id)
    caller_id = normalize_id(caller_id)

    with session_locks.hold(session.user_id):
        db.refresh(session)
        if session.status != SessionStatus.ACTIVE.value:
            raise NotActive()
        if caller_id != session.user_id:
            raise Unauthorized("Not session owner")

        session.final_state_hash = normalize_id(final_state_hash)
        _close(db, session, SessionStatus.SETTLED, now)

        emit_event(
            db,
            LedgerEventName.SESSION_SETTLED,
            subject=session.id,
            data={
                "user": session.user_id,
                "final_state_hash": session.final_state_hash,
                "action_count": session.action_count,
            },
            timestamp=now,
        )
        db.commit()
        db.refresh(session)
    return session


def cleanup_expired_session(db: Session, session_id: str, now: int) -> GaslessSession:
    session = _get_active(db, session_id)

    with session_locks.hold(session.user_id):
        db.refresh(session)
        if session.status != SessionStatus.ACTIVE.value:
            raise NotActive()
        if not _is_expired(session, now):
            raise NotExpired()

        _end(db, session, now)
        db.commit()
        db.refresh(session)
    return session


def is_session_valid(db: Session, session_id: str, now: int) -> bool:
    session = db.get(GaslessSession, normalize_id(session_id))
    return bool(
        session
        and session.status == SessionStatus.ACTIVE.value
        and not _is_expired(session, now)
        and session.action_count < SESSION_LIMITS["MAX_ACTIONS"]
    )


def get_session(db: Session, session_id: str) -> GaslessSession | None:
    return db.get(GaslessSession, normalize_id(session_id))


def get_session_actions(db: Session, session_id: str) -> list[SessionAction]:
    return (
        db.query(SessionAction)
        .filter(SessionAction.session_id == normalize_id(session_id))
        .order_by(SessionAction.sequence.asc())
        .all()
    )


def get_user_active_session(db: Session, user_id: str) -> str | None:
    pointer = db.get(UserActiveSession, normalize_id(user_id))
    return pointer.session_id if pointer else None
