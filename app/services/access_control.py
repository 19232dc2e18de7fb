import structlog
from sqlalchemy.orm import Session

from app.core.errors import InvalidKey, Unauthorized
from app.models.authorization import AuthorizedUpdater, RegistryOwner
from app.services.event_service import emit_event
from app.utils.enums import LedgerEventName
from app.utils.identifiers import is_null_id, normalize_id

logger = structlog.get_logger(__name__)


def bootstrap_owner(db: Session, owner: str) -> RegistryOwner:
    """Create the owner row on first start; the owner begins authorized."""
    existing = db.query(RegistryOwner).first()
    if existing:
        return existing

    owner = normalize_id(owner)
    if is_null_id(owner):
        raise InvalidKey("Registry owner must not be empty or zero")

    row = RegistryOwner(id=1, owner=owner)
    db.add(row)
    db.merge(AuthorizedUpdater(identity=owner, authorized=True))
    db.commit()
    db.refresh(row)
    logger.info("registry_owner_bootstrapped", owner=owner)
    return row


def get_owner(db: Session) -> str | None:
    row = db.query(RegistryOwner).first()
    return row.owner if row else None


def is_authorized(db: Session, identity: str) -> bool:
    identity = normalize_id(identity)
    row = db.query(AuthorizedUpdater).filter_by(identity=identity).first()
    return bool(row and row.authorized)


def require_owner(db: Session, caller_id: str) -> None:
    if normalize_id(caller_id) != get_owner(db):
        raise Unauthorized("Only owner can call this function")


def set_authorized(
    db: Session,
    identity: str,
    authorized: bool,
    caller_id: str,
    now: int,
) -> AuthorizedUpdater:
    require_owner(db, caller_id)

    identity = normalize_id(identity)
    if is_null_id(identity):
        raise InvalidKey("Updater identity must not be empty or zero")

    row = db.query(AuthorizedUpdater).filter_by(identity=identity).first()
    if row:
        row.authorized = authorized
    else:
        row = AuthorizedUpdater(identity=identity, authorized=authorized)
        db.add(row)

    emit_event(
        db,
        LedgerEventName.UPDATER_AUTHORIZED,
        subject=identity,
        data={"updater": identity, "authorized": authorized},
        timestamp=now,
    )
    db.commit()
    db.refresh(row)
    return row


def transfer_ownership(
    db: Session,
    new_owner: str,
    caller_id: str,
    now: int,
) -> RegistryOwner:
    require_owner(db, caller_id)

    new_owner = normalize_id(new_owner)
    if is_null_id(new_owner):
        raise InvalidKey("New owner must not be empty or zero")

    row = db.query(RegistryOwner).first()
    previous = row.owner
    row.owner = new_owner

    emit_event(
        db,
        LedgerEventName.OWNERSHIP_TRANSFERRED,
        subject=new_owner,
        data={"previous_owner": previous, "new_owner": new_owner},
        timestamp=now,
    )
    db.commit()
    db.refresh(row)
    return row
