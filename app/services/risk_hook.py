"""Swap admission gate driven by registry composite scores."""

from dataclasses import dataclass

from sqlalchemy.orm import Session

from app.core.config import settings
from app.models.hook_settings import HookSettings
from app.models.risk_record import RiskRecord
from app.services.access_control import require_owner
from app.services.event_service import emit_event
from app.services.risk_config import RISK_REASONS, RISK_THRESHOLDS
from app.services.risk_registry import composite_of, get_risk_data
from app.utils.enums import HookPolicy, LedgerEventName
from app.utils.identifiers import normalize_id


@dataclass(frozen=True)
class TokenAssessment:
    token_id: str
    score: int
    reason: str


@dataclass(frozen=True)
class SwapDecision:
    should_block: bool
    reason: str
    max_score: int
    riskiest_token: str
    policy: HookPolicy


def determine_reason(record: RiskRecord) -> tuple[int, str]:
    if record.last_updated == 0:
        return 0, RISK_REASONS["NO_DATA"]

    # A single dimension at or above HIGH gates on that dimension, not the average
    if record.holder_concentration >= RISK_THRESHOLDS["HIGH"]:
        return record.holder_concentration, RISK_REASONS["HOLDER_CONCENTRATION"]
    elif record.liquidity_ownership >= RISK_THRESHOLDS["HIGH"]:
        return record.liquidity_ownership, RISK_REASONS["LIQUIDITY_OWNERSHIP"]
    elif record.governance_capture >= RISK_THRESHOLDS["HIGH"]:
        return record.governance_capture, RISK_REASONS["GOVERNANCE_CAPTURE"]

    composite = composite_of(record)
    if composite >= RISK_THRESHOLDS["MEDIUM"]:
        return composite, RISK_REASONS["MODERATE"]
    return composite, RISK_REASONS["LOW"]


def assess_token(db: Session, token_id: str) -> TokenAssessment:
    record = get_risk_data(db, token_id)
    score, reason = determine_reason(record)
    return TokenAssessment(token_id=record.token_id, score=score, reason=reason)


def should_block(policy: HookPolicy, score: int) -> bool:
    if policy == HookPolicy.BLOCK_HIGH:
        return score >= RISK_THRESHOLDS["HIGH"]
    elif policy == HookPolicy.STRICT:
        return score >= RISK_THRESHOLDS["MEDIUM"]
    return False


def get_policy(db: Session) -> HookPolicy:
    row = db.query(HookSettings).first()
    if not row:
        return HookPolicy(settings.HOOK_POLICY)
    return HookPolicy(row.policy)


def set_policy(db: Session, policy: HookPolicy, caller_id: str, now: int) -> HookPolicy:
    require_owner(db, caller_id)

    row = db.query(HookSettings).first()
    previous = row.policy if row else HookPolicy(settings.HOOK_POLICY).value
    if row:
        row.policy = policy.value
    else:
        db.add(HookSettings(id=1, policy=policy.value))

    emit_event(
        db,
        LedgerEventName.POLICY_UPDATED,
        subject=None,
        data={"previous_policy": previous, "policy": policy.value},
        timestamp=now,
    )
    db.commit()
    return policy


def decide_swap(db: Session, token_a: str, token_b: str, now: int) -> SwapDecision:
    first = assess_token(db, token_a)
    second = assess_token(db, token_b)
    riskiest = second if second.score > first.score else first

    policy = get_policy(db)
    blocked = should_block(policy, riskiest.score)

    data = {
        "token_a": normalize_id(token_a),
        "token_b": normalize_id(token_b),
        "risk_score": riskiest.score,
        "reason": riskiest.reason,
        "policy": policy.value,
    }
    if blocked:
        emit_event(db, LedgerEventName.SWAP_BLOCKED, riskiest.token_id, data, now)
        db.commit()
    elif riskiest.score >= RISK_THRESHOLDS["MEDIUM"]:
        emit_event(db, LedgerEventName.RISK_WARNING, riskiest.token_id, data, now)
        db.commit()

    return SwapDecision(
        should_block=blocked,
        reason=riskiest.reason,
        max_score=riskiest.score,
        riskiest_token=riskiest.token_id,
        policy=policy,
    )
