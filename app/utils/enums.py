from enum import Enum


class HookPolicy(str, Enum):
    WARN_ONLY = "WARN_ONLY"
    BLOCK_HIGH = "BLOCK_HIGH"
    STRICT = "STRICT"


class SessionStatus(str, Enum):
    ACTIVE = "ACTIVE"
    SETTLED = "SETTLED"
    ENDED = "ENDED"


class ActionType(str, Enum):
    RISK_ACKNOWLEDGE = "RISK_ACKNOWLEDGE"
    SET_THRESHOLDS = "SET_THRESHOLDS"
    VIEW_RISK = "VIEW_RISK"


class LedgerEventName(str, Enum):
    RISK_DATA_UPDATED = "RiskDataUpdated"
    UPDATER_AUTHORIZED = "UpdaterAuthorized"
    OWNERSHIP_TRANSFERRED = "OwnershipTransferred"
    SESSION_STARTED = "SessionStarted"
    ACTION_RECORDED = "ActionRecorded"
    RISK_ACKNOWLEDGED = "RiskAcknowledged"
    SESSION_SETTLED = "SessionSettled"
    SESSION_ENDED = "SessionEnded"
    SWAP_BLOCKED = "SwapBlocked"
    RISK_WARNING = "RiskWarning"
    POLICY_UPDATED = "PolicyUpdated"
