from app.core.config import settings

MIN_SCORE = 0
MAX_SCORE = 100

RISK_THRESHOLDS = {
    "MEDIUM": settings.MEDIUM_RISK_THRESHOLD,
    "HIGH": settings.HIGH_RISK_THRESHOLD,
}

# Checked in order, first match wins
RISK_REASONS = {
    "NO_DATA": "No risk data available",
    "HOLDER_CONCENTRATION": "High holder concentration risk",
    "LIQUIDITY_OWNERSHIP": "High liquidity ownership risk",
    "GOVERNANCE_CAPTURE": "High governance capture risk",
    "MODERATE": "Multiple moderate risk factors",
    "LOW": "Low risk profile",
}

SESSION_LIMITS = {
    "TIMEOUT_SECONDS": settings.SESSION_TIMEOUT_SECONDS,
    "MAX_ACTIONS": settings.MAX_ACTIONS_PER_SESSION,
}
