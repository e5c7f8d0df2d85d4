"""Fraud alert construction: level message and notification priority."""

from dataclasses import dataclass

import structlog

from .models import FraudAlert, RiskLevel, RiskResult

logger = structlog.get_logger()


@dataclass(frozen=True)
class NotificationProfile:
    priority: str
    include_sound: bool
    include_vibration: bool


ALERT_MESSAGES: dict[RiskLevel, str] = {
    RiskLevel.CRITICAL: "CRITICAL FRAUD RISK - Immediate action required",
    RiskLevel.HIGH: "HIGH FRAUD RISK - Please review this transaction",
    RiskLevel.MEDIUM: "MEDIUM FRAUD RISK - Be cautious with this transaction",
    RiskLevel.LOW: "Transaction appears safe",
}

NOTIFICATION_PROFILES: dict[RiskLevel, NotificationProfile] = {
    RiskLevel.CRITICAL: NotificationProfile("max", include_sound=True, include_vibration=True),
    RiskLevel.HIGH: NotificationProfile("high", include_sound=True, include_vibration=False),
    RiskLevel.MEDIUM: NotificationProfile("high", include_sound=False, include_vibration=False),
    RiskLevel.LOW: NotificationProfile("normal", include_sound=False, include_vibration=False),
}


def build_alert(result: RiskResult) -> FraudAlert:
    """Map a risk result to the alert the user should see.

    Anything above LOW raises an alert; LOW still gets a message so clients
    can render a uniform banner.
    """
    profile = NOTIFICATION_PROFILES[result.level]
    alert = FraudAlert(
        should_alert=result.level != RiskLevel.LOW,
        level=result.level,
        message=ALERT_MESSAGES[result.level],
        priority=profile.priority,
        include_sound=profile.include_sound,
        include_vibration=profile.include_vibration,
        score=result.score,
        reasons=list(result.reasons),
    )

    if alert.should_alert:
        logger.warning(
            "fraud_alert_created",
            score=result.score,
            risk_level=result.level.value,
            priority=alert.priority,
            reason_count=len(result.reasons),
        )

    return alert
