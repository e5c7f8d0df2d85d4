"""Fraud detection domain."""

from .alerts import build_alert
from .analyzer import SmsAnalyzer
from .blacklist import GLOBAL_BLACKLIST_MERCHANTS, is_globally_blacklisted
from .config import FraudConfig, default_config
from .context_builder import (
    ContextBuilder,
    HistoricalTransaction,
    UserRiskSettings,
    build_risk_context,
)
from .models import (
    AnalysisResult,
    FraudAlert,
    RiskCategory,
    RiskContext,
    RiskLevel,
    RiskResult,
    RuleResult,
)
from .rules import ALL_RULES
from .rules_engine import RulesEngine, classify_risk_level, score

__all__ = [
    "ALL_RULES",
    "AnalysisResult",
    "ContextBuilder",
    "FraudAlert",
    "FraudConfig",
    "GLOBAL_BLACKLIST_MERCHANTS",
    "HistoricalTransaction",
    "RiskCategory",
    "RiskContext",
    "RiskLevel",
    "RiskResult",
    "RuleResult",
    "RulesEngine",
    "SmsAnalyzer",
    "UserRiskSettings",
    "build_alert",
    "build_risk_context",
    "classify_risk_level",
    "default_config",
    "is_globally_blacklisted",
    "score",
]
