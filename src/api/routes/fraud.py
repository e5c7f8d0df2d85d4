"""Fraud scoring endpoints."""

from dataclasses import asdict

import structlog
from fastapi import APIRouter
from pydantic import BaseModel, Field

from src.domains.fraud.alerts import build_alert
from src.domains.fraud.analyzer import SmsAnalyzer
from src.domains.fraud.config import default_config
from src.domains.fraud.context_builder import (
    ContextBuilder,
    HistoricalTransaction,
    UserRiskSettings,
)
from src.domains.fraud.models import AnalysisResult, FraudAlert, RiskContext, RiskResult
from src.domains.fraud.rules import ALL_RULES
from src.domains.fraud.rules_engine import RulesEngine
from src.domains.sms import ParsedTransaction, parse

from .sms import check_message_length

logger = structlog.get_logger()
router = APIRouter(prefix="/api/v1/fraud", tags=["fraud"])

# Module-level singletons; the core is stateless
_engine = RulesEngine()
_analyzer = SmsAnalyzer(engine=_engine)
_context_builder = ContextBuilder()


# ---------------------------------------------------------------------------
# Request/Response models
# ---------------------------------------------------------------------------


class ScoreRequest(BaseModel):
    transaction: ParsedTransaction
    context: RiskContext = Field(default_factory=RiskContext)


class ScoreResponse(BaseModel):
    risk: RiskResult
    alert: FraudAlert


class AnalyzeRequest(BaseModel):
    """Either a ready context, or history + settings to build one from."""

    message: str
    context: RiskContext | None = None
    history: list[HistoricalTransaction] | None = None
    settings: UserRiskSettings | None = None


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@router.post("/score")
async def score_transaction(request: ScoreRequest) -> ScoreResponse:
    risk = _engine.score(request.transaction, request.context)
    return ScoreResponse(risk=risk, alert=build_alert(risk))


@router.post("/analyze")
async def analyze_sms(request: AnalyzeRequest) -> AnalysisResult:
    check_message_length(request.message)

    context = request.context
    if context is None and (request.history is not None or request.settings is not None):
        transaction = parse(request.message)
        context = _context_builder.build(
            transaction, request.history or [], settings=request.settings
        )
    return _analyzer.analyze(request.message, context)


@router.get("/rules")
async def list_rules() -> dict:
    """Return the rule catalogue and the thresholds currently in force."""
    config = default_config
    return {
        "rule_count": len(ALL_RULES),
        "rules": [
            {"rule_id": rule.rule_id, "category": rule.category.value}
            for rule in ALL_RULES
        ],
        "thresholds": {
            "time": asdict(config.time),
            "amount": asdict(config.amount),
            "daily_limit": asdict(config.daily_limit),
            "velocity": asdict(config.velocity),
            "merchant": asdict(config.merchant),
            "round_amount": asdict(config.patterns),
            "balance": asdict(config.balance),
        },
        "levels": asdict(config.levels),
    }
