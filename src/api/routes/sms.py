"""SMS parsing endpoints."""

from datetime import UTC, datetime

import structlog
from fastapi import APIRouter
from pydantic import BaseModel

from src.config import settings
from src.domains.sms import ParsedTransaction, is_momo_message, parse, parse_many

logger = structlog.get_logger()
router = APIRouter(prefix="/api/v1/sms", tags=["sms"])


# ---------------------------------------------------------------------------
# Request/Response models
# ---------------------------------------------------------------------------


class ParseRequest(BaseModel):
    message: str
    fallback_to_now: bool = False


class ParseMultiRequest(BaseModel):
    message: str


class ParseMultiResponse(BaseModel):
    is_momo: bool
    count: int
    transactions: list[ParsedTransaction]


def check_message_length(message: str) -> None:
    if len(message) > settings.max_message_length:
        raise ValueError(
            f"Message exceeds {settings.max_message_length} characters"
        )


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@router.post("/parse")
async def parse_sms(request: ParseRequest) -> ParsedTransaction:
    check_message_length(request.message)
    now = datetime.now(UTC).replace(tzinfo=None) if request.fallback_to_now else None
    return parse(request.message, now=now)


@router.post("/parse-multi")
async def parse_multi_sms(request: ParseMultiRequest) -> ParseMultiResponse:
    """Parse a message that may hold several concatenated transactions."""
    check_message_length(request.message)
    transactions = parse_many(request.message)
    logger.info(
        "sms_batch_parsed",
        count=len(transactions),
        valid=sum(1 for t in transactions if t.is_valid),
    )
    return ParseMultiResponse(
        is_momo=is_momo_message(request.message),
        count=len(transactions),
        transactions=transactions,
    )
