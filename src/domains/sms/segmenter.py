"""Split forwarded or concatenated SMS text into single notifications."""

import re

from .extractors.base import CURRENCY

# Phrases that open a new provider notification.
_BOUNDARY = re.compile(
    r"(?=\b\d{12,}\s+Confirmed\b)"
    r"|(?=\bCash\s+Out\s+made\s+for\b)"
    r"|(?=\bPayment\s+(?:received|made)\s+for\b)",
    re.IGNORECASE,
)
_CURRENCY = re.compile(CURRENCY, re.IGNORECASE)


def split_segments(text: str) -> list[str]:
    """Return the notifications contained in text, in order.

    A candidate piece without a currency marker is folded back into the
    preceding piece, so plain single messages always come back whole.
    """
    pieces = [p.strip() for p in _BOUNDARY.split(text) if p and p.strip()]
    if not pieces:
        return [text.strip()]

    segments: list[str] = []
    for piece in pieces:
        if segments and not _CURRENCY.search(piece):
            segments[-1] = f"{segments[-1]} {piece}"
        elif segments and not _CURRENCY.search(segments[-1]):
            segments[-1] = f"{segments[-1]} {piece}"
        else:
            segments.append(piece)
    return segments
