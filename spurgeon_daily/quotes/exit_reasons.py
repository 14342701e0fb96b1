# spurgeon_daily/quotes/exit_reasons.py
from dataclasses import dataclass
from enum import Enum
from typing import Any

# Placeholder texts rendered in place of a quote
MISSING_TEXT = "{name} not found!"
UNREADABLE_TEXT = "contents could not be loaded"
OUT_OF_RANGE_TEXT = "No quote available for day {day}."


class QuoteExitReason(str, Enum):
    # Resource
    RESOURCE_MISSING = "resource_missing"
    RESOURCE_UNREADABLE = "resource_unreadable"

    # Selection
    INDEX_OUT_OF_RANGE = "index_out_of_range"


@dataclass
class QuoteExit:
    reason: QuoteExitReason
    message: str
    details: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "reason": self.reason.value,
            "message": self.message,
            "details": self.details or {},
        }
