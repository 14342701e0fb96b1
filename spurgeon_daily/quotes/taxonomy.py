# spurgeon_daily/quotes/taxonomy.py
from typing import Any

from .exit_reasons import QuoteExitReason

# Client-facing taxonomy for recovered quote failures. Keep aligned with QuoteExitReason.
_TAXONOMY: dict[str, dict[str, Any]] = {
    QuoteExitReason.RESOURCE_MISSING.value: {
        "description": "The bundled quotes resource could not be located.",
        "client_action": "Render the placeholder text; check QUOTES_RESOURCE.",
    },
    QuoteExitReason.RESOURCE_UNREADABLE.value: {
        "description": "The quotes resource exists but could not be read or decoded.",
        "client_action": "Render the placeholder text; check permissions and encoding.",
    },
    QuoteExitReason.INDEX_OUT_OF_RANGE.value: {
        "description": "The day-of-year has no matching entry in the quotes resource.",
        "client_action": "Render the placeholder text; the resource is too short for this date.",
    },
}


def get_taxonomy() -> list[dict[str, Any]]:
    return [{"reason": reason, **payload} for reason, payload in _TAXONOMY.items()]
