# spurgeon_daily/surfaces/main_view.py
from __future__ import annotations

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, Field

from spurgeon_daily.quotes.calendar import format_complete
from spurgeon_daily.quotes.selector import DailySelection, QuoteService

# Line terminators only; spaces and tabs inside the quote are kept
NEWLINES = "\n\r\x0b\x0c\x85\u2028\u2029"


class MainView(BaseModel):
    date: str = Field(..., description="ISO-8601 calendar date the quote is for")
    display_date: str = Field(..., description="Long-form date, e.g. 'Saturday, October 17, 2026'")
    day_of_year: int
    quote: str
    attribution: str
    share_text: str
    notifications_enabled: bool = False
    exit: dict[str, Any] | None = None


def share_text(quote: str, attribution: str) -> str:
    """Quote in double quotes, trailing newlines trimmed, attribution on its own line."""
    return f'"{quote}'.strip(NEWLINES) + '"' + "\n" + attribution


def build_main_view(selection: DailySelection, notifications_enabled: bool = False) -> MainView:
    return MainView(
        date=selection.date.isoformat(),
        display_date=format_complete(selection.date),
        day_of_year=selection.day_of_year,
        quote=selection.quote,
        attribution=selection.attribution,
        share_text=share_text(selection.quote, selection.attribution),
        notifications_enabled=notifications_enabled,
        exit=selection.exit.to_dict() if selection.exit else None,
    )


def render_main_view(
    service: QuoteService,
    when: date | datetime | None = None,
    notifications_enabled: bool = False,
) -> MainView:
    return build_main_view(service.select(when), notifications_enabled=notifications_enabled)
