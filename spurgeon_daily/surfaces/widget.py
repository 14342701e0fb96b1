# spurgeon_daily/surfaces/widget.py
"""
Home-screen widget.

TimelineProvider answers the three questions a widget host asks:
  - placeholder : something to draw before real data exists
  - snapshot    : the current state, for the widget gallery
  - timeline    : a batch of future entries plus when to ask again

Each entry is rendered from its own date, so an entry scheduled past
midnight shows the next day's quote.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timedelta
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from spurgeon_daily.metrics import record_timeline
from spurgeon_daily.quotes.calendar import format_complete
from spurgeon_daily.quotes.selector import QuoteService

log = logging.getLogger("spurgeon_daily")

WIDGET_KIND = "SpurgeonDailyWidget"
WIDGET_DISPLAY_NAME = "SpurgeonDaily"
WIDGET_DESCRIPTION = "Shows the SpurgeonDaily quote of the day."
WIDGET_FAMILIES = ["systemLarge"]


class ReloadPolicy(str, Enum):
    AT_END = "at_end"


class WidgetInfo(BaseModel):
    kind: str = WIDGET_KIND
    display_name: str = WIDGET_DISPLAY_NAME
    description: str = WIDGET_DESCRIPTION
    supported_families: list[str] = Field(default_factory=lambda: list(WIDGET_FAMILIES))


class WidgetEntry(BaseModel):
    date: datetime
    display_date: str
    quote: str
    attribution: str
    exit: dict[str, Any] | None = None


class Timeline(BaseModel):
    entries: list[WidgetEntry]
    policy: ReloadPolicy = ReloadPolicy.AT_END
    reload_after: datetime | None = Field(
        None, description="When the host should request the next timeline"
    )


class TimelineProvider:
    def __init__(self, service: QuoteService, entry_count: int = 5, interval_hours: int = 1):
        if entry_count < 1:
            raise ValueError("entry_count must be >= 1")
        if interval_hours < 1:
            raise ValueError("interval_hours must be >= 1")
        self.service = service
        self.entry_count = entry_count
        self.interval = timedelta(hours=interval_hours)

    def entry(self, when: datetime) -> WidgetEntry:
        selection = self.service.select(when)
        return WidgetEntry(
            date=when,
            display_date=format_complete(selection.date),
            quote=selection.quote,
            attribution=selection.attribution,
            exit=selection.exit.to_dict() if selection.exit else None,
        )

    def placeholder(self, now: datetime | None = None) -> WidgetEntry:
        return self.entry(now or self.service.now())

    def snapshot(self, now: datetime | None = None) -> WidgetEntry:
        return self.entry(now or self.service.now())

    def timeline(self, now: datetime | None = None) -> Timeline:
        now = now or self.service.now()
        entries = [self.entry(now + self.interval * offset) for offset in range(self.entry_count)]
        record_timeline(len(entries))
        return Timeline(
            entries=entries,
            policy=ReloadPolicy.AT_END,
            reload_after=entries[-1].date,
        )


class WidgetRefreshScheduler:
    """
    Drives a TimelineProvider the way a widget host does: build a batch,
    hand each entry to the renderer, and ask again once the batch runs out.
    """

    def __init__(self, provider: TimelineProvider, render: Callable[[WidgetEntry], Any]):
        self.provider = provider
        self.render = render
        self.next_refresh_at: datetime | None = None

    def due(self, now: datetime) -> bool:
        return self.next_refresh_at is None or now >= self.next_refresh_at

    def refresh(self, now: datetime | None = None) -> Timeline:
        timeline = self.provider.timeline(now)
        for entry in timeline.entries:
            self.render(entry)
        self.next_refresh_at = timeline.reload_after
        log.info(
            "widget_timeline",
            extra={"entries": len(timeline.entries), "next_refresh_at": self.next_refresh_at},
        )
        return timeline

    def tick(self, now: datetime) -> Timeline | None:
        """Refresh if the current batch has run out; otherwise do nothing."""
        if not self.due(now):
            return None
        return self.refresh(now)
