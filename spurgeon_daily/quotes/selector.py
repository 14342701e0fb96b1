# spurgeon_daily/quotes/selector.py
"""
Today's quote: load -> parse -> day-of-year -> index -> bounds check.

Nothing is cached between calls. Each select() re-reads the resource and
resolves the day afresh, so a surface that stays resident across midnight
picks up the new quote on its next render.

Index modes:
- zero_based : day-of-year - 1, so Jan 1 shows the first line and a
               366-line file covers every day of a leap year.
- legacy     : the 1-based day-of-year is used directly as a 0-based index,
               so Jan 1 shows the second line. Matches files authored with a
               throwaway line at position 0; such files need 367 lines.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, tzinfo
from pathlib import Path
from typing import Any

from spurgeon_daily.config import Settings, settings as default_settings
from spurgeon_daily.metrics import record_selection

from .calendar import calendar_date, day_of_year, now_in, reference_zone
from .exit_reasons import OUT_OF_RANGE_TEXT, QuoteExit, QuoteExitReason
from .loader import load_resource
from .parser import QuoteCollection, parse_quotes

log = logging.getLogger("spurgeon_daily")


@dataclass(frozen=True)
class DailySelection:
    date: date
    day_of_year: int
    index: int
    quote: str
    attribution: str
    exit: QuoteExit | None = None

    @property
    def ok(self) -> bool:
        return self.exit is None

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "day_of_year": self.day_of_year,
            "index": self.index,
            "quote": self.quote,
            "attribution": self.attribution,
            "exit": self.exit.to_dict() if self.exit else None,
        }


def index_for_day(day: int, mode: str = "zero_based") -> int:
    return day if mode == "legacy" else day - 1


def pick(
    quotes: QuoteCollection, index: int, day: int, out_of_range: str = "placeholder"
) -> tuple[str, QuoteExit | None]:
    """Bounds-checked lookup. Never raises for an index past the end."""
    if 0 <= index < len(quotes):
        return quotes[index], None

    exit_obj = QuoteExit(
        reason=QuoteExitReason.INDEX_OUT_OF_RANGE,
        message=f"Quotes resource has {len(quotes)} entries; index {index} requested.",
        details={"day_of_year": day, "index": index, "count": len(quotes)},
    )
    if out_of_range == "clamp" and quotes:
        return quotes[max(0, min(index, len(quotes) - 1))], exit_obj
    return OUT_OF_RANGE_TEXT.format(day=day), exit_obj


class QuoteService:
    """
    Shared quote selection used by the main view, widget and live activity.

    Holds configuration only; every call reads the resource again.
    """

    def __init__(
        self,
        resource: str | Path,
        encoding: str = "utf-8",
        attribution: str = "- Charles Spurgeon",
        tz: tzinfo | None = None,
        index_mode: str = "zero_based",
        out_of_range: str = "placeholder",
    ):
        self.resource = Path(resource)
        self.encoding = encoding
        self.attribution = attribution
        self.tz = tz
        self.index_mode = index_mode
        self.out_of_range = out_of_range

    @classmethod
    def from_settings(cls, cfg: Settings | None = None) -> QuoteService:
        cfg = cfg or default_settings
        return cls(
            resource=cfg.QUOTES_RESOURCE,
            encoding=cfg.QUOTES_ENCODING,
            attribution=cfg.QUOTE_ATTRIBUTION,
            tz=reference_zone(cfg.QUOTE_TIMEZONE),
            index_mode=cfg.QUOTE_INDEX_MODE,
            out_of_range=cfg.QUOTE_OUT_OF_RANGE,
        )

    def now(self) -> datetime:
        return now_in(self.tz)

    def quotes(self) -> QuoteCollection:
        return parse_quotes(load_resource(self.resource, encoding=self.encoding).text)

    def select(self, when: date | datetime | None = None) -> DailySelection:
        when = self.now() if when is None else when
        day = day_of_year(when, self.tz)
        index = index_for_day(day, self.index_mode)
        on = calendar_date(when, self.tz)

        loaded = load_resource(self.resource, encoding=self.encoding)
        if not loaded.ok:
            # Show the loader's placeholder rather than an index error on it
            record_selection(loaded.exit.reason.value)
            return DailySelection(
                date=on,
                day_of_year=day,
                index=index,
                quote=loaded.text,
                attribution=self.attribution,
                exit=loaded.exit,
            )

        quotes = parse_quotes(loaded.text)
        quote, exit_obj = pick(quotes, index, day, out_of_range=self.out_of_range)
        if exit_obj:
            log.warning(
                "quote_index_out_of_range",
                extra={
                    "day": day,
                    "index": index,
                    "count": len(quotes),
                    "policy": self.out_of_range,
                },
            )
            record_selection(exit_obj.reason.value, len(quotes))
        else:
            log.debug("quote_selected", extra={"day": day, "index": index})
            record_selection("ok", len(quotes))

        return DailySelection(
            date=on,
            day_of_year=day,
            index=index,
            quote=quote,
            attribution=self.attribution,
            exit=exit_obj,
        )
