from fastapi import Depends

from spurgeon_daily.config import settings
from spurgeon_daily.notifications import NotificationPreferences, preferences
from spurgeon_daily.quotes.selector import QuoteService
from spurgeon_daily.surfaces.widget import TimelineProvider


def get_quote_service() -> QuoteService:
    """
    Build the quote service from current settings.

    A fresh instance per request; tests swap it out via app.dependency_overrides.
    """
    return QuoteService.from_settings(settings)


def get_preferences() -> NotificationPreferences:
    return preferences


def get_timeline_provider(
    service: QuoteService = Depends(get_quote_service),
) -> TimelineProvider:
    return TimelineProvider(
        service,
        entry_count=settings.WIDGET_ENTRY_COUNT,
        interval_hours=settings.WIDGET_INTERVAL_HOURS,
    )
