# spurgeon_daily/surfaces/router.py
from datetime import date, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from spurgeon_daily.deps import get_preferences, get_quote_service, get_timeline_provider
from spurgeon_daily.notifications import NotificationPreferences
from spurgeon_daily.quotes.selector import QuoteService

from .live_activity import LiveActivity, LiveActivityRequest, render_live_activity
from .main_view import MainView, render_main_view
from .widget import Timeline, TimelineProvider, WidgetEntry, WidgetInfo

router = APIRouter(tags=["surfaces"])

Service = Annotated[QuoteService, Depends(get_quote_service)]
Preferences = Annotated[NotificationPreferences, Depends(get_preferences)]
Provider = Annotated[TimelineProvider, Depends(get_timeline_provider)]
OnDate = Annotated[date | None, Query(description="Preview another calendar day (YYYY-MM-DD)")]
At = Annotated[datetime | None, Query(description="Timeline start; defaults to now")]


# -------------------------
# Main view
# -------------------------
@router.get("/today", response_model=MainView)
def today(service: Service, prefs: Preferences, on: OnDate = None):
    return render_main_view(service, when=on, notifications_enabled=prefs.enabled)


@router.get("/today/share", response_class=PlainTextResponse)
def today_share(service: Service, on: OnDate = None):
    return render_main_view(service, when=on).share_text


# -------------------------
# Home-screen widget
# -------------------------
@router.get("/widget", response_model=WidgetInfo)
def widget_info():
    return WidgetInfo()


@router.get("/widget/placeholder", response_model=WidgetEntry)
def widget_placeholder(provider: Provider, at: At = None):
    return provider.placeholder(at)


@router.get("/widget/snapshot", response_model=WidgetEntry)
def widget_snapshot(provider: Provider, at: At = None):
    return provider.snapshot(at)


@router.get("/widget/timeline", response_model=Timeline)
def widget_timeline(provider: Provider, at: At = None):
    return provider.timeline(at)


# -------------------------
# Live activity
# -------------------------
@router.post("/live-activity", response_model=LiveActivity)
def live_activity(req: LiveActivityRequest):
    return render_live_activity(req.attributes, req.state)
