# spurgeon_daily/surfaces/live_activity.py
"""
Lock-screen / dynamic-island live activity.

The activity currently draws fixed placeholder text in every region; it
does not show the daily quote yet.
"""

from pydantic import BaseModel, Field


class LiveActivityState(BaseModel):
    # Dynamic stateful properties of the activity
    value: int = 0


class LiveActivityAttributes(BaseModel):
    # Fixed, non-changing properties of the activity
    name: str = Field(..., min_length=1, max_length=80)


class LiveActivityRequest(BaseModel):
    attributes: LiveActivityAttributes
    state: LiveActivityState = Field(default_factory=LiveActivityState)


class ExpandedRegions(BaseModel):
    leading: str
    trailing: str
    bottom: str


class DynamicIsland(BaseModel):
    expanded: ExpandedRegions
    compact_leading: str
    compact_trailing: str
    minimal: str
    widget_url: str
    keyline_tint: str


class LockScreen(BaseModel):
    text: str
    background_tint: str
    system_action_foreground: str


class LiveActivity(BaseModel):
    attributes: LiveActivityAttributes
    state: LiveActivityState
    lock_screen: LockScreen
    dynamic_island: DynamicIsland


def render_live_activity(
    attributes: LiveActivityAttributes, state: LiveActivityState | None = None
) -> LiveActivity:
    return LiveActivity(
        attributes=attributes,
        state=state or LiveActivityState(),
        lock_screen=LockScreen(
            text="Hello",
            background_tint="cyan",
            system_action_foreground="black",
        ),
        dynamic_island=DynamicIsland(
            expanded=ExpandedRegions(leading="Leading", trailing="Trailing", bottom="Bottom"),
            compact_leading="L",
            compact_trailing="T",
            minimal="Min",
            widget_url="http://www.apple.com",
            keyline_tint="red",
        ),
    )
