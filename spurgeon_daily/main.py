from __future__ import annotations

import os
import platform
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from importlib.metadata import PackageNotFoundError, version as dist_version
from pathlib import Path
from typing import Annotated

from fastapi import Depends, FastAPI, Request, status
from fastapi.responses import HTMLResponse, JSONResponse

from spurgeon_daily.config import settings
from spurgeon_daily.deps import get_preferences
from spurgeon_daily.metrics import MetricsMiddleware, metrics_endpoint
from spurgeon_daily.notifications import (
    NotificationPreferences,
    NotificationState,
    NotificationToggle,
    env_authorizer,
    preferences,
)
from spurgeon_daily.observability import RequestIdMiddleware, setup_json_logging
from spurgeon_daily.quotes.router import router as quotes_router
from spurgeon_daily.surfaces.router import router as surfaces_router

APP_NAME = "spurgeon-daily"
APP_DESC = "A daily Charles Spurgeon quote for the main view, home-screen widget and live activity."
APP_VERSION_FILE = Path(__file__).resolve().parents[1] / "VERSION"


def read_version() -> str:
    """Installed distribution version; the VERSION file for a source checkout."""
    try:
        return dist_version(APP_NAME)
    except PackageNotFoundError:
        pass
    try:
        return APP_VERSION_FILE.read_text(encoding="utf-8").strip()
    except OSError:
        return "0.0.0"


def utc_now_iso() -> str:
    return datetime.now(UTC).isoformat()


log = setup_json_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    preferences.request_authorization(env_authorizer(settings.NOTIFICATIONS_AUTHORIZE))
    app.state.is_ready = True
    log.info("startup", extra={"version": app.version, "resource": settings.QUOTES_RESOURCE.name})
    yield
    app.state.is_ready = False
    log.info("shutdown")


app = FastAPI(
    title=APP_NAME,
    description=APP_DESC,
    version=read_version(),
    lifespan=lifespan,
)
app.state.is_ready = False

app.add_middleware(MetricsMiddleware, skip_paths={"/metrics", "/live", "/ready"})
app.add_middleware(RequestIdMiddleware, logger=log)

app.include_router(quotes_router)
app.include_router(surfaces_router)

Preferences = Annotated[NotificationPreferences, Depends(get_preferences)]


# -------------------------
# Core endpoints
# -------------------------
@app.get("/health", tags=["core"])
def health():
    return {"status": "ok"}


@app.get("/live", tags=["ops"])
def live():
    return {"status": "live"}


@app.get("/ready", tags=["ops"])
def ready(request: Request):
    # flipped by lifespan: true after startup, false again during shutdown
    if getattr(request.app.state, "is_ready", False):
        return {"status": "ready"}
    return JSONResponse({"status": "not_ready"}, status_code=status.HTTP_503_SERVICE_UNAVAILABLE)


@app.get("/version", tags=["core"])
def version():
    return {
        "service": APP_NAME,
        "version": read_version(),
        "host": settings.APP_HOST,
        "port": settings.APP_PORT,
        "workers": settings.APP_WORKERS,
    }


@app.get("/__meta", tags=["core"])
def meta():
    git_commit = os.getenv("GIT_COMMIT", "unknown")
    git = {
        "commit": git_commit,
        "sha": os.getenv("GIT_SHA", git_commit),
        "branch": os.getenv("GIT_BRANCH", "unknown"),
        "dirty": os.getenv("GIT_DIRTY", "unknown"),
    }
    build = {
        "time": os.getenv("BUILD_TIME", "unknown"),
        "containerized": Path("/.dockerenv").exists(),
    }
    runtime = {
        "python": platform.python_version(),
        "implementation": platform.python_implementation(),
        "platform": platform.platform(),
        "pid": os.getpid(),
        "as_of": utc_now_iso(),
    }
    endpoints = sorted(
        {getattr(r, "path", "") for r in app.routes if getattr(r, "path", "").startswith("/")}
    )
    return {
        "service": APP_NAME,
        "version": read_version(),
        "git": git,
        "build": build,
        "runtime": runtime,
        "endpoints": endpoints,
    }


@app.get("/metrics", tags=["core"])
def metrics():
    return metrics_endpoint()


# -------------------------
# Notifications
# -------------------------
@app.get("/notifications", response_model=NotificationState, tags=["notifications"])
def get_notifications(prefs: Preferences):
    return prefs.state()


@app.put("/notifications", response_model=NotificationState, tags=["notifications"])
def put_notifications(payload: NotificationToggle, prefs: Preferences):
    return prefs.set_enabled(payload.enabled)


# -------------------------
# Main view page
# -------------------------
@app.get("/", response_class=HTMLResponse, tags=["surfaces"])
def home():
    html = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>SpurgeonDaily</title>
  <style>
    body { font-family: system-ui, sans-serif; margin: 0; background: #3f3d8f; color: #000; }
    main { display: flex; flex-direction: column; align-items: center; gap: 16px; padding: 48px 16px; }
    .card { background: #fff; border-radius: 20px; padding: 20px; max-width: 335px; width: 100%;
            box-shadow: 0 2px 6px rgba(0,0,0,0.2); }
    #display-date { font-weight: bold; font-size: 1.3em; text-align: center; border-radius: 10px; }
    #quote { font-weight: bold; font-style: italic; white-space: pre-wrap; }
    #attribution { font-size: 0.9em; margin-top: 2em; }
    button { width: 100%; max-width: 375px; padding: 16px; border: 0; border-radius: 10px;
             background: #1e6ff1; color: #fff; font-weight: bold; font-size: 1.2em; cursor: pointer; }
    label { color: #fff; }
  </style>
</head>
<body>
<main>
  <div class="card" id="display-date"></div>
  <div class="card">
    <div id="quote"></div>
    <div id="attribution"></div>
  </div>
  <button id="share">Share</button>
  <label><input type="checkbox" id="notify" /> Daily notifications</label>
</main>

<script>
let shareText = '';

async function loadToday() {
  const r = await fetch('/today');
  if (!r.ok) throw new Error('today failed');
  const data = await r.json();
  document.getElementById('display-date').textContent = data.display_date;
  document.getElementById('quote').textContent = data.quote;
  document.getElementById('attribution').textContent = data.attribution;
  document.getElementById('notify').checked = !!data.notifications_enabled;
  shareText = data.share_text;
}

async function share() {
  if (navigator.share) {
    await navigator.share({ text: shareText });
  } else if (navigator.clipboard) {
    await navigator.clipboard.writeText(shareText);
  }
}

async function toggleNotifications(ev) {
  await fetch('/notifications', {
    method: 'PUT',
    headers: {'Content-Type': 'application/json'},
    body: JSON.stringify({ enabled: ev.target.checked })
  });
}

document.getElementById('share').addEventListener('click', () => share().catch(() => {}));
document.getElementById('notify').addEventListener('change', toggleNotifications);
loadToday().catch(() => {
  document.getElementById('quote').textContent = 'Failed to load today\\'s quote';
});
</script>
</body>
</html>
"""
    return HTMLResponse(content=html, status_code=200)
