from pathlib import Path
from zoneinfo import ZoneInfo

import pytest

from spurgeon_daily.deps import get_quote_service
from spurgeon_daily.main import app
from spurgeon_daily.quotes.selector import QuoteService

UTC_ZONE = ZoneInfo("UTC")


def full_year_text(count: int = 366) -> str:
    return "\n".join(f"quote {i}" for i in range(count))


@pytest.fixture
def write_quotes(tmp_path):
    def _write(text: str, name: str = "quotes.txt") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def year_service(write_quotes) -> QuoteService:
    return QuoteService(write_quotes(full_year_text()), tz=UTC_ZONE)


@pytest.fixture
def use_service():
    """Route the app's quote service dependency to a given instance."""

    def _use(service: QuoteService) -> QuoteService:
        app.dependency_overrides[get_quote_service] = lambda: service
        return service

    yield _use
    app.dependency_overrides.pop(get_quote_service, None)
