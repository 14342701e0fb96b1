from datetime import UTC, date, datetime, timedelta
from zoneinfo import ZoneInfo

from conftest import UTC_ZONE, full_year_text

from spurgeon_daily.config import Settings
from spurgeon_daily.quotes.exit_reasons import QuoteExitReason
from spurgeon_daily.quotes.selector import QuoteService, index_for_day, pick


def test_every_day_of_leap_year_has_a_quote(year_service):
    day = date(2024, 1, 1)
    while day.year == 2024:
        selection = year_service.select(day)
        assert selection.ok, day
        assert selection.quote == f"quote {selection.day_of_year - 1}"
        day += timedelta(days=1)


def test_jan_first_is_first_entry(year_service):
    selection = year_service.select(date(2023, 1, 1))
    assert selection.day_of_year == 1
    assert selection.index == 0
    assert selection.quote == "quote 0"


def test_legacy_mode_uses_day_directly(write_quotes):
    service = QuoteService(write_quotes(full_year_text(367)), index_mode="legacy")
    assert service.select(date(2023, 1, 1)).quote == "quote 1"
    assert service.select(date(2024, 12, 31)).quote == "quote 366"


def test_legacy_mode_short_file_recovers_on_last_leap_day(write_quotes):
    service = QuoteService(write_quotes(full_year_text(366)), index_mode="legacy")
    selection = service.select(date(2024, 12, 31))
    assert selection.exit.reason == QuoteExitReason.INDEX_OUT_OF_RANGE


def test_single_line_resource_recovers_past_day_one(write_quotes):
    service = QuoteService(write_quotes("the only quote"))
    assert service.quotes() == ("the only quote",)
    assert service.select(date(2023, 1, 1)).quote == "the only quote"

    selection = service.select(date(2023, 1, 2))
    assert not selection.ok
    assert selection.exit.reason == QuoteExitReason.INDEX_OUT_OF_RANGE
    assert selection.quote == "No quote available for day 2."
    assert selection.exit.details == {"day_of_year": 2, "index": 1, "count": 1}


def test_clamp_policy_returns_last_entry_and_reports(write_quotes):
    service = QuoteService(write_quotes("a\nb"), out_of_range="clamp")
    selection = service.select(date(2023, 6, 1))
    assert selection.quote == "b"
    assert selection.exit.reason == QuoteExitReason.INDEX_OUT_OF_RANGE


def test_empty_resource_is_tolerated(write_quotes):
    service = QuoteService(write_quotes(""))
    assert service.select(date(2023, 1, 1)).quote == ""
    assert service.select(date(2023, 1, 2)).exit.reason == QuoteExitReason.INDEX_OUT_OF_RANGE


def test_missing_and_unreadable_both_yield_placeholder(tmp_path):
    bad = tmp_path / "bad.txt"
    bad.write_bytes(b"\xff\xfe")
    missing = QuoteService(tmp_path / "quotes.txt").select(date(2024, 5, 5))
    unreadable = QuoteService(bad).select(date(2024, 5, 5))

    assert missing.exit.reason == QuoteExitReason.RESOURCE_MISSING
    assert missing.quote == "quotes.txt not found!"
    assert unreadable.exit.reason == QuoteExitReason.RESOURCE_UNREADABLE
    assert unreadable.quote == "contents could not be loaded"
    for selection in (missing, unreadable):
        assert isinstance(selection.quote, str)
        assert selection.date == date(2024, 5, 5)


def test_resource_is_reread_on_each_select(write_quotes):
    path = write_quotes("old")
    service = QuoteService(path)
    assert service.select(date(2023, 1, 1)).quote == "old"
    path.write_text("new", encoding="utf-8")
    assert service.select(date(2023, 1, 1)).quote == "new"


def test_select_defaults_to_now(year_service):
    today = datetime.now(UTC).date()
    selection = year_service.select()
    # tolerate a midnight rollover between the two reads
    assert selection.date in (today, today + timedelta(days=1))


def test_aware_datetime_resolved_in_service_zone(write_quotes):
    service = QuoteService(write_quotes(full_year_text()), tz=ZoneInfo("America/New_York"))
    selection = service.select(datetime(2024, 1, 1, 3, 0, tzinfo=UTC))
    assert selection.date == date(2023, 12, 31)
    assert selection.quote == "quote 364"


def test_to_dict_shape(year_service):
    data = year_service.select(date(2024, 2, 29)).to_dict()
    assert data == {
        "date": "2024-02-29",
        "day_of_year": 60,
        "index": 59,
        "quote": "quote 59",
        "attribution": "- Charles Spurgeon",
        "exit": None,
    }


def test_index_for_day_modes():
    assert index_for_day(1) == 0
    assert index_for_day(1, "legacy") == 1


def test_pick_in_range():
    assert pick(("a", "b"), 1, 2) == ("b", None)


def test_from_settings_reads_env(write_quotes):
    path = write_quotes("x\ny")
    cfg = Settings(
        env={
            "QUOTES_RESOURCE": str(path),
            "QUOTE_TIMEZONE": "UTC",
            "QUOTE_INDEX_MODE": "LEGACY",
            "QUOTE_OUT_OF_RANGE": "bogus",
            "QUOTE_ATTRIBUTION": "- C. H. Spurgeon",
        }
    )
    service = QuoteService.from_settings(cfg)
    assert service.resource == path
    assert service.tz == UTC_ZONE
    assert service.index_mode == "legacy"
    assert service.out_of_range == "placeholder"
    assert service.select(date(2023, 1, 1)).attribution == "- C. H. Spurgeon"
