# spurgeon_daily/quotes/loader.py
"""
Quote resource loading.

The loader never raises for a missing or unreadable resource. Both cases
degrade to a human-readable placeholder so every surface has something to
render; the reason travels alongside in LoadResult.exit.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .exit_reasons import MISSING_TEXT, UNREADABLE_TEXT, QuoteExit, QuoteExitReason

log = logging.getLogger("spurgeon_daily")


@dataclass(frozen=True)
class LoadResult:
    text: str
    exit: QuoteExit | None = None

    @property
    def ok(self) -> bool:
        return self.exit is None


def load_resource(path: str | Path, encoding: str = "utf-8") -> LoadResult:
    path = Path(path)
    try:
        # no newline translation: a lone "\r" stays inside its entry
        return LoadResult(text=path.read_bytes().decode(encoding))
    except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as e:
        log.warning("quotes_resource_missing", extra={"path": str(path), "err": str(e)})
        return LoadResult(
            text=MISSING_TEXT.format(name=path.name),
            exit=QuoteExit(
                reason=QuoteExitReason.RESOURCE_MISSING,
                message="Quotes resource not found.",
                details={"path": str(path)},
            ),
        )
    except (OSError, ValueError, LookupError) as e:
        # ValueError covers decode errors and NUL bytes in the path;
        # LookupError an unknown codec name in QUOTES_ENCODING
        log.warning("quotes_resource_unreadable", extra={"path": str(path), "err": str(e)})
        return LoadResult(
            text=UNREADABLE_TEXT,
            exit=QuoteExit(
                reason=QuoteExitReason.RESOURCE_UNREADABLE,
                message="Quotes resource could not be read.",
                details={"path": str(path), "error": type(e).__name__},
            ),
        )


def load_file(path: str | Path, encoding: str = "utf-8") -> str:
    """Raw resource text, or the placeholder text on failure."""
    return load_resource(path, encoding=encoding).text
