"""Filter, paginate and select over a fetched record set."""

from __future__ import annotations

import logging
import math
from typing import Awaitable, Callable, Iterable, Sequence

from minimarket.config import PAGE_SIZE
from minimarket.models import ListQuery, Record

logger = logging.getLogger(__name__)

FetchRecords = Callable[[], Awaitable[Iterable[Record]]]


def filtered_records(records: Sequence[Record], search_text: str) -> list[Record]:
    """Stable case-insensitive substring filter on the record name."""
    if not search_text:
        return list(records)
    needle = search_text.lower()
    return [record for record in records if needle in (record.name or "").lower()]


def page_count(filtered: Sequence[Record], page_size: int) -> int:
    return max(1, math.ceil(len(filtered) / page_size))


def current_page(filtered: Sequence[Record], page_index: int, page_size: int) -> list[Record]:
    start = (page_index - 1) * page_size
    return list(filtered[start : start + page_size])


class RecordListPipeline:
    """Owns the record set, the list query and the inspected record."""

    def __init__(self, records: Iterable[Record] = (), page_size: int = PAGE_SIZE) -> None:
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        self.records: tuple[Record, ...] = tuple(records)
        self.query = ListQuery(page_size=page_size)
        self.selected: Record | None = None
        self.loading = False
        self.last_error: BaseException | None = None

    # Derived views

    @property
    def filtered(self) -> list[Record]:
        return filtered_records(self.records, self.query.search_text)

    @property
    def page_count(self) -> int:
        return page_count(self.filtered, self.query.page_size)

    @property
    def page_index(self) -> int:
        return self.query.page_index

    @property
    def visible(self) -> list[Record]:
        return current_page(self.filtered, self.query.page_index, self.query.page_size)

    @property
    def is_first_page(self) -> bool:
        return self.query.page_index <= 1

    @property
    def is_last_page(self) -> bool:
        return self.query.page_index >= self.page_count

    def page_window(self) -> tuple[int, int, int]:
        """Return (first, last, total) as 1-based positions for the page summary."""
        total = len(self.filtered)
        if total == 0:
            return (0, 0, 0)
        first = (self.query.page_index - 1) * self.query.page_size + 1
        last = min(self.query.page_index * self.query.page_size, total)
        return (first, last, total)

    # Query transitions

    def set_search_text(self, text: str) -> None:
        self.query.search_text = text or ""
        self.query.page_index = 1

    def go_to_next_page(self) -> None:
        if self.query.page_index < self.page_count:
            self.query.page_index += 1

    def go_to_prev_page(self) -> None:
        if self.query.page_index > 1:
            self.query.page_index -= 1

    def go_to_page(self, page_index: int) -> None:
        self.query.page_index = max(1, min(page_index, self.page_count))

    def set_page_size(self, page_size: int) -> None:
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        self.query.page_size = page_size
        self._clamp_page()

    # Selection

    def select(self, record: Record) -> None:
        self.selected = record

    def clear_selection(self) -> None:
        self.selected = None

    # Loading

    def load(self, records: Iterable[Record]) -> None:
        """Replace the record set, keeping the query and re-clamping the page."""
        self.records = tuple(records)
        self.last_error = None
        self._clamp_page()

    async def refresh(self, fetch: FetchRecords) -> None:
        """Fetch records through the collaborator; failures leave an empty set."""
        self.loading = True
        try:
            records = await fetch()
        except Exception as exc:
            logger.exception("record fetch failed")
            self.load(())
            self.last_error = exc
        else:
            self.load(records)
            logger.debug("loaded %d records", len(self.records))
        finally:
            self.loading = False

    def _clamp_page(self) -> None:
        self.query.page_index = max(1, min(self.query.page_index, self.page_count))
