"""Extract listing-level event data from one row of an events table.

Wikipedia merges venue/location cells across consecutive events with
rowspan, so later rows simply omit those columns. The values therefore carry
forward from the previous row of the same table.
"""

from typing import NamedTuple

from bs4 import Tag
from loguru import logger

import fightcard.wikipedia.layout as layout
from fightcard.errors import EventDateError, RowLayoutError
from fightcard.models import EventRecord
from fightcard.wikipedia.util import inner_text, is_footnote_ref, parse_event_date


class CarriedState(NamedTuple):
    venue: str = ""
    location: str = ""
    is_cancelled: bool = False


class EventRow:
    """Named access to the cells of one listing row."""

    def __init__(self, cells: list[Tag]):
        if not layout.MIN_EVENT_COLUMNS <= len(cells) <= layout.MAX_EVENT_COLUMNS:
            raise RowLayoutError(
                f"Event row has {len(cells)} cells, expected "
                f"{layout.MIN_EVENT_COLUMNS}-{layout.MAX_EVENT_COLUMNS}"
            )
        self.cells = cells

    def _cell(self, index: int) -> Tag | None:
        if index < len(self.cells):
            return self.cells[index]
        return None

    @property
    def name(self) -> Tag:
        return self.cells[layout.NAME_COLUMN]

    @property
    def date(self) -> Tag:
        return self.cells[layout.DATE_COLUMN]

    @property
    def venue(self) -> Tag | None:
        return self._cell(layout.VENUE_COLUMN)

    @property
    def location(self) -> Tag | None:
        return self._cell(layout.LOCATION_COLUMN)

    @property
    def cancellation(self) -> Tag | None:
        return self._cell(layout.CANCELLATION_COLUMN)


def _carried_text(cell: Tag | None, previous: str) -> str:
    if cell is None:
        return previous
    text = inner_text(cell)
    if is_footnote_ref(text):
        return previous
    return text


def extract_row(
    row: EventRow, carried: CarriedState = CarriedState()
) -> tuple[EventRecord, CarriedState]:
    """Build the listing part of an event and the state for the next row."""
    name = inner_text(row.name)
    if not name:
        logger.warning("Event name was empty: {!r}", name)
    else:
        logger.info("Parsing event: {}", name)

    date_text = inner_text(row.date)
    try:
        date = parse_event_date(date_text)
    except EventDateError:
        logger.error("Event {!r} has an invalid date: {!r}", name, date_text)
        raise

    venue = _carried_text(row.venue, carried.venue)
    location = _carried_text(row.location, carried.location)
    if row.cancellation is not None:
        is_cancelled = layout.CANCELLED_TOKEN in inner_text(row.cancellation)
    else:
        is_cancelled = carried.is_cancelled

    event = EventRecord(
        name=name,
        date=date,
        venue=venue,
        location=location,
        is_cancelled=is_cancelled,
    )
    return event, CarriedState(venue, location, is_cancelled)
