"""Extract events from the Wikipedia "List of UFC events" page."""

import dataclasses
import threading
from typing import Callable
from urllib.parse import urljoin

from bs4 import Tag
from loguru import logger

import fightcard.wikipedia.layout as layout
from fightcard.models import EventRecord
from fightcard.wikipedia.details import extract_event_details
from fightcard.wikipedia.rows import CarriedState, EventRow, extract_row
from fightcard.wikipedia.scraper import WikipediaScraper, check_cancelled
from fightcard.wikipedia.util import Parse, Query, css_query, parse_html

Fetch = Callable[[str, threading.Event | None], str]


def detail_link(name_cell: Tag, query: Query = css_query) -> str:
    """Absolute URL of the event's own page, or "" if the name is not linked."""
    links = query(name_cell, layout.DETAIL_LINK)
    if not links:
        return ""
    return urljoin(layout.BASE_URI, links[0]["href"])


class WikipediaEventsParser:
    """Turns the events listing (and each linked event page) into EventRecords.

    Only the last quantity_of_scheduled_events scheduled events (the nearest
    ones are at the bottom of that table) and the first quantity_of_past_events
    past events (most recent at the top) are kept.
    """

    quantity_of_scheduled_events: int = 10
    quantity_of_past_events: int = 5

    def __init__(
        self,
        fetch: Fetch | None = None,
        query: Query = css_query,
        parse: Parse = parse_html,
    ):
        if fetch is None:
            fetch = WikipediaScraper().fetch
        self.fetch = fetch
        self.query = query
        self.parse = parse

    def extract_events(
        self,
        listing_uri: str = layout.LIST_OF_EVENTS_URI,
        cancel_event: threading.Event | None = None,
    ) -> list[EventRecord]:
        html_data = self.fetch(listing_uri, cancel_event)
        events = self.parse_events_from(html_data, cancel_event)
        logger.success("Finished parsing events. Total events: {}", len(events))
        return events

    def parse_events_from(
        self, html_data: str, cancel_event: threading.Event | None = None
    ) -> list[EventRecord]:
        document = self.parse(html_data)
        events = []

        scheduled_rows = self.query(document, layout.SCHEDULED_EVENT_ROWS)
        if scheduled_rows:
            scheduled_rows = self.drop_footer(scheduled_rows[1:], False)
            scheduled_rows = self.select_scheduled(scheduled_rows)
            logger.debug("Parsing {} scheduled events", len(scheduled_rows))
            events.extend(self.parse_rows(scheduled_rows, False, cancel_event))
        else:
            logger.warning("Scheduled events were not found.")

        past_rows = self.query(document, layout.PAST_EVENT_ROWS)
        if past_rows:
            past_rows = self.drop_footer(past_rows[1:], True)
            past_rows = self.select_past(past_rows)
            logger.debug("Parsing {} past events", len(past_rows))
            events.extend(self.parse_rows(past_rows, True, cancel_event))
        else:
            logger.warning("Past events were not found.")

        check_cancelled(cancel_event)
        return events

    def is_footer_row(self, row: Tag, is_past: bool) -> bool:
        """A row without enough data cells to hold an event name and date."""
        width = len(self.query(row, layout.EVENT_CELLS))
        if is_past:
            width -= layout.PAST_EXTRA_COLUMNS
        return width < layout.MIN_EVENT_COLUMNS

    def drop_footer(self, rows: list[Tag], is_past: bool) -> list[Tag]:
        if rows and self.is_footer_row(rows[-1], is_past):
            logger.debug("Dropping footer row")
            return rows[:-1]
        return rows

    def select_scheduled(self, rows: list[Tag]) -> list[Tag]:
        if self.quantity_of_scheduled_events <= 0:
            return []
        return rows[-self.quantity_of_scheduled_events :]

    def select_past(self, rows: list[Tag]) -> list[Tag]:
        return rows[: max(self.quantity_of_past_events, 0)]

    def parse_rows(
        self,
        rows: list[Tag],
        is_past: bool,
        cancel_event: threading.Event | None = None,
    ) -> list[EventRecord]:
        """Parse rows of one table, carrying merged cells down the table."""
        events = []
        carried = CarriedState()
        for row in rows:
            check_cancelled(cancel_event)
            cells = self.query(row, layout.EVENT_CELLS)
            if is_past:
                # drop the "#" and reference columns
                cells = cells[1:-1]

            event, carried = extract_row(EventRow(cells), carried)
            event = dataclasses.replace(event, is_scheduled=not is_past)
            event = self.add_details(event, cells[layout.NAME_COLUMN], cancel_event)

            logger.info("Finished parsing event: {} / {}", event.name, event.date)
            logger.debug(
                "Venue: {}; Location: {}; sections: {}; fights: {}",
                event.venue,
                event.location,
                len(event.fight_card),
                event.total_fights(),
            )
            events.append(event)
        return events

    def add_details(
        self,
        event: EventRecord,
        name_cell: Tag,
        cancel_event: threading.Event | None = None,
    ) -> EventRecord:
        url = detail_link(name_cell, self.query)
        if not url:
            logger.debug("No event page link for {} / {}", event.name, event.date)
            return event

        logger.info("Parsing event details for {} / {}", event.name, event.date)
        document = self.parse(self.fetch(url, cancel_event))
        event = extract_event_details(event, document, self.query)
        return dataclasses.replace(event, detail_url=url)
