"""Command line entry point: scrape the UFC event listing from Wikipedia."""

import json
import sys
import threading

import click
import requests
from loguru import logger
from tabulate import tabulate

import fightcard.wikipedia.layout as layout
from fightcard.errors import ExtractionCancelled, FightCardScrapeError
from fightcard.models import EventRecord
from fightcard.wikipedia.events import WikipediaEventsParser
from fightcard.wikipedia.scraper import WikipediaScraper


def setup_logging(verbose: bool = False):
    """Set up logging format and level."""
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        level="DEBUG" if verbose else "INFO",
    )


def events_table(events: list[EventRecord]) -> str:
    rows = [
        {
            "Event": event.name,
            "Date": event.date.isoformat(),
            "Venue": event.venue,
            "Location": event.location,
            "Scheduled": "yes" if event.is_scheduled else "",
            "Cancelled": "yes" if event.is_cancelled else "",
            "Fights": event.total_fights(),
            "Bonuses": len(event.bonus_awards),
        }
        for event in events
    ]
    return tabulate(rows, headers="keys", tablefmt="simple")


def run_with_interrupt(parser: WikipediaEventsParser, url: str) -> list[EventRecord]:
    """Run the extraction in a worker thread so Ctrl-C can cancel it cleanly."""
    cancel_event = threading.Event()
    outcome = {}

    def work():
        try:
            outcome["events"] = parser.extract_events(url, cancel_event)
        except Exception as e:
            outcome["error"] = e

    worker = threading.Thread(target=work, daemon=True)
    worker.start()
    try:
        while worker.is_alive():
            worker.join(0.2)
    except KeyboardInterrupt:
        logger.warning("Interrupted, waiting for the current request to finish...")
        cancel_event.set()
        worker.join()

    if "error" in outcome:
        raise outcome["error"]
    return outcome["events"]


@click.command()
@click.option("--url", default=layout.LIST_OF_EVENTS_URI, help="Events listing page")
@click.option(
    "--scheduled",
    default=WikipediaEventsParser.quantity_of_scheduled_events,
    show_default=True,
    help="How many upcoming events to keep",
)
@click.option(
    "--past",
    default=WikipediaEventsParser.quantity_of_past_events,
    show_default=True,
    help="How many past events to keep",
)
@click.option(
    "--delay",
    default=WikipediaScraper.sleep_delay,
    show_default=True,
    help="Seconds to wait between requests",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "table"]),
    default="json",
    show_default=True,
)
@click.option("--verbose", "-v", is_flag=True, help="Log per-event details")
def cli(url, scheduled, past, delay, output_format, verbose):
    """Scrape UFC events, fight cards and bonus awards from Wikipedia."""
    setup_logging(verbose)

    parser = WikipediaEventsParser(fetch=WikipediaScraper(sleep_delay=delay).fetch)
    parser.quantity_of_scheduled_events = scheduled
    parser.quantity_of_past_events = past

    try:
        events = run_with_interrupt(parser, url)
    except ExtractionCancelled:
        logger.warning("Cancelled, no events written.")
        sys.exit(130)
    except (FightCardScrapeError, requests.RequestException) as e:
        logger.error("Extraction failed: {}", e)
        sys.exit(1)

    if output_format == "table":
        click.echo(events_table(events))
    else:
        click.echo(json.dumps([event.to_dict() for event in events], indent=2))


if __name__ == "__main__":
    cli()
