import threading
import time

import requests
from loguru import logger

from fightcard.errors import ExtractionCancelled


def check_cancelled(cancel_event: threading.Event | None):
    if cancel_event is not None and cancel_event.is_set():
        raise ExtractionCancelled("Extraction was cancelled")


class WikipediaScraper:
    """Fetches Wikipedia pages over a shared HTTP session."""

    session: requests.Session
    sleep_delay: float = 0.5
    timeout: float = 30.0
    user_agent: str = "fightcard/0.1 (event listing scraper)"
    requests_made: int = 0

    def __init__(self, sleep_delay: float | None = None):
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": self.user_agent})
        if sleep_delay is not None:
            self.sleep_delay = sleep_delay
        self.requests_made = 0

    def fetch(self, uri: str, cancel_event: threading.Event | None = None) -> str:
        """Return the page markup, or "" if the server did not answer 2xx.

        Transport errors are logged and re-raised.
        """
        check_cancelled(cancel_event)
        if self.requests_made and self.sleep_delay:
            time.sleep(self.sleep_delay)

        logger.info("--> GET {}", uri)
        try:
            r = self.session.get(uri, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("Request to {} failed: {}", uri, e)
            raise
        finally:
            self.requests_made += 1
        check_cancelled(cancel_event)

        if r:
            logger.info("<-- {} {}", r.status_code, uri)
            return r.text
        logger.error("<-- {} {}", r.status_code, uri)
        return ""
