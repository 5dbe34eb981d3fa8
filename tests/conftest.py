"""Shared pytest fixtures for testing."""

import pytest

from fightcard.wikipedia.util import parse_html

LISTING_URI = "https://en.wikipedia.org/wiki/List_of_UFC_events"

LISTING_HTML = """
<html>
<body>
<table class="wikitable" id="Scheduled_events">
<tbody>
<tr><th>Event</th><th>Date</th><th>Venue</th><th>Location</th><th>Ref.</th></tr>
<tr><td><a href="/wiki/UFC_400">UFC 400</a></td><td>Mar 8, 2025</td><td>Kaseya Center</td><td>Miami, Florida, U.S.</td><td><sup>[1]</sup></td></tr>
<tr><td>UFC Fight Night: Adams vs. Baker</td><td>Mar 1, 2025</td><td rowspan="2">UFC Apex</td><td rowspan="2">Las Vegas, Nevada, U.S.</td><td><sup>[2]</sup></td></tr>
<tr><td>UFC Fight Night: Clark vs. Davis</td><td>Feb 22, 2025</td><td><sup>[3]</sup></td></tr>
<tr><td>UFC 399</td><td>Feb 15, 2025</td><td>Madison Square Garden</td><td>New York City, New York, U.S.</td><td>Cancelled<sup>[4]</sup></td></tr>
</tbody>
</table>
<table class="wikitable" id="Past_events">
<tbody>
<tr><th>#</th><th>Event</th><th>Date</th><th>Venue</th><th>Location</th><th>Ref.</th></tr>
<tr><td>398</td><td><a href="/wiki/UFC_398">UFC 398</a></td><td>Feb 1, 2025</td><td rowspan="2">T-Mobile Arena</td><td rowspan="2">Las Vegas, Nevada, U.S.</td><td><sup>[5]</sup></td></tr>
<tr><td>397</td><td>UFC Fight Night: Evans vs. Fox</td><td>Jan 25, 2025</td><td><sup>[6]</sup></td></tr>
<tr><td>396</td><td>UFC Fight Night: Gray vs. Hill</td><td>Jan 18, 2025</td><td>Rogers Arena</td><td>Vancouver, British Columbia, Canada</td><td><sup>[7]</sup></td></tr>
</tbody>
</table>
</body>
</html>
"""

EVENT_PAGE_HTML = """
<html>
<body>
<table class="infobox vevent">
<tbody>
<tr><td><img src="//upload.wikimedia.org/UFC_398_poster.jpg" alt="poster"></td></tr>
</tbody>
</table>
<table class="toccolours">
<tbody>
<tr><th colspan="8">Main card (Pay-per-view)</th></tr>
<tr><th>Weight class</th><th></th><th></th><th></th><th>Method</th><th>Round</th><th>Time</th><th>Notes</th></tr>
<tr><td>Flyweight</td><td><a href="/wiki/Ivan_Ivanov">Ivan Ivanov</a> (c)</td><td>def.</td><td><a href="/wiki/Jack_Jones">Jack Jones</a></td><td>Submission (rear-naked choke)</td><td>2</td><td>2:05</td><td></td></tr>
<tr><td>Welterweight</td><td>Kevin King</td><td>def.</td><td>Liam Lee</td><td>Decision (unanimous)</td><td>5</td><td>5:00</td><td></td></tr>
<tr><th colspan="8">Preliminary card (ESPN)</th></tr>
<tr><td>Lightweight</td><td>Mark Moore</td><td>def.</td><td>Nick Nash</td><td>KO (punch)</td><td>3</td><td>4:10</td><td></td></tr>
</tbody>
</table>
<h2><span class="mw-headline" id="Announced_bouts">Announced bouts</span></h2>
<ul>
<li>Lightweight bout: Alice Smith vs. Bob Jones<sup class="reference">[8]</sup></li>
<li>Catchweight (150 lb) bout: Carla Diaz vs. Dana Evans<sup class="reference">[9]</sup></li>
</ul>
<h2><span class="mw-headline" id="Bonus_awards">Bonus awards</span></h2>
<p>The following fighters received $50,000 bonuses.</p>
<ul>
<li>Fight of the Night: Kevin King vs. Liam Lee<sup class="reference">[10]</sup></li>
<li>Performance of the Night: Ivan Ivanov<sup class="reference">[11]</sup></li>
<li>TBA</li>
</ul>
</body>
</html>
"""


@pytest.fixture
def listing_html():
    return LISTING_HTML


@pytest.fixture
def event_page_html():
    return EVENT_PAGE_HTML


@pytest.fixture
def event_page(event_page_html):
    return parse_html(event_page_html)


class FakeFetch:
    """Stands in for WikipediaScraper.fetch; unknown URLs answer ""."""

    def __init__(self, pages: dict[str, str]):
        self.pages = pages
        self.calls = []

    def __call__(self, uri, cancel_event=None):
        self.calls.append(uri)
        return self.pages.get(uri, "")


@pytest.fixture
def fake_fetch(listing_html, event_page_html):
    return FakeFetch(
        {
            LISTING_URI: listing_html,
            "https://en.wikipedia.org/wiki/UFC_398": event_page_html,
        }
    )


@pytest.fixture
def make_fetch():
    return FakeFetch
