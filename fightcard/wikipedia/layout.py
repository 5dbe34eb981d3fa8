"""Markup layout of the Wikipedia "List of UFC events" page and event pages.

These selectors and offsets are the only knowledge we have of the page
structure. If Wikipedia changes its templates, this is the place to update.
"""

BASE_URI = "https://en.wikipedia.org"
LIST_OF_EVENTS_URI = BASE_URI + "/wiki/List_of_UFC_events"

# listing page
SCHEDULED_EVENT_ROWS = (
    "table#Scheduled_events > tbody > tr, table#Scheduled_events > tr"
)
PAST_EVENT_ROWS = "table#Past_events > tbody > tr, table#Past_events > tr"
EVENT_CELLS = ":scope > td"
DETAIL_LINK = "a[href]"
CANCELLED_TOKEN = "Cancelled"

# column positions within a listing row (past rows have their first and last
# cells dropped before these apply)
NAME_COLUMN = 0
DATE_COLUMN = 1
VENUE_COLUMN = 2
LOCATION_COLUMN = 3
CANCELLATION_COLUMN = 4
MIN_EVENT_COLUMNS = DATE_COLUMN + 1
MAX_EVENT_COLUMNS = CANCELLATION_COLUMN + 1
# past rows carry a leading "#" and a trailing reference cell
PAST_EXTRA_COLUMNS = 2

# event page
EVENT_IMAGE = "table.infobox img"
FIGHT_CARD_ROWS = "table.toccolours > tbody > tr, table.toccolours > tr"
FIGHT_CARD_COLUMN_HEADER_ROW = 1
ANNOUNCED_BOUTS_HEADING = "h2:has(> span#Announced_bouts)"
BONUS_AWARDS_HEADING = "h2:has(> span#Bonus_awards)"
# how many sibling nodes (whitespace text included) after the heading the list sits
ANNOUNCED_BOUTS_LIST_OFFSET = 2
BONUS_AWARDS_LIST_OFFSET = 4

ANNOUNCED_BOUTS_SECTION = "Announced bouts"
MIN_BONUS_AWARD_LENGTH = 20

# fight row cells; column 2 only holds "vs."
WEIGHT_CLASS_COLUMN = 0
FIGHTER_ONE_COLUMN = 1
FIGHTER_TWO_COLUMN = 3
METHOD_COLUMN = 4
ROUND_COLUMN = 5
TIME_COLUMN = 6
MIN_FIGHT_COLUMNS = TIME_COLUMN + 1
