"""Parse the fight card table and the "Announced bouts" list of an event page."""

from bs4 import Tag
from loguru import logger

import fightcard.wikipedia.layout as layout
from fightcard.errors import (
    DuplicateSectionError,
    FightCardLayoutError,
    RowLayoutError,
)
from fightcard.models import FightCard, FightRecord
from fightcard.wikipedia.util import (
    element_children,
    inner_text,
    sibling_at,
    text_without_footnote,
)


def is_section_header(cells: list[Tag]) -> bool:
    return len(cells) == 1 and cells[0].name == "th"


def parse_fight_row(cells: list[Tag]) -> FightRecord:
    if len(cells) < layout.MIN_FIGHT_COLUMNS:
        raise RowLayoutError(
            f"Fight row has {len(cells)} cells, expected at least "
            f"{layout.MIN_FIGHT_COLUMNS}"
        )
    return FightRecord(
        weight_class=inner_text(cells[layout.WEIGHT_CLASS_COLUMN]),
        fighter_one=inner_text(cells[layout.FIGHTER_ONE_COLUMN]),
        fighter_two=inner_text(cells[layout.FIGHTER_TWO_COLUMN]),
        method=inner_text(cells[layout.METHOD_COLUMN]),
        round=inner_text(cells[layout.ROUND_COLUMN]),
        time=inner_text(cells[layout.TIME_COLUMN]),
    )


def build_fight_card(rows: list[Tag]) -> FightCard:
    """Group fight rows under the section header row that precedes them.

    Raises DuplicateSectionError if a section title repeats, and
    FightCardLayoutError if a fight appears before any section header.
    """
    rows = list(rows)
    if len(rows) > layout.FIGHT_CARD_COLUMN_HEADER_ROW:
        del rows[layout.FIGHT_CARD_COLUMN_HEADER_ROW]

    fight_card: FightCard = {}
    section = None
    for row in rows:
        cells = element_children(row)
        if is_section_header(cells):
            section = cells[0].get_text().strip()
            if section in fight_card:
                logger.debug("Fight card has a non-unique section: {}", section)
                raise DuplicateSectionError(section)
            fight_card[section] = []
            continue

        if section is None:
            raise FightCardLayoutError("Fight row found before any section header")
        fight_card[section].append(parse_fight_row(cells))

    return fight_card


def parse_announced_bout(text: str) -> FightRecord | None:
    """Parse "Lightweight bout: Alice Smith vs. Bob Jones"."""
    label, sep, fighters = text.partition(":")
    fighter_one, vs, fighter_two = fighters.partition("vs.")
    if not sep or not vs:
        logger.warning("Could not parse announced bout: {!r}", text)
        return None
    return FightRecord(
        weight_class=label.replace("bout", "").strip(),
        fighter_one=fighter_one.strip(),
        fighter_two=fighter_two.strip(),
    )


def merge_announced_bouts(heading: Tag, fight_card: FightCard) -> FightCard:
    """Add the bouts listed under the "Announced bouts" heading to fight_card.

    An existing "Announced bouts" section is left as it is.
    """
    bout_list = sibling_at(heading, layout.ANNOUNCED_BOUTS_LIST_OFFSET)
    if not isinstance(bout_list, Tag) or bout_list.name != "ul":
        logger.debug("No list found under the announced bouts heading")
        return fight_card

    items = element_children(bout_list)
    if not items:
        return fight_card

    if layout.ANNOUNCED_BOUTS_SECTION in fight_card:
        logger.debug(
            "Fight card has a non-unique section: {}", layout.ANNOUNCED_BOUTS_SECTION
        )
        return fight_card

    bouts = []
    for item in items:
        bout = parse_announced_bout(text_without_footnote(item))
        if bout:
            bouts.append(bout)

    merged = dict(fight_card)
    merged[layout.ANNOUNCED_BOUTS_SECTION] = bouts
    return merged
