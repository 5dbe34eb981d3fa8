"""Parse an individual event page: image, fight card and bonus awards."""

import dataclasses

from bs4 import Tag
from loguru import logger

import fightcard.wikipedia.layout as layout
from fightcard.errors import DuplicateSectionError
from fightcard.models import EventRecord
from fightcard.wikipedia.fight_card import build_fight_card, merge_announced_bouts
from fightcard.wikipedia.util import (
    Query,
    css_query,
    element_children,
    sibling_at,
    text_without_footnote,
)


def extract_image_url(document: Tag, query: Query = css_query) -> str:
    images = query(document, layout.EVENT_IMAGE)
    if not images:
        return ""
    return images[0].get("src", "")


def extract_bonus_awards(heading: Tag) -> list[str]:
    """Award citations from the list that follows the "Bonus awards" heading.

    Short leftovers (markup fragments, lone names) are dropped.
    """
    awards = []
    award_list = sibling_at(heading, layout.BONUS_AWARDS_LIST_OFFSET)
    if not isinstance(award_list, Tag) or award_list.name != "ul":
        logger.debug("No list found under the bonus awards heading")
        return awards

    for item in element_children(award_list):
        text = text_without_footnote(item)
        if len(text) > layout.MIN_BONUS_AWARD_LENGTH:
            awards.append(text)
    return awards


def extract_event_details(
    event: EventRecord, document: Tag, query: Query = css_query
) -> EventRecord:
    """Return a copy of event filled in from its own page."""
    image_url = extract_image_url(document, query)

    fight_card = {}
    discarded = False
    try:
        fight_card = build_fight_card(query(document, layout.FIGHT_CARD_ROWS))
    except DuplicateSectionError as e:
        logger.warning("Discarding fight card of {}: {}", event.name, e)
        discarded = True
    else:
        announced = query(document, layout.ANNOUNCED_BOUTS_HEADING)
        if announced:
            fight_card = merge_announced_bouts(announced[0], fight_card)

    bonus_awards = []
    bonus_heading = query(document, layout.BONUS_AWARDS_HEADING)
    if bonus_heading:
        bonus_awards = extract_bonus_awards(bonus_heading[0])

    return dataclasses.replace(
        event,
        image_url=image_url,
        fight_card=fight_card,
        fight_card_discarded=discarded,
        bonus_awards=bonus_awards,
    )
