"""Event and fight records produced by the scrapers."""

import datetime
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class FightRecord:
    weight_class: str
    fighter_one: str
    fighter_two: str
    method: str = ""  # empty until the bout has a result
    round: str = ""
    time: str = ""

    def to_dict(self) -> dict:
        return {
            "weight_class": self.weight_class,
            "fighter_one": self.fighter_one,
            "fighter_two": self.fighter_two,
            "method": self.method,
            "round": self.round,
            "time": self.time,
        }


FightCard = dict[str, list[FightRecord]]


@dataclass(frozen=True)
class EventRecord:
    """One promotion event, from the listing row and (optionally) its own page.

    fight_card maps section title (e.g. "Main card") to the bouts in that
    section, in the order the sections appear on the page.
    """

    name: str
    date: datetime.date
    venue: str = ""
    location: str = ""
    is_scheduled: bool = True
    is_cancelled: bool = False
    image_url: str = ""
    detail_url: str = ""
    fight_card: Mapping[str, tuple[FightRecord, ...]] = field(default_factory=dict)
    fight_card_discarded: bool = False  # sections were ambiguous, card dropped
    bonus_awards: tuple[str, ...] = ()

    def __post_init__(self):
        """Freeze the containers so the record cannot change once built."""
        object.__setattr__(
            self,
            "fight_card",
            MappingProxyType(
                {section: tuple(fights) for section, fights in self.fight_card.items()}
            ),
        )
        object.__setattr__(self, "bonus_awards", tuple(self.bonus_awards))

    def total_fights(self) -> int:
        return sum(len(fights) for fights in self.fight_card.values())

    def to_dict(self) -> dict:
        """Convert the event to plain JSON-ready data."""
        return {
            "name": self.name,
            "date": self.date.isoformat(),
            "venue": self.venue,
            "location": self.location,
            "is_scheduled": self.is_scheduled,
            "is_cancelled": self.is_cancelled,
            "image_url": self.image_url,
            "detail_url": self.detail_url,
            "fight_card": {
                section: [fight.to_dict() for fight in fights]
                for section, fights in self.fight_card.items()
            },
            "fight_card_discarded": self.fight_card_discarded,
            "bonus_awards": list(self.bonus_awards),
        }
