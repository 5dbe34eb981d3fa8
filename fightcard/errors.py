"""Exceptions raised while extracting events from the listing pages."""


class FightCardScrapeError(Exception):
    """Base class for all extraction failures."""


class EventDateError(FightCardScrapeError, ValueError):
    """An event row has a missing or unparsable date."""


class RowLayoutError(FightCardScrapeError):
    """A table row does not have the number of cells the layout expects."""


class FightCardLayoutError(FightCardScrapeError):
    """The fight card table is not laid out as section header + fight rows."""


class DuplicateSectionError(FightCardScrapeError):
    """Two fight card section headers share the same title."""

    def __init__(self, section: str):
        super().__init__(f"Fight card has more than one section named {section!r}")
        self.section = section


class ExtractionCancelled(FightCardScrapeError):
    """The caller asked for the extraction to stop."""
