"""In-memory index of known episodes keyed by guest name."""

import logging
from collections import Counter

from show_runner.config import ShowRunnerConfig
from show_runner.interfaces import RosterSource
from show_runner.models import MatchResult, RosterEntry
from show_runner.utils import normalize_name

logger = logging.getLogger(__name__)


class EpisodeDirectory:
    """Resolve guest names to episodes using the roster.

    Matching is containment-based, not edit distance: an entry matches
    when its normalized guest name is a substring of the normalized
    needle or the other way round. The first entry in roster order wins.
    This over-matches short or overlapping names ("Al" matches both
    "Alice" and "Albert"); ambiguous lookups are logged as warnings but
    still resolve to the earliest entry.
    """

    def __init__(self, config: ShowRunnerConfig):
        """Initialize with roster layout settings.

        Args:
            config: Configuration with column positions and header size
        """
        self.config = config
        self._entries: list[RosterEntry] | None = None

    @classmethod
    def from_entries(
        cls, config: ShowRunnerConfig, entries: list[RosterEntry]
    ) -> "EpisodeDirectory":
        """Build a directory from already-loaded entries."""
        directory = cls(config)
        directory._entries = list(entries)
        return directory

    @property
    def entries(self) -> list[RosterEntry]:
        """Loaded entries in roster order (empty before load)."""
        return list(self._entries or [])

    def is_available(self) -> bool:
        """Check if the roster has been loaded."""
        return self._entries is not None

    def load(self, source: RosterSource) -> list[RosterEntry]:
        """Load roster entries from a roster source.

        The configured number of header rows is skipped. Rows too short to
        hold both columns, or with a blank guest name, are skipped with a
        warning: a blank name would match every needle.

        Args:
            source: Roster source to read from

        Returns:
            Entries in roster order

        Raises:
            RosterError: If the source cannot be read
        """
        rows = source.read_all_rows(self.config.roster_id, self.config.roster_sheet_name)

        episode_idx = self.config.episode_number_column - 1
        guest_idx = self.config.guest_name_column - 1
        needed = max(episode_idx, guest_idx) + 1

        entries: list[RosterEntry] = []
        for row_number, row in enumerate(rows, 1):
            if row_number <= self.config.roster_header_rows:
                continue
            if len(row) < needed:
                if any(str(cell).strip() for cell in row):
                    logger.warning(f"Roster row {row_number} is too short, skipping: {row}")
                continue

            guest_name = str(row[guest_idx]).strip()
            episode_number = str(row[episode_idx]).strip()
            if not guest_name:
                logger.warning(f"Roster row {row_number} has no guest name, skipping")
                continue

            entries.append(RosterEntry(episode_number=episode_number, guest_name=guest_name))

        duplicates = [
            number
            for number, count in Counter(e.episode_number for e in entries).items()
            if count > 1
        ]
        if duplicates:
            listed = ", ".join(str(number) for number in duplicates)
            logger.warning(f"Duplicate episode numbers in roster: {listed}")

        self._entries = entries
        logger.info(f"Loaded {len(entries)} roster entries")
        return self.entries

    def find_all_matches(self, needle: str) -> list[RosterEntry]:
        """Find every entry matching a name, in roster order.

        Args:
            needle: Candidate guest name

        Returns:
            Matching entries (empty if none, or if the needle is blank)
        """
        normalized = normalize_name(needle)
        if not normalized:
            return []
        return [entry for entry in self._entries or [] if self._matches(entry, normalized)]

    def find_by_normalized_name(self, needle: str) -> RosterEntry | None:
        """Find the first entry matching a name.

        Args:
            needle: Candidate guest name

        Returns:
            First matching entry in roster order, or None
        """
        normalized = normalize_name(needle)
        if not normalized:
            return None

        for entry in self._entries or []:
            if self._matches(entry, normalized):
                return entry
        return None

    @staticmethod
    def _matches(entry: RosterEntry, normalized: str) -> bool:
        """Containment either way between a guest name and a normalized needle."""
        guest = normalize_name(entry.guest_name)
        return guest in normalized or normalized in guest

    def lookup(self, needle: str) -> MatchResult:
        """Resolve a name to a match result, warning on ambiguity.

        Args:
            needle: Candidate guest name

        Returns:
            MatchResult for the first matching entry, or a miss
        """
        matches = self.find_all_matches(needle)
        if not matches:
            return MatchResult.miss()

        if len(matches) > 1:
            others = ", ".join(str(entry) for entry in matches[1:])
            logger.warning(
                f"'{needle}' matches {len(matches)} roster entries; using {matches[0]} "
                f"(also matched: {others})"
            )
        return MatchResult.from_entry(matches[0])
