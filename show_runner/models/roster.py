"""Data models for the episode roster."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RosterEntry:
    """One known episode: its number and the guest's display name."""

    episode_number: str | int  # Kept as read, so "002" stays zero-padded
    guest_name: str

    def __str__(self) -> str:
        return f"Ep{self.episode_number} ({self.guest_name})"


@dataclass(frozen=True)
class MatchResult:
    """Result of resolving a candidate name against the roster."""

    matched: bool
    episode_number: str | int | None = None
    full_guest_name: str | None = None

    @classmethod
    def miss(cls) -> "MatchResult":
        return cls(matched=False)

    @classmethod
    def from_entry(cls, entry: RosterEntry) -> "MatchResult":
        return cls(
            matched=True,
            episode_number=entry.episode_number,
            full_guest_name=entry.guest_name,
        )
