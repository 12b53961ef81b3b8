"""Value records for Team Roster."""

from dataclasses import dataclass, field
from typing import Iterator, Tuple


@dataclass(frozen=True)
class Attendee:
    """A person taking part in the run."""

    name: str
    leader_eligible: bool = False


@dataclass(frozen=True)
class Configuration:
    """Schema-valid settings for one assignment run."""

    num_teams: int
    attendees: Tuple[Attendee, ...] = ()
    flat: bool = False

    def is_leader_eligible(self, attendee: Attendee) -> bool:
        """Return True if the attendee may lead, taking flat mode into account."""
        return self.flat or attendee.leader_eligible

    def leader_candidates(self) -> Tuple[Attendee, ...]:
        """Return the leader candidates in source order.

        In flat mode every attendee is a candidate.
        """
        return tuple(a for a in self.attendees if self.is_leader_eligible(a))


@dataclass(frozen=True)
class Team:
    """One team: a single leader plus its members."""

    leader: Attendee
    members: Tuple[Attendee, ...] = ()

    @property
    def size(self) -> int:
        return 1 + len(self.members)

    def people(self) -> Iterator[Attendee]:
        yield self.leader
        yield from self.members


@dataclass(frozen=True)
class Roster:
    """Teams produced by one run, ordered by team slot."""

    teams: Tuple[Team, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.teams)

    def __iter__(self) -> Iterator[Team]:
        return iter(self.teams)

    def __getitem__(self, index: int) -> Team:
        return self.teams[index]

    def attendees(self) -> Iterator[Attendee]:
        for team in self.teams:
            yield from team.people()
