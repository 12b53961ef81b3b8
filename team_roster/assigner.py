"""Core team assignment logic for Team Roster."""

from typing import Any, Dict, List, Optional

from .errors import InvalidConfiguration
from .models import Attendee, Configuration, Roster, Team
from .randomness import RandomSource, SystemRandomSource


def validate_configuration(config: Configuration) -> None:
    """Check that a roster can be built from the configuration.

    A zero team count is reported first, then a lack of leader candidates.
    Asking for more teams than attendees always means too few candidates as
    well, so it is reported as such.

    Args:
        config: Schema-valid configuration

    Raises:
        InvalidConfiguration: If the team count is out of bounds or there are
            fewer leader candidates than teams
    """
    if config.num_teams < 1:
        raise InvalidConfiguration.team_count_too_small(config.num_teams)

    num_candidates = len(config.leader_candidates())
    if num_candidates < config.num_teams:
        raise InvalidConfiguration.insufficient_leaders(num_candidates, config.num_teams)

    # unreachable while candidates are drawn from the attendees
    num_attendees = len(config.attendees)
    if config.num_teams > num_attendees:
        raise InvalidConfiguration.team_count_too_large(config.num_teams, num_attendees)


class TeamAssigner:
    """Splits attendees into teams, each with one randomly chosen leader."""

    def __init__(self, rng: Optional[RandomSource] = None):
        """Initialize the team assigner.

        Args:
            rng: Random source to draw from; the system's entropy by default
        """
        self.rng = rng if rng is not None else SystemRandomSource()

    def assign(self, config: Configuration) -> Roster:
        """Build a roster for the configuration.

        Args:
            config: Schema-valid configuration

        Returns:
            Roster with ``config.num_teams`` teams

        Raises:
            InvalidConfiguration: If the configuration cannot produce a roster
        """
        validate_configuration(config)

        leader_indices = self._select_leaders(config)
        taken = set(leader_indices)
        rest = [a for i, a in enumerate(config.attendees) if i not in taken]
        member_groups = self._distribute_members(rest, config.num_teams)

        return Roster(tuple(
            Team(config.attendees[leader_idx], tuple(members))
            for leader_idx, members in zip(leader_indices, member_groups)
        ))

    def _select_leaders(self, config: Configuration) -> List[int]:
        """Pick leader positions; the sampled order is the team slot order."""
        candidates = [
            i for i, a in enumerate(config.attendees) if config.is_leader_eligible(a)
        ]
        return self.rng.sample(candidates, config.num_teams)

    def _distribute_members(self, rest: List[Attendee], num_teams: int) -> List[List[Attendee]]:
        """Split the non-leaders into num_teams groups whose sizes differ by at most one.

        The teams receiving the extra members are drawn at random rather than
        always being the first ones.
        """
        shuffled = self.rng.shuffle(rest)
        base, extra = divmod(len(shuffled), num_teams)
        bigger = set(self.rng.sample(range(num_teams), extra))

        groups = []
        start = 0
        for slot in range(num_teams):
            size = base + (1 if slot in bigger else 0)
            groups.append(shuffled[start:start + size])
            start += size
        return groups

    def get_roster_summary(self, roster: Roster) -> Dict[str, Any]:
        """Get a summary of the roster.

        Args:
            roster: Roster returned by ``assign``

        Returns:
            Dictionary with roster statistics
        """
        if not roster.teams:
            return {
                'total_attendees': 0,
                'num_teams': 0,
                'leaders': [],
                'team_sizes': [],
                'average_team_size': 0.0
            }

        team_sizes = [team.size for team in roster]
        return {
            'total_attendees': sum(team_sizes),
            'num_teams': len(roster),
            'leaders': [team.leader.name for team in roster],
            'team_sizes': team_sizes,
            'average_team_size': round(sum(team_sizes) / len(team_sizes), 2)
        }


def assign(config: Configuration, rng: Optional[RandomSource] = None) -> Roster:
    """Build a roster for the configuration using the given random source."""
    return TeamAssigner(rng).assign(config)
