"""Exceptions raised by Team Roster."""

from enum import Enum
from pathlib import Path
from typing import Union


class TeamRosterError(Exception):
    """Base class for every error reported to the user."""


class ConfigLoadError(TeamRosterError):
    """The configuration file is missing, unreadable or not valid YAML/TOML."""

    def __init__(self, path: Union[str, Path], cause: Union[str, Exception]):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Failed to load configuration {self.path}: {cause}")


class SchemaValidationError(TeamRosterError, ValueError):
    """A configuration field is missing or has the wrong type."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"Invalid configuration field '{field}': {message}")


class InvalidConfigurationKind(Enum):
    INSUFFICIENT_LEADERS = "insufficient_leaders"
    INVALID_TEAM_COUNT = "invalid_team_count"


class InvalidConfiguration(TeamRosterError, ValueError):
    """A schema-valid configuration that cannot produce a roster.

    Attributes:
        kind: Which constraint failed
        observed: The value found in the configuration
        required: The bound it had to satisfy
    """

    def __init__(self, kind: InvalidConfigurationKind, observed: int, required: int, message: str):
        self.kind = kind
        self.observed = observed
        self.required = required
        super().__init__(message)

    @classmethod
    def insufficient_leaders(cls, num_candidates: int, num_teams: int) -> "InvalidConfiguration":
        return cls(
            InvalidConfigurationKind.INSUFFICIENT_LEADERS,
            num_candidates,
            num_teams,
            f"Not enough leader candidates: {num_candidates} eligible, "
            f"at least {num_teams} needed for {num_teams} teams",
        )

    @classmethod
    def team_count_too_small(cls, num_teams: int) -> "InvalidConfiguration":
        return cls(
            InvalidConfigurationKind.INVALID_TEAM_COUNT,
            num_teams,
            1,
            f"Number of teams must be at least 1, got {num_teams}",
        )

    @classmethod
    def team_count_too_large(cls, num_teams: int, num_attendees: int) -> "InvalidConfiguration":
        return cls(
            InvalidConfigurationKind.INVALID_TEAM_COUNT,
            num_teams,
            num_attendees,
            f"Cannot create {num_teams} teams from {num_attendees} attendees",
        )
