"""Team Roster - A tool to split attendees into teams, each with one leader."""

__version__ = "0.1.0"

from .assigner import TeamAssigner, assign
from .config import load_config
from .errors import ConfigLoadError, InvalidConfiguration, InvalidConfigurationKind, SchemaValidationError
from .models import Attendee, Configuration, Roster, Team
from .randomness import OrderedRandomSource, RandomSource, SystemRandomSource

__all__ = [
    "TeamAssigner",
    "assign",
    "load_config",
    "ConfigLoadError",
    "InvalidConfiguration",
    "InvalidConfigurationKind",
    "SchemaValidationError",
    "Attendee",
    "Configuration",
    "Roster",
    "Team",
    "OrderedRandomSource",
    "RandomSource",
    "SystemRandomSource",
]
