"""Validation utilities for Team Roster configuration files."""

from typing import Any, Iterable, Mapping

from .errors import SchemaValidationError
from .models import Attendee, Configuration

MAX_NAME_LENGTH = 100


def _is_int(value: Any) -> bool:
    # bool is a subclass of int but never a valid count
    return isinstance(value, int) and not isinstance(value, bool)


def validate_attendee(entry: Any, index: int) -> Attendee:
    """Validate one entry of the ``attendees`` list.

    Expected shape::

        person:
          name: Alice
        leader: true   # optional

    Args:
        entry: Raw entry parsed from the configuration file
        index: Position of the entry, used in error messages

    Returns:
        The corresponding Attendee

    Raises:
        SchemaValidationError: If the entry is malformed
    """
    prefix = f"attendees[{index}]"
    if not isinstance(entry, Mapping):
        raise SchemaValidationError(prefix, "must be a table with a 'person' entry")

    if 'person' not in entry:
        raise SchemaValidationError(f"{prefix}.person", "is required")
    person = entry['person']
    if not isinstance(person, Mapping):
        raise SchemaValidationError(f"{prefix}.person", "must be a table with a 'name' entry")

    if 'name' not in person:
        raise SchemaValidationError(f"{prefix}.person.name", "is required")
    name = person['name']
    if not isinstance(name, str):
        raise SchemaValidationError(
            f"{prefix}.person.name", f"must be a string, got {type(name).__name__}"
        )

    leader = entry.get('leader', False)
    if leader is None:
        leader = False
    if not isinstance(leader, bool):
        raise SchemaValidationError(
            f"{prefix}.leader", f"must be true or false, got {leader!r}"
        )

    return Attendee(name=name.strip(), leader_eligible=leader)


def validate_attendee_names(names: Iterable[str]) -> None:
    """Validate attendee names.

    Args:
        names: Names in configuration order

    Raises:
        SchemaValidationError: If a name is empty, too long or repeated
    """
    seen = set()
    for index, name in enumerate(names):
        field = f"attendees[{index}].person.name"
        if not name or not name.strip():
            raise SchemaValidationError(field, "cannot be empty or whitespace-only")
        if len(name) > MAX_NAME_LENGTH:
            raise SchemaValidationError(
                field, f"too long (max {MAX_NAME_LENGTH} chars): '{name[:50]}...'"
            )
        if name in seen:
            raise SchemaValidationError(field, f"duplicate attendee name '{name}'")
        seen.add(name)


def validate_config_data(data: Any) -> Configuration:
    """Validate a parsed configuration document and build a Configuration.

    Only types and required fields are checked here. Whether the team count
    can actually be satisfied is decided by the assigner.

    Args:
        data: Document parsed from YAML or TOML

    Returns:
        The validated Configuration

    Raises:
        SchemaValidationError: If a field is missing or has the wrong type
    """
    if not isinstance(data, Mapping):
        raise SchemaValidationError("<root>", "configuration must be a table/dictionary")

    if 'num_of_teams' in data:
        team_key = 'num_of_teams'
    elif 'num_teams' in data:
        team_key = 'num_teams'
    else:
        raise SchemaValidationError('num_of_teams', "is required")
    num_teams = data[team_key]
    if not _is_int(num_teams):
        raise SchemaValidationError(team_key, f"must be an integer, got {num_teams!r}")
    if num_teams < 0:
        raise SchemaValidationError(team_key, f"must not be negative, got {num_teams}")

    flat = data.get('flat', False)
    if flat is None:
        flat = False
    if not isinstance(flat, bool):
        raise SchemaValidationError('flat', f"must be true or false, got {flat!r}")

    if 'attendees' not in data:
        raise SchemaValidationError('attendees', "is required")
    raw_attendees = data['attendees']
    if not isinstance(raw_attendees, list):
        raise SchemaValidationError('attendees', "must be a list")
    if not raw_attendees:
        raise SchemaValidationError('attendees', "must contain at least 1 attendee")

    attendees = tuple(
        validate_attendee(entry, index) for index, entry in enumerate(raw_attendees)
    )
    validate_attendee_names(a.name for a in attendees)

    return Configuration(num_teams=num_teams, attendees=attendees, flat=flat)
