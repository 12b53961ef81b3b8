"""Serialization of rosters."""

from pathlib import Path
from typing import Any, Dict, Optional, TextIO

import pandas as pd
import tomli_w
import yaml

from .models import Roster

CSV_COLUMNS = ['team', 'role', 'name']


def roster_to_dict(roster: Roster) -> Dict[str, Any]:
    """Convert a roster to nested plain data, keeping team and member order."""
    return {
        'team': [
            {
                'leader': {'name': team.leader.name},
                'member': [{'name': m.name} for m in team.members],
            }
            for team in roster
        ]
    }


def dump_roster_yaml(roster: Roster, stream: Optional[TextIO] = None) -> Optional[str]:
    """Render a roster as YAML.

    Args:
        roster: Roster to render
        stream: Where to write; when omitted the YAML text is returned

    Returns:
        The YAML text if no stream was given, otherwise None
    """
    return yaml.safe_dump(
        roster_to_dict(roster),
        stream,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )


def save_roster_yaml(roster: Roster, output_path: Path) -> None:
    """Save a roster to a YAML file."""
    with open(output_path, 'w', encoding='utf-8') as f:
        dump_roster_yaml(roster, f)


def dump_roster_toml(roster: Roster) -> str:
    """Render a roster as TOML with the same team/leader/member nesting as the YAML output."""
    return tomli_w.dumps(roster_to_dict(roster))


def save_roster_toml(roster: Roster, output_path: Path) -> None:
    """Save a roster to a TOML file."""
    with open(output_path, 'wb') as f:
        tomli_w.dump(roster_to_dict(roster), f)


def roster_to_dataframe(roster: Roster) -> pd.DataFrame:
    """Flatten a roster into one row per attendee.

    Teams are numbered from 1 in slot order; the leader row comes first.
    """
    rows = []
    for team_number, team in enumerate(roster, start=1):
        rows.append((team_number, 'leader', team.leader.name))
        for member in team.members:
            rows.append((team_number, 'member', member.name))
    return pd.DataFrame(rows, columns=CSV_COLUMNS)


def save_roster_csv(roster: Roster, output_path: Path) -> None:
    """Save a roster to CSV format with ``team,role,name`` columns."""
    roster_to_dataframe(roster).to_csv(output_path, index=False)
