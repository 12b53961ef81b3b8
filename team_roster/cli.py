"""Command line entry point for Team Roster."""

import sys
from pathlib import Path
from typing import Optional

import click

from team_roster.assigner import TeamAssigner
from team_roster.config import load_config
from team_roster.errors import TeamRosterError
from team_roster.models import Roster
from team_roster.output import (
  dump_roster_toml,
  dump_roster_yaml,
  roster_to_dataframe,
  save_roster_csv,
  save_roster_toml,
  save_roster_yaml,
)

SAVERS = {
  "yaml": save_roster_yaml,
  "toml": save_roster_toml,
  "csv": save_roster_csv,
}


def render_roster(roster: Roster, output_format: str) -> str:
  """Render the roster in the requested format for standard output."""
  if output_format == "csv":
    return roster_to_dataframe(roster).to_csv(index=False)
  if output_format == "toml":
    return dump_roster_toml(roster)
  return dump_roster_yaml(roster)

def report_summary(assigner: TeamAssigner, roster: Roster) -> None:
  summary = assigner.get_roster_summary(roster)
  click.secho(f"Attendees: {summary['total_attendees']}", fg="blue", err=True)
  click.secho(f"Teams: {summary['num_teams']}", fg="blue", err=True)
  for slot, (leader, size) in enumerate(zip(summary["leaders"], summary["team_sizes"]), start=1):
    click.secho(f"  Team {slot}: led by {leader}, {size} people", fg="blue", err=True)
  click.secho(f"Average team size: {summary['average_team_size']}", fg="blue", err=True)

@click.command()
@click.argument("config_file", type=click.Path(path_type=Path))
@click.option("-o", "--output", "output_file", type=click.Path(dir_okay=False, path_type=Path),
              default=None, help="Write the roster to this file instead of standard output")
@click.option("--format", "output_format", type=click.Choice(sorted(SAVERS)), default="yaml",
              show_default=True, help="Output format")
@click.option("-v", "--verbose", is_flag=True, help="Print a summary of the roster to standard error")
def cli(config_file: Path, output_file: Optional[Path], output_format: str, verbose: bool):
  """Split the attendees listed in CONFIG_FILE into teams with one leader each."""
  assigner = TeamAssigner()
  try:
    config = load_config(config_file)
    if verbose:
      click.secho(f"Loaded {len(config.attendees)} attendees from {config_file}", fg="blue", err=True)
    roster = assigner.assign(config)
  except TeamRosterError as e:
    click.secho(f"Error: {e}", fg="red", err=True)
    sys.exit(1)

  if verbose:
    report_summary(assigner, roster)

  if output_file is None:
    click.echo(render_roster(roster, output_format), nl=False)
    return

  try:
    SAVERS[output_format](roster, output_file)
  except OSError as e:
    click.secho(f"Error: Failed to write roster to {output_file}: {e}", fg="red", err=True)
    sys.exit(1)
  click.secho(f"Wrote {len(roster)} teams to {output_file}", fg="green", err=True)

if __name__ == "__main__":
  cli()
