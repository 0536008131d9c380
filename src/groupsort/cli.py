"""CLI entry point for groupsort."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .config import ConfigLoader, EngineConfig
from .engine import create_assigner
from .exceptions import GroupsortError
from .exporters import export_assignment_json
from .loader import RosterData, load_roster
from .models import Assignment
from .validators import validate_group_shells

app = typer.Typer(
    name="groupsort",
    help="Assign students to groups, keeping mutual friends together",
    add_completion=False,
)
console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load_inputs(
    roster_file: Path, config_file: Path | None
) -> tuple[RosterData, EngineConfig]:
    """Load roster and config, exiting with an error message on failure."""
    try:
        config = ConfigLoader(config_file).load()
        roster = load_roster(roster_file)
    except (GroupsortError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    errors = validate_group_shells(roster.groups)
    if errors:
        console.print(f"[bold red]Error:[/bold red] Invalid groups in {roster_file.name}")
        for error in errors:
            console.print(f"  [red]• {error}[/red]")
        raise typer.Exit(1)

    return roster, config


def _show_assignment(assignment: Assignment, verbose: bool) -> None:
    """Print summary, group table and unassigned students."""
    statistics = assignment.statistics

    summary = Table(title="Summary", show_header=False)
    summary.add_column("Metric", style="cyan")
    summary.add_column("Value", style="green")
    summary.add_row("Students", str(statistics.total_students))
    summary.add_row("Assigned", str(statistics.total_assigned))
    summary.add_row("Unassigned", str(statistics.total_unassigned))
    summary.add_row("Mutual pairs", str(statistics.mutual_pairs))
    summary.add_row("Total happiness", str(statistics.total_happiness))
    summary.add_row("Happy students", str(statistics.happy_students))
    if statistics.iterations:
        summary.add_row(
            "Accepted swaps", f"{statistics.accepted_swaps} / {statistics.iterations}"
        )
    console.print(summary)

    groups_table = Table(title="Groups")
    groups_table.add_column("Group", style="cyan")
    groups_table.add_column("Size", style="green")
    groups_table.add_column("Capacity", style="yellow")
    if verbose:
        groups_table.add_column("Members", style="white")

    for group in assignment.groups:
        row = [
            group.name,
            str(assignment.size(group.id)),
            "∞" if group.capacity is None else str(group.capacity),
        ]
        if verbose:
            row.append(", ".join(assignment.members(group.id)))
        groups_table.add_row(*row)
    console.print(groups_table)

    if assignment.unassigned_details:
        console.print(
            f"\n[bold yellow]Unassigned students ({assignment.total_unassigned}):[/bold yellow]"
        )
        for entry in assignment.unassigned_details[:10]:
            console.print(f"  [yellow]- {entry.student_id} ({entry.reason.value})[/yellow]")
        if assignment.total_unassigned > 10:
            console.print(
                f"  [yellow]... and {assignment.total_unassigned - 10} more[/yellow]"
            )


def _export(assignment: Assignment, output: Path | None) -> None:
    if not output:
        return
    output_path = output if output.suffix == ".json" else output.with_suffix(".json")
    with console.status(f"[bold green]Exporting to {output_path}..."):
        export_assignment_json(assignment, output_path)
    console.print(f"\n[bold green]✓[/bold green] Assignment exported to: {output_path}")


@app.command()
def assign(
    roster_file: Annotated[
        Path,
        typer.Argument(help="Roster JSON file (students, groups, preferences)"),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option("-o", "--output", help="Output JSON file path"),
    ] = None,
    budget: Annotated[
        Optional[int],
        typer.Option("--budget", "-b", help="Local search iterations", min=0),
    ] = None,
    seed: Annotated[
        Optional[int],
        typer.Option("--seed", "-s", help="Random seed for reproducible runs"),
    ] = None,
    config_file: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Path to groupsort.json config"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Show detailed output"),
    ] = False,
) -> None:
    """Balanced assignment: keep mutual friends together."""
    _configure_logging(verbose)
    roster, config = _load_inputs(roster_file, config_file)
    config = config.with_overrides(swap_budget=budget, seed=seed)

    groups = roster.resolve_groups(config)
    console.print(f"\n[bold]Balanced assignment for:[/bold] {roster_file.name}")
    console.print(f"  Students: {len(roster.students)}  Groups: {len(groups)}")

    with console.status("[bold green]Assigning students..."):
        assignment = create_assigner(config).balanced_assign(
            groups, roster.students, roster.preferences
        )

    _show_assignment(assignment, verbose)
    _export(assignment, output)


@app.command()
def shuffle(
    roster_file: Annotated[
        Path,
        typer.Argument(help="Roster JSON file (students, groups)"),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option("-o", "--output", help="Output JSON file path"),
    ] = None,
    seed: Annotated[
        Optional[int],
        typer.Option("--seed", "-s", help="Random seed for reproducible runs"),
    ] = None,
    attempt_factor: Annotated[
        Optional[int],
        typer.Option(
            "--attempt-factor", help="Round-robin attempts per student, per group", min=1
        ),
    ] = None,
    config_file: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Path to groupsort.json config"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Show detailed output"),
    ] = False,
) -> None:
    """Random assignment that ignores preferences."""
    _configure_logging(verbose)
    roster, config = _load_inputs(roster_file, config_file)
    config = config.with_overrides(seed=seed, attempt_factor=attempt_factor)

    groups = roster.resolve_groups(config)
    console.print(f"\n[bold]Random assignment for:[/bold] {roster_file.name}")
    console.print(f"  Students: {len(roster.students)}  Groups: {len(groups)}")

    assignment = create_assigner(config).random_assign(
        groups, roster.students, roster.preferences
    )

    _show_assignment(assignment, verbose)
    _export(assignment, output)


@app.command()
def validate(
    roster_file: Annotated[
        Path,
        typer.Argument(help="Roster JSON file"),
    ],
) -> None:
    """Check a roster file without assigning anyone."""
    try:
        roster = load_roster(roster_file)
    except GroupsortError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    console.print(f"\n[bold]Validation Results for:[/bold] {roster_file.name}")
    console.print(f"  Students: {len(roster.students)}")
    console.print(f"  Groups: {len(roster.groups)}")

    known = set(roster.students)
    unknown_owners = sorted(owner for owner in roster.preferences if owner not in known)
    if unknown_owners:
        console.print(
            f"\n[bold yellow]Preferences given for unknown students "
            f"({len(unknown_owners)}):[/bold yellow]"
        )
        console.print(f"    {', '.join(unknown_owners)}")

    unknown = sorted(
        {liked for likes in roster.preferences.values() for liked in likes if liked not in known}
    )
    if unknown:
        console.print(
            f"\n[bold yellow]Preferences naming unknown students ({len(unknown)}):[/bold yellow]"
        )
        console.print(f"    {', '.join(unknown)}")

    errors = validate_group_shells(roster.groups)
    if errors:
        console.print("[bold red]✗ File has issues[/bold red]")
        for error in errors:
            console.print(f"  [red]• {error}[/red]")
        raise typer.Exit(1)

    console.print("[bold green]✓ File is valid[/bold green]")


if __name__ == "__main__":
    app()
