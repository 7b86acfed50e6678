from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .config import DAY_NAMES, PlannerConfig
from .data_generation import allocations_to_df, generate_people, save_people
from .exceptions import VaccineError
from .simulation import VaccinationSystem
from .visualize import plot_allocation

console = Console()
app = typer.Typer(add_completion=False, no_args_is_help=True)

DEFAULT_HUBS = ["Central:6:5:4", "North:3:3:2"]


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _parse_ints(raw: str, what: str) -> List[int]:
    try:
        return [int(v) for v in raw.split(",") if v.strip()]
    except ValueError:
        raise typer.BadParameter(f"{what} must be comma-separated integers, got {raw!r}")


def _parse_hub(raw: str) -> Tuple[str, int, int, int]:
    parts = raw.split(":")
    if len(parts) != 4:
        raise typer.BadParameter(f"hub must look like NAME:DOCTORS:NURSES:OTHER, got {raw!r}")
    name, *counts = parts
    try:
        doctors, nurses, other = (int(c) for c in counts)
    except ValueError:
        raise typer.BadParameter(f"staff counts must be integers, got {raw!r}")
    return name, doctors, nurses, other


@app.command("plan")
def plan(
    people: Optional[Path] = typer.Option(
        None, exists=True, dir_okay=False, help="CSV with header SSN,LAST,FIRST,YEAR; synthetic if omitted."
    ),
    hub: List[str] = typer.Option(DEFAULT_HUBS, "--hub", help="Hub as NAME:DOCTORS:NURSES:OTHER (repeatable)."),
    hours: str = typer.Option("8,8,8,8,8,4,0", help="Opening hours Monday..Sunday."),
    breaks: str = typer.Option("40,50,60,70,80", help="Age interval breaks."),
    population: int = typer.Option(5_000, help="Synthetic population size."),
    seed: int = typer.Option(42, help="Random seed for the synthetic population."),
    csv_out: Optional[Path] = typer.Option(None, help="Path to save the weekly plan table."),
    png_out: Optional[Path] = typer.Option(None, help="Path to save the overview chart."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every allocation call."),
) -> None:
    """Allocate the population to hub slots for one week."""
    _setup_logging(verbose)
    cfg = PlannerConfig(
        age_breaks=_parse_ints(breaks, "breaks"),
        weekly_hours=_parse_ints(hours, "hours"),
        people=population,
        seed=seed,
    )
    system = VaccinationSystem(current_year=cfg.current_year)
    system.set_load_listener(lambda n, line: console.log(f"[yellow]skipped line {n}:[/] {escape(line)}"))

    try:
        if people:
            added = system.load_people(people)
            console.log(f"Loaded {added} people from {people}")
        else:
            for p in generate_people(cfg):
                system.add_person(p.first_name, p.last_name, p.ssn, p.birth_year)
            console.log(f"Generated {system.count_people()} people (seed={cfg.seed})")

        system.set_age_intervals(*cfg.age_breaks)
        system.set_hours(*cfg.weekly_hours)
        for raw in hub:
            name, doctors, nurses, other = _parse_hub(raw)
            system.define_hub(name)
            system.set_staff(name, doctors, nurses, other)
    except VaccineError as exc:
        console.print(f"[bold red]ERROR:[/] {escape(str(exc))}")
        raise typer.Exit(code=1)

    console.log("Allocating week...", style="bold")
    week = system.week_allocate()

    _print_week(week, system)
    _print_stats(system)

    df = allocations_to_df(week, system.people, system.partition)
    if csv_out:
        df.to_csv(csv_out, index=False)
        console.log(f"Saved plan to {csv_out}")
    if png_out:
        distribution = system.distribution_allocated() if len(system.ledger) else {}
        plot_allocation(df, distribution, outfile=png_out)
        console.log(f"Saved chart to {png_out}")


@app.command("generate")
def generate(
    out: Path = typer.Argument(..., help="Destination CSV."),
    population: int = typer.Option(5_000, help="Number of people."),
    seed: int = typer.Option(42, help="Random seed."),
) -> None:
    """Write a synthetic population in the bulk-load format."""
    cfg = PlannerConfig(people=population, seed=seed)
    save_people(generate_people(cfg), out)
    console.log(f"Saved {population} people to {out}")


def _print_week(week: list, system: VaccinationSystem) -> None:
    table = Table(title="Weekly allocation", show_header=True, header_style="bold magenta")
    table.add_column("Hub")
    for day in DAY_NAMES:
        table.add_column(day, justify="right")
    for name in system.get_hubs():
        cells = []
        for day_plan in week:
            ssns = day_plan.get(name)
            cells.append("-" if ssns is None else str(len(ssns)))
        table.add_row(name, *cells)
    console.print(table)


def _print_stats(system: VaccinationSystem) -> None:
    if system.count_people() == 0:
        console.print("[yellow]No people registered.[/]")
        return
    counts = system.stats.allocated_counts()
    by_age = system.prop_allocated_age()
    dist = system.distribution_allocated() if len(system.ledger) else {label: 0.0 for label in counts}

    table = Table(title="Allocation by age interval", show_header=True, header_style="bold magenta")
    table.add_column("Interval")
    table.add_column("Allocated", justify="right")
    table.add_column("Share of population", justify="right")
    table.add_column("Share of allocated", justify="right")
    for label, n in counts.items():
        table.add_row(label, str(n), f"{by_age[label]:0.3f}", f"{dist[label]:0.3f}")
    console.print(table)
    console.print(f"Overall allocated: [bold]{system.prop_allocated():0.3f}[/]")
