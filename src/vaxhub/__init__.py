"""
Vaccination hub planner: age-priority allocation of people to weekly hub capacity.
"""

from .cli import app
from .simulation import VaccinationSystem

__all__ = ["VaccinationSystem", "app", "main"]


def main() -> None:
    # Delegate to Typer app so `uv run vaxhub ...` works.
    app()
