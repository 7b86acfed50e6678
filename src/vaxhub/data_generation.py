"""
People input and plan output.

Bulk loading reads the ``SSN,LAST,FIRST,YEAR`` text format; synthetic
populations can be generated and written in that same format so the CLI can run
without an external file. Weekly plans are flattened to pandas for export.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from random import Random
from typing import Callable, IO, Iterable, List, Optional, Union

import numpy as np
import pandas as pd

from .config import CSV_HEADER, DAY_NAMES, PlannerConfig
from .exceptions import InvalidConfiguration
from .models import Person
from .population import AgePartition, PersonRegistry

logger = logging.getLogger(__name__)

LoadListener = Callable[[int, str], None]

# optional sign and ASCII digits only, nothing else around them
YEAR_PATTERN = re.compile(r"[+-]?[0-9]+")

FIRST_NAMES: List[str] = ["Anna", "Marco", "Giulia", "Luca", "Sara", "Paolo", "Elena", "Matteo", "Chiara", "Davide"]
LAST_NAMES: List[str] = ["Rossi", "Bianchi", "Russo", "Ferrari", "Esposito", "Romano", "Colombo", "Ricci"]


def load_people(
    source: Union[IO[str], Path], registry: PersonRegistry, listener: Optional[LoadListener] = None
) -> int:
    """
    Register every well-formed row of ``source`` and return how many were added.

    Line numbers reported to ``listener`` start at 1 with the header. A header
    other than ``SSN,LAST,FIRST,YEAR`` aborts the load before anyone is
    registered; bad or duplicate rows are reported and skipped. Bytes that are
    not valid UTF-8 are read as U+FFFD rather than failing the file.
    """
    if isinstance(source, Path):
        with source.open(encoding="utf-8", errors="replace", newline="") as fh:
            return _load_lines(fh, registry, listener)
    return _load_lines(source, registry, listener)


def _load_lines(lines: Iterable[str], registry: PersonRegistry, listener: Optional[LoadListener]) -> int:
    added = 0
    for number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if number == 1:
            if line != CSV_HEADER:
                _report(listener, number, line)
                raise InvalidConfiguration(f"Bad header line: {line!r}")
            continue

        fields = line.split(",")
        if len(fields) != 4:
            _report(listener, number, line)
            continue
        ssn, last_name, first_name, year = fields
        if not YEAR_PATTERN.fullmatch(year):
            _report(listener, number, line)
            continue
        birth_year = int(year)

        if registry.add(first_name, last_name, ssn, birth_year):
            added += 1
        else:
            _report(listener, number, line)
    return added


def _report(listener: Optional[LoadListener], number: int, line: str) -> None:
    logger.debug("Skipping line %d: %r", number, line)
    if listener is not None:
        listener(number, line)


def generate_people(cfg: PlannerConfig) -> List[Person]:
    rng = Random(cfg.seed)
    people: List[Person] = []
    for i in range(cfg.people):
        age = int(np.clip(rng.normalvariate(cfg.mean_age, cfg.age_spread), 0, 105))
        people.append(
            Person(
                ssn=f"SSN{i + 1:07d}",
                first_name=rng.choice(FIRST_NAMES),
                last_name=rng.choice(LAST_NAMES),
                birth_year=cfg.current_year - age,
            )
        )
    return people


# ---------------- Persistence helpers ----------------


def people_to_df(people: Iterable[Person]) -> pd.DataFrame:
    records = [
        {"SSN": p.ssn, "LAST": p.last_name, "FIRST": p.first_name, "YEAR": p.birth_year} for p in people
    ]
    return pd.DataFrame.from_records(records, columns=CSV_HEADER.split(","))


def save_people(people: Iterable[Person], out_path: Path) -> None:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    people_to_df(people).to_csv(out_path, index=False, lineterminator="\n")


def allocations_to_df(week: List[dict], registry: PersonRegistry, partition: AgePartition) -> pd.DataFrame:
    records = []
    for day, plan in enumerate(week):
        for hub, ssns in plan.items():
            for ssn in ssns or []:
                age = registry.age_of(ssn)
                interval = partition.interval_of(age) if age is not None else None
                records.append(
                    {
                        "day": day,
                        "day_name": DAY_NAMES[day],
                        "hub": hub,
                        "ssn": ssn,
                        "age": age,
                        "interval": interval.label if interval else None,
                    }
                )
    return pd.DataFrame.from_records(records, columns=["day", "day_name", "hub", "ssn", "age", "interval"])
