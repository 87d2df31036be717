"""CSV export of per-process metrics."""

import csv
from typing import Sequence, TextIO

from .models import ProcessStats

CSV_COLUMNS = (
    "pid",
    "arrival_time",
    "burst_time",
    "priority",
    "completion_time",
    "turnaround_time",
    "waiting_time",
)


def write_stats_csv(stats: Sequence[ProcessStats], stream: TextIO) -> None:
    """Write one CSV row per process, in pid order, with a header row."""
    writer = csv.writer(stream)
    writer.writerow(CSV_COLUMNS)
    for row in sorted(stats, key=lambda r: r.pid):
        writer.writerow([getattr(row, column) for column in CSV_COLUMNS])
