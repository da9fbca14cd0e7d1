import csv
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import pytest

JAKARTA = "-6.2088,106.8456"
SURABAYA = "-7.2575,112.7521"
MEDAN = "3.5952,98.6722"
HEADER = [f"col{i}" for i in range(13)]


def make_row(origin: str, destination: str, width: int = 13) -> list[str]:
    row = [f"v{i}" for i in range(width)]
    row[9] = origin
    row[12] = destination
    return row


@pytest.fixture
def write_csv(tmp_path: Path):
    """Write rows (header prepended) to a CSV under tmp_path and return its path."""

    def _write(rows, name: str = "trips.csv", header=HEADER) -> Path:
        path = tmp_path / name
        with path.open("w", encoding="utf-8", newline="") as f:
            w = csv.writer(f)
            if header is not None:
                w.writerow(header)
            w.writerows(rows)
        return path

    return _write
