"""Write the standard set of benchmark datasets to disk."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence
from os import PathLike
from pathlib import Path

from sortbench.datasets import (
    ascending,
    descending,
    partially_shuffled,
    random_values,
    save_binary,
)

DEFAULT_SIZE = 2621440


def generate_datasets(
    directory: str | PathLike[str] = ".", n: int = DEFAULT_SIZE
) -> list[Path]:
    """Write ascending, descending, random and partial datasets of size ``n``; return their paths."""
    target = Path(directory)
    target.mkdir(parents=True, exist_ok=True)
    rng = random.Random()
    datasets = {
        "dataset_ascendente.bin": ascending(n),
        "dataset_descendente.bin": descending(n),
        "dataset_aleatorio.bin": random_values(n, rng),
        "dataset_parcial.bin": partially_shuffled(n, rng),
    }
    paths = []
    for filename, values in datasets.items():
        path = target / filename
        save_binary(path, values)
        paths.append(path)
    return paths


def main(argv: Sequence[str] | None = None) -> int:
    """Generate the datasets in a directory (the current one by default)."""
    parser = argparse.ArgumentParser(description="Generate binary sorting datasets.")
    parser.add_argument("directory", nargs="?", default=".")
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE)
    args = parser.parse_args(argv)
    if args.size < 0:
        parser.error("size must not be negative")
    generate_datasets(args.directory, args.size)
    print("Binary datasets generated successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())