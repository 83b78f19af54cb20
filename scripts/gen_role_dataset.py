#!/usr/bin/env python3
"""Synthetic role CSV generator.

Generates RBAC role CSV files for load and smoke testing of the validator.
The first line is the header (the full column set) and every other line is one
role. A configurable share of rows carries exactly one deliberate defect, so
the expected error count is known in advance.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

import numpy as np
import pandas as pd

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from src.models.role_row import COLUMNS  # noqa: E402

# One defect per corrupted row; each trips exactly one rule
DEFECTS: list[tuple[str, str]] = [
    ("operation", "CreateRole"),
    ("disabled", "maybe"),
    ("requestable", "yes"),
    ("entitlements", "AD:memberOf"),
    ("accessProfiles", "AP-1;;AP-2"),
]


def generate_roles(rows: int, invalid_ratio: float = 0.0, seed: int = 42) -> tuple[pd.DataFrame, int]:
    """Generate a role DataFrame.

    Args:
        rows: Number of role rows
        invalid_ratio: Share of rows (0..1) to corrupt with a single defect
        seed: Random seed for reproducible data

    Returns:
        (DataFrame with every COLUMNS entry plus ``accessProfiles``, number of corrupted rows)
    """
    rng = np.random.default_rng(seed)
    sources = ["AD", "SAP", "Okta", "Workday"]
    data: dict[str, list[str]] = {c: [""] * rows for c in COLUMNS}
    data["accessProfiles"] = [""] * rows

    for j in range(rows):
        src = sources[j % len(sources)]
        data["operation"][j] = "createRole"
        data["name"][j] = f"Role_{j + 1:05d}"
        data["description"][j] = f"Synthetic role {j + 1}"
        data["owner"][j] = f"owner{int(rng.integers(1, 50))}"
        data["disabled"][j] = str(rng.choice(["true", "false", ""]))
        data["requestable"][j] = str(rng.choice(["TRUE", "False", ""]))
        data["commentsRequired"][j] = str(rng.choice(["true", ""]))
        data["entitlements"][j] = ";".join(
            f"{src}:memberOf:CN=Group{k},OU=Roles" for k in range(int(rng.integers(1, 4)))
        )
        data["accessProfiles"][j] = ";".join(f"AP-{k}" for k in range(int(rng.integers(1, 3))))

    df = pd.DataFrame(data)
    n_invalid = int(round(rows * invalid_ratio))
    if n_invalid:
        targets = rng.choice(rows, size=n_invalid, replace=False)
        for i, row_idx in enumerate(sorted(targets)):
            field, value = DEFECTS[i % len(DEFECTS)]
            df.at[int(row_idx), field] = value
    return df, n_invalid


def write_roles_csv(output_path: Path, rows: int, invalid_ratio: float = 0.0, seed: int = 42) -> int:
    """Write a synthetic role CSV and return the number of corrupted rows."""
    df, n_invalid = generate_roles(rows, invalid_ratio=invalid_ratio, seed=seed)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_path, index=False)
    return n_invalid


def main() -> int:
    parser = argparse.ArgumentParser(description="Generate synthetic RBAC role CSV files")
    parser.add_argument("output", type=Path, help="Output CSV path")
    parser.add_argument("--rows", type=int, default=1000, help="Number of role rows (default: 1000)")
    parser.add_argument("--invalid-ratio", type=float, default=0.0, help="Share of corrupted rows (0..1)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    args = parser.parse_args()

    if args.rows < 1:
        print("Error: --rows must be positive", file=sys.stderr)
        return 1
    if not 0.0 <= args.invalid_ratio <= 1.0:
        print("Error: --invalid-ratio must be between 0 and 1", file=sys.stderr)
        return 1

    n_invalid = write_roles_csv(args.output, args.rows, args.invalid_ratio, args.seed)
    print(f"Generated {args.output} rows={args.rows} invalid={n_invalid}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
