"""
src/antibiogram_dataset/cleaning/dedup.py
=========================================

Duplicate removal and one-row-per-group aggregation.

Repeated measurements of the same physical sample share a filename and a
genus; each such (filename, genus) group is collapsed to a single row by
picking, per antibiotic, one of the observed values at random. This is not
an average: the row stays a real reading.
"""

from __future__ import annotations
import numpy as np
import pandas as pd

from antibiogram_dataset.config import FILE_COL, GENUS_COL, ID_COL, INPUT_COLS

GROUP_KEYS = [FILE_COL, GENUS_COL]


# ---------------------------------------------------------------------------
# Step 1: duplicate input rows
# ---------------------------------------------------------------------------
def drop_duplicate_inputs(inputs: pd.DataFrame,
                          targets: pd.DataFrame) -> tuple[pd.DataFrame, pd.DataFrame]:
    """
    Drop every repeat of an identical input row, keeping the first.

    The same positions are removed from *targets*, so both tables must be
    row-aligned on entry and stay row-aligned on exit.
    """
    if len(inputs) != len(targets):
        raise ValueError(
            f"inputs ({len(inputs):,} rows) and targets ({len(targets):,} rows) "
            "are not row-aligned"
        )

    dup = inputs.duplicated(keep="first").to_numpy()
    if dup.any():
        print(f"[!] dropping {int(dup.sum()):,} duplicate input rows")

    return (inputs.iloc[~dup].reset_index(drop=True),
            targets.iloc[~dup].reset_index(drop=True))


def combine(inputs: pd.DataFrame, targets: pd.DataFrame) -> pd.DataFrame:
    """Side-by-side join of row-aligned inputs and targets (one id column)."""
    return pd.concat([inputs.reset_index(drop=True),
                      targets.drop(columns=ID_COL).reset_index(drop=True)],
                     axis=1)


# ---------------------------------------------------------------------------
# Step 3: one representative row per (filename, genus)
# ---------------------------------------------------------------------------
def pick_representative(values: pd.Series, rng: np.random.Generator) -> float:
    """Uniform pick among non-missing values; NaN (no draw) if there are none."""
    present = values.dropna().to_numpy()
    if present.size == 0:
        return np.nan
    return present[rng.integers(present.size)]


def aggregate_groups(merged: pd.DataFrame,
                     antibiotics: list[str],
                     rng: np.random.Generator) -> pd.DataFrame:
    """
    Collapse *merged* to one row per (filename, genus).

    Rows without a filename or a genus are dropped. Groups are visited in
    sorted key order and antibiotics in the given order; one draw is taken
    from *rng* per non-empty (group, antibiotic) cell. Environmental columns
    come from the group's first row.
    """
    unmatched = merged[GROUP_KEYS].isna().any(axis=1)
    if unmatched.any():
        print(f"[!] dropping {int(unmatched.sum()):,} rows without {FILE_COL} or {GENUS_COL}")
    kept = merged.loc[~unmatched]

    # such a file yields one group per genus and may sit in two partitions
    mixed = kept.groupby(FILE_COL)[GENUS_COL].nunique().gt(1)
    if mixed.any():
        print(f"[!] {int(mixed.sum()):,} {FILE_COL}s map to more than one {GENUS_COL}")

    env_cols = [c for c in INPUT_COLS if c in kept.columns]
    columns  = [*GROUP_KEYS, *antibiotics, *env_cols]

    rows = []
    for (fname, genus), grp in kept.groupby(GROUP_KEYS, sort=True):
        row = {FILE_COL: fname, GENUS_COL: genus}
        for abx in antibiotics:
            row[abx] = pick_representative(grp[abx], rng)
        for col in env_cols:
            row[col] = grp[col].iloc[0]
        rows.append(row)

    out = (pd.DataFrame(rows, columns=columns)
             .astype({abx: "float64" for abx in antibiotics})
             .astype({col: kept[col].dtype for col in env_cols}))
    print(f"[=] aggregated {len(kept):,} rows into {len(out):,} (filename, genus) groups")
    return out
