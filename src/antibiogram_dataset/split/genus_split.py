"""
Genus-stratified train / validation / test partitioning.

Whole genera are moved into the test set until it reaches
ceil(n × test_fraction) records, so a genus is never split across the test
boundary. The remaining pool is split into train / validation per genus.
The test size only approximates the target fraction: it can overshoot by
at most the size of the last genus added.
"""

from __future__ import annotations
import math
import numpy as np
import pandas as pd

from antibiogram_dataset.config import (
    FILE_COL, GENUS_COL, LABEL_COL, PARTITIONS,
    TEST, TEST_FRACTION, TRAIN, TRAIN_FRACTION, VALIDATION,
)


def _ceil(x: float) -> int:
    # 0.7 * 10 == 7.000000000000001
    return math.ceil(round(x, 9))


def genus_counts(genus: pd.Series) -> pd.Series:
    """Records per genus, sorted by genus name."""
    return genus.value_counts().sort_index()


# ────────────────────────────────────────────────────────────
# 1. Test genera: greedy pass over a shuffled frequency table
# ────────────────────────────────────────────────────────────
def select_test_genera(genus: pd.Series,
                       test_fraction: float,
                       rng: np.random.Generator) -> list:
    counts = genus_counts(genus)
    target = _ceil(len(genus) * test_fraction)

    selected, running = [], 0
    for name, n in counts.iloc[rng.permutation(len(counts))].items():
        if running >= target:
            break
        selected.append(name)
        running += int(n)
    return selected


# ────────────────────────────────────────────────────────────
# 2. Train / validation: per-genus stratified sample
# ────────────────────────────────────────────────────────────
def stratified_split(pool: pd.DataFrame,
                     train_fraction: float,
                     rng: np.random.Generator) -> tuple[pd.DataFrame, pd.DataFrame]:
    """
    Put ceil(k × train_fraction) of each genus' k rows into train.

    Genera are visited in sorted order with one permutation each; a genus
    with a single row always lands in train. Row order is preserved inside
    both halves.
    """
    positions = pool.groupby(GENUS_COL, sort=True).indices
    in_train  = np.zeros(len(pool), dtype=bool)
    for name in sorted(positions):
        pos = positions[name]
        in_train[rng.permutation(pos)[:_ceil(len(pos) * train_fraction)]] = True
    return pool.iloc[in_train], pool.iloc[~in_train]


# ────────────────────────────────────────────────────────────
# 3. Driver
# ────────────────────────────────────────────────────────────
def assign_partitions(df: pd.DataFrame,
                      rng: np.random.Generator,
                      test_fraction: float = TEST_FRACTION,
                      train_fraction: float = TRAIN_FRACTION) -> pd.DataFrame:
    """Return a copy of *df* with a `type` column, rows ordered train → validation → test."""
    test_genera = select_test_genera(df[GENUS_COL], test_fraction, rng)
    in_test = df[GENUS_COL].isin(test_genera)

    train, valid = stratified_split(df.loc[~in_test], train_fraction, rng)
    labeled = pd.concat([
        train.assign(**{LABEL_COL: TRAIN}),
        valid.assign(**{LABEL_COL: VALIDATION}),
        df.loc[in_test].assign(**{LABEL_COL: TEST}),
    ], ignore_index=True)

    print(f"[=] test genera: {len(test_genera):,} / {df[GENUS_COL].nunique():,}")
    return labeled


def leaking_genera(labeled: pd.DataFrame) -> set:
    """Genera present both in test and in train/validation (should be empty)."""
    test = labeled[LABEL_COL] == TEST
    return set(labeled.loc[test, GENUS_COL]) & set(labeled.loc[~test, GENUS_COL])


def split_summary(labeled: pd.DataFrame) -> pd.DataFrame:
    summary = (labeled.groupby(LABEL_COL)
                      .agg(n_records=(FILE_COL, "size"),
                           n_genera=(GENUS_COL, "nunique"))
                      .reindex(list(PARTITIONS), fill_value=0))
    summary["fraction"] = summary["n_records"] / max(len(labeled), 1)
    return summary.rename_axis(LABEL_COL).reset_index()
