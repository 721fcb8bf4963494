"""
assemble.py

• Rounds mean diameters to whole millimetres
• Splits the labelled dataset into a feature/target table and a
  row-aligned filename → partition table
• Routes the per-sample input table through the same partition labels
• Writes every table as plain CSV (header, no index, no quoting)
"""

import csv
from pathlib import Path
import pandas as pd

from antibiogram_dataset.config import (
    FILE_COL, GENUS_COL, ID_COL, INPUT_COLS, LABEL_COL, OUTPUT_FILES, SMALL_DROP,
)

GROUP_KEYS = [FILE_COL, GENUS_COL]


# ───────────── tables ──────────────────────────────────────────────
def round_targets(df: pd.DataFrame, antibiotics: list[str]) -> pd.DataFrame:
    rounded = {abx: pd.to_numeric(df[abx]).round().astype("Int64") for abx in antibiotics}
    return df.assign(**rounded)


def build_training_table(labeled: pd.DataFrame, antibiotics: list[str]) -> pd.DataFrame:
    """Targets + environmental features; no ids, no partition label."""
    env_cols = [c for c in INPUT_COLS if c in labeled.columns]
    return round_targets(labeled, antibiotics)[[*antibiotics, *env_cols]]


def build_labels(labeled: pd.DataFrame) -> pd.DataFrame:
    return labeled[[FILE_COL, LABEL_COL]].reset_index(drop=True)


def align_inputs(inputs: pd.DataFrame, labeled: pd.DataFrame) -> pd.DataFrame:
    """
    Give every per-sample input row the label of its (filename, genus) group.

    *inputs* must carry filename and genus (see attach_metadata). Rows of
    groups that did not survive aggregation are dropped; the rest follow the
    row order of *labeled*.
    """
    aligned = labeled[[*GROUP_KEYS, LABEL_COL]].merge(
        inputs.drop(columns=[ID_COL, LABEL_COL], errors="ignore"),
        on=GROUP_KEYS, how="inner", validate="one_to_many",
    )
    dropped = len(inputs) - len(aligned)
    if dropped:
        print(f"[!] {dropped:,} input rows have no surviving (filename, genus) group")
    return aligned


def small_feature_variant(inputs: pd.DataFrame) -> pd.DataFrame:
    return inputs.drop(columns=SMALL_DROP)


# ───────────── CSV ─────────────────────────────────────────────────
def write_outputs(tables: dict, out_dir: Path) -> dict:
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    written = {}
    for name, df in tables.items():
        path = out_dir / OUTPUT_FILES[name]
        df.to_csv(path, index=False, quoting=csv.QUOTE_NONE, escapechar="\\")
        print(f"[✓] wrote {len(df):,} rows → {path}")
        written[name] = path
    return written
