"""
Target and input construction from annotated antibiogram records.

Input  : raw record table (one row = one antibiogram test)
Output : Target table (mean zone diameter per antibiotic) and
         Input table (environmental conditions with defaults applied)
"""

import re
import warnings
import pandas as pd

from antibiogram_dataset.config import (
    ANNOTATION_COL, ID_COL, INPUT_COLS, INPUT_DEFAULTS, RG_END, RG_START,
    TEMP_COL, TIME_COL,
)

RANGE_COL_RX = re.compile(rf"^(.+)(?:{RG_START}|{RG_END})$")
FLAG_TRUE    = {"true", "1", "1.0", "yes", "y"}


class MissingInputsWarning(UserWarning):
    """Input table still holds missing cells after defaults were applied."""


def filter_annotated(records: pd.DataFrame) -> pd.DataFrame:
    flags = (records[ANNOTATION_COL].astype("string")
                                    .str.strip().str.lower()
                                    .isin(FLAG_TRUE)
                                    .fillna(False)
                                    .astype(bool))
    kept = records.loc[flags].reset_index(drop=True)
    print(f"[=] annotated records: {len(kept):,} / {len(records):,}")
    return kept


def antibiotic_names(columns) -> list[str]:
    """Distinct antibiotic ids behind the *_rgStart / *_rgEnd columns."""
    names = []
    for col in columns:
        m = RANGE_COL_RX.match(str(col))
        if m and m.group(1) not in names:
            names.append(m.group(1))
    return names


# ────────────────────────────────────────────────────────────
# 1. Targets: mean of the range bounds
# ────────────────────────────────────────────────────────────
def _bound(records: pd.DataFrame, col: str) -> pd.Series:
    if col not in records:
        return pd.Series(float("nan"), index=records.index, dtype="float64")
    return pd.to_numeric(records[col], errors="coerce")


def compute_targets(records: pd.DataFrame) -> pd.DataFrame:
    # skipna mean: one bound → that bound, none → NaN
    means = {
        abx: pd.concat([_bound(records, abx + RG_START),
                        _bound(records, abx + RG_END)], axis=1).mean(axis=1)
        for abx in antibiotic_names(records.columns)
    }
    return pd.concat([records[[ID_COL]], pd.DataFrame(means, index=records.index)],
                     axis=1)


# ────────────────────────────────────────────────────────────
# 2. Inputs: environmental conditions
# ────────────────────────────────────────────────────────────
def _as_whole(series: pd.Series) -> pd.Series:
    """Nullable Int64 when every value is a whole number, else unchanged."""
    num = pd.to_numeric(series, errors="coerce")
    if num.notna().sum() != series.notna().sum() or (num.dropna() % 1 != 0).any():
        return series
    return num.astype("Int64")


def extract_inputs(records: pd.DataFrame) -> pd.DataFrame:
    inputs = records[[ID_COL, *INPUT_COLS]].fillna(INPUT_DEFAULTS)
    inputs = inputs.assign(**{col: _as_whole(inputs[col]) for col in (TEMP_COL, TIME_COL)})

    n_missing = int(inputs.isna().sum().sum())
    if n_missing:
        msg = f"{n_missing:,} missing input values remain after defaults"
        print(f"[!] {msg}")
        warnings.warn(msg, MissingInputsWarning, stacklevel=2)
    return inputs


# ────────────────────────────────────────────────────────────
# 3. Driver function
# ────────────────────────────────────────────────────────────
def build_features(records: pd.DataFrame) -> tuple[pd.DataFrame, pd.DataFrame]:
    """Return (targets, inputs), row-aligned, for the annotated records."""
    annotated = filter_annotated(records)
    return compute_targets(annotated), extract_inputs(annotated)
