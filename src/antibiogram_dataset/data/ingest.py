# src/antibiogram_dataset/data/ingest.py

from __future__ import annotations
from pathlib import Path
import pandas as pd

from antibiogram_dataset.config import (
    ANNOTATION_COL, FILE_COL, GENUS_COL, ID_COL, INPUT_COLS,
)

# Canonical rename maps; extend as new exports show up
RECORD_RENAME = {
    "ID_strain":         ID_COL,
    "id_strains":        ID_COL,
    "Manual_annotation": ANNOTATION_COL,
    "manually_annotated": ANNOTATION_COL,
}
TAXA_RENAME = {
    "id_strains": ID_COL,
    "Genus":      GENUS_COL,
}
FILES_RENAME = {
    "id_strains": ID_COL,
    "Filename":   FILE_COL,
    "file":       FILE_COL,
}


def read_table(path: str | Path) -> pd.DataFrame:
    """Read a CSV, .xlsx (first sheet) or Parquet export."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(path)

    suf = path.suffix.lower()
    if suf == ".csv":
        return pd.read_csv(path)
    if suf == ".xlsx":
        return pd.read_excel(path, sheet_name=0, engine="openpyxl")
    if suf == ".parquet":
        return pd.read_parquet(path, engine="pyarrow")
    raise ValueError(f"{path.name}: unsupported file type '{suf}'")


def _require(df: pd.DataFrame, required: set, tag: str) -> pd.DataFrame:
    missing = required - set(df.columns)
    if missing:
        raise ValueError(f"{tag}: missing columns {sorted(missing)}")
    return df


def load_records(path: str | Path) -> pd.DataFrame:
    df = read_table(path).rename(columns=RECORD_RENAME, errors="ignore")
    print(f"[+] records: read {len(df):,} rows from {Path(path).name}")
    return _require(df, {ID_COL, ANNOTATION_COL, *INPUT_COLS}, "records")


def load_taxa(path: str | Path) -> pd.DataFrame:
    df = read_table(path).rename(columns=TAXA_RENAME, errors="ignore")
    print(f"[+] taxonomy: read {len(df):,} rows from {Path(path).name}")
    return _require(df, {ID_COL, GENUS_COL}, "taxonomy")[[ID_COL, GENUS_COL]]


def load_files(path: str | Path) -> pd.DataFrame:
    """Sample → filename lookup; assembly level / size columns are ignored."""
    df = read_table(path).rename(columns=FILES_RENAME, errors="ignore")
    print(f"[+] filenames: read {len(df):,} rows from {Path(path).name}")
    return _require(df, {ID_COL, FILE_COL}, "filenames")[[ID_COL, FILE_COL]]
