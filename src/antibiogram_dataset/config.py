"""
config.py
---------
Paths, column names and fixed run constants for the dataset build.
"""
from pathlib import Path

# ---------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------
ROOT       = Path(__file__).resolve().parents[2]     # repo root
RAW_DIR    = ROOT / "data" / "raw"                   # annotation exports
PROC_DIR   = ROOT / "data" / "processed"             # CSV outputs

RECORDS_FILE = RAW_DIR / "antibiograms.csv"
TAXA_FILE    = RAW_DIR / "taxonomy.csv"
FILES_FILE   = RAW_DIR / "filenames.csv"

# ---------------------------------------------------------------------
# Columns
# ---------------------------------------------------------------------
ID_COL         = "ID_strains"
ANNOTATION_COL = "manual_annotation"
GENUS_COL      = "genus"
FILE_COL       = "filename"
LABEL_COL      = "type"

RG_START = "_rgStart"
RG_END   = "_rgEnd"

MEDIUM_COL = "Medium_antibiogram"
TEMP_COL   = "Inc_temp_antibiogram"
TIME_COL   = "Inc_time_antibiogram"
OX_COL     = "Inc_ox_antibiogram"
INPUT_COLS = [MEDIUM_COL, TEMP_COL, TIME_COL, OX_COL]

# medium has no default
INPUT_DEFAULTS = {OX_COL: "aerob", TEMP_COL: 37, TIME_COL: 1}

# dropped for the smaller-feature variant
SMALL_DROP = [MEDIUM_COL, TIME_COL]

# ---------------------------------------------------------------------
# Split constants
# ---------------------------------------------------------------------
SEED           = 123
TEST_FRACTION  = 0.20
TRAIN_FRACTION = 0.70          # share of the non-test pool

TRAIN, VALIDATION, TEST = "train", "validation", "test"
PARTITIONS = (TRAIN, VALIDATION, TEST)

# ---------------------------------------------------------------------
# Output file names
# ---------------------------------------------------------------------
OUTPUT_FILES = {
    "targets":               "targets.csv",
    "inputs":                "inputs.csv",
    "inputs_small":          "inputs_small.csv",
    "dataset":               "dataset.csv",
    "labels":                "labels.csv",
    "inputs_aligned":        "inputs_aligned.csv",
    "inputs_aligned_labels": "inputs_aligned_labels.csv",
    "split_summary":         "split_summary.csv",
}
