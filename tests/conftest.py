"""
Synthetic antibiogram exports shared by the test modules.

Every genus gets a few files and every file two measurements, plus one
record without a filename and one record that was never annotated.
"""

import numpy as np
import pandas as pd
import pytest

from antibiogram_dataset.config import (
    ANNOTATION_COL, FILE_COL, GENUS_COL, ID_COL,
    MEDIUM_COL, OX_COL, TEMP_COL, TIME_COL,
)

GENUS_SIZES = {
    "Bacillus":       6,
    "Escherichia":   10,
    "Klebsiella":     4,
    "Pseudomonas":    8,
    "Staphylococcus": 5,
    "Streptococcus":  3,
    "Vibrio":         1,
}
N_GROUPS = sum(GENUS_SIZES.values())


def _record(sid, j, rep, annotated=True):
    return {
        ID_COL:         sid,
        ANNOTATION_COL: annotated,
        "AMX_rgStart":  10 + j + rep,
        "AMX_rgEnd":    14 + j,
        "CIP_rgStart":  np.nan if j % 3 == 0 else 20 + rep,
        "CIP_rgEnd":    24,
        MEDIUM_COL:     "MH",
        TEMP_COL:       np.nan if rep else 35,
        TIME_COL:       1,
        OX_COL:         None if j % 2 else "anaerob",
    }


@pytest.fixture
def study():
    """(records, taxa, files) for N_GROUPS (filename, genus) groups."""
    rows, taxa, files = [], [], []
    i = 0
    for genus, n in GENUS_SIZES.items():
        for j in range(n):
            for rep in range(2):
                sid = f"S{i:03d}"
                rows.append(_record(sid, j, rep))
                taxa.append({ID_COL: sid, GENUS_COL: genus})
                files.append({ID_COL: sid, FILE_COL: f"{genus.lower()}_{j:02d}.fna",
                              "assembly_level": "Complete Genome", "size": 5_000_000})
                i += 1

    # annotated but no filename → dropped at aggregation
    rows.append(_record("S900", 0, 0))
    taxa.append({ID_COL: "S900", GENUS_COL: "Vibrio"})
    # never annotated → dropped up front
    rows.append(_record("S901", 1, 0, annotated=False))

    return pd.DataFrame(rows), pd.DataFrame(taxa), pd.DataFrame(files)


@pytest.fixture
def rng():
    return np.random.default_rng(123)
