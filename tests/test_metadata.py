import pandas as pd

from antibiogram_dataset.cleaning.metadata import attach_metadata
from antibiogram_dataset.config import FILE_COL, GENUS_COL, ID_COL


def test_left_join_keeps_unmatched_rows():
    table = pd.DataFrame({ID_COL: ["S1", "S2", "S3"], "AMX": [10.0, 11.0, 12.0]})
    taxa  = pd.DataFrame({ID_COL: ["S1", "S2"], GENUS_COL: ["Bacillus", "Vibrio"]})
    files = pd.DataFrame({ID_COL: ["S1", "S3"], FILE_COL: ["a.fna", "c.fna"],
                          "assembly_level": ["Contig", "Scaffold"], "size": [1, 2]})

    out = attach_metadata(table, taxa, files)

    assert out[ID_COL].tolist() == ["S1", "S2", "S3"]
    assert out.columns.tolist() == [ID_COL, "AMX", FILE_COL, GENUS_COL]
    assert out[FILE_COL].isna().tolist() == [False, True, False]
    assert out[GENUS_COL].isna().tolist() == [False, False, True]


def test_duplicate_lookup_keys_keep_first():
    table = pd.DataFrame({ID_COL: ["S1"]})
    taxa  = pd.DataFrame({ID_COL: ["S1", "S1"], GENUS_COL: ["Bacillus", "Vibrio"]})
    files = pd.DataFrame({ID_COL: ["S1"], FILE_COL: ["a.fna"]})

    out = attach_metadata(table, taxa, files)
    assert len(out) == 1
    assert out.loc[0, GENUS_COL] == "Bacillus"


def test_integer_and_string_ids_match():
    table = pd.DataFrame({ID_COL: [1, 2]})
    taxa  = pd.DataFrame({ID_COL: ["1", "2"], GENUS_COL: ["Bacillus", "Vibrio"]})
    files = pd.DataFrame({ID_COL: [1, 2], FILE_COL: ["a.fna", "b.fna"]})

    out = attach_metadata(table, taxa, files)
    assert out[GENUS_COL].tolist() == ["Bacillus", "Vibrio"]
