"""
Attach genus and filename to any table keyed by sample id.

Left joins only: samples without a taxon or a filename are kept with a
missing value and dropped later by the aggregation step.
"""

import pandas as pd

from antibiogram_dataset.config import FILE_COL, GENUS_COL, ID_COL


def _one_per_key(lookup: pd.DataFrame, tag: str) -> pd.DataFrame:
    dup = lookup[ID_COL].duplicated(keep="first")
    if dup.any():
        print(f"[!] {tag}: {int(dup.sum()):,} duplicate {ID_COL} keys – keeping first")
    return lookup.loc[~dup]


def attach_metadata(table: pd.DataFrame,
                    taxa: pd.DataFrame,
                    files: pd.DataFrame) -> pd.DataFrame:
    # exports disagree on int vs str ids
    table, taxa, files = (df.assign(**{ID_COL: df[ID_COL].astype(str)})
                          for df in (table, taxa, files))
    taxa  = _one_per_key(taxa[[ID_COL, GENUS_COL]], "taxonomy")
    files = _one_per_key(files[[ID_COL, FILE_COL]], "filenames")

    out = (table.merge(files, on=ID_COL, how="left", validate="many_to_one")
                .merge(taxa,  on=ID_COL, how="left", validate="many_to_one"))

    print(f"[=] rows without {FILE_COL}: {int(out[FILE_COL].isna().sum()):,}  "
          f"without {GENUS_COL}: {int(out[GENUS_COL].isna().sum()):,}")
    return out
