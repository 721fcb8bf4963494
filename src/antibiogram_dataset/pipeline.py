#!/usr/bin/env python3
"""
pipeline.py
-----------
Annotated antibiograms → genus-stratified ML dataset.

• Keep manually annotated records, build targets (mean zone diameter per
  antibiotic) and inputs (environmental conditions, defaults filled)
• Drop duplicate input rows (and the matching target rows)
• Attach filename + genus, collapse to one row per (filename, genus)
• Label train / validation / test with whole genera in test
• Write dataset, labels and the aligned input table to data/processed

All randomness comes from one numpy Generator seeded here and is drawn in
this order: group representatives, genus shuffle, train/validation split.
"""
import numpy as np
import pandas as pd

from antibiogram_dataset.cleaning.dedup import aggregate_groups, combine, drop_duplicate_inputs
from antibiogram_dataset.cleaning.metadata import attach_metadata
from antibiogram_dataset.config import (
    FILE_COL, FILES_FILE, ID_COL, INPUT_COLS, LABEL_COL, PROC_DIR, RECORDS_FILE,
    SEED, TAXA_FILE, TEST_FRACTION, TRAIN_FRACTION,
)
from antibiogram_dataset.data.ingest import load_files, load_records, load_taxa
from antibiogram_dataset.features.targets import build_features
from antibiogram_dataset.output.assemble import (
    align_inputs, build_labels, build_training_table, small_feature_variant, write_outputs,
)
from antibiogram_dataset.split.genus_split import assign_partitions, leaking_genera, split_summary


def build_dataset(records: pd.DataFrame,
                  taxa: pd.DataFrame,
                  files: pd.DataFrame,
                  seed: int = SEED,
                  test_fraction: float = TEST_FRACTION,
                  train_fraction: float = TRAIN_FRACTION) -> dict:
    """Run every stage in memory and return the output tables by name."""
    rng = np.random.default_rng(seed)

    targets, inputs = build_features(records)
    antibiotics = [c for c in targets.columns if c != ID_COL]
    print(f"[=] antibiotics: {len(antibiotics):,}")

    inputs_u, targets_u = drop_duplicate_inputs(inputs, targets)
    merged  = attach_metadata(combine(inputs_u, targets_u), taxa, files)
    grouped = aggregate_groups(merged, antibiotics, rng)
    labeled = assign_partitions(grouped, rng, test_fraction, train_fraction)

    leaks = leaking_genera(labeled)
    if leaks:
        raise RuntimeError(f"genera on both sides of the test boundary: {sorted(leaks)}")

    aligned = align_inputs(attach_metadata(inputs_u, taxa, files), labeled)

    return {
        "targets":               targets,
        "inputs":                inputs,
        "inputs_small":          small_feature_variant(inputs),
        "dataset":               build_training_table(labeled, antibiotics),
        "labels":                build_labels(labeled),
        "inputs_aligned":        aligned[INPUT_COLS],
        "inputs_aligned_labels": aligned[[FILE_COL, LABEL_COL]],
        "split_summary":         split_summary(labeled),
    }


def main():
    records = load_records(RECORDS_FILE)
    if records.empty:
        raise SystemExit(f"No antibiogram records in {RECORDS_FILE}")

    tables = build_dataset(records, load_taxa(TAXA_FILE), load_files(FILES_FILE))

    print("\n=== Split summary ===")
    print(tables["split_summary"].to_string(index=False))
    write_outputs(tables, PROC_DIR)


if __name__ == "__main__":
    main()
