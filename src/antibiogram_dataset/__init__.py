"""Antibiogram → ML dataset preparation (targets, inputs, genus-stratified split)."""

__version__ = "0.1.0"
