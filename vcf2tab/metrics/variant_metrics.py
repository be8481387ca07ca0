"""Variant-level summary tables.

Turns normalized rows into a DataFrame, tags each row with a variant class
derived from the trimmed alleles and counts the classes.
"""
from __future__ import annotations

from typing import Iterable, List

import pandas as pd

from ..core.normalize import NormalizedVariant, normalize_record
from ..io import SimpleVCFReader

__all__ = [
    "VARIANT_TYPES",
    "classify_variant",
    "variant_table",
    "compute_variant_metrics",
    "summarize_variant_types",
]

# fixed reporting order
VARIANT_TYPES = ["SNV", "MNV", "INS", "DEL", "COMPLEX", "NONE"]

COLUMNS = ["Chrom", "Start", "End", "Ref", "Alt", "Type", "LengthChange"]


def classify_variant(ref: str, alt: str) -> str:
    """Classify a *trimmed* allele pair.

    SNV: 1 base vs 1 base; MNV: same length > 1; INS: empty ref;
    DEL: empty alt; COMPLEX: different non-zero lengths; NONE: both empty
    (ALT identical to REF).
    """
    if not ref and not alt:
        return "NONE"
    if not ref:
        return "INS"
    if not alt:
        return "DEL"
    if len(ref) == len(alt):
        return "SNV" if len(ref) == 1 else "MNV"
    return "COMPLEX"


def variant_table(variants: Iterable[NormalizedVariant]) -> pd.DataFrame:
    """Return DataFrame with columns: Chrom, Start, End, Ref, Alt, Type, LengthChange."""
    rows: List[dict] = []
    for v in variants:
        rows.append({
            "Chrom": v.chrom,
            "Start": v.start,
            "End": v.end,
            "Ref": v.ref,
            "Alt": v.alt,
            "Type": classify_variant(v.ref, v.alt),
            "LengthChange": len(v.alt) - len(v.ref),
        })
    df = pd.DataFrame(rows, columns=COLUMNS)
    for col in ["Start", "End", "LengthChange"]:
        df[col] = pd.to_numeric(df[col], errors="coerce").astype("int64")
    return df


def compute_variant_metrics(reader: SimpleVCFReader) -> pd.DataFrame:
    """Normalize every record from ``reader`` and tabulate the result."""
    return variant_table(v for rec in reader.parse() for v in normalize_record(rec))


def summarize_variant_types(df: pd.DataFrame) -> pd.DataFrame:
    """Count variants per class.

    Returns one row per entry of VARIANT_TYPES (zero counts included) with
    columns Type, Count, Fraction.
    """
    if "Type" not in df.columns:
        raise ValueError("DataFrame must contain 'Type' column for summarising")
    counts = df["Type"].value_counts().reindex(VARIANT_TYPES, fill_value=0)
    total = int(counts.sum())
    out = pd.DataFrame({
        "Type": counts.index,
        "Count": counts.values.astype("int64"),
    })
    out["Fraction"] = out["Count"] / total if total else 0.0
    return out.reset_index(drop=True)
