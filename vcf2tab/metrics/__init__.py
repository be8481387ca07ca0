"""Metric computation subpackage."""

from .variant_metrics import (  # noqa: F401
    VARIANT_TYPES,
    classify_variant,
    compute_variant_metrics,
    summarize_variant_types,
    variant_table,
)

__all__ = [
    "VARIANT_TYPES",
    "classify_variant",
    "compute_variant_metrics",
    "summarize_variant_types",
    "variant_table",
]
