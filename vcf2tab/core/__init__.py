"""Pure record normalization (no I/O)."""

from .normalize import (  # noqa: F401
	NormalizedVariant,
	normalize,
	normalize_chrom,
	normalize_record,
	parse_position,
	trim_alleles,
)

__all__ = [
	"NormalizedVariant",
	"normalize",
	"normalize_chrom",
	"normalize_record",
	"parse_position",
	"trim_alleles",
]
