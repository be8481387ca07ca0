"""vcf2tab – convert VCF records to a 0-based, half-open tab-delimited table.

Subpackages:
	core     – pure per-record normalization (trimming, multi-allelic split)
	io       – streaming VCF reader and tab-delimited writer
	metrics  – variant class tables built on pandas
	plot     – summary visualisations

The conversion entry points are re-exported so users can simply::

	from vcf2tab import convert_file
	convert_file("input.vcf.gz", "output.tsv")
"""

from .core import NormalizedVariant, normalize
from .convert import ConvertOptions, ConvertStats, convert, convert_file
from .exceptions import Vcf2TabError, MalformedRecordError, InvalidPositionError

__version__ = "0.1.0"
__all__ = [
	"NormalizedVariant",
	"normalize",
	"ConvertOptions",
	"ConvertStats",
	"convert",
	"convert_file",
	"Vcf2TabError",
	"MalformedRecordError",
	"InvalidPositionError",
	"__version__",
]
