"""I/O subpackage.

Streaming VCF line source on the input side, the tab-delimited table on
the output side.
"""

from .vcf_reader import SimpleVCFReader, VcfRecord, open_vcf, split_record  # noqa: F401
from .tab_writer import HEADER_FIELDS, TabWriter, format_row, open_output, read_tab  # noqa: F401

__all__ = [
	"SimpleVCFReader",
	"VcfRecord",
	"open_vcf",
	"split_record",
	"HEADER_FIELDS",
	"TabWriter",
	"format_row",
	"open_output",
	"read_tab",
]
