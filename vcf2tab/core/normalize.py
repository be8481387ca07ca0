"""Per-record coordinate and allele normalization.

VCF stores a variant as a 1-based inclusive range ``[POS, POS+len(REF)-1]``
and pads indels with an anchor base shared by REF and ALT. The functions
here turn one record into 0-based half-open rows, one per alternate allele,
with the shared leading/trailing bases removed:

	VCF            output (start, end, ref, alt)
	10 A   G       9   10  A   G
	10 A   G,T     9   10  A   G
	               9   10  A   T
	10 A   AA      10  10      A
	10 AA  A       10  11  A

Everything in this module is pure; no I/O happens here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from ..exceptions import InvalidPositionError

__all__ = [
	"CHROM_PREFIX",
	"NormalizedVariant",
	"normalize_chrom",
	"parse_position",
	"trim_alleles",
	"normalize",
	"normalize_record",
]

CHROM_PREFIX = "chr"


@dataclass(frozen=True)
class NormalizedVariant:
	"""One alternate allele in 0-based half-open coordinates.

	Attributes
	----------
	chrom : str
		Chromosome name, always starting with ``chr``.
	start, end : int
		0-based inclusive start and exclusive end of the trimmed reference
		allele. ``start == end`` marks an insertion point.
	ref, alt : str
		Trimmed alleles; either may be empty.
	"""

	chrom: str
	start: int
	end: int
	ref: str
	alt: str

	def to_fields(self) -> Tuple[str, str, str, str, str]:
		return (self.chrom, str(self.start), str(self.end), self.ref, self.alt)


def normalize_chrom(chrom: Optional[str]) -> Optional[str]:
	"""Prefix ``chr`` unless already present. Returns None for a missing name."""
	if not chrom:
		return None
	if chrom.startswith(CHROM_PREFIX):
		return chrom
	return CHROM_PREFIX + chrom


def parse_position(value: Union[str, int], line_no: Optional[int] = None) -> int:
	"""Parse a VCF POS value; raises InvalidPositionError if it is not an integer >= 0."""
	if isinstance(value, int) and not isinstance(value, bool):
		pos = value
	else:
		try:
			pos = int(str(value).strip())
		except ValueError:
			raise InvalidPositionError(f"invalid POS value {value!r}", line_no) from None
	if pos < 0:
		raise InvalidPositionError(f"negative POS value {value!r}", line_no)
	return pos


def trim_alleles(ref: str, alt: str) -> Tuple[int, int, int]:
	"""Locate the differing core of two alleles without copying them.

	Returns ``(left, ref_right, alt_right)`` such that ``ref[left:ref_right]``
	and ``alt[left:alt_right]`` are the alleles with their common prefix and
	then their common suffix removed. The prefix is consumed first, so the
	suffix scan never reaches back past ``left``.
	"""
	left = 0
	limit = min(len(ref), len(alt))
	while left < limit and ref[left] == alt[left]:
		left += 1
	ref_right = len(ref)
	alt_right = len(alt)
	while ref_right > left and alt_right > left and ref[ref_right - 1] == alt[alt_right - 1]:
		ref_right -= 1
		alt_right -= 1
	return left, ref_right, alt_right


def normalize(
	chrom: Optional[str],
	position: Union[str, int],
	ref: str,
	alts: str,
	*,
	line_no: Optional[int] = None,
) -> List[NormalizedVariant]:
	"""Normalize one VCF record into one row per alternate allele.

	Parameters
	----------
	chrom : str | None
		Chromosome column. Empty / None skips the record (empty result).
	position : str | int
		1-based POS column. Unparsable values raise InvalidPositionError.
	ref : str
		REF allele.
	alts : str
		Comma-separated ALT alleles; each is trimmed against the original REF.
	line_no : int | None
		Input line number, only used to annotate errors.
	"""
	chrom = normalize_chrom(chrom)
	if chrom is None:
		return []
	pos = parse_position(position, line_no)
	# 1-based inclusive end equals the 0-based exclusive end
	end = pos + len(ref) - 1
	out: List[NormalizedVariant] = []
	for alt in alts.split(","):
		left, ref_right, alt_right = trim_alleles(ref, alt)
		out.append(NormalizedVariant(
			chrom=chrom,
			start=pos - 1 + left,
			end=end - (len(ref) - ref_right),
			ref=ref[left:ref_right],
			alt=alt[left:alt_right],
		))
	return out


def normalize_record(record) -> List[NormalizedVariant]:
	"""Normalize a :class:`vcf2tab.io.VcfRecord`."""
	return normalize(record.chrom, record.pos, record.ref, record.alts, line_no=record.line_no)
