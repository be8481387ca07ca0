"""Lightweight streaming VCF line source.

Only the fixed columns needed for coordinate conversion are extracted
(CHROM, POS, REF, ALT); ID, QUAL, FILTER, INFO and sample columns are
never parsed. Files ending in ``.gz`` are decompressed transparently.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple, Union
import gzip
import os

from ..exceptions import MalformedRecordError

__all__ = ["VcfRecord", "SimpleVCFReader", "open_vcf", "split_record"]

# 0-based column indices of the fixed VCF fields we read
COL_CHROM = 0
COL_POS = 1
COL_REF = 3
COL_ALT = 4

PathLike = Union[str, os.PathLike]


@dataclass
class VcfRecord:
	"""Raw fields of one VCF data line.

	Attributes
	----------
	chrom, pos, ref, alts : str
		Column values as found in the file. POS is kept as a string; the
		normalizer casts it and reports bad values with ``line_no``.
	line_no : int | None
		1-based physical line number in the input.
	"""

	chrom: str
	pos: str
	ref: str
	alts: str
	line_no: Optional[int] = None


def open_vcf(path: PathLike):
	"""Open a VCF for text reading, gunzipping when the name ends in ``.gz``."""
	if os.fspath(path).endswith('.gz'):
		return gzip.open(path, 'rt')
	return open(path, 'rt')


def split_record(line: str, line_no: Optional[int] = None) -> Optional[VcfRecord]:
	"""Split a tab-delimited data line into a VcfRecord.

	Returns None for a blank line or an empty CHROM column. Raises
	MalformedRecordError when the ALT column is missing.
	"""
	line = line.rstrip('\r\n')
	if not line:
		return None
	parts = line.split('\t')
	if not parts[COL_CHROM]:
		return None
	if len(parts) <= COL_ALT:
		raise MalformedRecordError(
			f"expected at least {COL_ALT + 1} tab-separated columns, found {len(parts)}",
			line_no,
		)
	return VcfRecord(parts[COL_CHROM], parts[COL_POS], parts[COL_REF], parts[COL_ALT], line_no)


class SimpleVCFReader:
	"""Minimal streaming VCF reader.

	Parameters
	----------
	source : str | os.PathLike | Iterable[str]
		Path to an (optionally gzipped) VCF, or an already open line stream.
		Streams are read but not closed.
	max_records : int | None
		Stop after this many data lines (blank / skipped lines included).
	"""

	def __init__(self, source: Union[PathLike, Iterable[str]], max_records: Optional[int] = None):
		self.source = source
		self.max_records = max_records
		self.header_lines = 0

	def _is_path(self) -> bool:
		return isinstance(self.source, (str, os.PathLike))

	def iter_lines(self) -> Iterator[Tuple[int, str]]:
		"""Yield ``(line_no, line)`` for every data line.

		Only the leading block of ``#`` lines is treated as header; the first
		line not starting with ``#`` and everything after it is data. A file
		with no data lines simply yields nothing.
		"""
		if self._is_path():
			with open_vcf(self.source) as fh:  # type: ignore[arg-type]
				yield from self._scan(fh)
		else:
			yield from self._scan(self.source)  # type: ignore[arg-type]

	def _scan(self, fh: Iterable[str]) -> Iterator[Tuple[int, str]]:
		self.header_lines = 0
		in_header = True
		count = 0
		for line_no, line in enumerate(fh, start=1):
			if in_header:
				if line.startswith('#'):
					self.header_lines += 1
					continue
				in_header = False
			if self.max_records is not None and count >= self.max_records:
				break
			count += 1
			yield line_no, line

	def parse(self) -> Iterator[VcfRecord]:
		"""Yield a VcfRecord per data line, silently dropping skippable lines."""
		for line_no, line in self.iter_lines():
			rec = split_record(line, line_no)
			if rec is not None:
				yield rec

	def __iter__(self) -> Iterator[VcfRecord]:
		return self.parse()
