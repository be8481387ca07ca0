"""Writer (and reader) for the 0-based tab-delimited output table.

Format::

	region	sequenceid	startposition	endposition	refsequence	altsequence
	chr1	9	10	A	G

Every line, header included, ends with a tab before the newline. Data rows
carry five values (chromosome, start, end, ref, alt) under the six-name
header.
"""

from __future__ import annotations

from typing import Iterable, TextIO

import pandas as pd

from ..core.normalize import NormalizedVariant

__all__ = ["HEADER_FIELDS", "TabWriter", "format_row", "open_output", "read_tab"]

HEADER_FIELDS = (
	"region",
	"sequenceid",
	"startposition",
	"endposition",
	"refsequence",
	"altsequence",
)

TABLE_COLUMNS = ["Chrom", "Start", "End", "Ref", "Alt"]


def format_row(fields: Iterable[str]) -> str:
	return "".join(f"{f}\t" for f in fields) + "\n"


def open_output(path) -> TextIO:
	return open(path, "w", encoding="utf-8", newline="\n")


class TabWriter:
	"""Serialise NormalizedVariant rows to a writable text sink."""

	def __init__(self, sink: TextIO):
		self.sink = sink
		self.rows_written = 0

	def write_header(self) -> None:
		self.sink.write(format_row(HEADER_FIELDS))

	def write_variant(self, variant: NormalizedVariant) -> None:
		self.sink.write(format_row(variant.to_fields()))
		self.rows_written += 1

	def write_variants(self, variants: Iterable[NormalizedVariant]) -> None:
		for v in variants:
			self.write_variant(v)


def read_tab(path) -> pd.DataFrame:
	"""Load a converted table into a DataFrame.

	Columns: Chrom, Start, End, Ref, Alt. Empty alleles stay empty strings
	(no NaN) and coordinates are integers.
	"""
	try:
		df = pd.read_csv(
			path,
			sep="\t",
			header=None,
			skiprows=1,
			names=TABLE_COLUMNS + ["_trailing"],
			usecols=range(len(TABLE_COLUMNS)),
			dtype=str,
			keep_default_na=False,
		)
	except pd.errors.EmptyDataError:
		# header-only table
		df = pd.DataFrame({c: pd.Series(dtype=str) for c in TABLE_COLUMNS})
	for col in ("Start", "End"):
		df[col] = df[col].astype(int)
	return df
