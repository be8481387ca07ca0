"""Stream driver: VCF lines in, normalized tab-delimited rows out.

``convert`` works on any line iterable and writable text sink;
``convert_file`` adds path handling (gzip detection on the input, UTF-8
output) and guarantees both files are closed on every exit path.
Errors are not caught here: a malformed POS or a truncated line aborts the
run and whatever was already written stays on disk.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, TextIO

from .core.normalize import normalize_record
from .io.tab_writer import TabWriter, open_output
from .io.vcf_reader import SimpleVCFReader, open_vcf, split_record
from .utils import ProgressPrinter, log_info

__all__ = ["ConvertOptions", "ConvertStats", "convert", "convert_file"]


@dataclass
class ConvertOptions:
	"""Run-time switches for a conversion.

	max_lines : int | None
		Stop after this many data lines; None processes the whole input.
	progress : bool
		Print a dot every 10 data lines and a count every 1,000.
	"""

	max_lines: Optional[int] = None
	progress: bool = True


@dataclass
class ConvertStats:
	header_lines: int = 0
	data_lines: int = 0
	skipped_records: int = 0
	variants_written: int = 0


def convert(
	lines: Iterable[str],
	sink: TextIO,
	options: Optional[ConvertOptions] = None,
	progress_stream: Optional[TextIO] = None,
) -> ConvertStats:
	"""Convert VCF ``lines`` and write the table to ``sink``.

	The header row is always written, so an empty or header-only input
	yields a header-only table.
	"""
	options = options or ConvertOptions()
	reader = SimpleVCFReader(lines, max_records=options.max_lines)
	writer = TabWriter(sink)
	progress = ProgressPrinter(enabled=options.progress, stream=progress_stream)
	stats = ConvertStats()

	writer.write_header()
	for line_no, line in reader.iter_lines():
		stats.data_lines += 1
		progress.tick()
		rec = split_record(line, line_no)
		if rec is None:
			stats.skipped_records += 1
			continue
		writer.write_variants(normalize_record(rec))
	progress.finish()

	stats.header_lines = reader.header_lines
	stats.variants_written = writer.rows_written
	return stats


def convert_file(input_path, output_path, options: Optional[ConvertOptions] = None) -> ConvertStats:
	"""Convert the VCF at ``input_path`` (``.gz`` aware) into ``output_path``."""
	options = options or ConvertOptions()
	log_info(f"Converting {input_path} -> {output_path}")
	with open_vcf(input_path) as fh, open_output(output_path) as out:
		stats = convert(fh, out, options)
	log_info(
		f"Done: {stats.data_lines:,} data lines, {stats.variants_written:,} variants written"
		f" ({stats.skipped_records:,} skipped, {stats.header_lines:,} header lines)"
	)
	return stats
