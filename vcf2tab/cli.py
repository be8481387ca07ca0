"""Command line interface for vcf2tab.

Current subcommands:
	convert  – VCF (1-based inclusive) to 0-based exclusive tab-delimited table
	summary  – variant class counts and plots for a VCF

Example:
	python -m vcf2tab convert -f input.vcf.gz -o output.tsv
"""

from __future__ import annotations

import argparse
from pathlib import Path

from .convert import ConvertOptions, convert_file
from .exceptions import Vcf2TabError
from .io import SimpleVCFReader
from .metrics import compute_variant_metrics, summarize_variant_types
from .plot import plot_variant_type_pie, plot_indel_length_distribution
from .utils import log_error, log_info


def _require_file(path: str) -> None:
	if not Path(path).is_file():
		log_error(f"Input file not found: {path}")


def cmd_convert(args: argparse.Namespace) -> int:
	_require_file(args.filename)
	options = ConvertOptions(max_lines=args.max_lines, progress=not args.quiet)
	try:
		convert_file(args.filename, args.outputfile, options)
	except (Vcf2TabError, OSError, EOFError) as exc:
		log_error(f"Conversion failed, {args.outputfile} is incomplete: {exc}")
	return 0


def cmd_summary(args: argparse.Namespace) -> int:
	_require_file(args.vcf)
	outdir = Path(args.out)
	outdir.mkdir(parents=True, exist_ok=True)

	reader = SimpleVCFReader(args.vcf, max_records=args.max_lines)
	try:
		variant_df = compute_variant_metrics(reader)
	except (Vcf2TabError, OSError, EOFError) as exc:
		log_error(f"Could not read {args.vcf}: {exc}")
	summary_df = summarize_variant_types(variant_df)

	variant_df.to_csv(outdir / 'variants.tsv', sep='\t', index=False)
	summary_df.to_csv(outdir / 'variant_types.tsv', sep='\t', index=False)
	log_info(f"{len(variant_df):,} variants from {args.vcf}")
	for row in summary_df.itertuples(index=False):
		log_info(f"  {row.Type:<8} {row.Count:>10,} ({row.Fraction * 100:.2f}%)")

	if variant_df.empty:
		print("No variant records found.")
		return 0
	plot_variant_type_pie(variant_df, output_path=str(outdir / 'variant_type_pie.png'))
	plot_indel_length_distribution(variant_df, output_path=str(outdir / 'indel_length_distribution.png'))
	print(f"Summary tables and plots written to {outdir}")
	return 0


def build_parser() -> argparse.ArgumentParser:
	p = argparse.ArgumentParser(prog="vcf2tab", description="Convert VCF to a 0-based exclusive tab-delimited table")
	sub = p.add_subparsers(dest="command")
	sp = sub.add_parser("convert", help="Convert a VCF or VCF.GZ file")
	sp.add_argument("-f", "--filename", required=True, help="VCF file to load (.gz is decompressed)")
	sp.add_argument("-o", "--outputfile", required=True, help="Output tab-delimited file")
	sp.add_argument("--max-lines", type=int, default=None, help="Only convert the first N data lines (debug)")
	sp.add_argument("-q", "--quiet", action="store_true", help="Do not print progress dots")
	sp.set_defaults(func=cmd_convert)

	sp2 = sub.add_parser("summary", help="Variant class counts and plots")
	sp2.add_argument("--vcf", required=True, help="Input VCF or VCF.GZ file")
	sp2.add_argument("--out", required=True, help="Output directory for tables and plots")
	sp2.add_argument("--max-lines", type=int, default=None, help="Limit number of data lines parsed (debug)")
	sp2.set_defaults(func=cmd_summary)
	return p


def main(argv=None):
	parser = build_parser()
	args = parser.parse_args(argv)
	if not hasattr(args, 'func'):
		parser.print_help()
		return 1
	return args.func(args)


if __name__ == "__main__":  # pragma: no cover
	raise SystemExit(main())
