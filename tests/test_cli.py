import pytest

from conftest import vcf_line
from vcf2tab.cli import build_parser, main


def test_convert_command(write_vcf, tmp_path):
	src = write_vcf([vcf_line(1, 10, "A", "G,T")], name="in.vcf.gz")
	out = tmp_path / "out.tsv"
	assert main(["convert", "-f", str(src), "-o", str(out), "--quiet"]) == 0
	assert out.read_text().splitlines()[1:] == ["chr1\t9\t10\tA\tG\t", "chr1\t9\t10\tA\tT\t"]


def test_convert_long_options(write_vcf, tmp_path):
	src = write_vcf([vcf_line(p, 10, "A", "G") for p in range(1, 4)])
	out = tmp_path / "out.tsv"
	main(["convert", "--filename", str(src), "--outputfile", str(out), "--max-lines", "2", "-q"])
	assert len(out.read_text().splitlines()) == 3


def test_help_exits_zero(capsys):
	with pytest.raises(SystemExit) as info:
		main(["convert", "--help"])
	assert info.value.code == 0
	assert "--filename" in capsys.readouterr().out


def test_missing_required_argument_exits_nonzero(capsys):
	with pytest.raises(SystemExit) as info:
		main(["convert", "-f", "in.vcf"])
	assert info.value.code != 0
	assert "usage" in capsys.readouterr().err


def test_no_subcommand_prints_help(capsys):
	assert main([]) == 1
	assert "convert" in capsys.readouterr().out


def test_missing_input_file(tmp_path, capsys):
	with pytest.raises(SystemExit) as info:
		main(["convert", "-f", str(tmp_path / "nope.vcf"), "-o", str(tmp_path / "o.tsv")])
	assert info.value.code == 1
	assert "Input file not found" in capsys.readouterr().err


def test_bad_position_exits_one(write_vcf, tmp_path, capsys):
	src = write_vcf([vcf_line(1, "x", "A", "G")])
	with pytest.raises(SystemExit) as info:
		main(["convert", "-f", str(src), "-o", str(tmp_path / "o.tsv"), "-q"])
	assert info.value.code == 1
	assert "line 4" in capsys.readouterr().err


def test_summary_command(write_vcf, tmp_path):
	src = write_vcf([vcf_line(1, 10, "A", "G,AT"), vcf_line(2, 20, "CAA", "C")])
	outdir = tmp_path / "summary"
	assert main(["summary", "--vcf", str(src), "--out", str(outdir)]) == 0
	for name in ["variants.tsv", "variant_types.tsv", "variant_type_pie.png", "indel_length_distribution.png"]:
		assert (outdir / name).exists()


def test_summary_header_only(write_vcf, tmp_path):
	src = write_vcf([])
	outdir = tmp_path / "summary"
	assert main(["summary", "--vcf", str(src), "--out", str(outdir)]) == 0
	assert (outdir / "variant_types.tsv").exists()
	assert not (outdir / "variant_type_pie.png").exists()


def test_parser_defaults():
	args = build_parser().parse_args(["convert", "-f", "a.vcf", "-o", "b.tsv"])
	assert args.max_lines is None
	assert args.quiet is False
