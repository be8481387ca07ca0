import pytest

from conftest import vcf_line
from vcf2tab.core import NormalizedVariant, normalize
from vcf2tab.io import SimpleVCFReader
from vcf2tab.metrics import VARIANT_TYPES, classify_variant, compute_variant_metrics, summarize_variant_types, variant_table


@pytest.mark.parametrize(
	"ref, alt, expected",
	[
		("A", "G", "SNV"),
		("AC", "GT", "MNV"),
		("", "TTA", "INS"),
		("CG", "", "DEL"),
		("CG", "T", "COMPLEX"),
		("", "", "NONE"),
	],
)
def test_classify_variant(ref, alt, expected):
	assert classify_variant(ref, alt) == expected


def test_variant_table_columns_and_length_change():
	df = variant_table(normalize("1", 10, "ACGT", "A,AACGT,TCGA"))
	assert list(df.columns) == ["Chrom", "Start", "End", "Ref", "Alt", "Type", "LengthChange"]
	assert df["Type"].tolist() == ["DEL", "INS", "MNV"]
	assert df["LengthChange"].tolist() == [-3, 1, 0]
	assert df["Start"].dtype == "int64"


def test_variant_table_empty():
	df = variant_table([])
	assert df.empty
	assert "Type" in df.columns


def test_summarize_counts_every_class():
	df = variant_table([
		NormalizedVariant("chr1", 9, 10, "A", "G"),
		NormalizedVariant("chr1", 19, 20, "C", "T"),
		NormalizedVariant("chr1", 30, 30, "", "A"),
		NormalizedVariant("chr1", 40, 42, "AT", ""),
	])
	summary = summarize_variant_types(df)
	assert summary["Type"].tolist() == VARIANT_TYPES
	counts = dict(zip(summary["Type"], summary["Count"]))
	assert counts == {"SNV": 2, "MNV": 0, "INS": 1, "DEL": 1, "COMPLEX": 0, "NONE": 0}
	assert summary["Fraction"].sum() == pytest.approx(1.0)


def test_summarize_empty_table():
	summary = summarize_variant_types(variant_table([]))
	assert summary["Count"].sum() == 0
	assert (summary["Fraction"] == 0).all()


def test_summarize_requires_type_column():
	with pytest.raises(ValueError):
		summarize_variant_types(variant_table([]).drop(columns=["Type"]))


def test_compute_variant_metrics_from_file(write_vcf):
	path = write_vcf([vcf_line(1, 10, "A", "G,AT"), vcf_line("", 11, "A", "G"), vcf_line(2, 5, "CAA", "C")])
	df = compute_variant_metrics(SimpleVCFReader(str(path)))
	assert df["Chrom"].tolist() == ["chr1", "chr1", "chr2"]
	assert df["Type"].tolist() == ["SNV", "INS", "DEL"]
