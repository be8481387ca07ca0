import pytest

from vcf2tab.core import normalize
from vcf2tab.metrics import variant_table
from vcf2tab.plot import plot_indel_length_distribution, plot_variant_type_pie
from vcf2tab.plot.base import hist_plot, smart_cutoff_values

import numpy as np


@pytest.fixture
def variant_df():
	variants = []
	for pos, ref, alts in [(10, "A", "G,AT"), (20, "ACG", "A"), (30, "C", "CTTTT"), (40, "GT", "CA")]:
		variants.extend(normalize("1", pos, ref, alts))
	return variant_table(variants)


def test_variant_type_pie_written(variant_df, tmp_path):
	out = tmp_path / "pie.png"
	assert plot_variant_type_pie(variant_df, output_path=str(out)) is None
	assert out.stat().st_size > 0


def test_variant_type_pie_empty_table_returns_none():
	assert plot_variant_type_pie(variant_table([])) is None


def test_indel_length_distribution_written(variant_df, tmp_path):
	out = tmp_path / "indel.png"
	plot_indel_length_distribution(variant_df, output_path=str(out))
	assert out.exists()


def test_indel_length_distribution_without_indels():
	df = variant_table(normalize("1", 10, "A", "G"))
	assert plot_indel_length_distribution(df) is None


def test_indel_length_distribution_requires_columns(variant_df):
	with pytest.raises(ValueError):
		plot_indel_length_distribution(variant_df.drop(columns=["LengthChange"]))


def test_hist_plot_returns_figure_without_path():
	fig = hist_plot([1, 2, 2, 3], title="t")
	assert fig is not None
	assert fig.axes[0].get_title().startswith("t")


def test_smart_cutoff_drops_extreme_tail():
	values = np.array([1.0] * 200 + [2.0] * 200 + [1000.0])
	kept, iters = smart_cutoff_values(values)
	assert iters >= 1
	assert kept.max() < 1000


def test_smart_cutoff_keeps_even_spread():
	values = np.arange(100, dtype=float)
	kept, iters = smart_cutoff_values(values)
	assert iters == 0
	assert kept.size == 100
