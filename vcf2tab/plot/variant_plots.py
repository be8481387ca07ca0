"""Summary plots over a normalized variant table.

Implements:
 - variant class composition (pie)
 - indel length change distribution (histogram, insertions > 0 > deletions)

Both expect the DataFrame produced by
``vcf2tab.metrics.variant_table``.
"""

from __future__ import annotations

from typing import Optional

import pandas as pd
import matplotlib.pyplot as plt

from .base import set_plot_style, save_figure, hist_plot
from ..metrics.variant_metrics import summarize_variant_types

__all__ = [
	"plot_variant_type_pie",
	"plot_indel_length_distribution",
]


def plot_variant_type_pie(
	variant_df: pd.DataFrame,
	*,
	output_path: Optional[str] = None,
	title: str = "Variant class composition",
) -> Optional[plt.Figure]:
	"""Pie chart of SNV / MNV / INS / DEL / COMPLEX counts.

	Classes with zero count are left out of the pie. Returns None without
	drawing when the table is empty.
	"""
	summary = summarize_variant_types(variant_df)
	summary = summary[summary["Count"] > 0]
	total = int(summary["Count"].sum())
	if total == 0:
		print("No variants to plot for variant class pie.")
		return None
	set_plot_style()
	fig, ax = plt.subplots(figsize=(5, 5))
	labels = [f"{t}: {c} ({c / total * 100:.2f}%)" for t, c in zip(summary["Type"], summary["Count"])]
	ax.pie(summary["Count"].values, labels=labels, autopct=None, startangle=90, counterclock=False)
	ax.set_title(f"{title}\nTotal variants: {total}")
	fig.tight_layout()
	return save_figure(fig, output_path)


def plot_indel_length_distribution(
	variant_df: pd.DataFrame,
	*,
	output_path: Optional[str] = None,
	title: str = "Indel length change distribution",
	use_smart_cutoff: bool = False,
) -> Optional[plt.Figure]:
	"""Histogram of ``len(alt) - len(ref)`` over INS / DEL / COMPLEX rows."""
	if "LengthChange" not in variant_df.columns or "Type" not in variant_df.columns:
		raise ValueError("DataFrame must contain Type and LengthChange columns")
	indels = variant_df.loc[variant_df["Type"].isin(["INS", "DEL", "COMPLEX"]), "LengthChange"]
	indels = indels[indels != 0]
	if indels.empty:
		print("No indels to plot for length distribution.")
		return None
	return hist_plot(
		indels,
		output_path=output_path,
		title=title,
		xlabel="Length change (bp, alt - ref)",
		discrete=True,
		enable_smart_cutoff=use_smart_cutoff,
	)
