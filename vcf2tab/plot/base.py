"""Base plotting utilities shared by the summary plots.

Each helper returns a matplotlib Figure when ``output_path`` is not
provided; otherwise the figure is saved, closed and ``None`` is returned.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

import matplotlib.pyplot as plt
import seaborn as sns
import pandas as pd
import numpy as np

__all__ = [
	"set_plot_style",
	"save_figure",
	"smart_cutoff_values",
	"hist_plot",
]


def set_plot_style() -> None:
	"""Apply a unified visual style."""
	sns.set_theme(style="whitegrid")
	plt.rcParams.update({
		"axes.titlesize": 13,
		"axes.labelsize": 11,
		"font.size": 10,
		"figure.dpi": 100,
	})


def save_figure(fig: plt.Figure, output_path: Optional[str]) -> Optional[plt.Figure]:
	"""Save figure if ``output_path`` provided else return it.

	Parameters
	----------
	fig : matplotlib.figure.Figure
		Figure to save or return.
	output_path : str | None
		Path to save. If None the figure is returned and *not* closed.
	"""
	if output_path:
		fig.savefig(output_path, bbox_inches="tight")
		plt.close(fig)
		return None
	return fig


def smart_cutoff_values(
	values: np.ndarray,
	pct: float = 99.5,
	max_iter: int = 5,
) -> Tuple[np.ndarray, int]:
	"""Iteratively drop the upper tail while it is longer than the bulk.

	A pass removes values above the ``pct`` percentile whenever
	``max - p[pct] > p[pct] - median``. Returns the kept values and the
	number of passes applied. NaNs are dropped.
	"""
	current = values[~np.isnan(values)]
	iters = 0
	while iters < max_iter and current.size:
		cur_max = float(current.max())
		hi = float(np.percentile(current, pct))
		mid = float(np.percentile(current, 50))
		if (cur_max - hi) > (hi - mid):
			current = current[current <= hi]
			iters += 1
		else:
			break
	return current, iters


def hist_plot(
	values: Union[pd.Series, np.ndarray, list],
	*,
	output_path: Optional[str] = None,
	title: str = "",
	xlabel: str = "",
	bins: Union[int, str] = 50,
	color: str = "steelblue",
	kde: bool = False,
	discrete: bool = False,
	figsize: Tuple[int, int] = (8, 5),
	smart_cutoff: float = 99.5,
	enable_smart_cutoff: bool = True,
	smart_cutoff_max_iter: int = 5,
) -> Optional[plt.Figure]:
	"""Histogram with an optional smart upper cutoff noted in the title."""
	set_plot_style()
	arr = np.asarray(values, dtype=float)
	mask = ~np.isnan(arr)
	orig_min = float(arr[mask].min()) if mask.any() else 0.0
	orig_max = float(arr[mask].max()) if mask.any() else 0.0
	filtered = arr[mask]
	cut_phrase = ""
	if enable_smart_cutoff and mask.any() and 0 < smart_cutoff < 100:
		filtered, iters = smart_cutoff_values(arr, smart_cutoff, smart_cutoff_max_iter)
		if iters > 0:
			cut_phrase = f"(smart cutoff at {smart_cutoff:.2f}% iter={iters} | original range:{orig_min:g}-{orig_max:g})"
		else:
			cut_phrase = f"(no cutoff | original range:{orig_min:g}-{orig_max:g})"
	elif mask.any():
		cut_phrase = f"(original range:{orig_min:g}-{orig_max:g})"
	fig, ax = plt.subplots(figsize=figsize)
	if filtered.size:
		if discrete:
			sns.histplot(filtered, discrete=True, kde=kde, color=color, ax=ax)
		else:
			sns.histplot(filtered, bins=bins, kde=kde, color=color, ax=ax)
	ax.set_title(f"{title}\n{cut_phrase}" if cut_phrase else title)
	ax.set_xlabel(xlabel)
	ax.set_ylabel("Count")
	fig.tight_layout()
	return save_figure(fig, output_path)
