"""Plotting API for variant summaries.

Import convenience: ``from vcf2tab.plot import plot_variant_type_pie``.
"""

from .variant_plots import *  # noqa: F401,F403
from . import base as _base  # keep base accessible if needed

__all__ = ["plot_variant_type_pie", "plot_indel_length_distribution"]
