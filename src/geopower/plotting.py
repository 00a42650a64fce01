"""Bar charts of OAT sensitivity results (matplotlib)."""

import math
from pathlib import Path

from matplotlib.figure import Figure

from geopower.types import SensitivityResult

ABSOLUTE_COLOR = (0.2, 0.6, 0.8)
RELATIVE_COLOR = (0.8, 0.4, 0.4)
NOT_AVAILABLE = "N/A"


def _finite_or_zero(values):
    return [v if math.isfinite(v) else 0.0 for v in values]


def _mark_not_available(ax, positions, values):
    for pos, value in zip(positions, values):
        if not math.isfinite(value):
            ax.text(pos, 0, NOT_AVAILABLE, ha="center", va="bottom")


def plot_results(
    results: list[SensitivityResult],
    path: Path | str | None = None,
    dpi: int = 150,
) -> Figure:
    """Two stacked bar charts: absolute change [GWe] and relative change [%].

    Non-finite values (relative change against a zero baseline) are drawn
    with zero height and labelled N/A. The figure is not registered with
    pyplot. Saves it to `path` if given, and returns it either way.
    """
    names = [r.name for r in results]
    positions = list(range(len(results)))
    absolute_raw = [r.absolute_change for r in results]
    relative_raw = [r.relative_change_pct for r in results]

    fig = Figure(figsize=(8, 8))
    ax1, ax2 = fig.subplots(2, 1)

    ax1.bar(positions, _finite_or_zero(absolute_raw), color=ABSOLUTE_COLOR)
    _mark_not_available(ax1, positions, absolute_raw)
    ax1.set_title("Absolute Change in Power Capacity")
    ax1.set_xlabel("Factors")
    ax1.set_ylabel("Absolute Change (GWe)")

    ax2.bar(positions, _finite_or_zero(relative_raw), color=RELATIVE_COLOR)
    _mark_not_available(ax2, positions, relative_raw)
    title = "Relative Change in Power Capacity"
    if any(r.is_degenerate for r in results):
        title += " (N/A: baseline power is zero)"
    ax2.set_title(title)
    ax2.set_xlabel("Factors")
    ax2.set_ylabel("Relative Change (%)")

    for ax in (ax1, ax2):
        ax.set_xticks(positions)
        ax.set_xticklabels(names, rotation=45, ha="right")
        ax.grid(True)

    fig.tight_layout()
    if path is not None:
        fig.savefig(path, dpi=dpi)
    return fig
