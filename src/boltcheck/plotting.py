"""
Plotting helpers for bolt configurations and evaluation results.

All save outputs are forced to `.svg` when `save_path` is provided.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import matplotlib.pyplot as plt
from matplotlib.patches import Circle, Rectangle

from .model.bolts import BoltConfiguration

if TYPE_CHECKING:
    from .evaluation.models import EvaluationResult

_LIMIT_STATE_LABELS = {
    "bolt_shear": "Bolt shear",
    "block_shear": "Block shear",
    "bearing": "Bearing",
}


def plot_bolt_configuration(
    config: BoltConfiguration,
    *,
    ax: plt.Axes | None = None,
    show: bool = True,
    save_path: str | Path | None = None,
    hole_allowance: float | None = None,
    length_unit: str = "in",
) -> plt.Axes:
    """Plot the bolt pattern inside its edge-distance outline."""
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 6))
    else:
        fig = ax.figure

    height, width = config.outline()
    ax.add_patch(
        Rectangle(
            (0.0, 0.0),
            width,
            height,
            linewidth=3,
            edgecolor="darkgray",
            facecolor="lightgray",
            alpha=0.3,
            zorder=1,
            label="Edge distances",
        )
    )

    visual_radius = config.bolt_diameter / 2.0
    points = config.bolt_points()
    for i, (y, z) in enumerate(points):
        ax.add_patch(
            Circle(
                (z, y),
                radius=visual_radius,
                facecolor="steelblue",
                edgecolor="black",
                linewidth=1.5,
                zorder=3,
            )
        )
        if hole_allowance is not None:
            ax.add_patch(
                Circle(
                    (z, y),
                    radius=config.hole_diameter(hole_allowance) / 2.0,
                    fill=False,
                    edgecolor="black",
                    linestyle="--",
                    linewidth=0.8,
                    zorder=2,
                )
            )
        ax.text(z, y, str(i + 1), ha="center", va="center", fontsize=8,
                fontweight="bold", color="white", zorder=4)

    cy, cz = config.centroid
    ax.plot(cz, cy, "k+", markersize=12, markeredgewidth=2, label="Centroid")

    margin = max(height, width, config.bolt_diameter * 4.0) * 0.1
    ax.set_xlim(-margin, width + margin)
    ax.set_ylim(-margin, height + margin)
    ax.set_aspect("equal")
    ax.set_xlabel(f"z ({length_unit})", fontsize=11)
    ax.set_ylabel(f"y ({length_unit})", fontsize=11)
    ax.grid(True, alpha=0.3, linestyle="--")
    ax.legend(loc="upper right")

    title = config.name or "Bolt Pattern"
    ax.set_title(
        f"{title}: {config.n_rows} x {config.n_columns} = {config.n_bolts} bolts, "
        f"d = {config.bolt_diameter:g} {length_unit} ({config.bolt_grade})",
        fontsize=12,
    )

    plt.tight_layout()
    _finish(fig, show=show, save_path=save_path)
    return ax


def plot_capacity_summary(
    result: "EvaluationResult",
    *,
    ax: plt.Axes | None = None,
    show: bool = True,
    save_path: str | Path | None = None,
    force_unit: str = "kip",
) -> plt.Axes:
    """Horizontal bars for each limit-state capacity against the demand line."""
    if ax is None:
        fig, ax = plt.subplots(figsize=(9, 4.5))
    else:
        fig = ax.figure

    states = list(result.capacities)
    values = [result.capacities[s] for s in states]
    labels = [_LIMIT_STATE_LABELS[s] for s in states]
    labels.append("Bolt tension")
    values.append(result.bolt_tensile_capacity)

    colors = []
    for state in states:
        colors.append("firebrick" if state == result.governing_limit_state else "steelblue")
    colors.append("lightgray")

    positions = list(range(len(values)))
    ax.barh(positions, values, color=colors, edgecolor="black", zorder=2)
    for pos, value in zip(positions, values):
        ax.text(value, pos, f" {value:.1f}", va="center", fontsize=9)

    ax.axvline(result.demand, color="black", linestyle="--", linewidth=1.5,
               label=f"Demand = {result.demand:.1f} {force_unit}", zorder=3)

    ax.set_yticks(positions)
    ax.set_yticklabels(labels)
    ax.invert_yaxis()
    ax.set_xlabel(f"Capacity ({force_unit})", fontsize=11)
    ax.grid(True, axis="x", alpha=0.3, linestyle="--")
    ax.legend(loc="lower right")

    ratio = result.utilization_ratio
    ratio_text = f"{ratio:.1%}" if ratio != float("inf") else "inf"
    ax.set_title(
        f"{result.connection.name}: {result.verdict} (utilization {ratio_text}, "
        f"governs: {_LIMIT_STATE_LABELS[result.governing_limit_state]})",
        fontsize=12,
    )

    plt.tight_layout()
    _finish(fig, show=show, save_path=save_path)
    return ax


def _finish(fig, *, show: bool, save_path: str | Path | None) -> None:
    if save_path is not None:
        out = Path(save_path)
        if out.suffix.lower() != ".svg":
            out = out.with_suffix(".svg")
        fig.savefig(str(out), format="svg", bbox_inches="tight")

    if show:
        plt.show()


__all__ = ["plot_bolt_configuration", "plot_capacity_summary"]
