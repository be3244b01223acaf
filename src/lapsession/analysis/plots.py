"""Plot generation for recorded sessions."""

from __future__ import annotations

from pathlib import Path

import matplotlib
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure

from lapsession.session.models import Session
from lapsession.session.store import calculate_average_lap

matplotlib.use("Agg")


def _save_dual_format(fig: Figure, out_base: Path) -> None:
    """Write a figure to PNG and PDF with a shared base path.

    Args:
        fig: Figure object to persist.
        out_base: Output path without suffix.
    """
    out_base.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out_base.with_suffix(".png"), dpi=180, bbox_inches="tight")
    fig.savefig(out_base.with_suffix(".pdf"), bbox_inches="tight")


def export_lap_time_plot(session: Session, out_base: str | Path) -> None:
    """Plot the lap times of a session with its average.

    Args:
        session: Session whose laps are drawn.
        out_base: Output path without suffix.
    """
    laps = np.arange(1, len(session.lap_times) + 1)
    average = calculate_average_lap(session)

    fig, ax = plt.subplots(figsize=(6, 4))
    ax.bar(laps, session.lap_times, width=0.6, alpha=0.8)
    ax.axhline(average, color="tab:red", lw=1.5, ls="--", label=f"Average {average:.2f} s")
    ax.set_xticks(laps)
    ax.set_xlabel("Lap")
    ax.set_ylabel("Lap time [s]")
    ax.set_title(f"{session.driver_name} | {session.track_name} | {session.vehicle_name}")
    ax.grid(True, axis="y", alpha=0.3)
    ax.legend()
    _save_dual_format(fig, Path(out_base))
    plt.close(fig)
