"""
Plotting utilities for benchmark results.
Consistent styling and a horizontal bar chart of per-algorithm timings.
"""

import os

import numpy as np
import matplotlib
matplotlib.use('Agg')  # Non-interactive backend for saving
import matplotlib.pyplot as plt


# ---------------------------------------------------------------------------
# PlotStyle -- shared styling helpers
# ---------------------------------------------------------------------------

class PlotStyle:
    """Centralised styling and figure management for benchmark plots."""

    # Colorblind-friendly palette
    PALETTE = ['#2E86AB', '#F18F01', '#2E7D32', '#C73E1D', '#7B1FA2', '#00838F']

    @staticmethod
    def setup_style():
        """Set matplotlib rcParams for clean report figures."""
        plt.rcParams.update({
            'font.family': 'sans-serif',
            'font.size': 11,
            'axes.labelsize': 12,
            'axes.titlesize': 14,
            'axes.titleweight': 'bold',
            'figure.facecolor': 'white',
            'axes.facecolor': 'white',
            'axes.edgecolor': '#333333',
            'axes.grid': True,
            'axes.axisbelow': True,
            'axes.spines.top': False,
            'axes.spines.right': False,
            'grid.color': '#E0E0E0',
            'grid.linewidth': 0.5,
        })

    @staticmethod
    def create_figure(nrows=1, ncols=1, figsize=None):
        """Return (fig, axes)."""
        fig, axes = plt.subplots(nrows, ncols, figsize=figsize)
        return fig, axes

    @staticmethod
    def save_figure(fig, filepath, dpi=150):
        """Save *fig* to *filepath*, creating directories as needed."""
        directory = os.path.dirname(filepath)
        if directory:
            os.makedirs(directory, exist_ok=True)
        fig.tight_layout()
        fig.savefig(filepath, dpi=dpi, facecolor='white', edgecolor='none')
        plt.close(fig)


# ---------------------------------------------------------------------------
# Standalone plotting functions
# ---------------------------------------------------------------------------

def plot_timing_bar(values, title, filepath):
    """Horizontal bar chart of one timing statistic per algorithm.

    Parameters
    ----------
    values : dict of str -> float  -- seconds per label
    title : str
    filepath : str
    """
    PlotStyle.setup_style()
    labels = list(values.keys())
    seconds = np.array([values[k] for k in labels], dtype=float)

    fig, ax = PlotStyle.create_figure(figsize=(10, max(4, 0.6 * len(labels))))
    y_pos = np.arange(len(labels))
    colours = [PlotStyle.PALETTE[i % len(PlotStyle.PALETTE)] for i in range(len(labels))]
    bars = ax.barh(y_pos, seconds, color=colours, edgecolor='black', linewidth=0.5)

    # Annotate bar values
    for bar, t in zip(bars, seconds):
        ax.text(bar.get_width(), bar.get_y() + bar.get_height() / 2,
                f' {t:.6f} s', va='center', fontsize=9)

    ax.set_yticks(y_pos)
    ax.set_yticklabels(labels)
    ax.set_xlabel('Time [s]')
    ax.set_title(title)
    ax.invert_yaxis()
    PlotStyle.save_figure(fig, filepath)
