"""
plot.py: static matplotlib figure of a solved maze with row/col axes.

Cell (r, c) is centred on the integer point x=c, y=r, so row 0 is at the bottom.
"""

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from mazepath.orchestrator import MazeRun


def plot_maze(run: MazeRun, out_png: str, show_path: bool = True,
              wall_width: float = 3.5, grid_alpha: float = 0.25, grid_lw: float = 0.8):
    rows, cols = run.rows, run.cols
    inches = (7.2, 4.8)  # 720x480 @ 100 dpi
    dpi = 100
    fig = plt.figure(figsize=inches, dpi=dpi)
    ax = fig.add_subplot(111)
    ax.set_aspect('equal', adjustable='box')
    ax.set_xlim(-0.5, cols - 0.5)
    ax.set_ylim(-0.5, rows - 0.5)
    fig.patch.set_facecolor('white')
    ax.set_facecolor('white')

    # Axis ticks at cell centers
    ax.set_xticks(range(0, cols)); ax.set_xlabel("col")
    ax.set_yticks(range(0, rows)); ax.set_ylabel("row")

    # Alignment grid at cell borders (half-integers)
    ax.set_axisbelow(True)
    for xb in np.arange(-0.5, cols - 0.5 + 1, 1.0):
        ax.plot([xb, xb], [-0.5, rows - 0.5], color='0.85', linewidth=grid_lw, alpha=grid_alpha, zorder=0)
    for yb in np.arange(-0.5, rows - 0.5 + 1, 1.0):
        ax.plot([-0.5, cols - 0.5], [yb, yb], color='0.85', linewidth=grid_lw, alpha=grid_alpha, zorder=0)

    # Walls, outer border included (off-grid neighbours always count as walls)
    walls = run.graph.walls()
    for r in range(rows):
        for c in range(cols):
            n, e, s, w = walls[r, c]
            if n:
                ax.plot([c-0.5, c+0.5], [r+0.5, r+0.5], 'k-', linewidth=wall_width, zorder=2)
            if s:
                ax.plot([c-0.5, c+0.5], [r-0.5, r-0.5], 'k-', linewidth=wall_width, zorder=2)
            if e:
                ax.plot([c+0.5, c+0.5], [r-0.5, r+0.5], 'k-', linewidth=wall_width, zorder=2)
            if w:
                ax.plot([c-0.5, c-0.5], [r-0.5, r+0.5], 'k-', linewidth=wall_width, zorder=2)

    if show_path and len(run.path) > 1:
        cells = np.array(run.cells())
        ax.plot(cells[:, 1], cells[:, 0], '-', color='orange', linewidth=2.0, zorder=3)

    # Start/Goal markers at integer centers
    sr, sc = run.graph.cell_of(run.start)
    gr, gc = run.graph.cell_of(run.goal)
    ax.scatter(sc, sr, s=300, c='red', edgecolors='none', zorder=4)
    ax.scatter(gc, gr, s=300, c='green', edgecolors='none', zorder=4)

    plt.tight_layout(pad=0.6)
    fig.savefig(out_png, dpi=dpi)
    plt.close(fig)
