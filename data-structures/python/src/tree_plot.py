"""Matplotlib rendering of a BinarySearchTree's shape.

Each node is placed at x = its in-order rank and y = minus its depth, so the
picture reads top-down with keys increasing left to right. Rendering never
mutates the tree.
"""

from pathlib import Path
from typing import List, Optional, Tuple, Union

import numpy as np
import matplotlib.pyplot as plt

from binary_search_tree import BinarySearchTree

COLORS = {
    "node": "#3498db",
    "edge": "#2c3e50",
    "text": "white",
    "empty": "#7f8c8d",
}

FIGSIZE = (10, 6)


def layout(tree: BinarySearchTree) -> Tuple[list, np.ndarray, np.ndarray, List[Tuple[int, int]]]:
    """Compute node coordinates and parent-child edges.

    Returns ``(values, xs, ys, edges)`` where ``values`` is in-order, ``xs``
    and ``ys`` are float arrays aligned with it, and ``edges`` holds
    ``(parent_index, child_index)`` pairs into those arrays.
    """
    values: list = []
    depths: List[int] = []
    parents: List[Optional[int]] = []
    index_of = {}

    stack: list = []
    node = tree.root
    depth = 0
    while stack or node is not None:
        while node is not None:
            stack.append((node, depth))
            node = node.left
            depth += 1
        node, depth = stack.pop()
        index_of[id(node)] = len(values)
        values.append(node.value)
        depths.append(depth)
        parents.append(None if node.parent is None else id(node.parent))
        node = node.right
        depth += 1

    edges = [(index_of[p], i) for i, p in enumerate(parents) if p is not None]
    xs = np.arange(len(values), dtype=float)
    ys = -np.asarray(depths, dtype=float)
    return values, xs, ys, edges


def plot_tree(tree: BinarySearchTree, ax=None, title: Optional[str] = None):
    if ax is None:
        fig, ax = plt.subplots(figsize=FIGSIZE)
    else:
        fig = ax.figure

    values, xs, ys, edges = layout(tree)
    ax.set_axis_off()
    if title is not None:
        ax.set_title(title, fontsize=12, fontweight="bold")

    if not values:
        ax.text(0.5, 0.5, "(empty tree)", ha="center", va="center",
                color=COLORS["empty"], transform=ax.transAxes)
        return fig

    for parent, child in edges:
        ax.plot([xs[parent], xs[child]], [ys[parent], ys[child]],
                color=COLORS["edge"], linewidth=1.2, zorder=1)
    ax.scatter(xs, ys, s=600, c=COLORS["node"], edgecolors=COLORS["edge"], zorder=2)
    for x, y, value in zip(xs, ys, values):
        ax.annotate(str(value), xy=(x, y), ha="center", va="center",
                    color=COLORS["text"], fontsize=9, fontweight="bold", zorder=3)

    ax.set_xlim(xs.min() - 1, xs.max() + 1)
    ax.set_ylim(ys.min() - 1, 1)
    return fig


def save_tree_plot(tree: BinarySearchTree, path: Union[str, Path],
                   title: Optional[str] = None) -> Path:
    path = Path(path)
    fig = plot_tree(tree, title=title)
    fig.savefig(path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return path
