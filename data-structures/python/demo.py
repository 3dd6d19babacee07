"""
Balanced Search Tree Demo — Rotation cases, height growth, and tree shapes.

Generates:
- viz/*.png — Individual visualization files
- report.pdf — Comprehensive PDF report
"""

import sys
from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).parent / "src"))

from balanced_search_tree import TreeNode
from linked_list import ListNode

SEED = 42
np.random.seed(SEED)

MAX_ELEMENTS = 200

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)


def layout(tree):
    """Map each value to (in-order rank, depth) for plotting."""
    positions = {}
    edges = []

    def walk(node, depth, parent):
        if node.is_empty():
            return
        walk(node.left, depth + 1, node.value)
        positions[node.value] = (len(positions), -depth)
        if parent is not None:
            edges.append((parent, node.value))
        walk(node.right, depth + 1, node.value)

    walk(tree, 0, None)
    return positions, edges


def draw_tree(ax, tree, title):
    positions, edges = layout(tree)
    for parent, child in edges:
        (x0, y0), (x1, y1) = positions[parent], positions[child]
        ax.plot([x0, x1], [y0, y1], "-", color="gray", linewidth=1, zorder=1)
    for value, (x, y) in positions.items():
        ax.scatter(x, y, s=400, color="steelblue", edgecolors="black", zorder=2)
        ax.text(x, y, str(value), ha="center", va="center", color="white", fontsize=8, zorder=3)
    ax.set_title(title)
    ax.set_xticks([])
    ax.set_yticks([])
    ax.margins(0.15)


def example_1_rotation_cases():
    """The four single/double rotation cases on three elements."""
    print("=" * 60)
    print("Example 1: Rotation Cases")
    print("=" * 60)

    cases = {
        "right-right (left rotation)": [1, 2, 3],
        "left-left (right rotation)": [3, 2, 1],
        "left-right (double rotation)": [3, 1, 2],
        "right-left (double rotation)": [1, 3, 2],
    }

    fig, axes = plt.subplots(1, len(cases), figsize=(14, 3.5))
    for ax, (name, values) in zip(axes, cases.items()):
        tree = TreeNode.from_iterable(values)
        print(f"{name:30s} insert {values} -> pre-order {tree.pre_order()}, valid={tree.validate()}")
        draw_tree(ax, tree, f"{name}\ninsert {values}")
    fig.suptitle("Every case settles on root 2, children 1 and 3")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_rotation_cases.png", dpi=150)
    plt.close(fig)


def example_2_height_growth():
    """Height after each insertion compared with the AVL bound."""
    print("\n" + "=" * 60)
    print("Example 2: Height Growth")
    print("=" * 60)

    n = np.arange(1, MAX_ELEMENTS + 1)
    orders = {
        "ascending": np.arange(MAX_ELEMENTS),
        "shuffled": np.random.permutation(MAX_ELEMENTS),
    }

    heights = {}
    for name, order in orders.items():
        tree: TreeNode[int] = TreeNode()
        history = []
        for value in order:
            tree.insert(int(value))
            history.append(tree.height())
        assert tree.validate()
        heights[name] = np.array(history)
        print(f"{name:10s} final height = {history[-1]} for n = {MAX_ELEMENTS}")

    avl_bound = 1.44 * np.log2(n + 2)
    perfect = np.ceil(np.log2(n + 1))
    print(f"AVL bound at n = {MAX_ELEMENTS}: {avl_bound[-1]:.2f}")

    fig, ax = plt.subplots(figsize=(8, 6))
    ax.step(n, heights["ascending"], where="post", label="Ascending inserts", color="steelblue")
    ax.step(n, heights["shuffled"], where="post", label="Shuffled inserts", color="darkorange")
    ax.plot(n, avl_bound, "r--", linewidth=2, label="1.44 log2(n + 2)")
    ax.plot(n, perfect, "g:", linewidth=2, label="ceil(log2(n + 1))")
    ax.set_xlabel("Elements inserted")
    ax.set_ylabel("Height")
    ax.set_title("Tree Height vs. AVL Bound")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_height_growth.png", dpi=150)
    plt.close(fig)


def example_3_tree_shape():
    """Shape of a tree built from a shuffled sequence."""
    print("\n" + "=" * 60)
    print("Example 3: Tree Shape")
    print("=" * 60)

    values = [int(v) for v in np.random.permutation(31)]
    tree = TreeNode.from_iterable(values)
    print(f"Inserted: {values}")
    print(f"Result:   {tree}")

    fig, ax = plt.subplots(figsize=(12, 5))
    draw_tree(ax, tree, f"31 shuffled values, height {tree.height()}")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_tree_shape.png", dpi=150)
    plt.close(fig)


def example_4_linked_list():
    """Insert-after, delete and in-place reversal on the list."""
    print("\n" + "=" * 60)
    print("Example 4: Linked List")
    print("=" * 60)

    lst = ListNode.from_iterable([1, 2, 4])
    print(f"Built:            {lst}")
    lst.next.insert(3)
    print(f"Insert 3 after 2: {lst}")
    lst.delete()
    print(f"Delete head:      {lst}")
    lst.reverse()
    print(f"Reversed:         {lst}")


def generate_pdf_report(figures_data):
    """Generate PDF report from the saved PNGs."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    pdf_path = VIZ_DIR.parent / "report.pdf"

    with PdfPages(pdf_path) as pdf:
        # Title page
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.6, "Balanced Search Tree", fontsize=36, ha="center", fontweight="bold")
        fig.text(0.5, 0.5, "Recursive AVL Tree with In-Place Rotations", fontsize=24, ha="center")
        fig.text(0.5, 0.2, f"Seed: {SEED}", fontsize=12, ha="center", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        for title, png_name in figures_data:
            page = plt.figure(figsize=(11, 8.5))
            page.text(0.5, 0.98, title, fontsize=14, ha="center", fontweight="bold")
            img = plt.imread(VIZ_DIR / png_name)
            ax = page.add_axes([0.05, 0.05, 0.9, 0.88])
            ax.imshow(img)
            ax.axis("off")
            pdf.savefig(page)
            plt.close(page)

    print(f"PDF report saved to: {pdf_path}")
    return pdf_path


def main():
    print("\n" + "#" * 60)
    print("#" + " " * 18 + "BALANCED SEARCH TREE DEMO" + " " * 15 + "#")
    print("#" * 60)
    print(f"\nRandom seed: {SEED}")
    print(f"Output directory: {VIZ_DIR}")

    example_1_rotation_cases()
    example_2_height_growth()
    example_3_tree_shape()
    example_4_linked_list()

    generate_pdf_report([
        ("Example 1: Rotation Cases", "01_rotation_cases.png"),
        ("Example 2: Height Growth", "02_height_growth.png"),
        ("Example 3: Tree Shape", "03_tree_shape.png"),
    ])

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)


if __name__ == "__main__":
    main()
