import sys
import os
import argparse
import matplotlib.pyplot as plt

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from nexus.basis import default_basis
from nexus.groups import ParticleCategory
from nexus.projection import project, root_edges
from nexus.roots import generate_roots

COLORS = {
    ParticleCategory.FERMION: "#ec4899",
    ParticleCategory.STRONG: "#10b981",
    ParticleCategory.WEAK: "#8b5cf6",
    ParticleCategory.ELECTROMAGNETIC: "#06b6d4",
    ParticleCategory.GRAVITATIONAL: "#a78bfa",
}
DEFAULT_COLOR = "#3b82f6"


def plot_group(group: str, angle: float, output_path: str):
    print(f"Projecting {group}...")
    roots = generate_roots(group)
    points = project(roots, angle, default_basis(group))

    plt.figure(figsize=(8, 8))

    for i, j in root_edges(roots):
        plt.plot([points[i].x, points[j].x], [points[i].y, points[j].y],
                 color="slategray", alpha=0.08, linewidth=0.5)

    xs = [p.x for p in points]
    ys = [p.y for p in points]
    colors = [COLORS.get(p.original.category, DEFAULT_COLOR) for p in points]
    plt.scatter(xs, ys, c=colors, s=12, zorder=3)

    plt.title(f"{group} Petrie projection ({len(points)} roots)")
    plt.gca().set_aspect("equal")
    plt.axis("off")

    plt.savefig(output_path, dpi=150)
    print(f"Projection saved to {output_path}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Render a root system projection to PNG")
    parser.add_argument("group", nargs="?", default="E8")
    parser.add_argument("--angle", type=float, default=0.0)
    parser.add_argument("--output", default=None)
    args = parser.parse_args()
    plot_group(args.group, args.angle, args.output or f"{args.group.lower()}_projection.png")
