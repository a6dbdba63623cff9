#!/usr/bin/env python3
"""
Plot ear-clipping triangulations and benchmark timings.

Usage:
    python3 scripts/visualize.py --tri out.tri [--output fig.png]
    python3 scripts/visualize.py --csv results/benchmark_results.csv [--output times.png]
"""

import argparse
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from matplotlib.collections import PatchCollection
from matplotlib.patches import Polygon as MplPolygon

from earclip.polyio import read_tri

plt.rcParams['font.size'] = 10
plt.rcParams['axes.labelsize'] = 12
plt.rcParams['axes.titlesize'] = 14
plt.rcParams['legend.fontsize'] = 10
plt.rcParams['figure.figsize'] = (10, 6)

COLORS = {
    'convex': '#377eb8',
    'random': '#e41a1c',
    'star': '#4daf4a',
}


def plot_triangulation(vertices, triangles, title, ax, color='#377eb8'):
    """Plot filled triangles over the polygon outline."""
    patches = []
    for tri in triangles:
        triangle = vertices[list(tri)]
        patches.append(MplPolygon(triangle, closed=True))

    p = PatchCollection(patches, alpha=0.4, facecolor=color, edgecolor='#333333', linewidth=0.5)
    ax.add_collection(p)

    poly_closed = np.vstack([vertices, vertices[0]])
    ax.plot(poly_closed[:, 0], poly_closed[:, 1], 'k-', linewidth=1.5)
    ax.scatter(vertices[:, 0], vertices[:, 1], c='black', s=20, zorder=5)

    ax.set_aspect('equal')
    ax.set_title(title)


def plot_tri_file(tri_path, output):
    points, triangles = read_tri(tri_path)
    vertices = np.array(points, dtype=np.float64)

    fig, ax = plt.subplots(figsize=(8, 8))
    plot_triangulation(vertices, triangles, f'{Path(tri_path).stem} ({len(triangles)} triangles)', ax)
    plt.tight_layout()
    plt.savefig(output, dpi=150, bbox_inches='tight')
    plt.close(fig)


def plot_benchmark_times(df, output):
    """Mean time per vertex count, one line per polygon family."""
    fig, ax = plt.subplots(figsize=(10, 6))

    for ptype in df['polygon_type'].unique():
        data = df[df['polygon_type'] == ptype].groupby('num_vertices')['time_ms'].mean().reset_index()
        ax.plot(data['num_vertices'], data['time_ms'],
                'o-', label=ptype, color=COLORS.get(ptype, 'gray'), linewidth=2, markersize=6)

    ax.set_xlabel('Number of Vertices (N)')
    ax.set_ylabel('Time (ms)')
    ax.set_title('Ear Clipping Performance')
    ax.legend(loc='upper left')
    ax.set_xscale('log')
    ax.set_yscale('log')
    ax.grid(True, alpha=0.3)

    plt.tight_layout()
    plt.savefig(output, dpi=150, bbox_inches='tight')
    plt.close(fig)


def main():
    parser = argparse.ArgumentParser(description='Plot triangulations and benchmark results')
    parser.add_argument('--tri', type=Path, help='Triangulation file (.tri) to draw')
    parser.add_argument('--csv', type=Path, help='Benchmark CSV written by scripts/benchmark.py')
    parser.add_argument('--output', '-o', type=Path, default=Path('figure.png'))
    args = parser.parse_args()

    if args.tri is None and args.csv is None:
        parser.error('one of --tri or --csv is required')

    args.output.parent.mkdir(parents=True, exist_ok=True)
    if args.tri is not None:
        plot_tri_file(args.tri, args.output)
    else:
        plot_benchmark_times(pd.read_csv(args.csv), args.output)

    print(f'Saved {args.output}')


if __name__ == '__main__':
    main()
