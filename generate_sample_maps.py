#!/usr/bin/env python3
"""
Generate sample region maps and save PNG previews.

For each seed this writes three images, one per stage of the pipeline:
elevations only, elevations with cities, and the full map with routes.

Usage:
    python generate_sample_maps.py [seed ...]

If no seed is provided, seeds 1 to 5 are used.
"""

import sys
from pathlib import Path
sys.path.append(str(Path(__file__).parent))

import matplotlib.pyplot as plt
import numpy as np

from py_regionmap import (
    ClusteringError,
    generate_full,
    render_base,
    render_full,
    render_with_cities,
)
from py_regionmap.config import configure_logging, settings


def create_sample_map(seed, width, height, num_cities, output_dir):
    """Generate one map and save a preview of each pipeline stage."""

    print(f"\nGenerating region map for seed {seed}...")
    print(f"  Dimensions: {width}x{height}")
    print(f"  Requested cities: {num_cities}")

    try:
        region_map = generate_full(seed, width, height, num_cities)
    except ClusteringError as e:
        print(f"  Skipped: {e}")
        return None

    land_pct = np.mean(region_map.elevations >= 0) * 100
    print(f"  Land: {land_pct:.1f}% | Cities: {len(region_map.cities)} | "
          f"Route tiles: {len(region_map.routes)}")

    stages = {
        "base": render_base(region_map),
        "cities": render_with_cities(region_map),
        "full": render_full(region_map),
    }

    fig, axes = plt.subplots(1, len(stages), figsize=(5 * len(stages), 4))
    for ax, (name, image) in zip(axes, stages.items()):
        ax.imshow(image, interpolation="nearest")
        ax.set_title(name)
        ax.set_xticks([])
        ax.set_yticks([])
        plt.imsave(output_dir / f"region_{seed}_{name}.png", image)

    fig.suptitle(f"Seed: {seed}", fontsize=12)
    overview = output_dir / f"region_{seed}_overview.png"
    fig.savefig(overview, dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"  Saved to: {overview}")

    return region_map


def main():
    """Generate sample maps for the seeds given on the command line."""

    configure_logging(settings.log_level, settings.log_format)

    seeds = [int(arg) for arg in sys.argv[1:]] or [1, 2, 3, 4, 5]
    output_dir = Path("sample_maps")
    output_dir.mkdir(exist_ok=True)

    print("Generating sample region maps")
    print("=" * 60)

    generated = 0
    for seed in seeds:
        region_map = create_sample_map(
            seed,
            settings.default_map_width,
            settings.default_map_height,
            settings.default_num_cities,
            output_dir,
        )
        if region_map is not None:
            generated += 1

    print("=" * 60)
    print(f"Generated {generated}/{len(seeds)} maps in {output_dir}/")


if __name__ == "__main__":
    main()
