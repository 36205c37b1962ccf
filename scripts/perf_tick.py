"""
Multi-N tick performance validation.

Runs the update engine on square seas of increasing size and reports
median/p90 tick time. Populations scale with the grid (25% fish, 5% sharks).
"""

import numpy as np
import time
import gc

from wator.data_types import SimulationConfig
from wator.engine import UpdateEngine
from wator.rng import make_rng, make_seed
from wator.world import World


def build_world(side: int):
    """Create a populated side x side world and its engine."""
    config = SimulationConfig(fish_spawn_period=3, shark_spawn_period=10, shark_starve_limit=4)
    rng = make_rng(make_seed("perf", side))
    cells = side * side
    world = World.create(side, side, cells // 4, cells // 20, config, rng)
    return world, UpdateEngine(world, rng)


def run_tick_perf_test(side: int, runs: int = 25) -> dict:
    """
    Run tick performance test at given grid side.

    Args:
        side: Grid width and height
        runs: Number of measured ticks

    Returns:
        Dict with p50, p90, min, max and final population
    """
    world, engine = build_world(side)

    # Warmup
    engine.update()

    # Measure (GC disabled for stable timing)
    gc.collect()
    gc.disable()

    times_ns = []
    try:
        for _ in range(runs):
            start = time.perf_counter_ns()
            engine.update()
            elapsed_ns = time.perf_counter_ns() - start
            times_ns.append(elapsed_ns)
    finally:
        gc.enable()

    times_ms = np.array(times_ns) / 1_000_000
    population = world.population()

    return {
        'cells': side * side,
        'runs': runs,
        'p50_ms': np.percentile(times_ms, 50),
        'p90_ms': np.percentile(times_ms, 90),
        'min_ms': np.min(times_ms),
        'max_ms': np.max(times_ms),
        'fish': population['fish'],
        'sharks': population['sharks'],
    }


def main():
    """Run multi-N tick performance validation."""
    print("=" * 80)
    print("Wa-Tor Tick Performance")
    print("=" * 80)
    print()

    results = []

    for side in [32, 64, 128, 256]:
        print(f"[{side}x{side}]")

        result = run_tick_perf_test(side)

        print(f"  p50: {result['p50_ms']:.3f}ms")
        print(f"  p90: {result['p90_ms']:.3f}ms")
        print(f"  min: {result['min_ms']:.3f}ms, max: {result['max_ms']:.3f}ms")
        print(f"  Fish: {result['fish']}, Sharks: {result['sharks']}")

        results.append(result)
        print()

    print("=" * 80)
    print("Summary Table")
    print("=" * 80)
    print()
    print("|   Cells | p50 (ms) | p90 (ms) |   Fish | Sharks |")
    print("|---------|----------|----------|--------|--------|")
    for r in results:
        print(f"| {r['cells']:7d} | {r['p50_ms']:8.3f} | {r['p90_ms']:8.3f} | {r['fish']:6d} | {r['sharks']:6d} |")

    print()
    print("=" * 80)


if __name__ == '__main__':
    main()
