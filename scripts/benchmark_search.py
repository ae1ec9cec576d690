"""
Benchmark script for the slideshow search.
Compares ordering strategies on generated photo collections.
"""

import random
import statistics
import time
import logging

import sys
from pathlib import Path

# Add src to path so we can import slideshow_toolkit
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root / "src"))

try:
    from slideshow_toolkit.builder import OrderingStrategy, SearchConfig, search_slideshow
    from slideshow_toolkit.core.models import Orientation, Photo
except ImportError as e:
    print(f"Error: Could not import slideshow_toolkit: {e}")
    sys.exit(1)

# Setup logging
logging.basicConfig(level=logging.WARNING, format='%(message)s')
logger = logging.getLogger("benchmark")


def generate_photos(count: int, vocabulary: int, seed: int) -> list:
    """Random photo collection with 1-6 tags per photo."""
    gen = random.Random(seed)
    tags = [f"tag{i}" for i in range(vocabulary)]
    return [
        Photo(
            i,
            gen.choice([Orientation.HORIZONTAL, Orientation.VERTICAL]),
            tuple(gen.sample(tags, gen.randint(1, 6))),
        )
        for i in range(count)
    ]


def benchmark_strategy(
    photos: list,
    strategy: OrderingStrategy,
    iterations: int = 10,
    runs: int = 3,
):
    """Benchmark one strategy."""
    print(f"\n--- {strategy} (x{runs}, {iterations} iterations each) ---")

    times = []
    scores = []

    for i in range(runs):
        config = SearchConfig(
            iterations=iterations,
            ordering_strategy=strategy,
            seed=12345 + i,  # Different seed
        )

        start = time.perf_counter()
        show = search_slideshow(photos, config)
        duration = time.perf_counter() - start

        times.append(duration)
        scores.append(show.total_score if show else 0)
        print(f"Run {i+1}: {duration:.3f}s (score {scores[-1]})")

    print(f"Average: {statistics.mean(times):.3f}s, score {statistics.mean(scores):.1f}")
    print(f"Best score: {max(scores)}")

    return statistics.mean(times)


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Benchmark slideshow search strategies")
    parser.add_argument("--photos", type=int, default=200, help="Number of photos")
    parser.add_argument("--vocabulary", type=int, default=40, help="Distinct tags")
    parser.add_argument("--iterations", type=int, default=10, help="Search iterations")
    parser.add_argument("--seed", type=int, default=1, help="Generator seed")

    args = parser.parse_args()

    photos = generate_photos(args.photos, args.vocabulary, args.seed)
    print(f"Generated {len(photos)} photos over {args.vocabulary} tags")

    for strategy in (OrderingStrategy.GREEDY, OrderingStrategy.LOCAL_SEARCH):
        benchmark_strategy(photos, strategy, iterations=args.iterations)

    if args.photos <= 8:
        benchmark_strategy(photos, OrderingStrategy.EXHAUSTIVE, iterations=args.iterations)
    else:
        print("\nSkipping exhaustive benchmark (use --photos 8 or fewer)")
