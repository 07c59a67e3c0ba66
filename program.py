import argparse
import logging
import sys

import numpy as np

from geometry import Point
from quickhull import InvalidInputError, QuickHull

logger = logging.getLogger(__name__)

DISTRIBUTIONS = ("uniform", "circle", "gaussian", "clusters")


def parse_args(argv=None):
    parser = argparse.ArgumentParser("QuickHull convex hull")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--datafile", type=str, help="file with point count on the first line, then 'x y' lines")
    source.add_argument("--generate", type=int, metavar="N", help="generate N random points")
    parser.add_argument("--distribution", choices=DISTRIBUTIONS, default="uniform")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--iterative", action="store_true", help="use the explicit stack instead of recursion")
    parser.add_argument("--plot", action="store_true")
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser.parse_args(argv)


def load_points(filename: str) -> list[tuple[float, float]]:
    points = []
    with open(filename, 'r', encoding='utf-8') as f:
        n = int(f.readline().strip())
        for _ in range(n):
            line = f.readline().strip()
            if line:
                x, y = map(float, line.split())
                points.append((x, y))

    if len(points) != n:
        logger.warning("%s declares %d points, read %d", filename, n, len(points))
    return points


def generate_random_points(n: int, distribution: str, seed: int = 42) -> list[tuple[float, float]]:
    rng = np.random.default_rng(seed)

    if distribution == "uniform":
        xy = rng.uniform(0, 1000, size=(n, 2))
    elif distribution == "circle":
        angle = rng.uniform(0, 2 * np.pi, size=n)
        r = rng.uniform(0, 500, size=n) ** 0.5
        xy = np.column_stack((500 + r * np.cos(angle), 500 + r * np.sin(angle)))
    elif distribution == "gaussian":
        xy = rng.normal(500, 150, size=(n, 2))
    elif distribution == "clusters":
        n_clusters = 5
        centers = rng.uniform(100, 900, size=(n_clusters, 2))
        labels = rng.integers(0, n_clusters, size=n)
        xy = centers[labels] + rng.normal(0, 50, size=(n, 2))
    else:
        raise ValueError(f"Unknown distribution: {distribution}")

    return [(float(x), float(y)) for x, y in xy]


def format_hull(hull: list[Point]) -> str:
    return "\n".join(f"{p.x:g} {p.y:g}" for p in hull)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.datafile:
            points = load_points(args.datafile)
            logger.info("Loaded %d points from %s", len(points), args.datafile)
        else:
            points = generate_random_points(args.generate, args.distribution, args.seed)
            logger.info("Generated %d points (%s)", len(points), args.distribution)

        qh = QuickHull(points, iterative=args.iterative)
        hull = qh.get_hull_points()
    except InvalidInputError as e:
        logger.error("Invalid input: %s", e)
        return 1
    except (OSError, ValueError) as e:
        logger.error("Cannot read points: %s", e)
        return 1

    logger.info("Hull has %d points", len(hull))
    print(len(hull))
    print(format_hull(hull))

    if args.plot:
        import matplotlib.pyplot as plt
        from visualization import plot_hull

        plot_hull(qh.points, hull)
        plt.show()

    return 0


if __name__ == "__main__":
    sys.exit(main())
