import matplotlib.pyplot as plt
from matplotlib.axes import Axes

from geometry import Point


def plot_points(points: list[Point], ax: Axes | None = None):
    x = [p.x for p in points]
    y = [p.y for p in points]
    if ax is None:
        plt.scatter(x, y)
    else:
        ax.scatter(x, y)


def plot_hull(points: list[Point], hull: list[Point], ax: Axes | None = None, clr: str = 'r'):
    """
    Plot input points and the closed hull polygon on top of them.
    """
    if ax is None:
        ax = plt.gca()

    plot_points(points, ax=ax)

    closed = hull + hull[:1]
    xs = [p.x for p in closed]
    ys = [p.y for p in closed]
    ax.plot(xs, ys, 'o-', c=clr, markersize=4)
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_title(f"Convex hull ({len(hull)} of {len(points)} points)")
    ax.grid(True, alpha=0.3)
    ax.axis('equal')
    return ax
