import pytest

import program


@pytest.fixture
def square_file(tmp_path):
    path = tmp_path / "square.txt"
    path.write_text("5\n0 0\n4 0\n4 4\n0 4\n2 2\n", encoding="utf-8")
    return path


def test_load_points(square_file):
    points = program.load_points(str(square_file))
    assert points == [(0.0, 0.0), (4.0, 0.0), (4.0, 4.0), (0.0, 4.0), (2.0, 2.0)]


def test_main_datafile(square_file, capsys):
    assert program.main(["--datafile", str(square_file)]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == ["4", "0 4", "4 4", "4 0", "0 0"]


@pytest.mark.parametrize("iterative", [[], ["--iterative"]])
def test_main_generate(iterative, capsys):
    assert program.main(["--generate", "200", "--distribution", "circle"] + iterative) == 0

    out = capsys.readouterr().out.splitlines()
    assert int(out[0]) == len(out) - 1
    assert 3 <= int(out[0]) <= 200


def test_main_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("0\n", encoding="utf-8")
    assert program.main(["--datafile", str(path)]) == 1


def test_main_missing_file(tmp_path):
    assert program.main(["--datafile", str(tmp_path / "nope.txt")]) == 1


def test_main_malformed_file(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("2\n0 zero\n1 1\n", encoding="utf-8")
    assert program.main(["--datafile", str(path)]) == 1


@pytest.mark.parametrize("distribution", program.DISTRIBUTIONS)
def test_generate_random_points(distribution):
    points = program.generate_random_points(100, distribution, seed=7)
    assert len(points) == 100
    assert all(isinstance(x, float) and isinstance(y, float) for x, y in points)
    assert points == program.generate_random_points(100, distribution, seed=7)


def test_generate_unknown_distribution():
    with pytest.raises(ValueError):
        program.generate_random_points(10, "spiral")


def test_plot_hull():
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    from geometry import Point
    from visualization import plot_hull

    points = [Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4), Point(2, 2)]
    hull = [Point(0, 4), Point(4, 4), Point(4, 0), Point(0, 0)]

    fig, ax = plt.subplots()
    assert plot_hull(points, hull, ax=ax) is ax
    xs, ys = ax.lines[0].get_data()
    assert list(xs) == [0, 4, 4, 0, 0]
    assert list(ys) == [4, 4, 0, 0, 4]
    plt.close(fig)
