import csv

import pytest

from geometry import Point
import program

from point_io import save_points
from program import RectangleAnalyzer, build_parser, main
from rotating_calipers import compute_bounding_rectangles


@pytest.fixture
def analyzer():
    a = RectangleAnalyzer()
    a.load_text("(0,0), (4,0), (4,3), (0,3), (2,1)")
    a.run_analysis()
    return a


def test_run_analysis(analyzer):
    assert analyzer.hull.vertices == (Point(0, 0), Point(4, 0), Point(4, 3), Point(0, 3))
    assert len(analyzer.rectangles) == 4
    assert analyzer.minimum.area == 12
    assert analyzer.selected == analyzer.minimum


def test_run_analysis_sweeps_once(monkeypatch):
    calls = []

    def counting(hull):
        calls.append(hull)
        return compute_bounding_rectangles(hull)

    monkeypatch.setattr(program, "compute_bounding_rectangles", counting)
    a = RectangleAnalyzer()
    a.load_text("(60,10), (60,20), (70,10), (60,20), (10,70), (50,30)")
    a.run_analysis()
    assert len(calls) == 1
    assert a.minimum == a.rectangles[1]
    assert a.minimum.area == 600


def test_report_marks_minimum(analyzer):
    report = analyzer.generate_report()
    assert "rectangle 1, area: ~12.00  <- minimum" in report
    assert "rectangle 2, area: ~12.00\n" in report
    assert "Minimum area: 12" in report


def test_select(analyzer):
    analyzer.select(2)
    assert analyzer.selected == analyzer.rectangles[1]
    with pytest.raises(IndexError):
        analyzer.select(5)


def test_degenerate_input_has_no_rectangles():
    a = RectangleAnalyzer()
    a.load_text("(0,0), (1,0), (2,0)")
    a.run_analysis()
    assert len(a.hull) == 2
    assert a.rectangles == []
    assert a.minimum is None
    assert "Not enough distinct points" in a.generate_report()


def test_save_results_csv(analyzer, tmp_path):
    path = tmp_path / "results.csv"
    analyzer.save_results(str(path))
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["Rectangle", "Area", "Approximate area", "Corners", "Minimum"]
    assert len(rows) == 5
    assert rows[1][1] == "12" and rows[1][4] == "True"
    assert rows[2][4] == "False"


def test_main_with_file(tmp_path, capsys):
    points_path = tmp_path / "points.txt"
    save_points(points_path, [Point(60, 10), Point(60, 20), Point(70, 10), Point(60, 20), Point(10, 70), Point(50, 30)])
    report_path = tmp_path / "report.txt"
    plot_path = tmp_path / "plot.png"

    code = main([
        "--file", str(points_path),
        "--report", str(report_path),
        "--plot", str(plot_path),
        "--all-rectangles",
    ])

    assert code == 0
    out = capsys.readouterr().out
    assert "Hull vertices: 3" in out
    assert "rectangle 2, area: ~600.00  <- minimum" in out
    assert report_path.read_text(encoding="utf-8") == out
    assert plot_path.stat().st_size > 0


def test_main_generate(capsys):
    assert main(["--generate", "40", "--distribution", "clusters", "--seed", "3"]) == 0
    assert "Points: 40" in capsys.readouterr().out


def test_main_errors(tmp_path, capsys):
    assert main(["--file", str(tmp_path / "missing.txt")]) == 1
    assert main(["--points", ""]) == 1
    assert main(["--points", "(0,0), (4,0), (4,3)", "--rectangle", "9"]) == 1
    assert "error:" in capsys.readouterr().err


def test_seed_from_environment(monkeypatch):
    monkeypatch.setenv("HULL_SEED", "7")
    assert build_parser().parse_args(["--generate", "5"]).seed == 7


def test_bad_seed_environment_is_a_usage_error(monkeypatch, capsys):
    monkeypatch.setenv("HULL_SEED", "seven")
    with pytest.raises(SystemExit) as exc:
        main(["--generate", "5"])
    assert exc.value.code == 2
    assert "--seed" in capsys.readouterr().err
    assert build_parser().parse_args(["--generate", "5", "--seed", "3"]).seed == 3
