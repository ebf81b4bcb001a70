import pytest

from minimizer2d.core.results_summary import ResultsSummary
from minimizer2d.core.trace import (
    STOP_CONVERGED,
    STOP_MAX_ITER,
    EvaluatedPoint,
    IterationRecord,
    Point2D,
    Trace,
)


def make_trace(name, x, y, value, status=STOP_CONVERGED, n_iter=3):
    point = Point2D(x, y)
    records = [IterationRecord(index=k, point=point, value=value) for k in range(n_iter + 1)]
    return Trace(
        method_name=name,
        records=records,
        final=EvaluatedPoint(point, value),
        status=status,
        func_evals=10,
        grad_evals=2,
    )


def test_rows_contain_run_results():
    summary = ResultsSummary()
    summary.add_run(make_trace("CD", 5.0, 4.0, 3.0))
    summary.add_run(make_trace("GD", 4.9, 4.0, 3.01, status=STOP_MAX_ITER, n_iter=7))

    rows = summary.as_rows()
    assert [row["method"] for row in rows] == ["CD", "GD"]
    assert rows[1] == {
        "method": "GD",
        "x_star": [4.9, 4.0],
        "f_star": 3.01,
        "n_iter": 7,
        "func_evals": 10,
        "grad_evals": 2,
        "status": STOP_MAX_ITER,
        "distance_to_minimum": None,
    }


def test_distance_to_known_minimum():
    summary = ResultsSummary(reference=Point2D(5.0, 4.0))
    summary.add_run(make_trace("RS", 8.0, 8.0, 30.0))

    assert summary.as_rows()[0]["distance_to_minimum"] == pytest.approx(5.0)


def test_best_by_f_prefers_first_on_ties():
    summary = ResultsSummary()
    summary.add_run(make_trace("RS", 5.1, 4.0, 3.5))
    summary.add_run(make_trace("CD", 5.0, 4.0, 3.0))
    summary.add_run(make_trace("GD", 5.0, 4.0, 3.0))
    assert summary.best_by_f().method_name == "CD"


def test_best_by_f_empty():
    assert ResultsSummary().best_by_f() is None


def test_converged_runs():
    summary = ResultsSummary([
        make_trace("CD", 5.0, 4.0, 3.0),
        make_trace("RS", 5.2, 4.1, 3.1, status=STOP_MAX_ITER),
    ])
    assert [run.method_name for run in summary.converged_runs()] == ["CD"]


def test_to_dataframe():
    pd = pytest.importorskip("pandas")
    summary = ResultsSummary([make_trace("CD", 5.0, 4.0, 3.0)])
    df = summary.to_dataframe()
    assert isinstance(df, pd.DataFrame)
    assert list(df["method"]) == ["CD"]
