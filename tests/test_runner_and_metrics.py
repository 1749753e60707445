# -*- coding: utf-8 -*-
import logging

import pytest

from maxdefense.business_objects import ArmorItem, ContractViolationError
from maxdefense.planning import Solution
from maxdefense.planning import runner
from maxdefense.planning.runner import compare_solvers, run_solver
from maxdefense.quality_metrics.core import compute_solution_metrics, solutions_agree


@pytest.mark.parametrize("method", ["dynamic", "exhaustive"])
def test_run_solver_packages_solution(method, abcd):
    sol = run_solver(method, abcd, 5)
    assert sol.method == method
    assert sol.total_defense == 7.0
    assert sol.total_cost == 5
    assert sol.budget == 5
    assert sol.elapsed_seconds >= 0.0


def test_run_solver_truncates_real_budget_for_dynamic(abcd):
    assert run_solver("dynamic", abcd, 5.9).total_defense == 7.0


def test_run_solver_unknown_method(abcd):
    with pytest.raises(ValueError, match="Unknown solver"):
        run_solver("greedy", abcd, 5)


@pytest.mark.parametrize("method", ["dynamic", "exhaustive"])
@pytest.mark.parametrize("budget", [-0.5, -1, float("inf"), float("nan")])
def test_run_solver_rejects_bad_budget_for_every_method(method, budget, abcd):
    with pytest.raises(ContractViolationError):
        run_solver(method, abcd, budget)


def test_compare_solvers_agree(abcd):
    dyn, exh = compare_solvers(abcd, 9)
    assert solutions_agree(dyn, exh)
    assert dyn.total_defense == 12.0


def test_compare_solvers_warns_on_disagreement(abcd, monkeypatch, caplog):
    monkeypatch.setitem(runner.SOLVERS, "exhaustive", lambda armors, budget: [])
    with caplog.at_level(logging.WARNING, logger="maxdefense.planning.runner"):
        compare_solvers(abcd, 5)
    assert "disagree" in caplog.text


def test_compute_solution_metrics(abcd):
    sol = Solution.from_items("dynamic", abcd[:2], budget=10)
    metrics = compute_solution_metrics(sol)
    assert metrics["Items"] == 2.0
    assert metrics["Total Cost"] == 5.0
    assert metrics["Total Defense"] == 7.0
    assert metrics["Budget Used %"] == pytest.approx(50.0)
    assert metrics["Defense per Gold"] == pytest.approx(1.4)


def test_metrics_handle_empty_solution_and_zero_budget():
    metrics = compute_solution_metrics(Solution.from_items("exhaustive", [], budget=0))
    assert metrics["Budget Used %"] == 0.0
    assert metrics["Defense per Gold"] == 0.0


def test_solutions_agree_tolerance():
    a = Solution.from_items("dynamic", [ArmorItem("x", 1, 0.1)], budget=1)
    b = Solution.from_items("exhaustive", [ArmorItem("y", 1, 0.1 + 1e-12)], budget=1)
    assert solutions_agree(a, b)
    assert not solutions_agree(a, b, tol=0.0)
