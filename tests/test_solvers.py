# -*- coding: utf-8 -*-
import random

import pytest

from maxdefense.business_objects import ArmorItem, ContractViolationError
from maxdefense.planning import sum_armor
from maxdefense.planning.solvers.dynamic import (
    build_defense_table,
    dynamic_max_defense,
    reconstruct_selection,
)
from maxdefense.planning.solvers.exhaustive import (
    MAX_EXHAUSTIVE_ITEMS,
    exhaustive_max_defense,
    subset_from_mask,
)

SOLVERS = [dynamic_max_defense, exhaustive_max_defense]


def _random_catalog(rng, n, fractional=False):
    def defense():
        if fractional:
            return round(rng.uniform(0, 25), 1)
        return float(rng.randint(0, 25))
    return [ArmorItem(f"armor {i}", rng.randint(1, 15), defense()) for i in range(n)]


@pytest.mark.parametrize("solver", SOLVERS)
def test_abcd_budget_five_picks_a_and_b(solver, abcd):
    chosen = solver(abcd, 5)
    cost, defense = sum_armor(chosen)
    assert defense == 7.0
    assert cost == 5
    assert sorted(a.description for a in chosen) == ["A", "B"]


@pytest.mark.parametrize("solver", SOLVERS)
def test_unaffordable_item_gives_empty_selection(solver):
    assert solver([ArmorItem("X", 10, 1.0)], 5) == []


@pytest.mark.parametrize("solver", SOLVERS)
def test_empty_input_law(solver, abcd):
    assert solver([], 10) == []
    assert solver(abcd, 0) == []


def test_dynamic_returns_items_last_index_first(abcd):
    chosen = dynamic_max_defense(abcd, 9)
    assert [a.description for a in chosen] == ["C", "B", "A"]


def test_table_shape_and_base_cases(abcd):
    table = build_defense_table(abcd, 5)
    assert len(table) == 5
    assert all(len(row) == 6 for row in table)
    assert table[0] == [0.0] * 6
    assert all(row[0] == 0.0 for row in table)
    assert table[4][5] == 7.0


def test_dynamic_tie_prefers_leaving_the_later_item():
    armors = [ArmorItem("first", 3, 5.0), ArmorItem("second", 3, 5.0)]
    table = build_defense_table(armors, 3)
    assert table[2][3] == table[1][3]
    chosen = reconstruct_selection(armors, table, 3)
    assert [a.description for a in chosen] == ["first"]


def test_exhaustive_tie_keeps_first_found():
    armors = [ArmorItem("first", 3, 5.0), ArmorItem("second", 3, 5.0)]
    chosen = exhaustive_max_defense(armors, 3)
    assert [a.description for a in chosen] == ["first"]


def test_zero_defense_items_are_never_chosen():
    armors = [ArmorItem("dud", 1, 0.0), ArmorItem("ok", 2, 1.0)]
    for solver in SOLVERS:
        assert [a.description for a in solver(armors, 10)] == ["ok"]


def test_solvers_share_items_with_input(abcd):
    for solver in SOLVERS:
        for armor in solver(abcd, 14):
            assert any(armor is src for src in abcd)


def test_subset_from_mask_uses_bit_j_for_item_j(abcd):
    assert [a.description for a in subset_from_mask(abcd, 0b1010)] == ["B", "D"]
    assert subset_from_mask(abcd, 0) == []


def test_exhaustive_rejects_too_many_items():
    armors = [ArmorItem(f"a{i}", 1, 1.0) for i in range(MAX_EXHAUSTIVE_ITEMS + 1)]
    with pytest.raises(ContractViolationError):
        exhaustive_max_defense(armors, 10)


def test_exhaustive_accepts_real_budget(abcd):
    _, defense = sum_armor(exhaustive_max_defense(abcd, 5.5))
    assert defense == 7.0


@pytest.mark.parametrize("budget", [-1, 2.5, True])
def test_dynamic_rejects_bad_budget(abcd, budget):
    with pytest.raises(ContractViolationError):
        dynamic_max_defense(abcd, budget)


def test_exhaustive_rejects_negative_budget(abcd):
    with pytest.raises(ContractViolationError):
        exhaustive_max_defense(abcd, -1)
    with pytest.raises(ContractViolationError):
        exhaustive_max_defense(abcd, float("nan"))


@pytest.mark.parametrize("fractional", [False, True])
def test_solvers_agree_on_random_catalogs(fractional):
    rng = random.Random(1234)
    for _ in range(40):
        armors = _random_catalog(rng, rng.randint(0, 12), fractional=fractional)
        budget = rng.randint(0, 60)
        dyn = dynamic_max_defense(armors, budget)
        exh = exhaustive_max_defense(armors, budget)
        dyn_cost, dyn_defense = sum_armor(dyn)
        exh_cost, exh_defense = sum_armor(exh)
        assert dyn_cost <= budget
        assert exh_cost <= budget
        assert dyn_defense == pytest.approx(exh_defense)
        assert dyn_defense == pytest.approx(build_defense_table(armors, budget)[-1][budget])


def test_optimum_is_monotone_in_budget():
    rng = random.Random(7)
    armors = _random_catalog(rng, 10)
    for solver in SOLVERS:
        optima = [sum_armor(solver(armors, b))[1] for b in range(0, 50)]
        assert all(x <= y for x, y in zip(optima, optima[1:]))


def test_solvers_are_deterministic():
    rng = random.Random(99)
    armors = _random_catalog(rng, 9)
    for solver in SOLVERS:
        assert solver(armors, 30) == solver(armors, 30)
