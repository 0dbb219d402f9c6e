import statistics

import pytest

from contest_solvers.heaps import (
    count_dictionary_lookups,
    merge_cost,
    min_toy_fetches,
    plan_change,
    plan_change as _plan,
    running_medians,
)


def test_merge_two_piles_costs_their_sum():
    weights = [3, 4]
    assert merge_cost(weights) == sum(weights)


def test_merge_single_pile_is_free():
    assert merge_cost([7]) == 0
    assert merge_cost([]) == 0


def test_merge_cost_is_order_independent():
    weights = [9, 1, 2, 8, 4]
    assert merge_cost(weights) == merge_cost(sorted(weights, reverse=True))


def test_merge_cost_at_least_total_minus_nothing():
    weights = [5, 5, 5, 5]
    assert merge_cost(weights) >= sum(weights)


def test_running_medians_match_statistics():
    values = [5, 1, 9, 3, 7, 2, 8, 6, 4]
    medians = running_medians(values)
    assert len(medians) == (len(values) + 1) // 2
    for k, median in enumerate(medians):
        assert median == statistics.median(values[: 2 * k + 1])


def test_dictionary_sample():
    assert count_dictionary_lookups(3, [1, 2, 1, 5, 4, 4, 1]) == 5


def test_dictionary_large_memory_looks_up_each_word_once():
    words = [4, 2, 4, 9, 2, 9, 1]
    assert count_dictionary_lookups(10, words) == len(set(words))


def test_dictionary_zero_capacity_looks_up_everything():
    words = [1, 1, 2]
    assert count_dictionary_lookups(0, words) == len(words)


def test_toys_sample():
    assert min_toy_fetches(2, [1, 2, 3, 1, 3, 1, 2]) == 4


def test_toys_large_floor_fetches_each_once():
    requests = [3, 1, 3, 2, 1, 2, 3]
    assert min_toy_fetches(5, requests) == len(set(requests))


def test_toys_single_slot_fetches_on_every_change():
    requests = [1, 1, 2, 2, 1, 3]
    changes = 1 + sum(1 for a, b in zip(requests, requests[1:]) if a != b)
    assert min_toy_fetches(1, requests) == changes


def test_toys_reject_zero_capacity():
    with pytest.raises(ValueError):
        min_toy_fetches(0, [1])


def test_plan_change_sample():
    total, plan = plan_change(42, [117, 71, 150, 243, 200], [1, 1, 1, 1, 1])
    assert (total, plan) == (79, [(1, 17), (1, 0), (2, 0), (2, 43), (2, 0)])


def test_plan_change_payments_cover_prices():
    prices = [117, 71, 150, 243, 200, 99]
    weights = [3, 1, 4, 1, 5, 9]
    _, plan = _plan(10, prices, weights)
    for price, (notes, coins) in zip(prices, plan):
        assert notes * 100 + coins >= price
        assert coins in (0, price % 100)


def test_plan_change_rich_buyer_pays_exactly():
    prices = [150, 230]
    total, plan = plan_change(1000, prices, [1, 1])
    assert total == 0
    assert [notes * 100 + coins for notes, coins in plan] == prices


def test_plan_change_length_mismatch():
    with pytest.raises(ValueError):
        plan_change(0, [1, 2], [1])