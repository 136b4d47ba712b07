from planarcheck.checks.search import first_combination, first_result


def test_first_combination_is_lexicographic():
    hit = first_combination([1, 2, 3, 4, 5], 2, lambda c: sum(c) == 6)
    assert hit == (1, 5)


def test_first_combination_follows_input_order():
    hit = first_combination([5, 4, 3, 2, 1], 2, lambda c: sum(c) == 6)
    assert hit == (5, 1)


def test_first_combination_none():
    assert first_combination([1, 2, 3], 2, lambda c: False) is None
    assert first_combination([1, 2], 3, lambda c: True) is None


def test_first_result_returns_probe_value():
    out = first_result(range(6), 3, lambda c: "x".join(map(str, c)) if c[0] == 1 else None)
    assert out == "1x2x3"
    assert first_result(range(2), 3, lambda c: c) is None
