import pytest

from lotools.condition import if_, if_f, switch, ternary, ternary_f


def test_ternary():
    assert ternary(True, "a", "b") == "a"
    assert ternary(False, "a", "b") == "b"


def test_ternary_f():
    assert ternary_f(True, lambda: "a", lambda: "b") == "a"
    assert ternary_f(False, lambda: "a", lambda: "b") == "b"


def test_ternary_f_only_calls_chosen_branch():
    def boom():
        raise AssertionError("must not be called")

    assert ternary_f(True, lambda: 1, boom) == 1


@pytest.mark.parametrize(
    "first, second, expected",
    [(True, False, 1), (True, True, 1), (False, True, 2), (False, False, 3)],
)
def test_if_else(first, second, expected):
    assert if_(first, 1).else_if(second, 2).else_(3) == expected


@pytest.mark.parametrize(
    "first, second, expected",
    [(True, False, 1), (True, True, 1), (False, True, 2), (False, False, 3)],
)
def test_if_f_else_f(first, second, expected):
    result = (
        if_f(first, lambda: 1)
        .else_if_f(second, lambda: 2)
        .else_f(lambda: 3)
    )
    assert result == expected


@pytest.mark.parametrize(
    "case1, case2, expected",
    [(42, 1, 1), (42, 42, 1), (1, 42, 2), (1, 1, 3)],
)
def test_switch_case(case1, case2, expected):
    assert switch(42).case(case1, 1).case(case2, 2).default(3) == expected


@pytest.mark.parametrize(
    "case1, case2, expected",
    [(42, 1, 1), (42, 42, 1), (1, 42, 2), (1, 1, 3)],
)
def test_switch_case_f(case1, case2, expected):
    result = (
        switch(42)
        .case_f(case1, lambda: 1)
        .case_f(case2, lambda: 2)
        .default_f(lambda: 3)
    )
    assert result == expected