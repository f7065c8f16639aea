import pytest

from pushswap.stacks import Stacks


def test_initial_state():
    st = Stacks([3, 1, 2])
    assert st.a == [3, 1, 2]
    assert st.b == []
    assert st.operations == []
    assert len(st) == 3


def test_sa_swaps_top_of_a():
    st = Stacks([1, 2, 3])
    st.sa()
    assert st.a == [2, 1, 3]
    assert st.operations == ["sa"]


def test_sa_needs_two_elements():
    st = Stacks([1, 2])
    st.pb()
    st.sa()
    assert st.a == [2]
    assert st.operations == ["pb"]


def test_push_moves_between_stacks():
    st = Stacks([1, 2, 3])
    st.pb()
    st.pb()
    assert st.a == [3]
    assert st.b == [2, 1]
    st.pa()
    assert st.a == [2, 3]
    assert st.b == [1]
    assert st.operations == ["pb", "pb", "pa"]


def test_pa_on_empty_b_does_nothing():
    st = Stacks([1, 2])
    st.pa()
    assert st.a == [1, 2]
    assert st.operations == []


def test_pb_on_empty_a_does_nothing():
    st = Stacks([1])
    st.pb()
    st.pb()
    assert st.a == []
    assert st.b == [1]
    assert st.operations == ["pb"]


def test_sb_swaps_top_of_b():
    st = Stacks([1, 2, 3])
    st.pb()
    st.pb()
    st.sb()
    assert st.b == [1, 2]
    assert st.operations[-1] == "sb"


def test_ra_and_rra_are_inverse():
    st = Stacks([4, 5, 6, 7])
    st.ra()
    assert st.a == [5, 6, 7, 4]
    st.rra()
    assert st.a == [4, 5, 6, 7]
    assert st.operations == ["ra", "rra"]


def test_rra_brings_bottom_to_top():
    st = Stacks([4, 5, 6])
    st.rra()
    assert st.a == [6, 4, 5]


def test_rb_and_rrb():
    st = Stacks([1, 2, 3, 9])
    st.pb()
    st.pb()
    st.pb()
    assert st.b == [3, 2, 1]
    st.rb()
    assert st.b == [2, 1, 3]
    st.rrb()
    assert st.b == [3, 2, 1]
    assert st.a == [9]


def test_rb_needs_two_elements():
    st = Stacks([1, 2])
    st.pb()
    st.rb()
    st.rrb()
    assert st.b == [1]
    assert st.operations == ["pb"]


def test_combined_operations_record_each_part():
    st = Stacks([1, 2, 3, 4])
    st.pb()
    st.pb()
    st.ss()
    assert st.operations[-2:] == ["sa", "sb"]
    st.rr()
    assert st.operations[-2:] == ["ra", "rb"]
    st.rrr()
    assert st.operations[-2:] == ["rra", "rrb"]


def test_operations_preserve_multiset():
    st = Stacks([5, 3, 8, 1, 9, 2])
    for op in ["pb", "pb", "ra", "rb", "sa", "sb", "rra", "rrb", "pa", "rr", "pa"]:
        getattr(st, op)()
    assert sorted(st.a + st.b) == [1, 2, 3, 5, 8, 9]


@pytest.mark.parametrize(
    "values, expected",
    [([1, 2, 3], True), ([2, 1, 3], False), ([], True)],
)
def test_is_sorted(values, expected):
    assert Stacks(values).is_sorted() is expected


def test_is_sorted_false_when_b_not_empty():
    st = Stacks([1, 2, 3])
    st.pb()
    assert st.is_sorted() is False
    st.pa()
    assert st.is_sorted() is True