import pytest
from lea.support.finiteset import FiniteSet, FiniteSetIndexError


def test_no_duplicates():
    fs = FiniteSet([1, 2, 2, 3, 1])
    assert fs.size() == 3
    assert len(fs) == 3
    assert list(fs) == [1, 2, 3]

    fs.add(2)
    fs |= [3, 4]
    assert list(fs) == [1, 2, 3, 4]


def test_contains():
    fs = FiniteSet("abc")
    assert fs.contains("a")
    assert "c" in fs
    assert not fs.contains("d")
    assert "d" not in fs


def test_element_at():
    fs = FiniteSet([5, 3, 8])
    assert [fs.element_at(i) for i in range(fs.size())] == [5, 3, 8]

    with pytest.raises(FiniteSetIndexError):
        fs.element_at(3)
    with pytest.raises(FiniteSetIndexError):
        fs.element_at(-1)
    with pytest.raises(IndexError):
        FiniteSet().element_at(0)


def test_iteration_is_restartable():
    fs = FiniteSet([1, 2, 3])
    assert list(fs) == list(fs)
    assert sorted(fs) == [1, 2, 3]


def test_pure_operations():
    s1 = FiniteSet([1, 2, 3])
    s2 = FiniteSet([3, 4, 5])

    assert list(s1 | s2) == [1, 2, 3, 4, 5]
    assert list(s1 & s2) == [3]
    assert list(s1 - s2) == [1, 2]
    assert list(s1.union(s2)) == [1, 2, 3, 4, 5]
    assert list(s1.intersection([2, 3])) == [2, 3]
    assert list(s1.difference([1])) == [2, 3]

    # Operands are unchanged
    assert list(s1) == [1, 2, 3]
    assert list(s2) == [3, 4, 5]


def test_inplace_operations():
    fs = FiniteSet([1, 2, 3])
    original = fs
    fs |= FiniteSet([4])
    fs &= FiniteSet([2, 3, 4])
    fs -= FiniteSet([3])
    assert fs is original
    assert list(fs) == [2, 4]

    fs.update([9]).difference_update([2]).intersection_update([9, 4])
    assert fs == FiniteSet([4, 9])


def test_discard():
    fs = FiniteSet([1, 2, 3])
    fs.discard(2)
    fs.discard(7)
    assert list(fs) == [1, 3]
    assert 2 not in fs


def test_equality_ignores_order():
    assert FiniteSet([1, 2, 3]) == FiniteSet([3, 1, 2])
    assert FiniteSet([1, 2]) != FiniteSet([1, 2, 3])
    assert FiniteSet() == FiniteSet()
    assert FiniteSet([1]).equal(FiniteSet([1]))
    assert FiniteSet([1]).not_equal(FiniteSet([2]))


def test_comparisons():
    small = FiniteSet([1, 2])
    big = FiniteSet([2, 3, 1])
    other = FiniteSet([4])

    assert small <= big
    assert small < big
    assert big >= small
    assert big > small
    assert not big <= small
    assert not small < small
    assert small <= small
    assert small >= small

    assert not small <= other
    assert not other <= small
    assert small != other

    assert small.subset_or_equal(big)
    assert big.superset_or_equal(small)
    assert small.strict_subset(big)
    assert big.strict_superset(small)
    assert not big.strict_superset(big)


def test_compare_with_other_types():
    assert FiniteSet([1]) != {1}
    assert not (FiniteSet([1]) == [1])
    with pytest.raises(TypeError):
        FiniteSet([1]) <= {1, 2}


def test_unhashable():
    with pytest.raises(TypeError):
        hash(FiniteSet([1]))


def test_frozen():
    assert FiniteSet([2, 1]).frozen() == FiniteSet([1, 2]).frozen()
    assert FiniteSet([1]).frozen() == frozenset([1])


def test_isdisjoint():
    assert FiniteSet([1, 2]).isdisjoint(FiniteSet([3]))
    assert not FiniteSet([1, 2]).isdisjoint([2])
    assert FiniteSet().isdisjoint([1])


def test_empty():
    fs = FiniteSet()
    assert fs.is_empty()
    assert not fs
    assert FiniteSet([0])
    assert not FiniteSet([0]).is_empty()


def test_copy_is_independent():
    fs = FiniteSet([1, 2])
    cp = fs.copy()
    cp.add(3)
    assert list(fs) == [1, 2]
    assert list(cp) == [1, 2, 3]


def test_display():
    fs = FiniteSet([3, 1, 2])
    assert str(fs) == "{3, 1, 2}"
    assert repr(fs) == "<FiniteSet {3, 1, 2}>"
    assert str(FiniteSet()) == "{}"


def test_algebra_laws():
    a = FiniteSet([1, 2, 3])
    b = FiniteSet([3, 4])
    c = FiniteSet([5, 1])
    empty = FiniteSet()

    assert a | (b | c) == (a | b) | c
    assert a & (b & c) == (a & b) & c
    assert a | b == b | a
    assert a & b == b & a
    assert (a - a).is_empty()
    assert a | empty == a
    assert empty | a == a
    assert a <= a
    assert (a == b) == (a <= b and b <= a)
    assert a | a == a
    assert a & a == a
    assert a - b == FiniteSet([1, 2])
