"""
Tests for the terminal operations of Sequence.
"""

import itertools

import numpy as np
import pytest
from seqpipe import Sequence


class TestCollecting:
    def test_collect(self):
        assert Sequence(range(3)).collect() == [0, 1, 2]
        assert Sequence([]).collect() == []

    def test_consume_drives_side_effects(self):
        seen = []
        assert Sequence([1, 2]).for_each(lambda x, i: seen.append(i)).consume() is None
        assert seen == [0, 1]

    def test_count(self):
        assert Sequence(range(10)).filter(lambda x: x > 6).count() == 3
        assert Sequence([]).count() == 0

    def test_to_array(self):
        arr = Sequence(range(4)).map(lambda x: x * 1.5).to_array()
        assert isinstance(arr, np.ndarray)
        np.testing.assert_allclose(arr, [0.0, 1.5, 3.0, 4.5])

    def test_to_array_dtype(self):
        assert Sequence([1, 2]).to_array(dtype=np.int32).dtype == np.int32


class TestFirstLast:
    def test_first_pulls_one(self):
        pulled = []
        assert Sequence(itertools.count()).for_each(pulled.append).first() == 0
        assert pulled == [0]

    def test_first_empty(self):
        assert Sequence([]).first() is None
        assert Sequence([]).first(default='none') == 'none'

    def test_last(self):
        assert Sequence([1, 2, 3]).last() == 3
        assert Sequence([]).last() is None


class TestSearching:
    def test_find(self):
        assert Sequence([1, 4, 9]).find(lambda x: x > 3) == 4
        assert Sequence([1, 4, 9]).find(lambda x: x > 30) is None
        assert Sequence([1]).find(lambda x: x > 30, default=-1) == -1

    def test_find_with_index(self):
        assert Sequence('abc').find(lambda x, i: i == 2) == 'c'

    def test_find_on_infinite(self):
        assert Sequence(itertools.count()).find(lambda x: x * x > 50) == 8

    def test_some(self):
        assert Sequence([1, 2, 3]).some(lambda x: x == 2)
        assert not Sequence([1, 2, 3]).some(lambda x: x == 5)
        assert not Sequence([]).some(lambda x: True)

    def test_some_finds_none_element(self):
        assert Sequence([1, None]).some(lambda x: x is None)

    def test_every(self):
        assert Sequence([2, 4]).every(lambda x: x % 2 == 0)
        assert not Sequence([2, 3]).every(lambda x: x % 2 == 0)
        assert Sequence([]).every(lambda x: False)

    def test_every_short_circuits_on_infinite(self):
        assert not Sequence(itertools.count()).every(lambda x: x < 5)

    def test_every_with_index(self):
        assert Sequence([0, 1, 2]).every(lambda x, i: x == i)

    def test_includes(self):
        assert Sequence([1, 'a', None]).includes('a')
        assert Sequence([1, 'a', None]).includes(None)
        assert not Sequence([1, 2]).includes(3)
        assert Sequence(itertools.count()).includes(1000)

    def test_includes_is_strict(self):
        assert not Sequence([True, 2]).includes(1)
        assert not Sequence([1, 2]).includes(True)
        assert Sequence([1.0, 2]).includes(1)
        assert Sequence([np.int64(3)]).includes(3)

    def test_includes_array_elements(self):
        data = [np.array([1, 2]), 3]
        assert Sequence(data).includes(3)
        assert not Sequence(data[:1]).includes(4)
        assert not Sequence(data[:1]).includes(np.array([1, 2]))
        assert Sequence(data).includes(data[0])
        assert Sequence(data).replace(3, "x").collect()[1] == "x"


class TestReducing:
    def test_reduce(self):
        assert Sequence([1, 2, 3]).reduce(0, lambda acc, x: acc + x) == 6

    def test_reduce_with_index(self):
        assert Sequence(['a', 'b']).reduce('', lambda acc, x, i: acc + f"{x}{i}") == 'a0b1'

    def test_reduce_empty_returns_initial(self):
        assert Sequence([]).reduce('init', lambda acc, x: acc + x) == 'init'

    def test_sum(self):
        assert Sequence(range(10)).sum() == 45
        assert Sequence([0.5, 0.25]).sum(1) == 1.75


class TestJoin:
    def test_skips_empty_and_keeps_zero(self):
        assert Sequence([1, "", 0, "a"]).join(";") == "1;0;a"

    def test_skips_none(self):
        assert Sequence([None, "x", None, 2]).join(",") == "x,2"

    def test_no_leading_or_trailing_separator(self):
        assert Sequence(["", "a", ""]).join("-") == "a"
        assert Sequence([]).join("-") == ""

    def test_uses_str(self):
        class Empty:
            def __str__(self):
                return ""

        assert Sequence([Empty(), False, 1.5]).join(" ") == "False 1.5"
