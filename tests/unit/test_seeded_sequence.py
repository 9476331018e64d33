#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
确定性伪随机序列 单元测试
"""

import pytest

from divination.core.seeded_sequence import MODULUS, SeededSequence, lcg_next, pick_index


class TestLcg:
    """lcg_next / pick_index 测试类"""

    def test_lcg_next_from_one(self):
        """测试：种子 1 的前两步"""
        # When
        value, state = lcg_next(1)
        second, _ = lcg_next(state)

        # Then
        assert value == state == 60616
        assert second == 778523634

    def test_lcg_stays_in_range(self):
        """测试：状态始终在 [0, 2^31-1) 内"""
        state = 123456789
        for _ in range(1000):
            _, state = lcg_next(state)
            assert 0 <= state < MODULUS

    def test_pick_index_uses_abs(self):
        assert pick_index(-7, 5) == 2
        assert pick_index(7, 5) == 2

    def test_pick_index_rejects_empty_range(self):
        with pytest.raises(ValueError):
            pick_index(10, 0)


class TestSeededSequence:
    """SeededSequence 测试类"""

    def test_same_seed_same_sequence(self):
        """测试：相同种子得到相同序列"""
        # Given
        a = SeededSequence(20240315)
        b = SeededSequence(20240315)

        # Then
        assert [a.next() for _ in range(50)] == [b.next() for _ in range(50)]

    def test_different_seed_different_sequence(self):
        a = SeededSequence(1)
        b = SeededSequence(2)
        assert [a.next() for _ in range(5)] != [b.next() for _ in range(5)]

    def test_randint_inclusive_bounds(self):
        seq = SeededSequence(42)
        values = {seq.randint(3, 5) for _ in range(500)}
        assert values == {3, 4, 5}

    def test_sample_returns_unique_items(self):
        """测试：sample 不重复"""
        # Given
        seq = SeededSequence(99)
        items = list(range(78))

        # When
        picked = seq.sample(items, 10)

        # Then
        assert len(picked) == 10
        assert len(set(picked)) == 10

    def test_sample_whole_population_terminates(self):
        """测试：抽取全部元素也能结束"""
        seq = SeededSequence(7)
        picked = seq.sample(list("abcdefgh"), 8)
        assert sorted(picked) == list("abcdefgh")

    def test_sample_too_many_raises(self):
        with pytest.raises(ValueError):
            SeededSequence(1).sample([1, 2], 3)

    def test_choice_empty_raises(self):
        with pytest.raises(ValueError):
            SeededSequence(1).choice([])

    def test_shuffled_is_permutation(self):
        seq = SeededSequence(5)
        items = list(range(20))
        result = seq.shuffled(items)
        assert sorted(result) == items
        assert items == list(range(20))
