#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
确定性伪随机序列

线性同余生成器：state' = (state * 48271 + 12345) mod (2^31 - 1)
相同种子永远得到相同序列。每个调用方持有自己的 SeededSequence 实例，
不共享任何模块级状态。
"""

from typing import List, Sequence, Tuple, TypeVar

T = TypeVar("T")

MULTIPLIER = 48271
INCREMENT = 12345
MODULUS = 2 ** 31 - 1


def lcg_next(state: int) -> Tuple[int, int]:
    """
    推进一步

    Args:
        state: 当前状态

    Returns:
        (value, new_state)，value 与 new_state 相同
    """
    new_state = (state * MULTIPLIER + INCREMENT) % MODULUS
    return new_state, new_state


def pick_index(state: int, n: int) -> int:
    """abs(state) mod n"""
    if n <= 0:
        raise ValueError("n 必须大于 0")
    return abs(state) % n


class SeededSequence:
    """带状态的种子序列"""

    def __init__(self, seed: int):
        self.seed = int(seed)
        self.state = self.seed

    def next(self) -> int:
        value, self.state = lcg_next(self.state)
        return value

    def pick_index(self, n: int) -> int:
        return pick_index(self.next(), n)

    def randint(self, low: int, high: int) -> int:
        """[low, high] 闭区间内的整数"""
        if high < low:
            raise ValueError("high 不能小于 low")
        return low + self.pick_index(high - low + 1)

    def chance(self, percent: int) -> bool:
        return self.pick_index(100) < percent

    def choice(self, items: Sequence[T]) -> T:
        if not items:
            raise ValueError("不能从空序列中选择")
        return items[self.pick_index(len(items))]

    def sample(self, items: Sequence[T], k: int) -> List[T]:
        """
        选出 k 个不重复位置的元素

        先按拒绝重复的方式抽取，超过尝试次数后按顺序补齐，保证终止。
        """
        if k > len(items):
            raise ValueError(f"样本数量 {k} 超过候选数量 {len(items)}")
        chosen: List[int] = []
        attempts = 0
        max_attempts = k * 20
        while len(chosen) < k and attempts < max_attempts:
            idx = self.pick_index(len(items))
            if idx not in chosen:
                chosen.append(idx)
            attempts += 1
        if len(chosen) < k:
            start = self.pick_index(len(items))
            for offset in range(len(items)):
                idx = (start + offset) % len(items)
                if idx not in chosen:
                    chosen.append(idx)
                if len(chosen) == k:
                    break
        return [items[i] for i in chosen]

    def shuffled(self, items: Sequence[T]) -> List[T]:
        """Fisher-Yates 洗牌，返回新列表"""
        result = list(items)
        for i in range(len(result) - 1, 0, -1):
            j = self.pick_index(i + 1)
            result[i], result[j] = result[j], result[i]
        return result
