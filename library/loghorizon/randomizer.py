from __future__ import annotations

from random import Random
from typing import Optional


class Randomizer:
    """掷骰器, 所有掷出的骰子都会记录在 details 中"""

    details: list[tuple[int, int]]

    def __init__(self, seed: Optional[int] = None):
        self.rand = Random(seed)
        self.details = []

    def roll_once(self, faces: int) -> int:
        if faces < 1:
            raise ValueError("Can't input zero in type")
        value = self.rand.randint(1, faces)
        self.details.append((value, faces))
        return value

    def roll_barabara(self, times: int, faces: int) -> list[int]:
        if times < 0:
            raise ValueError("Input a wrong number")
        return [self.roll_once(faces) for _ in range(times)]

    def roll_d66(self) -> int:
        """两颗 d6 按掷出顺序拼接, 不排序"""
        tens, ones = self.roll_barabara(2, 6)
        return tens * 10 + ones

    def clear(self):
        self.details.clear()
