from library.loghorizon import Randomizer


class SequenceRandomizer(Randomizer):
    """按给定顺序返回骰值, 用完后再掷骰视为测试错误"""

    def __init__(self, values):
        super().__init__()
        self.values = list(values)

    def roll_once(self, faces: int) -> int:
        if not self.values:
            raise AssertionError("unexpected dice roll")
        value = self.values.pop(0)
        assert 1 <= value <= faces
        self.details.append((value, faces))
        return value
