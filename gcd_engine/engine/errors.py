from typing import List, Optional, Sequence


# --------------------------- Engine Errors ---------------------------
class GcdError(Exception):
    pass


class InvalidArgument(GcdError, ValueError):
    default_msg = 'All operands are zero, the GCD is undefined'

    def __init__(self, msg: Optional[str] = None):
        super().__init__(msg if msg else self.default_msg)


class OutOfRange(GcdError, ValueError):
    default_msg = 'Operand magnitude is not representable: '

    def __init__(self, positions: Sequence[int], values: Sequence[int]):
        """
        :param positions: Every offending operand position (0 based)
        :param values: The offending values, aligned with positions
        """
        self.positions: List[int] = list(positions)
        self.values: List[int] = list(values)
        msg = f'{self.default_msg}operand {self.positions[0]} = {self.values[0]}'
        if len(self.positions) > 1:
            msg += f' (and {len(self.positions) - 1} more at positions {self.positions[1:]})'
        super().__init__(msg)
