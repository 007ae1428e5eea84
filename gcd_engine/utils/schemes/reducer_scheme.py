from abc import abstractmethod
import numpy as np

from gcd_engine.configs.engine import engine_config
from gcd_engine.utils.logger import Logger
from gcd_engine.utils.schemes.module import Module
from gcd_engine.utils.types import *


class ReducerScheme(Module):
    """
    A Scheme for all GCD reduction modules. \n
    A reducer defines the pairwise GCD step and how the running GCD is folded over a vector.
    The fold policy (fast paths, short-circuit and zero truncation) is shared by all reducers.
    """

    def __init__(self, name: Optional[str] = None,
                 description: Optional[str] = None,
                 version: Optional[str] = None):
        super().__init__(name, description, version)

    @abstractmethod
    def pair(self, a: int, b: int) -> int:
        """
        :return: The non-negative GCD of a and b
        """
        raise NotImplementedError

    @abstractmethod
    def fold(self, first: int, extras: np.ndarray) -> int:
        """
        :param first: The running GCD
        :param extras: Non-zero operands to fold into the running GCD, left to right
        :return: The non-negative GCD of first and all extras
        """
        raise NotImplementedError

    def execute(self, operands: Tuple[int, ...]) -> int:
        """
        Reduce validated operands to their GCD.
        :param operands: At least two validated operands (a, b, *other)
        :return: The GCD
        """
        a, b, *other = operands

        # gcd with 1 is always 1
        if len(other) == 2 and other[1] == 1:
            return 1

        if not other and (b == 0 or a == b):
            return abs(a)

        result = self.pair(a, b)
        if not other:
            return result

        extras = np.asarray(other, dtype=np.int64)
        zeros = np.flatnonzero(extras == 0)
        if zeros.size:
            stop = int(zeros[0])
            if engine_config.WARN_ON_TRUNCATED_FOLD:
                Logger(
                    f'{self.name}: fold stopped at operand {stop + 2} (zero), '
                    f'{len(other) - stop - 1} remaining operands ignored',
                    Logger.Levels.warning
                ).log()
            extras = extras[:stop]
            if not extras.size:
                return result
        return self.fold(result, extras)
