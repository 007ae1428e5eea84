import numpy as np

from gcd_engine.configs.engine import engine_config
from gcd_engine.engine import kernels
from gcd_engine.utils.schemes.reducer_scheme import ReducerScheme


class SteinReducer(ReducerScheme):
    """
    Binary GCD: strips common powers of two, then subtracts the smaller odd value from the larger.
    With BINARY_STEIN disabled the pairwise step falls back to remainders, which gives the same results.
    """

    def __init__(self):
        super().__init__(
            name='Stein',
            description='GCD by shifts and subtractions',
            version='1'
        )

    def pair(self, a: int, b: int) -> int:
        if engine_config.BINARY_STEIN:
            return int(kernels.stein_pair(a, b))
        return int(kernels.euclid_pair(a, b))

    def fold(self, first: int, extras: np.ndarray) -> int:
        if engine_config.BINARY_STEIN:
            return int(kernels.stein_fold(first, extras))
        return int(kernels.euclid_fold(first, extras))
