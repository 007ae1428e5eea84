import numpy as np

from gcd_engine.engine import kernels
from gcd_engine.utils.schemes.reducer_scheme import ReducerScheme


class EuclideanReducer(ReducerScheme):
    """
    GCD by repeated remainders: gcd(a, b) = gcd(b, a mod b) until b is 0
    """

    def __init__(self):
        super().__init__(
            name='Euclidean',
            description='GCD by repeated remainders',
            version='1'
        )

    def pair(self, a: int, b: int) -> int:
        return int(kernels.euclid_pair(a, b))

    def fold(self, first: int, extras: np.ndarray) -> int:
        return int(kernels.euclid_fold(first, extras))
