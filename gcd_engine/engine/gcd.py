"""
The GCD function family.

Every public function funnels into `reduce`, which validates a local copy of the operands and hands them to the
reducer module of the requested algorithm. The timed forms measure validation and reduction together and only
return a duration for calls that completed.
"""
from enum import Enum, auto

from gcd_engine.engine.reducers import EuclideanReducer, SteinReducer
from gcd_engine.engine.validation import validate_operands
from gcd_engine.utils.schemes.reducer_scheme import ReducerScheme
from gcd_engine.utils.stopwatch import Stopwatch
from gcd_engine.utils.types import *


class Algorithms(Enum):
    EUCLIDEAN = auto()
    STEIN = auto()


REDUCERS: Dict[Algorithms, ReducerScheme] = {
    Algorithms.EUCLIDEAN: EuclideanReducer(),
    Algorithms.STEIN: SteinReducer()
}


def get_reducer(algorithm: Algorithms | str) -> ReducerScheme:
    if isinstance(algorithm, str):
        try:
            algorithm = Algorithms[algorithm.upper()]
        except KeyError:
            raise ValueError(f'Algorithm "{algorithm}" is not supported, try: '
                             f'{", ".join(a.name.lower() for a in Algorithms)}') from None
    return REDUCERS[algorithm]


def reduce(operands: Operands,
           algorithm: Algorithms | str = Algorithms.EUCLIDEAN,
           timed: bool = False) -> int | TimedResult:
    """
    Reduce two or more integers to their GCD.
    :param operands: The operands (a, b, *other). The sequence is copied, never modified.
    :param algorithm: The reduction algorithm
    :param timed: If True return (gcd, elapsed seconds)
    :raise InvalidArgument: If all operands are zero or less than two operands are given
    :raise OutOfRange: If an operand magnitude is not representable
    :return: The GCD, or the GCD and the elapsed time
    """
    reducer = get_reducer(algorithm)
    if not timed:
        return reducer.execute(validate_operands(operands))

    with Stopwatch(label=reducer.name) as stopwatch:
        result = reducer.execute(validate_operands(operands))
    return result, stopwatch.elapsed


def reduce_euclidean(operands: Operands, timed: bool = False) -> int | TimedResult:
    return reduce(operands, Algorithms.EUCLIDEAN, timed)


def reduce_stein(operands: Operands, timed: bool = False) -> int | TimedResult:
    return reduce(operands, Algorithms.STEIN, timed)


def gcd_euclidean(a: Operand, b: Operand, *other: Operand) -> int:
    """
    GCD of two or more integers by the Euclidean algorithm.
    e.g. gcd_euclidean(12, 18) == 6, gcd_euclidean(12, 18, 24) == 6
    """
    return reduce((a, b, *other), Algorithms.EUCLIDEAN)


def gcd_stein(a: Operand, b: Operand, *other: Operand) -> int:
    """
    GCD of two or more integers by Stein's binary algorithm.
    """
    return reduce((a, b, *other), Algorithms.STEIN)


def timed_gcd_euclidean(a: Operand, b: Operand, *other: Operand) -> TimedResult:
    return reduce((a, b, *other), Algorithms.EUCLIDEAN, timed=True)


def timed_gcd_stein(a: Operand, b: Operand, *other: Operand) -> TimedResult:
    return reduce((a, b, *other), Algorithms.STEIN, timed=True)
