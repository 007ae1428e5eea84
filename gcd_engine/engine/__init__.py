from .errors import *
from .gcd import (
    Algorithms,
    reduce,
    reduce_euclidean,
    reduce_stein,
    gcd_euclidean,
    gcd_stein,
    timed_gcd_euclidean,
    timed_gcd_stein
)
from .validation import validate_operands, operand_bounds
from . import errors

__all__ = [
    'Algorithms',
    'reduce',
    'reduce_euclidean',
    'reduce_stein',
    'gcd_euclidean',
    'gcd_stein',
    'timed_gcd_euclidean',
    'timed_gcd_stein',
    'validate_operands',
    'operand_bounds',
    'GcdError',
    'InvalidArgument',
    'OutOfRange',
    'errors'
]
