from . import engine
from .engine import (
    Algorithms,
    reduce,
    reduce_euclidean,
    reduce_stein,
    gcd_euclidean,
    gcd_stein,
    timed_gcd_euclidean,
    timed_gcd_stein,
    GcdError,
    InvalidArgument,
    OutOfRange
)

# configs
from .configs import (
    config,
    engine_config,
    logging_config
)

from .utils.logger import Logger
