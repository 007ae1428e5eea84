"""
Global config for the reduction engine
"""
from dataclasses import dataclass
import numpy as np

from .configurable import Configurable


@dataclass
class EngineConfig(Configurable):
    # ============================== Operand width ==============================
    INT_DTYPE: type = np.int32                  # operands must fit this signed integer type

    # ============================== Validation ==============================
    STRICT_ZERO_CHECK: bool = True              # all-zero check on every operand, else only on the first four

    # ============================== Algorithms ==============================
    BINARY_STEIN: bool = True                   # Stein pairwise step by shifts, else by remainders

    # ============================== Printing ==============================
    WARN_ON_TRUNCATED_FOLD: bool = False        # warn when a zero extra operand stops the fold


engine_config: EngineConfig = EngineConfig()
