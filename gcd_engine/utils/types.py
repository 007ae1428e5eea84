import numpy as np
from typing import Union, List, Tuple, Sequence, Optional, Dict, Type

Operand = Union[int, np.integer]
Operands = Sequence[Operand]
TimedResult = Tuple[int, float]            # (gcd, elapsed seconds)
