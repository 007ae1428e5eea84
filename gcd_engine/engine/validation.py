import numpy as np

from gcd_engine.configs.engine import engine_config
from gcd_engine.engine.errors import InvalidArgument, OutOfRange
from gcd_engine.utils.types import *


def operand_bounds(dtype: Optional[Type[np.integer]] = None) -> Tuple[int, int]:
    """
    The smallest and largest operand magnitude accepted for an integer type.
    The type minimum is excluded since its absolute value overflows the type.
    :param dtype: A signed numpy integer type, defaults to the configured one
    :return: (lowest accepted value, highest accepted value)
    """
    info = np.iinfo(dtype if dtype is not None else engine_config.INT_DTYPE)
    return -int(info.max), int(info.max)


def validate_operands(operands: Operands,
                      strict_zero_check: Optional[bool] = None,
                      dtype: Optional[Type[np.integer]] = None) -> Tuple[int, ...]:
    """
    Copies and checks the operands of a GCD reduction.
    :param operands: The operands as supplied by the caller, never modified
    :param strict_zero_check: Check all operands for the all-zero case, or only the first four.
    Defaults to the configured value.
    :param dtype: The integer type operands must fit in. Defaults to the configured value.
    :raise TypeError: If an operand is not an integer
    :raise InvalidArgument: If less than two operands are given or all checked operands are zero
    :raise OutOfRange: If an operand magnitude does not fit the integer type
    :return: The operands as a tuple of python ints
    """
    if strict_zero_check is None:
        strict_zero_check = engine_config.STRICT_ZERO_CHECK

    values = tuple(operands)
    if len(values) < 2:
        raise InvalidArgument(f'At least two operands are required, got {len(values)}')

    for pos, v in enumerate(values):
        if isinstance(v, bool) or not isinstance(v, int | np.integer):
            raise TypeError(f"Unsupported operand at position {pos}: '{type(v)}'")
    values = tuple(int(v) for v in values)

    checked = values if strict_zero_check else values[:4]
    if not any(checked):
        raise InvalidArgument()

    low, high = operand_bounds(dtype)
    positions = [pos for pos, v in enumerate(values) if not low <= v <= high]
    if positions:
        raise OutOfRange(positions, [values[pos] for pos in positions])
    return values
