"""
Play condition evaluation for Dynamic Footsteps.
"""

import operator as _op
from typing import Optional

from state.constants import UNSET_ID
from .profiles import Operator, PlayCondition

COMPARATORS = {
    Operator.EQ: _op.eq,
    Operator.NE: _op.ne,
    Operator.GT: _op.gt,
    Operator.LT: _op.lt,
    Operator.GE: _op.ge,
    Operator.LE: _op.le,
}


def evaluates(condition: Optional[PlayCondition], current_value: Optional[int]) -> bool:
    """Check whether a play condition allows the sound.

    Args:
        condition: The profile's play condition, or None
        current_value: Live value of the condition's variable, or None
            when the condition has no variable bound

    Returns:
        True if the sound may play
    """
    if condition is None or not condition.enabled:
        return True

    # Enabled without a variable never plays
    if condition.variable_id == UNSET_ID:
        return False

    compare = COMPARATORS.get(condition.operator)
    if compare is None or current_value is None:
        return False
    return compare(current_value, condition.value)
