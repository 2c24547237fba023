"""Guard clauses instead of deeply nested conditionals."""
from typing import Optional

GREETING = "Hello"


def greeting_for(first_condition: bool, second_condition: bool, third_condition: bool) -> Optional[str]:
    """
    Return the greeting when only the third condition holds.

    Each early return replaces one level of nesting.
    """
    if first_condition:
        return None
    if second_condition:
        return None
    if third_condition:
        return GREETING
    return None
