import re
from typing import List, Tuple, Union

_DIGITS = re.compile(r'([0-9]+)')


def _digits_key(run: str) -> Tuple[int, str, int]:
    value = run.lstrip('0')
    return len(value), value, len(run)


def natural_key(s: str) -> List[Union[str, Tuple[int, str, int]]]:
    """Returns a sort key comparing ASCII digit runs by numeric value and everything else as plain text.

    Equal numbers with different leading zeros sort the shorter run first.
    """
    parts = _DIGITS.split(s)
    # odd positions always hold the digit runs
    return [_digits_key(p) if i % 2 else p for i, p in enumerate(parts)]


def natural_less(a: str, b: str) -> bool:
    """Returns `True` if `a` sorts before `b` in natural order. Example: `group2` < `group10`"""
    return natural_key(a) < natural_key(b)
