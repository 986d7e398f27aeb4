"""Robust computation of the sign of a 2x2 determinant."""

import math
from enum import IntEnum


class Sign(IntEnum):
    """Sign of a determinant."""

    NEGATIVE = -1
    ZERO = 0
    POSITIVE = 1


def sign_of_det2x2(x1: float, y1: float, x2: float, y2: float) -> Sign:
    """Return the sign of the determinant | x1 y1 ; x2 y2 |, computed robustly."""
    return Sign(_sign(x1, y1, x2, y2))


def _sign(x1: float, y1: float, x2: float, y2: float) -> int:
    # testing null entries
    if x1 == 0.0 or y2 == 0.0:
        if y1 == 0.0 or x2 == 0.0:
            return 0
        if y1 > 0:
            return -1 if x2 > 0 else 1
        return 1 if x2 > 0 else -1
    if y1 == 0.0 or x2 == 0.0:
        if y2 > 0:
            return 1 if x1 > 0 else -1
        return -1 if x1 > 0 else 1

    sign = 1

    # make y coordinates positive and permute so that y2 is the largest
    if 0.0 < y1:
        if 0.0 < y2:
            if y1 > y2:
                sign = -1
                x1, x2 = x2, x1
                y1, y2 = y2, y1
        elif y1 <= -y2:
            sign = -1
            x2, y2 = -x2, -y2
        else:
            x1, x2 = -x2, x1
            y1, y2 = -y2, y1
    elif 0.0 < y2:
        if -y1 <= y2:
            sign = -1
            x1, y1 = -x1, -y1
        else:
            x1, x2 = x2, -x1
            y1, y2 = y2, -y1
    elif y1 >= y2:
        x1, y1, x2, y2 = -x1, -y1, -x2, -y2
    else:
        sign = -1
        x1, x2 = -x2, -x1
        y1, y2 = -y2, -y1

    # make x coordinates positive; if |x2| < |x1| one can conclude
    if 0.0 < x1:
        if 0.0 < x2:
            if x1 > x2:
                return sign
        else:
            return sign
    else:
        if 0.0 < x2:
            return -sign
        if x1 >= x2:
            sign = -sign
            x1, x2 = -x1, -x2
        else:
            return -sign

    # all entries strictly positive, x1 <= x2 and y1 <= y2
    while True:
        k = math.floor(x2 / x1)
        x2 -= k * x1
        y2 -= k * y1

        if y2 < 0.0:
            return -sign
        if y2 > y1:
            return sign

        if x1 > x2 + x2:
            if y1 < y2 + y2:
                return sign
        else:
            if y1 > y2 + y2:
                return -sign
            x2 = x1 - x2
            y2 = y1 - y2
            sign = -sign
        if y2 == 0.0:
            if x2 == 0.0:
                return 0
            return -sign
        if x2 == 0.0:
            return sign

        # exchange the roles of 1 and 2
        k = math.floor(x1 / x2)
        x1 -= k * x2
        y1 -= k * y2

        if y1 < 0.0:
            return sign
        if y1 > y2:
            return -sign

        if x2 > x1 + x1:
            if y2 < y1 + y1:
                return -sign
        else:
            if y2 > y1 + y1:
                return sign
            x1 = x2 - x1
            y1 = y2 - y1
            sign = -sign
        if y1 == 0.0:
            if x1 == 0.0:
                return 0
            return sign
        if x1 == 0.0:
            return -sign