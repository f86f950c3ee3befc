"""Math functions from the builtins and the math module."""

import math

from primer.core.constants import DemoCategory
from primer.demos.registry import register_demo


def sign(value: float) -> int:
    """-1 for negative, 0 for zero, 1 for positive. NaN has no sign."""
    if math.isnan(value):
        raise ValueError("Cannot take the sign of NaN")
    if value == 0:
        return 0
    return int(math.copysign(1, value))


@register_demo("maths", "Math Functions", DemoCategory.BASICS)
def run() -> None:
    """Absolute values, rounding, powers, logarithms and trigonometry."""
    print(abs(-20))                       # 20
    print(sign(-7))                       # -1
    print(max(15, 30))                    # 30
    print(min(15, 30))                    # 15
    print(pow(2, 3))                      # 8
    print(math.sqrt(49))                  # 7.0
    print(math.floor(7.9))                # 7
    print(math.ceil(7.1))                 # 8
    print(round(5.6))                     # 6
    # round() uses banker's rounding on ties
    print(round(2.5), round(3.5))         # 2 4
    print(math.trunc(9.87))               # 9
    print(math.exp(1))                    # 2.718281828...
    print(math.log(10))                   # 2.302585092...
    print(math.log10(1000))               # 3.0
    print(math.sin(math.pi / 2))          # 1.0
    print(math.cos(0))                    # 1.0
    print(math.tan(math.pi / 4))          # 0.999...
    print(math.asin(1))                   # 1.5707963267948966
    print(math.acos(1))                   # 0.0
    print(math.atan(1))                   # 0.7853981633974483
    print(math.pi)
    print(math.e)
