from .decimal_arithmetic import DecimalArithmetic
from .float_arithmetic import FloatArithmetic

__all__ = [
    "DecimalArithmetic",
    "FloatArithmetic",
]
