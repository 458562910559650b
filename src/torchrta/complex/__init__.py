"""Complex numbers at a selectable floating-point precision."""

from ._complex import (
    Complex,
    ComplexDouble,
    ComplexExtended,
    ComplexSingle,
    add,
    complex_type,
    conjugate,
    divide,
    imag,
    make_complex,
    multiply,
    multiply_real,
    real,
    set_real,
    subtract,
)
from ._functions import (
    absolute,
    angle,
    arccos,
    arccosh,
    arcsin,
    arcsinh,
    arctan,
    arctanh,
    cos,
    cosh,
    exp,
    log,
    power,
    projection,
    sin,
    sinh,
    sqrt,
    tan,
    tanh,
)

__all__ = [
    # Types
    "Complex",
    "ComplexDouble",
    "ComplexExtended",
    "ComplexSingle",
    "complex_type",
    "make_complex",
    # Arithmetic
    "add",
    "conjugate",
    "divide",
    "imag",
    "multiply",
    "multiply_real",
    "real",
    "set_real",
    "subtract",
    # Transcendental
    "absolute",
    "angle",
    "arccos",
    "arccosh",
    "arcsin",
    "arcsinh",
    "arctan",
    "arctanh",
    "cos",
    "cosh",
    "exp",
    "log",
    "power",
    "projection",
    "sin",
    "sinh",
    "sqrt",
    "tan",
    "tanh",
]
