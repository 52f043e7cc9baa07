"""
Fixed-point emulation of the exponential functions used by the Elo model.

Every value is an integer scaled by 2**PRECISION, so the results are the same
on every machine.
"""

# Binary precision of every fixed-point quantity
PRECISION = 10
SCALE = 1 << PRECISION  # 1.0

# round(value * 2**PRECISION)
LN10 = 2358  # ln(10)
E = 2784     # e

MAX_TAYLOR_TERMS = 10


def to_fixed(value: int) -> int:
    """Promote a plain integer to fixed-point scale."""
    return value << PRECISION


def from_fixed(value: int) -> int:
    """Drop the fractional part of a fixed-point value."""
    return value >> PRECISION


def fp_exp(x: int) -> int:
    """
    Calculate e^x for a fractional fixed-point x in [0, 1).
    
    Uses a Taylor series truncated at MAX_TAYLOR_TERMS terms.
    
    Args:
        x: Exponent at fixed-point scale
        
    Returns:
        e^x at fixed-point scale
    """
    result = SCALE  # x^0 / 0!
    term = SCALE
    
    for i in range(1, MAX_TAYLOR_TERMS + 1):
        # x^i / i!
        term = ((term * x) >> PRECISION) // i
        result += term
        
        # Below resolution, later terms are zero too
        if term == 0:
            break
    
    return result


def fp_exp_int(x: int) -> int:
    """
    Calculate e^x for a non-negative plain integer x.
    
    Multiplies by E exactly x times, so cost and rounding error grow with x.
    
    Args:
        x: Integer exponent
        
    Returns:
        e^x at fixed-point scale
    """
    s = SCALE
    for _ in range(x):
        s = (s * E) >> PRECISION
    return s


def fp_pow10(x: int) -> int:
    """
    Calculate 10^x for a fixed-point x, as e^(x * ln(10)).
    
    The exponent is split into an integer part handled by fp_exp_int and a
    fractional part handled by fp_exp.
    
    Args:
        x: Exponent at fixed-point scale
        
    Returns:
        10^x at fixed-point scale
    """
    exponent = (x * LN10) >> PRECISION
    
    e1 = exponent >> PRECISION
    e2 = exponent - (e1 << PRECISION)
    
    return (fp_exp_int(e1) * fp_exp(e2)) >> PRECISION
