"""Normal-distribution helpers."""

import math

# Abramowitz & Stegun 26.2.17 coefficients
_P = 0.2316419
_B = (0.319381530, -0.356563782, 1.781477937, -1.821255978, 1.330274429)
_INV_SQRT_2PI = 0.3989422804014327


def normal_cdf(z: float) -> float:
    """Standard normal CDF via a rational polynomial approximation.

    Absolute error is below 1e-7 over the whole real line.
    """
    t = 1.0 / (1.0 + _P * abs(z))
    density = _INV_SQRT_2PI * math.exp(-z * z / 2.0)
    poly = t * (_B[0] + t * (_B[1] + t * (_B[2] + t * (_B[3] + t * _B[4]))))
    tail = density * poly
    return 1.0 - tail if z > 0 else tail
