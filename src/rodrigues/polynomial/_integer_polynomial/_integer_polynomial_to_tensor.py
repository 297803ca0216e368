import math
from fractions import Fraction
from typing import Optional, Union

import torch
from torch import Tensor

from rodrigues.integer import Integer

from ._integer_polynomial import IntegerPolynomial


def _saturating_float(value: Union[Integer, Fraction]) -> float:
    # Nearest float64, or a signed inf once the magnitude passes float max.
    if isinstance(value, Integer):
        value = int(value)

    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def integer_polynomial_to_tensor(
    p: IntegerPolynomial,
    dtype: torch.dtype = torch.float64,
    device: Optional[torch.device] = None,
) -> Tensor:
    """Convert coefficients to a floating point tensor.

    Parameters
    ----------
    p : IntegerPolynomial
        Polynomial to convert.
    dtype : torch.dtype
        Floating point dtype of the result (default float64).
    device : torch.device, optional
        Device of the result.

    Returns
    -------
    Tensor
        Shape (len(p),), coefficients in ascending order. Values beyond the
        range of ``dtype`` become inf with the coefficient's sign.
    """
    return torch.tensor(
        [_saturating_float(c) for c in p.coeffs], dtype=dtype, device=device
    )
