from fractions import Fraction
from typing import Optional

import torch
from torch import Tensor

from rodrigues.polynomial._integer_polynomial._integer_polynomial_to_tensor import (
    _saturating_float,
)

from ._rodrigues_coefficients import RodriguesCoefficients


def rodrigues_coefficients_to_tensor(
    c: RodriguesCoefficients,
    dtype: torch.dtype = torch.float64,
    device: Optional[torch.device] = None,
) -> Tensor:
    """Normalized power-basis coefficients as a floating point tensor.

    Each entry signed_i / prefix is formed exactly and rounded once, so a
    coefficient is finite whenever its true value fits in ``dtype``.

    Parameters
    ----------
    c : RodriguesCoefficients
        Generator output.
    dtype : torch.dtype
        Floating point dtype (default float64).
    device : torch.device, optional
        Device of the result.

    Returns
    -------
    Tensor
        Shape (degree + 1,), entry i is signed_i / prefix, the coefficient
        of x^i.

    Examples
    --------
    >>> rodrigues_coefficients_to_tensor(legendre_polynomial_p_coefficients(2))
    tensor([-0.5000,  0.0000,  1.5000], dtype=torch.float64)
    """
    prefix = int(c.prefix)

    return torch.tensor(
        [_saturating_float(Fraction(int(v), prefix)) for v in c.signed()],
        dtype=dtype,
        device=device,
    )
