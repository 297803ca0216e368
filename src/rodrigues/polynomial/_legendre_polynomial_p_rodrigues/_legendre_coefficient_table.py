from typing import Optional

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from rodrigues.polynomial._integer_polynomial._integer_polynomial_exponent import (
    _check_exponent,
)

from ._legendre_polynomial_p_coefficients import (
    legendre_polynomial_p_coefficients,
)
from ._rodrigues_coefficients_to_tensor import (
    rodrigues_coefficients_to_tensor,
)
from ._shifted_legendre_polynomial_p_coefficients import (
    shifted_legendre_polynomial_p_coefficients,
)


@tensorclass
class LegendreCoefficientTable:
    """Power-basis coefficients of P_0, ..., P_n, one row per degree.

    Attributes
    ----------
    coeffs : Tensor
        Shape (n + 1, n + 1). coeffs[k, i] is the coefficient of x^i in P_k;
        entries with i > k are zero. The batch dimension is the degree.

    Examples
    --------
    >>> table = legendre_polynomial_p_table(2)
    >>> table.coeffs
    tensor([[ 1.0000,  0.0000,  0.0000],
            [ 0.0000,  1.0000,  0.0000],
            [-0.5000,  0.0000,  1.5000]], dtype=torch.float64)
    >>> table(torch.tensor([1.0], dtype=torch.float64))
    tensor([[1., 1., 1.]], dtype=torch.float64)
    """

    coeffs: Tensor

    def __call__(self, x: Tensor) -> Tensor:
        """Evaluate every row at x with Horner's method.

        Returns a tensor of shape (*x.shape, n + 1).
        """
        coeffs = self.coeffs

        result = torch.zeros(
            *x.shape,
            coeffs.shape[0],
            dtype=torch.promote_types(x.dtype, coeffs.dtype),
            device=coeffs.device,
        )

        x = x.unsqueeze(-1)
        for i in reversed(range(coeffs.shape[-1])):
            result = result * x + coeffs[..., i]

        return result


def legendre_polynomial_p_table(
    max_degree: int,
    shifted: bool = False,
    dtype: torch.dtype = torch.float64,
    device: Optional[torch.device] = None,
) -> LegendreCoefficientTable:
    """Tabulate normalized Legendre coefficients for degrees 0..max_degree.

    Every row comes from the exact generator; each coefficient is divided
    by its prefix exactly and only then converted to ``dtype``.

    Parameters
    ----------
    max_degree : int
        Highest degree in [0, MAXIMUM_EXPONENT].
    shifted : bool
        Tabulate shifted polynomials on [0, 1] instead (default False).
    dtype : torch.dtype
        Floating point dtype (default float64).
    device : torch.device, optional
        Device of the table.

    Returns
    -------
    LegendreCoefficientTable
        Table with batch size (max_degree + 1,).

    Raises
    ------
    InvalidExponentError
        If max_degree is not an integer in [0, MAXIMUM_EXPONENT].
    """
    max_degree = _check_exponent(max_degree, "max_degree")

    if shifted:
        generate = shifted_legendre_polynomial_p_coefficients
    else:
        generate = legendre_polynomial_p_coefficients

    coeffs = torch.zeros(
        max_degree + 1, max_degree + 1, dtype=dtype, device=device
    )
    for n in range(max_degree + 1):
        coeffs[n, : n + 1] = rodrigues_coefficients_to_tensor(
            generate(n), dtype=dtype, device=device
        )

    return LegendreCoefficientTable(
        coeffs=coeffs, batch_size=[max_degree + 1], device=device
    )
