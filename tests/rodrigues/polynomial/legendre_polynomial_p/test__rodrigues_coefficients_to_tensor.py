from fractions import Fraction

import numpy as np
import pytest
import torch
from numpy.polynomial import legendre as np_leg

from rodrigues.polynomial import (
    InvalidExponentError,
    LegendreCoefficientTable,
    legendre_polynomial_p_coefficients,
    legendre_polynomial_p_table,
    rodrigues_coefficients_to_tensor,
)


class TestRodriguesCoefficientsToTensor:
    def test_degree_two(self):
        t = rodrigues_coefficients_to_tensor(legendre_polynomial_p_coefficients(2))
        torch.testing.assert_close(
            t, torch.tensor([-0.5, 0.0, 1.5], dtype=torch.float64)
        )

    @pytest.mark.parametrize("n", range(0, 14))
    def test_vs_numpy(self, n):
        """Compare with numpy.polynomial.legendre.leg2poly."""
        t = rodrigues_coefficients_to_tensor(legendre_polynomial_p_coefficients(n))
        expected = np_leg.leg2poly([0.0] * n + [1.0])
        np.testing.assert_allclose(t.numpy(), expected, rtol=1e-12, atol=1e-12)

    def test_dtype(self):
        t = rodrigues_coefficients_to_tensor(
            legendre_polynomial_p_coefficients(3), dtype=torch.float32
        )
        assert t.dtype == torch.float32


class TestLegendrePolynomialPTable:
    def test_shape(self):
        table = legendre_polynomial_p_table(5)
        assert isinstance(table, LegendreCoefficientTable)
        assert table.coeffs.shape == (6, 6)
        assert table.batch_size == torch.Size([6])

    def test_rows_are_zero_padded(self):
        table = legendre_polynomial_p_table(4)
        torch.testing.assert_close(
            table.coeffs[2],
            torch.tensor([-0.5, 0.0, 1.5, 0.0, 0.0], dtype=torch.float64),
        )

    def test_evaluate_vs_numpy(self):
        """Compare every row with numpy.polynomial.legendre.legval."""
        table = legendre_polynomial_p_table(10)
        x = torch.linspace(-1.0, 1.0, 21, dtype=torch.float64)
        values = table(x)
        assert values.shape == (21, 11)
        for n in range(11):
            expected = np_leg.legval(x.numpy(), [0.0] * n + [1.0])
            np.testing.assert_allclose(
                values[:, n].numpy(), expected, rtol=1e-10, atol=1e-10
            )

    def test_shifted_evaluate_vs_numpy(self):
        table = legendre_polynomial_p_table(6, shifted=True)
        x = torch.linspace(0.0, 1.0, 11, dtype=torch.float64)
        values = table(x)
        for n in range(7):
            expected = np_leg.legval(2.0 * x.numpy() - 1.0, [0.0] * n + [1.0])
            np.testing.assert_allclose(
                values[:, n].numpy(), expected, rtol=1e-10, atol=1e-10
            )

    def test_values_at_one(self):
        table = legendre_polynomial_p_table(13)
        values = table(torch.tensor([1.0], dtype=torch.float64))
        torch.testing.assert_close(
            values, torch.ones(1, 14, dtype=torch.float64)
        )

    def test_invalid_max_degree(self):
        with pytest.raises(InvalidExponentError):
            legendre_polynomial_p_table(-1)


class TestRodriguesCoefficientsToTensorPrecision:
    def test_float32_degree_80_is_finite(self):
        c = legendre_polynomial_p_coefficients(80)
        t = rodrigues_coefficients_to_tensor(c, dtype=torch.float32)
        assert torch.isfinite(t).all()

    @pytest.mark.parametrize("n", [80, 100, 120])
    def test_float32_leading_coefficient(self, n):
        c = legendre_polynomial_p_coefficients(n)
        t = rodrigues_coefficients_to_tensor(c, dtype=torch.float32)

        magnitude, positive = c.coefficients[n]
        exact = float(Fraction(int(magnitude), int(c.prefix)))
        assert positive
        assert t[n].item() == pytest.approx(exact, rel=1e-6)

    def test_float64_matches_exact_division(self):
        c = legendre_polynomial_p_coefficients(200)
        t = rodrigues_coefficients_to_tensor(c)
        expected = [float(Fraction(int(v), int(c.prefix))) for v in c.signed()]
        assert t.tolist() == expected

    def test_table_float32_high_degree(self):
        table = legendre_polynomial_p_table(90, dtype=torch.float32)
        assert torch.isfinite(table.coeffs).all()
