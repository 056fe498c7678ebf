"""Tests for the PCHIP first derivative."""

import pytest
import torch


def _central_difference(spline, t, eps=1e-7):
    from torchpchip import pchip_evaluate

    forward = pchip_evaluate(spline, t + eps)
    backward = pchip_evaluate(spline, t - eps)

    return (forward - backward) / (2 * eps)


class TestPCHIPDerivative:
    def test_reproduces_estimated_derivatives(self):
        """Test that the derivative at the knots equals ds."""
        from torchpchip import pchip_derivative, pchip_fit

        x = torch.tensor([0.0, 0.5, 0.9, 2.0, 2.4, 3.0], dtype=torch.float64)
        y = torch.tensor([1.0, 1.5, 0.2, 0.3, 2.0, 2.1], dtype=torch.float64)

        spline = pchip_fit(x, y)

        torch.testing.assert_close(
            pchip_derivative(spline, x), spline.ds, atol=1e-12, rtol=1e-12
        )

    def test_reproduces_explicit_derivatives(self):
        """Test that caller-supplied derivatives are reproduced."""
        from torchpchip import pchip_derivative, pchip_fit

        x = torch.linspace(0, 1, 6, dtype=torch.float64)
        y = torch.cos(x)
        dydx = torch.tensor(
            [1.0, -2.0, 0.0, 4.0, 0.5, -1.0], dtype=torch.float64
        )

        spline = pchip_fit(x, y, dydx)

        torch.testing.assert_close(
            pchip_derivative(spline, x), dydx, atol=1e-12, rtol=1e-12
        )

    @pytest.mark.parametrize("explicit", [False, True])
    def test_numerical_derivative_at_interior_knots(self, explicit):
        """Test that finite differences of the interpolant match ds."""
        from torchpchip import pchip_fit

        x = torch.tensor([0.0, 0.7, 1.2, 2.0, 3.1, 3.5], dtype=torch.float64)
        y = torch.sin(2 * x)
        dydx = 2 * torch.cos(2 * x) if explicit else None

        spline = pchip_fit(x, y, dydx)

        numerical = _central_difference(spline, x[1:-1])

        torch.testing.assert_close(
            numerical, spline.ds[1:-1], atol=1e-5, rtol=1e-5
        )

    def test_numerical_derivative_at_end_points(self):
        """Test one-sided finite differences at the end points."""
        from torchpchip import pchip_evaluate, pchip_fit

        x = torch.tensor([0.0, 0.7, 1.2, 2.0], dtype=torch.float64)
        y = torch.tensor([0.0, 1.0, 1.5, 1.6], dtype=torch.float64)

        spline = pchip_fit(x, y)
        eps = 1e-7

        left = (pchip_evaluate(spline, x[0] + eps) - y[0]) / eps
        right = (y[-1] - pchip_evaluate(spline, x[-1] - eps)) / eps

        torch.testing.assert_close(left, spline.ds[0], atol=1e-5, rtol=1e-5)
        torch.testing.assert_close(right, spline.ds[-1], atol=1e-5, rtol=1e-5)

    def test_matches_finite_differences_between_knots(self):
        """Test the analytic derivative against finite differences."""
        from torchpchip import pchip_derivative, pchip_fit

        x = torch.linspace(0, 3, 8, dtype=torch.float64)
        y = torch.stack([torch.exp(-x), x**2], dim=-1)

        spline = pchip_fit(x, y)

        t = torch.tensor([0.2, 1.1, 2.33, 2.9], dtype=torch.float64)

        analytic = pchip_derivative(spline, t)
        assert analytic.shape == (4, 2)

        torch.testing.assert_close(
            analytic, _central_difference(spline, t), atol=1e-6, rtol=1e-6
        )

    def test_derivative_of_linear(self):
        """Test that the derivative of linear data is constant."""
        from torchpchip import pchip_derivative, pchip_fit

        x = torch.linspace(0, 1, 5, dtype=torch.float64)
        y = 3 * x + 2

        spline = pchip_fit(x, y)

        t = torch.tensor([0.1, 0.5, 0.95], dtype=torch.float64)

        torch.testing.assert_close(
            pchip_derivative(spline, t),
            torch.full_like(t, 3.0),
            atol=1e-12,
            rtol=1e-12,
        )

    def test_scalar_query(self):
        """Test that a scalar query returns a 0-d tensor."""
        from torchpchip import pchip_derivative, pchip_fit

        x = torch.linspace(0, 1, 5, dtype=torch.float64)
        spline = pchip_fit(x, x**2)

        assert pchip_derivative(spline, 0.4).shape == ()

    def test_domain_error(self):
        """Test that out-of-range queries raise DomainError."""
        from torchpchip import DomainError, pchip_derivative, pchip_fit

        x = torch.linspace(0, 1, 5, dtype=torch.float64)
        spline = pchip_fit(x, x**2)

        with pytest.raises(DomainError):
            pchip_derivative(spline, 1.01)
