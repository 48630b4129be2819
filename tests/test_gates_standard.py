"""Tests for standard gate matrices."""

import cmath
import math

import torch

from qgates.gates import standard as stdgates


class TestStaticGates:
    """Tests for fixed single-qubit matrices."""

    def test_default_dtype_and_shape(self):
        """Test that every single-qubit matrix is a complex64 2x2 tensor."""
        for factory in (stdgates.I, stdgates.X, stdgates.Y, stdgates.Z, stdgates.H, stdgates.T):
            gate = factory()
            assert gate.shape == (2, 2)
            assert gate.dtype == torch.complex64

    def test_y_gate_matrix(self):
        """Test Y gate has correct matrix."""
        expected = torch.tensor([[0.0, -1.0j], [1.0j, 0.0]], dtype=torch.complex64)
        assert torch.allclose(stdgates.Y(), expected)

    def test_h_gate_squares_to_identity(self):
        """Test H^2 = I."""
        h = stdgates.H(dtype=torch.complex128)
        assert torch.allclose(h @ h, torch.eye(2, dtype=torch.complex128), atol=1e-12)

    def test_t_gate_phase(self):
        """Test T = diag(1, e^{i*pi/4})."""
        t = stdgates.T(dtype=torch.complex128)
        assert t[0, 0] == 1
        assert abs(complex(t[1, 1]) - cmath.exp(1j * math.pi / 4)) < 1e-12
        assert stdgates.T_PHASE == cmath.exp(1j * math.pi / 4)

    def test_paulis_square_to_identity(self):
        """Test X^2 = Y^2 = Z^2 = I."""
        eye = torch.eye(2, dtype=torch.complex64)
        for factory in (stdgates.X, stdgates.Y, stdgates.Z):
            gate = factory()
            assert torch.allclose(gate @ gate, eye)


class TestParametricGates:
    """Tests for matrices built from parameters."""

    def test_phase_matches_t_at_quarter_pi(self):
        """Test phase(pi/4) equals T."""
        assert torch.allclose(stdgates.phase(math.pi / 4), stdgates.T())

    def test_phase_inverse_is_negative_angle(self):
        """Test phase(theta) @ phase(-theta) = I."""
        product = stdgates.phase(0.9) @ stdgates.phase(-0.9)
        assert torch.allclose(product, torch.eye(2, dtype=torch.complex64), atol=1e-6)

    def test_matrix2x2_layout(self):
        """Test that coefficients are laid out row by row."""
        m = stdgates.matrix2x2(1, 2j, 3, 4)
        assert complex(m[0, 1]) == 2j
        assert complex(m[1, 0]) == 3


class TestTwoQubitGates:
    """Tests for CNOT."""

    def test_cnot_shape_and_unitary(self):
        gate = stdgates.CNOT()
        assert gate.shape == (4, 4)
        assert stdgates.is_unitary(gate)

    def test_cnot_flips_second_qubit_when_first_set(self):
        """Test |10> -> |11> and |11> -> |10> with the control first."""
        gate = stdgates.CNOT()
        assert gate[3, 2] == 1
        assert gate[2, 3] == 1
        assert gate[0, 0] == 1
        assert gate[1, 1] == 1


class TestIsUnitary:
    def test_rejects_non_square(self):
        assert not stdgates.is_unitary(torch.zeros(2, 3, dtype=torch.complex64))

    def test_batched(self):
        batch = torch.stack([stdgates.H(), stdgates.X()])
        assert stdgates.is_unitary(batch)
