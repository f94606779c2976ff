import unittest

import numpy as np

from iknet.core.exception import DimensionMismatch, NoPriorForward
from iknet.neural_network.unit import sigmoid, Unit


class TestUnit(unittest.TestCase):

    def test_weights_initialized_in_range(self):
        random_state = np.random.RandomState(1234)
        unit = Unit(n_inputs=500, eta=0.01, random_state=random_state)

        self.assertEqual(unit.weights.shape, (500,))
        self.assertTrue((unit.weights >= -0.5).all())
        self.assertTrue((unit.weights < 0.5).all())

    def test_activate(self):
        random_state = np.random.RandomState(1234)
        unit = Unit(n_inputs=3, eta=0.01, random_state=random_state)

        x = np.r_[0.2, -1.0, 0.5]
        expected = 1.0 / (1.0 + np.exp(-np.dot(unit.weights, x)))

        self.assertAlmostEqual(unit.activate(x), expected)
        self.assertAlmostEqual(unit.activation, expected)

    def test_activate_wrong_length(self):
        unit = Unit(n_inputs=3, eta=0.01)

        with self.assertRaises(DimensionMismatch):
            unit.activate([1.0, 2.0])

    def test_derivative(self):
        unit = Unit(n_inputs=2, eta=0.01)
        unit.weights[:] = 0

        unit.activate([1.0, 1.0])

        self.assertAlmostEqual(unit.derivative(), 0.25)
        self.assertAlmostEqual(unit.derivative(0.9), 0.09)

    def test_derivative_before_activate(self):
        unit = Unit(n_inputs=2, eta=0.01)

        with self.assertRaises(NoPriorForward):
            unit.derivative()

        # An explicit activation needs no cached one
        self.assertAlmostEqual(unit.derivative(0.5), 0.25)

    def test_update_weights(self):
        unit = Unit(n_inputs=2, eta=0.5)
        unit.weights[:] = [0.1, -0.2]
        unit.delta = 0.4

        unit.update_weights([1.0, 2.0])

        np.testing.assert_allclose(unit.weights, [0.1 - 0.2, -0.2 - 0.4])

    def test_update_weights_with_eta(self):
        unit = Unit(n_inputs=1, eta=0.5)
        unit.weights[:] = [1.0]
        unit.delta = 1.0

        unit.update_weights([1.0], eta=0.1)

        self.assertAlmostEqual(unit.weights[0], 0.9)

    def test_sigmoid_large_arguments(self):
        self.assertEqual(sigmoid(-1000.0), 0.0)
        self.assertEqual(sigmoid(1000.0), 1.0)
        self.assertEqual(sigmoid(0.0), 0.5)
