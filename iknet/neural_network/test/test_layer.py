import unittest

import numpy as np

from iknet.neural_network.layer import Layer


class TestLayer(unittest.TestCase):

    def test_construct(self):
        layer = Layer(n_inputs=4, size=3, eta=0.01)

        self.assertEqual(len(layer), 3)
        self.assertEqual(len(layer.units), 3)
        self.assertTrue(all(unit.n_inputs == 4 for unit in layer.units))
        self.assertEqual(layer.weights.shape, (3, 4))

    def test_propagate(self):
        random_state = np.random.RandomState(1234)
        layer = Layer(n_inputs=2, size=3, eta=0.01, random_state=random_state)

        x = np.r_[0.3, 0.6]
        output = layer.propagate(x)

        expected = 1.0 / (1.0 + np.exp(-layer.weights.dot(x)))
        np.testing.assert_allclose(output, expected)
        np.testing.assert_array_equal(layer.input, x)

    def test_propagate_copies_input(self):
        layer = Layer(n_inputs=2, size=1, eta=0.01)

        x = np.r_[0.3, 0.6]
        layer.propagate(x)
        x[0] = 100.0

        self.assertEqual(layer.input[0], 0.3)

    def test_apply_updates_uses_cached_input(self):
        layer = Layer(n_inputs=2, size=2, eta=1.0)
        for unit in layer.units:
            unit.weights[:] = 0
            unit.delta = 1.0

        layer.propagate([1.0, 2.0])
        layer.apply_updates()

        np.testing.assert_allclose(layer.weights, [[-1, -2], [-1, -2]])

    def test_apply_updates_explicit_input(self):
        layer = Layer(n_inputs=2, size=1, eta=1.0)
        layer.units[0].weights[:] = 0
        layer.units[0].delta = 0.5

        layer.propagate([1.0, 2.0])
        layer.apply_updates([2.0, 0.0])

        np.testing.assert_allclose(layer.weights, [[-1.0, 0.0]])
