import unittest

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402

from iknet import visualize  # noqa: E402


class TestVisualize(unittest.TestCase):

    def tearDown(self):
        plt.close('all')

    def test_plot_error_history(self):
        errors = [0.5, 0.4, 0.35]

        ax = visualize.plot_error_history(errors)

        lines = ax.get_lines()
        self.assertEqual(len(lines), 1)
        np.testing.assert_array_equal(lines[0].get_xdata(), [1, 2, 3])
        np.testing.assert_array_equal(lines[0].get_ydata(), errors)

    def test_plot_error_history_bad_shape(self):
        with self.assertRaises(ValueError):
            visualize.plot_error_history([[0.1, 0.2]])

    def test_plot_arm(self):
        _, ax = plt.subplots()

        visualize.plot_arm(np.pi/2, np.pi, arm_length=2, center=(0, 0),
                           target=(4, 0), ax=ax)

        arm, target = ax.get_lines()
        np.testing.assert_allclose(arm.get_xdata(), [0, 2, 4], atol=1e-12)
        np.testing.assert_allclose(arm.get_ydata(), [0, 0, 0], atol=1e-12)
        np.testing.assert_array_equal(target.get_xdata(), [4])

    def test_plot_arm_bad_target(self):
        with self.assertRaises(ValueError):
            visualize.plot_arm(0, 0, target=(1, 2, 3))
