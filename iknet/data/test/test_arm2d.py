import unittest

import numpy as np

from iknet.data import arm2d


class TestArm2d(unittest.TestCase):

    def test_straight_arm_down(self):
        elbow, end = arm2d.end_effector(alpha=0, beta=np.pi, arm_length=10)

        np.testing.assert_allclose(elbow, [0, -10], atol=1e-12)
        np.testing.assert_allclose(end, [0, -20], atol=1e-12)

    def test_straight_arm_sideways(self):
        elbow, end = arm2d.end_effector(alpha=np.pi/2, beta=np.pi,
                                        arm_length=2, center=(1, 1))

        np.testing.assert_allclose(elbow, [3, 1], atol=1e-12)
        np.testing.assert_allclose(end, [5, 1], atol=1e-12)

    def test_folded_arm_returns_to_center(self):
        _, end = arm2d.end_effector(alpha=0.7, beta=0, arm_length=5,
                                    center=(3, -2))

        np.testing.assert_allclose(end, [3, -2], atol=1e-12)

    def test_make_dataset(self):
        random_state = np.random.RandomState(1234)
        arm_length = 200
        center = np.r_[400, 400]

        examples = arm2d.make_dataset(100, arm_length=arm_length,
                                      center=center,
                                      random_state=random_state)

        self.assertEqual(len(examples), 100)

        for example in examples:
            alpha, beta = example.angles
            self.assertTrue(0 <= alpha < np.pi)
            self.assertTrue(0 <= beta < np.pi)

            # Law of cosines for the triangle center, elbow, end
            reach = np.linalg.norm(example.point - center)
            self.assertAlmostEqual(reach, 2*arm_length*np.sin(beta/2))

    def test_make_dataset_reproducible(self):
        examples1 = arm2d.make_dataset(
            5, random_state=np.random.RandomState(5))
        examples2 = arm2d.make_dataset(
            5, random_state=np.random.RandomState(5))

        for example1, example2 in zip(examples1, examples2):
            np.testing.assert_array_equal(example1.point, example2.point)
            np.testing.assert_array_equal(example1.angles, example2.angles)

    def test_make_dataset_negative_count(self):
        with self.assertRaises(ValueError):
            arm2d.make_dataset(-1)
