"""
Synthetic data for a planar arm of two equal-length segments.

The first joint sits at `center`. An angle `alpha` rotates the first
segment clockwise from straight down, and `beta` is the inner angle at
the elbow between the two segments, so `beta = pi` is a straight arm.
Both angles are sampled from [0, pi).
"""
from collections import namedtuple
import logging

import numpy as np


logger = logging.getLogger(__name__)

DEFAULT_ARM_LENGTH = 10.0
DEFAULT_CENTER = (0.0, 0.0)


# `point` is the end effector position, `angles` is [alpha, beta]
ArmExample = namedtuple('ArmExample', ['point', 'angles'])


def translate(point, angle, arm_length):
    """ Move `arm_length` away from `point` in direction `angle`
    """
    return np.array([point[0] + arm_length * np.sin(angle),
                     point[1] - arm_length * np.cos(angle)])


def end_effector(alpha, beta, arm_length=DEFAULT_ARM_LENGTH,
                 center=DEFAULT_CENTER):
    """
    Forward kinematics of the arm.

    Returns
    -------
    elbow, end: ndarray, shape=(2,)
        The positions of the elbow joint and of the end effector.
    """
    elbow = translate(center, alpha, arm_length)
    end = translate(elbow, np.pi - beta + alpha, arm_length)
    return elbow, end


def make(arm_length=DEFAULT_ARM_LENGTH, center=DEFAULT_CENTER, rs=None):
    """
    Make a single random arm configuration.

    Parameters
    ----------
    arm_length: float, default=10
        The length of each of the two segments.

    center: tuple, len=2, default=(0, 0)
        The location of the first joint.

    rs: numpy.random.RandomState
        RandomState object for reproducible results.

    Returns
    -------
    example: ArmExample
        The end effector point and the angles that produced it.
    """
    rs = rs if rs is not None else np.random.RandomState()

    alpha = rs.uniform(0, np.pi)
    beta = rs.uniform(0, np.pi)

    _, end = end_effector(alpha, beta, arm_length=arm_length, center=center)

    return ArmExample(point=end, angles=np.array([alpha, beta]))


def make_dataset(N, arm_length=DEFAULT_ARM_LENGTH, center=DEFAULT_CENTER,
                 random_state=None):
    """
    Make a randomly generated dataset of arm configurations.

    Parameters
    ----------
    N: int
        The number of examples.

    arm_length, center:
        See :func:`make`.

    random_state: numpy.random.RandomState, default=None
        Provide a RandomState object for reproducible results.

    Returns
    -------
    examples: list of ArmExample
    """
    if N < 0:
        raise ValueError("`N` should be non-negative.")

    rs = random_state if random_state is not None \
        else np.random.RandomState()

    examples = [make(arm_length=arm_length, center=center, rs=rs)
                for _ in range(N)]

    logger.info("Made {} arm examples (arm_length={}, center={})".format(
        N, arm_length, tuple(center)))

    return examples
