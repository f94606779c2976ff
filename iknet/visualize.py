import matplotlib.pyplot as plt
import numpy as np

from iknet.data.arm2d import (
    DEFAULT_ARM_LENGTH, DEFAULT_CENTER, end_effector)


def plot_error_history(error_values, ax=None,
                       line_kwargs=dict(c='b', ls='-', lw=1)):
    """ Plot the per-epoch error history of a network

    Parameters
    ----------
    error_values: list
        The `error_values` attribute of a trained `NeuralNetwork`.

    ax: matplotlib.axes.Axes, default=None
        The axis to plot onto. A new figure is created if None.

    line_kwargs: args
        Any keyword arguments that can be passed to `matplotlib.pyplot.plot`.

    Returns
    -------
    ax: matplotlib.axes.Axes
    """
    error_values = np.asarray(error_values, dtype=float)
    if error_values.ndim != 1:
        raise ValueError("`error_values` must be 1d.")

    if ax is None:
        _, ax = plt.subplots(figsize=(6, 4))

    epochs = np.arange(1, len(error_values) + 1)
    ax.plot(epochs, error_values, **line_kwargs)
    ax.set_xlabel("Epoch")
    ax.set_ylabel("Mean error")

    return ax


def plot_arm(alpha, beta, arm_length=DEFAULT_ARM_LENGTH,
             center=DEFAULT_CENTER, target=None, ax=None,
             arm_kwargs=dict(c='r', ls='-', lw=2, marker='o'),
             target_kwargs=dict(c='k', marker='s', ms=8)):
    """ Draw the two segments of the arm for the joint angles
    `alpha`, `beta`, and optionally the point the arm should reach

    Returns
    -------
    ax: matplotlib.axes.Axes
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 6))

    elbow, end = end_effector(alpha, beta, arm_length=arm_length,
                              center=center)
    joints = np.array([center, elbow, end], dtype=float)

    ax.plot(joints[:, 0], joints[:, 1], **arm_kwargs)

    if target is not None:
        if len(target) != 2:
            raise ValueError("`target` must be a 2d point.")
        ax.plot([target[0]], [target[1]], ls='', **target_kwargs)

    reach = 2.1 * arm_length
    ax.set_xlim(center[0] - reach, center[0] + reach)
    ax.set_ylim(center[1] - reach, center[1] + reach)
    ax.set_aspect(1)

    return ax
