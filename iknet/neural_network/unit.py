import numpy as np
from scipy.special import expit

from iknet.core.exception import DimensionMismatch, NoPriorForward


WEIGHT_INIT_RANGE = (-0.5, 0.5)


def sigmoid(x):
    """ The logistic function, 1 / (1 + exp(-x))
    """
    return expit(x)


class Unit:
    """ A single sigmoid unit (no bias term)

    The computation for an input vector `x` is::

        activation = sigmoid(dot(weights, x))

    The most recent activation is cached so that the derivative and the
    weight update of a following backward pass can use it.
    """
    def __init__(self, n_inputs, eta, random_state=None):
        """
        Parameters
        ----------
        n_inputs: int
            Length of the input vectors (and of the weight vector).

        eta: float
            The learning rate used by `update_weights`.

        random_state: numpy.random.RandomState, default=None
            Provide a RandomState object for reproducible results.
        """
        self.n_inputs = n_inputs
        self.eta = eta

        rs = np.random.RandomState() if random_state is None \
            else random_state

        low, high = WEIGHT_INIT_RANGE
        self.weights = rs.uniform(low=low, high=high, size=n_inputs)

        self.activation = None
        self.delta = 0.0

    def __repr__(self):
        return "<Unit n_inputs=%d>" % self.n_inputs

    def _validate(self, x):
        x = np.asarray(x, dtype=float)
        if x.shape != (self.n_inputs,):
            msg = "Input has shape {} but unit expects ({},)"
            raise DimensionMismatch(msg.format(x.shape, self.n_inputs))
        return x

    def activate(self, x):
        """ Compute, cache and return `sigmoid(dot(weights, x))`
        """
        x = self._validate(x)
        self.activation = float(sigmoid(np.dot(self.weights, x)))
        return self.activation

    def derivative(self, activation=None):
        """ Derivative of the sigmoid at the cached activation, written in
        terms of the activation itself: a * (1 - a)
        """
        if activation is None:
            if self.activation is None:
                msg = "The unit has no activation; call `activate` first"
                raise NoPriorForward(msg)
            activation = self.activation
        return activation * (1.0 - activation)

    def update_weights(self, x, eta=None):
        """ Gradient descent step: weights -= eta * delta * x

        `x` must be the input that produced the activation `delta` was
        computed from.
        """
        x = self._validate(x)
        eta = self.eta if eta is None else eta
        self.weights -= eta * self.delta * x
