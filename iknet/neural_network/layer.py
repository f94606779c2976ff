import numpy as np

from iknet.neural_network.unit import Unit


class Layer:
    """ An ordered, fixed-size collection of units sharing one input
    """
    def __init__(self, n_inputs, size, eta, random_state=None):
        self.n_inputs = n_inputs
        self.size = size
        self.units = [Unit(n_inputs, eta, random_state=random_state)
                      for _ in range(size)]
        self.input = None

    def __repr__(self):
        return "<Layer n_inputs=%d, size=%d>" % (self.n_inputs, self.size)

    def __len__(self):
        return self.size

    def propagate(self, x):
        """ Cache `x` as this layer's input and return the activations of
        the units, in unit order
        """
        self.input = np.array(x, dtype=float)
        return np.array([unit.activate(self.input) for unit in self.units])

    def apply_updates(self, x=None, eta=None):
        """ Update the weights of every unit with input `x` (by default
        the cached input of the most recent `propagate` call)
        """
        x = self.input if x is None else x
        for unit in self.units:
            unit.update_weights(x, eta=eta)

    @property
    def deltas(self):
        return np.array([unit.delta for unit in self.units])

    @property
    def weights(self):
        """ Copy of the weights as a (size, n_inputs) array """
        return np.array([unit.weights for unit in self.units])
