"""
A small feed-forward network of sigmoid units, trained by plain
stochastic gradient descent on the half squared error.

Each unit owns its weight vector and is evaluated one at a time; there
are no bias terms. For a network with layer sizes n_0, n_1, ..., n_L the
computation for a single input `x` is::

    a_0 = x
    a_l = sigmoid(W_l a_{l-1}),  l = 1, ..., L
    output = a_L

Backpropagation visits the layers from the output to the input. Every
layer is fully updated before the layer upstream of it computes its
deltas, so the upstream deltas are computed against the already
updated downstream weights.
"""
from collections import namedtuple
import logging

import numpy as np

from iknet.core.exception import DimensionMismatch, EmptyDataset
from iknet.core.exception import NoPriorForward
from iknet.core.logger import progress
from iknet.neural_network.layer import Layer


logger = logging.getLogger(__name__)

DEFAULT_ETA = 0.01
DEFAULT_ITERATIONS = 10000


HiddenLayer = namedtuple('HiddenLayer', ['size'])

NetworkStructure = namedtuple(
    'NetworkStructure', ['n_inputs', 'hidden_layers', 'n_outputs'])

TrainingExample = namedtuple('TrainingExample', ['input', 'label'])

# `inputs[i]` is the input of layer i and `activations[i]` its output
ForwardTrace = namedtuple('ForwardTrace', ['inputs', 'activations'])


def _validate_count(value, name):
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        msg = "`{}` should be an int but was type {}"
        raise TypeError(msg.format(name, type(value)))
    if value < 1:
        msg = "`{}` should be positive but was {}"
        raise ValueError(msg.format(name, value))
    return int(value)


def layer_sizes(structure):
    """ Returns the list of sizes `[n_inputs, h_0, ..., h_k, n_outputs]`
    described by a `NetworkStructure`, validating every entry
    """
    n_inputs = _validate_count(structure.n_inputs, 'n_inputs')
    n_outputs = _validate_count(structure.n_outputs, 'n_outputs')

    hidden = []
    for i, hidden_layer in enumerate(structure.hidden_layers):
        # Plain ints are accepted as well as `HiddenLayer` tuples
        size = getattr(hidden_layer, 'size', hidden_layer)
        hidden.append(_validate_count(size, 'hidden_layers[{}]'.format(i)))

    return [n_inputs] + hidden + [n_outputs]


class NeuralNetwork:
    """
    Feed-forward sigmoid network with an arbitrary number of hidden
    layers.

    The error history, `error_values`, gets one entry per completed
    training epoch (or per explicit call to `error`).
    """
    def __init__(self, structure, eta=DEFAULT_ETA, random_state=None):
        """
        Parameters
        ----------
        structure: NetworkStructure
            The number of inputs, the ordered hidden layers (each a
            `HiddenLayer` or a positive int) and the number of outputs.

        eta: float, default=0.01
            The learning rate of the gradient descent updates.

        random_state: numpy.random.RandomState, default=None
            Provide a RandomState object for reproducible results.
        """
        sizes = layer_sizes(structure)

        self.structure = structure
        self.n_inputs = sizes[0]
        self.n_outputs = sizes[-1]
        self.eta = float(eta)

        rs = np.random.RandomState() if random_state is None \
            else random_state

        # Layer i maps sizes[i] inputs to sizes[i+1] outputs, so with no
        # hidden layers this is the single input => output layer.
        self.layers = [
            Layer(n_in, n_out, self.eta, random_state=rs)
            for n_in, n_out in zip(sizes[:-1], sizes[1:])
        ]

        self.output = None
        self.error_values = []

        # The forward pass that the next `backward` call consumes
        self._trace = None

        logger.debug("Built network with layer sizes {}".format(sizes))

    def __repr__(self):
        sizes = [self.n_inputs] + [layer.size for layer in self.layers]
        return "<NeuralNetwork sizes=%s>" % sizes

    def get_params(self, flat=False):
        """
        Parameters
        ----------
        flat: bool, default=False
            If True, the parameters are flattened into a single array.

        Returns
        -------
        params: list or array
            Copies of the layer weight arrays, each shape
            `(layer.size, layer.n_inputs)`, or these flattened into a
            single array.
        """
        params = [layer.weights for layer in self.layers]
        if flat:
            return np.hstack([p.ravel() for p in params])
        return params

    def set_params(self, params):
        """ Overwrite the weights with `params`, given in either of the
        forms returned by `get_params`
        """
        shapes = [(layer.size, layer.n_inputs) for layer in self.layers]

        if isinstance(params, np.ndarray) and params.ndim == 1:
            n_params = sum(rows * cols for rows, cols in shapes)
            if params.shape[0] != n_params:
                msg = "Flat parameters have length {} but should be {}"
                raise ValueError(msg.format(params.shape[0], n_params))
            splits = np.cumsum([rows * cols for rows, cols in shapes])
            params = [p.reshape(shape) for p, shape in
                      zip(np.split(params, splits[:-1]), shapes)]

        if len(params) != len(self.layers):
            msg = "Got {} parameter arrays but the network has {} layers"
            raise ValueError(msg.format(len(params), len(self.layers)))

        for layer, weights, shape in zip(self.layers, params, shapes):
            weights = np.asarray(weights, dtype=float)
            if weights.shape != shape:
                msg = "Weights are shape {} but should be {}"
                raise ValueError(msg.format(weights.shape, shape))
            for unit, row in zip(layer.units, weights):
                unit.weights = row.copy()

    def _validate_input(self, input):
        x = np.array(input, dtype=float)
        if x.shape != (self.n_inputs,):
            msg = "Input has shape {} but the network expects ({},)"
            raise DimensionMismatch(msg.format(x.shape, self.n_inputs))
        return x

    def _validate_label(self, label):
        y = np.array(label, dtype=float)
        if y.shape != (self.n_outputs,):
            msg = "Label has shape {} but the network has {} outputs"
            raise DimensionMismatch(msg.format(y.shape, self.n_outputs))
        return y

    def _validate_trace(self, trace):
        n_layers = len(self.layers)
        if len(trace.inputs) != n_layers or len(trace.activations) != n_layers:
            msg = "Trace has {} inputs and {} activations but the network " \
                  "has {} layers"
            raise DimensionMismatch(msg.format(
                len(trace.inputs), len(trace.activations), n_layers))

        inputs = []
        activations = []
        for index, layer in enumerate(self.layers):
            x = np.asarray(trace.inputs[index], dtype=float)
            a = np.asarray(trace.activations[index], dtype=float)

            if x.shape != (layer.n_inputs,):
                msg = ("Trace input of layer {} has shape {} but "
                       "should be ({},)")
                raise DimensionMismatch(
                    msg.format(index, x.shape, layer.n_inputs))

            if a.shape != (layer.size,):
                msg = ("Trace activations of layer {} have shape {} but "
                       "should be ({},)")
                raise DimensionMismatch(msg.format(index, a.shape, layer.size))

            inputs.append(x)
            activations.append(a)

        return ForwardTrace(inputs=tuple(inputs),
                            activations=tuple(activations))

    def _propagate(self, input):
        x = self._validate_input(input)

        inputs = []
        activations = []
        for layer in self.layers:
            inputs.append(x)
            x = layer.propagate(x)
            activations.append(x)

        return ForwardTrace(inputs=tuple(inputs),
                            activations=tuple(activations))

    def propagate(self, input):
        """ Run a forward pass and return its `ForwardTrace`

        The trace can be handed to `backward` explicitly. It is also
        cached as the pending forward pass, exactly as `forward` does.
        """
        trace = self._propagate(input)
        self._trace = trace
        self.output = trace.activations[-1].copy()
        return trace

    def forward(self, input):
        """
        Parameters
        ----------
        input: array-like, shape=(n_inputs,)

        Returns
        -------
        output: ndarray, shape=(n_outputs,)
            The activations of the output layer. Every entry lies in the
            open interval (0, 1).
        """
        self.propagate(input)
        return self.output.copy()

    def backward(self, label, trace=None):
        """ Backpropagate the error against `label` and take one gradient
        descent step on every weight

        Parameters
        ----------
        label: array-like, shape=(n_outputs,)
            The target output for the input of the forward pass.

        trace: ForwardTrace, default=None
            The forward pass to backpropagate through. The default uses
            the pending pass of the most recent `forward` or `propagate`
            call. Either way, the pending pass is consumed.
        """
        label = self._validate_label(label)

        if trace is None:
            if self._trace is None:
                msg = ("No forward pass to backpropagate through; "
                       "call `forward` first")
                raise NoPriorForward(msg)
            trace = self._trace
        else:
            trace = self._validate_trace(trace)

        self._trace = None

        # The output layer: gradient of 0.5 * ||output - label||^2
        last = self.layers[-1]
        output = trace.activations[-1]
        for i, unit in enumerate(last.units):
            unit.delta = (output[i] - label[i]) * unit.derivative(output[i])
        last.apply_updates(trace.inputs[-1])

        # Hidden layers, from the last to the first
        for index in range(len(self.layers) - 2, -1, -1):
            layer = self.layers[index]
            downstream = self.layers[index + 1]
            activations = trace.activations[index]

            for j, unit in enumerate(layer.units):
                epsilon = sum(next_unit.weights[j] * next_unit.delta
                              for next_unit in downstream.units)
                unit.delta = epsilon * unit.derivative(activations[j])

            layer.apply_updates(trace.inputs[index])

    def train(self, examples, iterations=DEFAULT_ITERATIONS, on_epoch=None):
        """ Run `iterations` epochs of stochastic gradient descent

        Parameters
        ----------
        examples: list of TrainingExample (or `(input, label)` pairs)
            Visited in the given order during every epoch; one weight
            update per example.

        iterations: int, default=10000
            The number of epochs. Exactly this many entries are appended
            to `error_values`.

        on_epoch: list of callables, default=None
            Each has signature::

                f(epoch, error_value)

            and is called after each epoch's error has been recorded.
            See :mod:`iknet.util.on_epoch`.
        """
        examples = list(examples)
        if len(examples) == 0:
            raise EmptyDataset("Can't train on an empty set of examples")

        if iterations < 0:
            msg = "`iterations` should be non-negative but was {}"
            raise ValueError(msg.format(iterations))

        on_epoch = on_epoch or []

        logger.info("Training on {} examples for {} epochs".format(
            len(examples), iterations))

        for iteration in range(iterations):
            for x, label in examples:
                self.forward(x)
                self.backward(label)

            self.error(examples)

            progress(logger, "Error: {:.6f}".format(self.error_values[-1]),
                     iteration + 1, iterations)

            for func in on_epoch:
                func(iteration, self.error_values[-1])

        if iterations > 0:
            logger.info("Finished training, final error {:.6f}".format(
                self.error_values[-1]))

    def error(self, dataset):
        """ Append the mean Euclidean distance between the network output
        and the labels over `dataset` to `error_values`

        The evaluation does not replace the pending forward pass.
        """
        dataset = list(dataset)
        if len(dataset) == 0:
            raise EmptyDataset("Can't compute the error of an empty dataset")

        errors = []
        for x, label in dataset:
            label = self._validate_label(label)
            output = self._propagate(x).activations[-1]
            errors.append(np.sqrt(((label - output)**2).sum()))

        self.error_values.append(float(np.mean(errors)))
