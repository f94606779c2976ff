# flake8: noqa

from .layer import Layer

from .neural_network import (
    DEFAULT_ETA,
    DEFAULT_ITERATIONS,
    ForwardTrace,
    HiddenLayer,
    NetworkStructure,
    NeuralNetwork,
    TrainingExample,
)

from .unit import sigmoid, Unit
