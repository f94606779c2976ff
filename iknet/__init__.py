# flake8: noqa

from .core.exception import (
    DimensionMismatch,
    EmptyDataset,
    NoPriorForward,
)

from .neural_network import (
    HiddenLayer,
    NetworkStructure,
    NeuralNetwork,
    TrainingExample,
)
