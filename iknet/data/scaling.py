import numpy as np

from iknet.core.exception import EmptyDataset, ScalerNotFit
from iknet.neural_network.neural_network import TrainingExample


# Targets are kept away from the flat tails of the sigmoid
DEFAULT_LOW = 0.1
DEFAULT_HIGH = 0.9


class ArmScaler:
    """ Maps arm points and joint angles into `[low, high]` and back

    Points are scaled with a single min and max taken over all of their
    coordinates, so the x and y axes share one scale. Angles in [0, pi]
    are scaled linearly.
    """
    def __init__(self, low=DEFAULT_LOW, high=DEFAULT_HIGH):
        if not low < high:
            msg = "`low` ({}) should be less than `high` ({})"
            raise ValueError(msg.format(low, high))

        self.low = low
        self.high = high

        self.min = None
        self.max = None

    @property
    def span(self):
        return self.high - self.low

    @property
    def is_fit(self):
        return self.min is not None

    def fit(self, points):
        """ Record the extent of the coordinates in `points`

        Parameters
        ----------
        points: array-like, shape=(n_points, 2)
        """
        points = np.asarray(points, dtype=float)
        if points.size == 0:
            raise EmptyDataset("Can't fit a scaler to zero points")

        vmin, vmax = points.min(), points.max()
        if vmin == vmax:
            msg = "All coordinates equal {}; no scale can be fit"
            raise ValueError(msg.format(vmin))

        self.min = float(vmin)
        self.max = float(vmax)

        return self

    def _check_fit(self):
        if not self.is_fit:
            raise ScalerNotFit("Call `fit` before scaling points")

    def transform_points(self, points):
        self._check_fit()
        points = np.asarray(points, dtype=float)
        unit = (points - self.min) / (self.max - self.min)
        return unit * self.span + self.low

    def inverse_transform_points(self, values):
        self._check_fit()
        values = np.asarray(values, dtype=float)
        unit = (values - self.low) / self.span
        return unit * (self.max - self.min) + self.min

    def transform_angles(self, angles):
        angles = np.asarray(angles, dtype=float)
        return angles / np.pi * self.span + self.low

    def inverse_transform_angles(self, values):
        values = np.asarray(values, dtype=float)
        return (values - self.low) / self.span * np.pi

    def to_training_examples(self, arm_examples):
        """ Convert a list of `ArmExample` into scaled `TrainingExample`
        pairs for a network with two inputs and two outputs
        """
        self._check_fit()
        return [
            TrainingExample(input=self.transform_points(example.point),
                            label=self.transform_angles(example.angles))
            for example in arm_examples
        ]
