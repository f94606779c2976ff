# flake8: noqa

from .arm2d import ArmExample, end_effector, make_dataset
from .scaling import ArmScaler
