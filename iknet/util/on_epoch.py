""" This module provides a few simple `on_epoch` functions that can be
used in the NeuralNetwork.train member function
"""
import logging


def collect_errors(error_list):
    """ Collects the per-epoch errors of a single `train` call. Errors are
    appended to :code:`error_list` and so an empty list should be provided.
    Usage::

        errors = []
        network.train(examples, on_epoch=[collect_errors(errors)])
    """

    def on_epoch(epoch, error_value):
        error_list.append(error_value)

    return on_epoch


def log_every(n, logger=None, level=logging.INFO):
    """ Log the error every `n` epochs (the first epoch is epoch 1) to
    :code:`logger`, by default the `iknet` package logger
    """
    if n < 1:
        raise ValueError("`n` should be a positive int")

    logger = logger or logging.getLogger('iknet')

    def on_epoch(epoch, error_value):
        if (epoch + 1) % n == 0:
            logger.log(level, "Epoch {:d}, error: {:.6f}".format(
                epoch + 1, error_value))

    return on_epoch
