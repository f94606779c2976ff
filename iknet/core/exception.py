

class DimensionMismatch(Exception):
    """ Raised when an input or label vector does not have the length
    expected by a unit or by the network
    """


class NoPriorForward(Exception):
    """ Raised when backpropagation is requested without a pending forward
    pass to consume
    """


class EmptyDataset(Exception):
    """ Raised when training or error evaluation is given no examples
    """


class ScalerNotFit(Exception):
    """ Raised when trying to scale points with a scaler that has not been
    fit to any data
    """
