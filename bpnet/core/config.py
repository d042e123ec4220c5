DEFAULT_ETA = 0.15
DEFAULT_ALPHA = 0.5
DEFAULT_SMOOTHING_FACTOR = 100.0


class NetworkConfig(object):
    """ Training hyperparameters shared by every neuron of a network
    """
    __slots__ = ('_eta', '_alpha', '_smoothing_factor')

    def __init__(self,
                 eta=DEFAULT_ETA,
                 alpha=DEFAULT_ALPHA,
                 smoothing_factor=DEFAULT_SMOOTHING_FACTOR):
        """
        Parameters
        ----------
        eta: float, default=0.15
            The overall learning rate, in [0, 1].

        alpha: float, default=0.5
            Momentum, the multiplier of the previous weight change. Must
            be non-negative.

        smoothing_factor: float, default=100
            Number of training samples the recent average error is
            (roughly) averaged over. Must be non-negative.
        """
        try:
            eta = float(eta)
            alpha = float(alpha)
            smoothing_factor = float(smoothing_factor)
        except (ValueError, TypeError):
            msg = "`eta`, `alpha` and `smoothing_factor` must be numeric"
            raise ValueError(msg)

        if not 0.0 <= eta <= 1.0:
            msg = "`eta` ({}) should be in the range [0, 1]"
            raise ValueError(msg.format(eta))

        if alpha < 0:
            msg = "`alpha` ({}) should be non-negative"
            raise ValueError(msg.format(alpha))

        if smoothing_factor < 0:
            msg = "`smoothing_factor` ({}) should be non-negative"
            raise ValueError(msg.format(smoothing_factor))

        self._eta = eta
        self._alpha = alpha
        self._smoothing_factor = smoothing_factor

    @property
    def eta(self):
        return self._eta

    @property
    def alpha(self):
        return self._alpha

    @property
    def smoothing_factor(self):
        return self._smoothing_factor

    def __eq__(self, other):
        if not isinstance(other, NetworkConfig):
            return NotImplemented
        return ((self.eta, self.alpha, self.smoothing_factor) ==
                (other.eta, other.alpha, other.smoothing_factor))

    def __hash__(self):
        return hash((self.eta, self.alpha, self.smoothing_factor))

    def __repr__(self):
        return "<NetworkConfig eta=%g, alpha=%g, smoothing_factor=%g>" % (
            self.eta, self.alpha, self.smoothing_factor)
