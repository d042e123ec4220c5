import numpy


def plot_error_history(error_history, ax=None, **line_kwargs):
    """ Plot the recent average error after each training example

    Parameters
    ----------
    error_history: sequence of float
        For example, `TrainingReport.error_history`.

    ax: matplotlib.axes.Axes, default=None
        The axis to draw on. The default (None) creates a new figure.

    line_kwargs: args
        Any keyword arguments that can be passed to
        `matplotlib.pyplot.plot`.

    Returns
    -------
    ax: matplotlib.axes.Axes
    """
    import matplotlib.pyplot as plt

    error_history = numpy.asarray(error_history, dtype=float)

    if error_history.ndim != 1 or len(error_history) == 0:
        raise ValueError("`error_history` must be a non-empty 1d sequence.")

    if ax is None:
        fig = plt.figure(figsize=(6, 4))
        ax = fig.add_subplot(1, 1, 1)

    kwargs = dict(c='b', ls='-', lw=1)
    kwargs.update(line_kwargs)

    ax.plot(numpy.arange(1, len(error_history) + 1), error_history, **kwargs)
    ax.set_xlabel('Training pass')
    ax.set_ylabel('Recent average error')
    ax.set_xlim(1, max(2, len(error_history)))
    ax.set_ylim(bottom=0)

    return ax
