import unittest

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt  # noqa: E402

from bpnet.visualize import plot_error_history  # noqa: E402


class TestVisualize(unittest.TestCase):

    def tearDown(self):
        plt.close('all')

    def test_plot_error_history(self):
        history = [0.01, 0.3, 0.25, 0.2, 0.1]
        ax = plot_error_history(history, c='r')

        lines = ax.get_lines()
        self.assertEqual(len(lines), 1)
        self.assertEqual(list(lines[0].get_ydata()), history)
        self.assertEqual(list(lines[0].get_xdata()), [1, 2, 3, 4, 5])

    def test_existing_axis(self):
        fig, ax = plt.subplots()
        self.assertIs(plot_error_history([0.5, 0.4], ax=ax), ax)

    def test_empty_history(self):
        with self.assertRaises(ValueError):
            plot_error_history([])


if __name__ == '__main__':
    unittest.main()
