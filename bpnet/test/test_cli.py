import logging
import os
import tempfile
import unittest

from click.testing import CliRunner

from bpnet.cli import cli


class TestCli(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.filename = os.path.join(self.tmp_dir.name, 'training.txt')
        self.runner = CliRunner()

    def tearDown(self):
        root = logging.getLogger()
        for handler in list(root.handlers):
            if getattr(handler, '_bpnet_handler', False):
                root.removeHandler(handler)
                handler.close()

        self.tmp_dir.cleanup()

    def test_make_data_then_train(self):
        result = self.runner.invoke(cli, [
            'make-data', self.filename, '--gate', 'and', '--samples', '50',
            '--seed', '3', '--hidden', '2'])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertTrue(os.path.exists(self.filename))

        with open(self.filename) as f:
            self.assertEqual(f.readline(), 'topology: 2 2 1\n')

        plot_file = os.path.join(self.tmp_dir.name, 'error.png')
        result = self.runner.invoke(cli, [
            'train', self.filename, '--seed', '1234', '--passes', '2',
            '--quiet', '--plot', plot_file])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn('Net recent average error:', result.output)
        self.assertTrue(os.path.exists(plot_file))

    def test_train_malformed_topology(self):
        with open(self.filename, 'w') as f:
            f.write("in: 1.0 0.0\nout: 1.0\n")

        result = self.runner.invoke(cli, ['train', self.filename, '--quiet'])
        self.assertEqual(result.exit_code, 2)

    def test_train_stopped_early(self):
        with open(self.filename, 'w') as f:
            f.write("topology: 2 2 1\nin: 1.0\nout: 1.0\n")

        result = self.runner.invoke(cli, ['train', self.filename, '--quiet'])
        self.assertEqual(result.exit_code, 1)

    def test_train_truncated_last_example(self):
        with open(self.filename, 'w') as f:
            f.write("topology: 2 2 1\n"
                    "in: 1.0 0.0\nout: 1.0\n"
                    "in: 0.0 1.0\n")

        log_file = os.path.join(self.tmp_dir.name, 'log.txt')
        result = self.runner.invoke(cli, [
            'train', self.filename, '--quiet', '--log-file', log_file])

        self.assertIsInstance(result.exception, SystemExit)
        self.assertEqual(result.exit_code, 3)

        with open(log_file) as f:
            contents = f.read()
        self.assertIn('Bad target values', contents)

    def test_train_bad_config(self):
        with open(self.filename, 'w') as f:
            f.write("topology: 2 2 1\nin: 1.0 0.0\nout: 1.0\n")

        result = self.runner.invoke(
            cli, ['train', self.filename, '--quiet', '--eta', '2.0'])
        self.assertNotEqual(result.exit_code, 0)


if __name__ == '__main__':
    unittest.main()
