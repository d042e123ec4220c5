import logging
import os
import tempfile
import unittest

from bpnet.core.logger import setup_logging


class TestLogger(unittest.TestCase):

    def tearDown(self):
        root = logging.getLogger()
        for handler in list(root.handlers):
            if getattr(handler, '_bpnet_handler', False):
                root.removeHandler(handler)
                handler.close()

    def test_setup_logging_to_file(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            filename = os.path.join(tmp_dir, 'log.txt')

            setup_logging(filename=filename, stdout=False)
            setup_logging(filename=filename, stdout=False)
            logging.getLogger('network').info('hello there')

            bpnet_handlers = [
                h for h in logging.getLogger().handlers
                if getattr(h, '_bpnet_handler', False)]
            self.assertEqual(len(bpnet_handlers), 1)

            for handler in bpnet_handlers:
                handler.flush()

            with open(filename) as f:
                contents = f.read()

            self.tearDown()

        self.assertIn('hello there', contents)
        self.assertIn('[network:', contents)
        self.assertIn('INFO', contents)


if __name__ == '__main__':
    unittest.main()
