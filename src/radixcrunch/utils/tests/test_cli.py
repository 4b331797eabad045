import logging
import os
import unittest
from testfixtures import TempDirectory

from .. import cli


class test_cli(unittest.TestCase):
    def setUp(self):
        self.dir = TempDirectory()
        # Detached from the logger hierarchy
        self.logger = logging.Logger("radixcrunch_cli_test")

    def tearDown(self):
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)
        self.dir.cleanup()

    def test_argparser(self):
        args = cli.logging_argparser().parse_args([])
        self.assertEqual((args.log, args.logfile, args.stdout, args.stderr), ("",) * 4)
        args, unknown = cli.logging_argparser().parse_known_args(
            ["--log", "debug", "-x", "--other"]
        )
        self.assertEqual(args.log, "debug")
        self.assertEqual(unknown, ["-x", "--other"])

    def test_filter(self):
        record = logging.LogRecord("name", logging.INFO, "", 0, "msg", None, None)
        self.assertTrue(cli.LevelSplitFilter(False).filter(record))
        self.assertFalse(cli.LevelSplitFilter(True).filter(record))
        record.levelno = logging.WARNING
        self.assertFalse(cli.LevelSplitFilter(False).filter(record))
        self.assertTrue(cli.LevelSplitFilter(True).filter(record))

    def test_cliconfig(self):
        self.assertFalse(cli.logger_has_handlers(self.logger))
        logfile = os.path.join(self.dir.path, "test.log")
        cli.logging_cliconfig(self.logger, ["--log", "debug", "--logfile", logfile])
        self.assertEqual(self.logger.level, logging.DEBUG)
        self.assertEqual(len(self.logger.handlers), 3)
        self.assertTrue(cli.logger_has_handlers(self.logger))

        self.logger.debug("first message")
        for handler in self.logger.handlers:
            handler.flush()
        with open(logfile, "r") as f:
            self.assertEqual(f.read(), "DEBUG:radixcrunch_cli_test: first message\n")

        # Loggers with handlers keep their configuration
        cli.logging_cliconfig(self.logger, ["--log", "error"])
        self.assertEqual(self.logger.level, logging.DEBUG)
        self.assertEqual(len(self.logger.handlers), 3)

    def test_redirect(self):
        stdout = os.path.join(self.dir.path, "stdout.log")
        stderr = os.path.join(self.dir.path, "stderr.log")
        cli.logging_cliconfig(
            self.logger, ["--log", "info", "--stdout", stdout, "--stderr", stderr]
        )
        self.assertEqual(len(self.logger.handlers), 2)
        self.logger.info("info message")
        self.logger.error("error message")
        for handler in self.logger.handlers:
            handler.flush()
        with open(stdout, "r") as f:
            self.assertEqual(f.read(), "INFO:radixcrunch_cli_test: info message\n")
        with open(stderr, "r") as f:
            self.assertEqual(f.read(), "ERROR:radixcrunch_cli_test: error message\n")

    def test_getlogger(self):
        logger = cli.getLogger("radixcrunch.utils.tests.test_cli", __file__)
        self.assertEqual(logger.name, "radixcrunch.utils.tests.test_cli")


def main_test_suite():
    """Test suite including all test suites"""
    testSuite = unittest.TestSuite()
    testSuite.addTest(test_cli("test_argparser"))
    testSuite.addTest(test_cli("test_filter"))
    testSuite.addTest(test_cli("test_cliconfig"))
    testSuite.addTest(test_cli("test_redirect"))
    testSuite.addTest(test_cli("test_getlogger"))
    return testSuite


if __name__ == "__main__":
    import sys

    mysuite = main_test_suite()
    runner = unittest.TextTestRunner()
    if not runner.run(mysuite).wasSuccessful():
        sys.exit(1)
