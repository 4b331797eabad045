import os
import unittest
from testfixtures import LogCapture, TempDirectory

from .. import suite
from ...convert.engine import ConversionEngine


class test_suite(unittest.TestCase):
    def setUp(self):
        self.dir = TempDirectory()

    def tearDown(self):
        self.dir.cleanup()

    def test_scenarios(self):
        lst = suite.scenarios()
        self.assertEqual(len(lst), 9)
        self.assertEqual(len(set(scenario.name for scenario in lst)), 9)
        self.assertEqual(lst[0].digits, [5, 4, 3, 2, 1])
        self.assertEqual(lst[0].iterations, 20000)
        self.assertEqual(suite.power_of_ten(2), [0, 0, 1])

        scaled = suite.scenarios(scale=0.001)
        self.assertEqual(len(scaled), 9)
        self.assertEqual(scaled[0].iterations, 20)
        self.assertTrue(all(scenario.iterations >= 1 for scenario in scaled))
        self.assertEqual(scaled[0].digits, lst[0].digits)
        self.assertEqual(lst[0].scaled(1), lst[0])
        self.assertNotEqual(lst[0], lst[1])

    def test_run(self):
        results = suite.run_suite(scale=0.0001)
        self.assertEqual(len(results), 9)
        for scenario, result in results:
            self.assertTrue(result.is_correct, msg=scenario.name)
            self.assertEqual(result.kind, scenario.kind)

        df, stats = suite.summary(results)
        self.assertEqual(list(df.columns), suite.COLUMNS)
        self.assertEqual(len(df), 9)
        self.assertEqual(stats["ntotal"], 9)
        self.assertEqual(stats["ncorrect"], 9)
        self.assertGreaterEqual(stats["best_speedup"], stats["average_speedup"])
        self.assertGreaterEqual(stats["time_percentage"], 0)

    def test_failure(self):
        lst = [
            suite.Scenario("Bad digit", "general", "10 (10→16)", 5, [10], 10, 16),
            suite.Scenario(
                "Good", "small-number", "12345 (10→16)", 5, [5, 4, 3, 2, 1], 10, 16
            ),
        ]
        with LogCapture("radixcrunch.benchmark.suite") as logs:
            results = suite.run_suite(lst, engine=ConversionEngine())
            self.assertIn("ERROR", [r.levelname for r in logs.records])
            logs.clear()
        self.assertFalse(results[0][1].is_correct)
        self.assertTrue(results[1][1].is_correct)
        df, stats = suite.summary(results)
        self.assertEqual(stats["ncorrect"], 1)
        self.assertEqual(stats["ntotal"], 2)
        self.assertEqual(list(df["correct"]), [False, True])

    def test_empty(self):
        df, stats = suite.summary([])
        self.assertEqual(len(df), 0)
        self.assertEqual(stats["ntotal"], 0)
        self.assertEqual(stats["ncorrect"], 0)
        self.assertEqual(stats["average_speedup"], 0)
        self.assertEqual(stats["time_percentage"], 0)

    def test_save(self):
        lst = suite.scenarios(scale=0.0001)[:3]
        results = suite.run_suite(lst)
        filename = os.path.join(self.dir.path, "results.json")
        suite.save_results(results, filename)
        results2 = suite.load_results(filename)
        self.assertEqual(len(results2), 3)
        for (scenario, result), (scenario2, result2) in zip(results, results2):
            self.assertEqual(scenario, scenario2)
            self.assertEqual(result, result2)


def main_test_suite():
    """Test suite including all test suites"""
    testSuite = unittest.TestSuite()
    testSuite.addTest(test_suite("test_scenarios"))
    testSuite.addTest(test_suite("test_run"))
    testSuite.addTest(test_suite("test_failure"))
    testSuite.addTest(test_suite("test_empty"))
    testSuite.addTest(test_suite("test_save"))
    return testSuite


if __name__ == "__main__":
    import sys

    mysuite = main_test_suite()
    runner = unittest.TextTestRunner()
    if not runner.run(mysuite).wasSuccessful():
        sys.exit(1)
