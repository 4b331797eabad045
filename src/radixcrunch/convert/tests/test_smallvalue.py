import unittest
from testfixtures import LogCapture

from .. import smallvalue
from ..digits import from_int
from ..errors import OverflowDetected


class test_smallvalue(unittest.TestCase):
    def test_accumulate(self):
        self.assertEqual(smallvalue.accumulate([5, 4, 3, 2, 1], 10), 12345)
        self.assertEqual(smallvalue.accumulate([0], 10), 0)
        self.assertEqual(smallvalue.accumulate([1] * 128, 2), 2**128 - 1)
        with self.assertRaises(OverflowDetected):
            smallvalue.accumulate([0] * 128 + [1], 2)
        self.assertEqual(smallvalue.accumulate([255], 256, bits=8), 255)
        with self.assertRaises(OverflowDetected):
            smallvalue.accumulate([0, 1], 256, bits=8)
        with self.assertRaises(OverflowDetected):
            smallvalue.accumulate([0, 0, 1], 256, bits=16)

    def test_convert(self):
        self.assertEqual(smallvalue.convert([5, 4, 3, 2, 1], 10, 16), [9, 3, 0, 3])
        self.assertEqual(smallvalue.convert([0xF, 0xF], 16, 10), [5, 5, 2])
        self.assertEqual(smallvalue.convert([0], 10, 16), [0])

    def test_overflow(self):
        digits = [0] * 50 + [1]
        with LogCapture("radixcrunch.convert.smallvalue") as logs:
            result = smallvalue.convert(digits, 10, 16)
        self.assertEqual(result, from_int(10**50, 16))
        self.assertEqual([r.levelname for r in logs.records], ["DEBUG"])

        with LogCapture("radixcrunch.convert.smallvalue") as logs:
            result = smallvalue.convert([5, 4, 3, 2, 1], 10, 16, bits=8)
        self.assertEqual(result, [9, 3, 0, 3])
        self.assertEqual(len(logs.records), 1)


def main_test_suite():
    """Test suite including all test suites"""
    testSuite = unittest.TestSuite()
    testSuite.addTest(test_smallvalue("test_accumulate"))
    testSuite.addTest(test_smallvalue("test_convert"))
    testSuite.addTest(test_smallvalue("test_overflow"))
    return testSuite


if __name__ == "__main__":
    import sys

    mysuite = main_test_suite()
    runner = unittest.TextTestRunner()
    if not runner.run(mysuite).wasSuccessful():
        sys.exit(1)
