import threading
import unittest

from .. import cache


class test_cache(unittest.TestCase):
    def test_limitedsizedict(self):
        d = cache.LimitedSizeDict(size_limit=2)
        d["a"] = 1
        d["b"] = 2
        d["c"] = 3
        self.assertEqual(list(d.keys()), ["b", "c"])
        d = cache.LimitedSizeDict([("a", 1), ("b", 2), ("c", 3)], size_limit=1)
        self.assertEqual(dict(d), {"c": 3})

    def test_get(self):
        calls = []

        def square(x):
            calls.append(x)
            return x * x

        c = cache.MemoCache()
        self.assertEqual(c.get("square", 3, square), 9)
        self.assertEqual(c.get("square", 3, square), 9)
        self.assertEqual(calls, [3])
        self.assertEqual(c.get("power", (2, 10), pow), 1024)
        self.assertIn(("power", (2, 10)), c)
        self.assertNotIn(("power", (2, 11)), c)
        self.assertNotIn(("other", 3), c)
        self.assertEqual(c.size("square"), 1)
        self.assertEqual(c.size(), 2)
        c.clear("square")
        self.assertEqual(c.size(), 1)
        c.clear()
        self.assertEqual(c.size(), 0)

    def test_limit(self):
        c = cache.MemoCache(size_limit=3)
        for i in range(10):
            c.get("id", i, lambda x: x)
        self.assertEqual(c.size("id"), 3)
        self.assertIn(("id", 9), c)
        self.assertNotIn(("id", 0), c)

    def test_nested(self):
        c = cache.MemoCache()

        def outer(x):
            return c.get("inner", x, lambda y: y + 1) * 2

        self.assertEqual(c.get("outer", 1, outer), 4)
        self.assertEqual(c.size(), 2)

    def test_memoized(self):
        calls = []

        @cache.memoized("add")
        def add(a, b):
            calls.append((a, b))
            return a + b

        self.assertEqual(add.__name__, "add")
        self.assertEqual(add(1, 2), 3)
        self.assertEqual(add(1, 2), 3)
        self.assertEqual(len(calls), 2)
        c = cache.MemoCache()
        self.assertEqual(add(1, 2, cache=c), 3)
        self.assertEqual(add(1, 2, cache=c), 3)
        self.assertEqual(len(calls), 3)
        self.assertIn(("add", (1, 2)), c)

    def test_threads(self):
        c = cache.MemoCache()
        calls = []
        lock = threading.Lock()

        def generator(x):
            with lock:
                calls.append(x)
            return x

        def run():
            for i in range(100):
                c.get("id", i, generator)

        threads = [threading.Thread(target=run) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        self.assertEqual(sorted(calls), list(range(100)))


def main_test_suite():
    """Test suite including all test suites"""
    testSuite = unittest.TestSuite()
    testSuite.addTest(test_cache("test_limitedsizedict"))
    testSuite.addTest(test_cache("test_get"))
    testSuite.addTest(test_cache("test_limit"))
    testSuite.addTest(test_cache("test_nested"))
    testSuite.addTest(test_cache("test_memoized"))
    testSuite.addTest(test_cache("test_threads"))
    return testSuite


if __name__ == "__main__":
    import sys

    mysuite = main_test_suite()
    runner = unittest.TextTestRunner()
    if not runner.run(mysuite).wasSuccessful():
        sys.exit(1)
