import time
import logging
from contextlib import contextmanager


_logger = logging.getLogger(__name__)


def hms(seconds):
    sec = seconds
    hours = int(sec / 3600.0)
    sec -= hours * 3600
    min = int(sec / 60.0)
    sec -= min * 60
    return (hours, min, sec)


def strseconds(seconds):
    return "{:d}h {:d}m {:.3f}s".format(*hms(seconds))


class Stopwatch(object):
    """Accumulates monotonic wall-clock time over one or more timed blocks"""

    clock = staticmethod(time.perf_counter)

    def __init__(self):
        self.reset()

    def reset(self):
        self.elapsed = 0.0
        self._t0 = None

    def start(self):
        self._t0 = self.clock()

    def stop(self):
        if self._t0 is None:
            raise RuntimeError("Stopwatch was not started")
        self.elapsed += self.clock() - self._t0
        self._t0 = None
        return self.elapsed

    @property
    def elapsed_ms(self):
        return self.elapsed * 1000.0

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_value, exc_traceback):
        self.stop()


def time_loop(func, iterations, *args):
    """Call func(*args) iterations times

    Returns:
        tuple: total elapsed time (milliseconds), result of the last call
    """
    result = None
    with Stopwatch() as sw:
        for _ in range(iterations):
            result = func(*args)
    return sw.elapsed_ms, result


@contextmanager
def timeit_logger(logger=None, name=""):
    if logger is None:
        logger = _logger
    with Stopwatch() as sw:
        yield sw
    if name:
        text = "Elapsed time ({})".format(name)
    else:
        text = "Elapsed time"
    logger.info("{}: {}".format(text, strseconds(sw.elapsed)))
