from collections import OrderedDict
import functools
import threading


class LimitedSizeDict(OrderedDict):
    def __init__(self, *args, **kwds):
        self.size_limit = kwds.pop("size_limit", None)
        OrderedDict.__init__(self, *args, **kwds)
        self._check_size_limit()

    def __setitem__(self, key, value):
        OrderedDict.__setitem__(self, key, value)
        self._check_size_limit()

    def _check_size_limit(self):
        if self.size_limit is not None:
            while len(self) > self.size_limit:
                self.popitem(last=False)


class MemoCache(object):
    """Read-mostly cache of pure function results, shared by reference.

    Each subject (e.g. "exponents", "powers") has its own bounded store.
    Values are generated at most once per key while they stay in the store:
    readers of a populated key never take the lock, writers populate under it.
    """

    def __init__(self, size_limit=1024):
        self.size_limit = size_limit
        self._stores = {}
        self._lock = threading.RLock()

    def _store(self, subject):
        store = self._stores.get(subject)
        if store is None:
            with self._lock:
                store = self._stores.get(subject)
                if store is None:
                    store = LimitedSizeDict(size_limit=self.size_limit)
                    self._stores[subject] = store
        return store

    def get(self, subject, key, generator):
        """
        Args:
            subject(str): cache namespace
            key(hashable):
            generator(callable): generator(*key) when key is a tuple, else generator(key)
        Returns:
            Any: cached value
        """
        store = self._store(subject)
        try:
            return store[key]
        except KeyError:
            pass
        with self._lock:
            try:
                return store[key]
            except KeyError:
                if isinstance(key, tuple):
                    value = generator(*key)
                else:
                    value = generator(key)
                store[key] = value
                return value

    def __contains__(self, item):
        subject, key = item
        return key in self._stores.get(subject, {})

    def size(self, subject=None):
        if subject is None:
            return sum(len(store) for store in self._stores.values())
        return len(self._stores.get(subject, {}))

    def clear(self, subject=None):
        with self._lock:
            if subject is None:
                self._stores.clear()
            else:
                self._stores.pop(subject, None)


def memoized(subject):
    """Decorator caching a pure function of its positional arguments
    in the MemoCache passed as keyword argument "cache" (no caching when omitted)
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, cache=None):
            if cache is None:
                return func(*args)
            return cache.get(subject, args, func)

        return wrapper

    return decorator

