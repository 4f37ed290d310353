"""Reader/writer lock guarding the interface registry"""

import threading
from contextlib import contextmanager


class RWLock:
    """Many concurrent readers or one writer, never both.

    Writers hold the condition's lock for their whole critical section,
    which also keeps new readers out until they release it.
    """

    def __init__(self):
        self._read_ready = threading.Condition(threading.Lock())
        self._readers = 0

    def r_acquire(self):
        with self._read_ready:
            self._readers += 1

    def r_release(self):
        with self._read_ready:
            self._readers -= 1
            if self._readers == 0:
                self._read_ready.notify_all()

    def w_acquire(self):
        self._read_ready.acquire()
        try:
            while self._readers > 0:
                self._read_ready.wait()
        except BaseException:
            # interrupted while waiting for readers to drain
            self._read_ready.release()
            raise

    def w_release(self):
        self._read_ready.release()

    @contextmanager
    def read(self):
        self.r_acquire()
        try:
            yield
        finally:
            self.r_release()

    @contextmanager
    def write(self):
        self.w_acquire()
        try:
            yield
        finally:
            self.w_release()
