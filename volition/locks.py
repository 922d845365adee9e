"""Spin, reentrant and reader/writer locks plus a lock that asserts it is never contended."""

import contextlib
import threading


class LockStateError(RuntimeError):
    """Raised when a lock is released or taken in a state that forbids it."""


class SpinLock:
    """A non-reentrant mutual-exclusion lock with a non-blocking try."""

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._locked = False

    @property
    def locked(self):
        """True while some holder owns the lock."""
        return self._locked

    def try_acquire(self):
        """Take the lock if it is free; return whether it was taken."""
        with self._cond:
            if self._locked:
                return False
            self._locked = True
            return True

    def acquire(self):
        """Wait until the lock is free and take it."""
        with self._cond:
            self._cond.wait_for(lambda: not self._locked)
            self._locked = True

    def release(self):
        """Free the lock."""
        with self._cond:
            self._locked = False
            self._cond.notify()

    def __enter__(self):
        self.acquire()
        return self

    def __exit__(self, *args):
        self.release()
        return False


class ReentrantLock:
    """A lock that the owning thread may take several times over."""

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._owner = None
        self._count = 0

    @property
    def owner(self):
        """Ident of the owning thread, or None when free."""
        return self._owner

    @property
    def depth(self):
        """How many times the owner currently holds the lock."""
        return self._count

    def try_acquire(self):
        """Take the lock if free or already ours; return whether it was taken."""
        me = threading.get_ident()
        with self._cond:
            if self._owner not in (None, me):
                return False
            self._owner = me
            self._count += 1
            return True

    def acquire(self):
        """Wait until the lock is free or ours, then take it once more."""
        me = threading.get_ident()
        with self._cond:
            self._cond.wait_for(lambda: self._owner in (None, me))
            self._owner = me
            self._count += 1

    def release(self):
        """Drop one hold; raises LockStateError if the caller is not the owner."""
        me = threading.get_ident()
        with self._cond:
            if self._owner != me:
                raise LockStateError("lock released by a thread that does not own it")
            self._count -= 1
            if self._count == 0:
                self._owner = None
                self._cond.notify_all()

    def __enter__(self):
        self.acquire()
        return self

    def __exit__(self, *args):
        self.release()
        return False


class PushLock:
    """A reader/writer lock: many readers or one writer."""

    _WRITER = 0xFFFFFFFF

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._count = 0

    @property
    def readers(self):
        """Number of readers holding the lock (zero while a writer holds it)."""
        return 0 if self._count == self._WRITER else self._count

    @property
    def write_held(self):
        """True while a writer holds the lock."""
        return self._count == self._WRITER

    def acquire_read(self):
        """Wait until no writer holds the lock, then join the readers."""
        with self._cond:
            self._cond.wait_for(lambda: self._count != self._WRITER)
            self._count += 1

    def release_read(self):
        """Leave the readers; raises LockStateError if no reader holds it."""
        with self._cond:
            if self._count == 0 or self._count == self._WRITER:
                raise LockStateError("read lock released without being held")
            self._count -= 1
            if self._count == 0:
                self._cond.notify_all()

    def acquire_write(self):
        """Wait until nobody holds the lock, then take it exclusively."""
        with self._cond:
            self._cond.wait_for(lambda: self._count == 0)
            self._count = self._WRITER

    def release_write(self):
        """Free the write hold; raises LockStateError if no writer holds it."""
        with self._cond:
            if self._count != self._WRITER:
                raise LockStateError("write lock released without being held")
            self._count = 0
            self._cond.notify_all()

    @contextlib.contextmanager
    def read_locked(self):
        """Hold a read lock for the duration of a with-block."""
        self.acquire_read()
        try:
            yield self
        finally:
            self.release_read()

    @contextlib.contextmanager
    def write_locked(self):
        """Hold the write lock for the duration of a with-block."""
        self.acquire_write()
        try:
            yield self
        finally:
            self.release_write()


class UnnecessaryLock:
    """Marks a section that must never be entered concurrently.

    It does not block: overlapping use raises LockStateError.
    """

    def __init__(self):
        self._locked = False

    @property
    def locked(self):
        """True while the section is entered."""
        return self._locked

    def acquire(self):
        """Enter the section; raises LockStateError if it is already entered."""
        if self._locked:
            raise LockStateError("section entered while already in use")
        self._locked = True

    def release(self):
        """Leave the section; raises LockStateError if it was not entered."""
        if not self._locked:
            raise LockStateError("section left without being entered")
        self._locked = False

    def __enter__(self):
        self.acquire()
        return self

    def __exit__(self, *args):
        self.release()
        return False