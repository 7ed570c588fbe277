# What it does: Makes the update of a single file atomic and mutually exclusive across processes
# How it does: Exclusively creates `<target>.lock` (this fails if another process got there first), buffers the new content into it, then fsyncs and renames it over the target
# What data structure it uses: A small state machine (unlocked -> held -> unlocked) around one open file handle

import os

class LockError(Exception):
    pass

class MissingParent(LockError):
    def __init__(self, path):
        super().__init__(f"Cannot create lock file, parent directory is missing: {path}")
        self.path = path

class NoPermission(LockError):
    def __init__(self, path):
        super().__init__(f"Permission denied creating lock file: {path}")
        self.path = path

class StaleLock(LockError):
    def __init__(self, path):
        super().__init__(f"Not holding lock on file: {path}")
        self.path = path


class Lockfile:
    def __init__(self, path):
        self.file_path = os.fspath(path)
        self.lock_path = self.file_path + '.lock'
        self.lock = None

    @property
    def is_held(self):
        return self.lock is not None

    def hold_for_update(self): # Returns True if the lock was acquired, False if someone already holds it
        if self.lock is not None:
            return False

        try:
            fd = os.open(self.lock_path, os.O_RDWR | os.O_CREAT | os.O_EXCL, 0o666)
        except FileExistsError:
            return False
        except FileNotFoundError:
            raise MissingParent(self.lock_path)
        except PermissionError:
            raise NoPermission(self.lock_path)

        self.lock = os.fdopen(fd, 'wb')
        return True

    def write(self, data):
        self._raise_on_stale_lock()
        if isinstance(data, str):
            data = data.encode()
        return self.lock.write(data)

    def commit(self): # Flushes the buffered content to disk and renames the lock over the target
        self._raise_on_stale_lock()
        try:
            self.lock.flush()
            os.fsync(self.lock.fileno())
            self.lock.close()
            os.replace(self.lock_path, self.file_path)
        except Exception:
            # A failed commit releases the lock; the target keeps its old content
            self._release()
            raise
        self.lock = None

    def rollback(self): # Releases the lock and discards everything written, leaving the target untouched
        self._raise_on_stale_lock()
        self._release()

    def _release(self):
        lock, self.lock = self.lock, None
        try:
            lock.close()
        finally:
            try:
                os.unlink(self.lock_path)
            except FileNotFoundError:
                pass

    def _raise_on_stale_lock(self):
        if self.lock is None:
            raise StaleLock(self.lock_path)
