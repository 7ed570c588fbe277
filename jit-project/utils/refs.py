# What it does: Reads and moves the HEAD pointer, the one mutable file in the repository
# How it does: Updates go through a Lockfile on HEAD, so a crash leaves either the old or the new value and two concurrent committers cannot interleave their writes

import os

from .lockfile import Lockfile


class LockDenied(Exception):
    def __init__(self, path):
        super().__init__(f"Unable to create '{path}.lock': File exists. Another jit process seems to be running in this repository")
        self.path = path


class Refs:
    def __init__(self, path):
        self.path = os.fspath(path)

    @property
    def head_path(self):
        return os.path.join(self.path, 'HEAD')

    def update_head(self, oid):
        lockfile = Lockfile(self.head_path)

        if not lockfile.hold_for_update():
            raise LockDenied(self.head_path)

        try:
            lockfile.write(oid)
            lockfile.write('\n')
            lockfile.commit()
        except Exception:
            if lockfile.is_held:
                lockfile.rollback()
            raise

    def read_head(self): # Returns the commit id HEAD points to, or None if there are no commits yet
        try:
            with open(self.head_path, 'r') as f:
                head = f.read().strip()
        except FileNotFoundError:
            return None
        return head or None
