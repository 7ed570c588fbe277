# What it does: Gives the commit command a view of the working directory: which files exist, their bytes and their permission bits
# How it does: Walks the directory with os.walk, pruning ignored directories before descending into them
# What data structure it uses: Tree Traversal (depth-first walk of the file system)

import os

from . import ignore


class Workspace:
    def __init__(self, path, ignore_patterns=None):
        self.path = os.path.abspath(path)
        if ignore_patterns is None:
            ignore_patterns = ignore.get_ignored_patterns(self.path)
        self.ignore_patterns = set(ignore_patterns)

    def list_files(self):
        """
        Yields (relative_path, is_regular_file) for every non-directory entry
        below the workspace root, in sorted order. Paths use '/' as separator.
        """
        for root, dirs, files in os.walk(self.path):
            rel_dir = os.path.relpath(root, self.path)
            rel_dir = '' if rel_dir == '.' else rel_dir.replace(os.sep, '/')

            dirs[:] = sorted(
                d for d in dirs
                if not ignore.is_ignored(_join(rel_dir, d), self.ignore_patterns)
            )
            # os.walk reports symlinks to directories as dirs but never descends into them
            linked_dirs = [d for d in dirs if os.path.islink(os.path.join(root, d))]
            dirs[:] = [d for d in dirs if d not in linked_dirs]

            for name in sorted(files + linked_dirs):
                rel_path = _join(rel_dir, name)
                if ignore.is_ignored(rel_path, self.ignore_patterns):
                    continue
                full_path = os.path.join(root, name)
                yield rel_path, os.path.isfile(full_path) and not os.path.islink(full_path)

    def read_file(self, path):
        with open(self._full_path(path), 'rb') as f:
            return f.read()

    def stat_permissions(self, path):
        return os.stat(self._full_path(path)).st_mode

    def _full_path(self, path):
        return os.path.join(self.path, *path.split('/'))


def _join(rel_dir, name):
    return f'{rel_dir}/{name}' if rel_dir else name
