# What it does: Implements the `.jitignore` functionality used by the workspace
# What data structure it uses: Set (to store the ignore patterns)

import os
from fnmatch import fnmatch

IGNORE_FILE = '.jitignore'
DEFAULT_PATTERNS = frozenset({'.git'})

def get_ignored_patterns(repo_root):
    """
    Reads the .jitignore file and returns a set of glob patterns.
    The repository's own .git directory is always ignored.
    """
    ignore_file = os.path.join(repo_root, IGNORE_FILE)
    patterns = set(DEFAULT_PATTERNS)

    if os.path.exists(ignore_file):
        with open(ignore_file, 'r') as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith('#'):
                    patterns.add(line.rstrip('/'))
    return patterns

def is_ignored(path, ignore_patterns): # Returns True if the path, or any of its components, matches a pattern
    for pattern in ignore_patterns:
        if fnmatch(path, pattern) or any(fnmatch(part, pattern) for part in path.split('/')):
            return True
    return False
