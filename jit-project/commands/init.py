# The command: jit init [path]
# What it does: Initializes a new, empty repository by creating the hidden `.git` directory and its internal structure
# How it does: It creates the `objects` and `refs` subdirectories. Running it again on an existing repository only recreates whatever is missing
# What data structure it uses: Tree (the file system directory structure is a tree). It lays the foundation for the Hash Table of the object database

import os
import sys
from utils import repository

def run(args):
    root = os.path.abspath(args.path or os.getcwd())
    git_dir = repository.git_path(root)
    existed = os.path.isdir(git_dir)

    try:
        init_repository(root)
    except OSError as e:
        print(f"fatal: unable to initialize repository in {git_dir}: {e}", file=sys.stderr)
        sys.exit(1)

    if existed:
        print(f"Reinitialized existing Jit repository in {git_dir}")
    else:
        print(f"Initialized empty Jit repository in {git_dir}")

def init_repository(root): # Creates the .git skeleton under root; safe to call on an existing repository
    for name in ('objects', 'refs'):
        os.makedirs(repository.git_path(root, name), exist_ok=True)
    return repository.git_path(root)
