# What it does: Locates the repository and knows where its pieces live on disk
# How it does: `find_repo_root` walks up the directory tree until it finds a `.git` directory
# What data structure it uses: Uses recursion (linear recursion up the parent directories)

import os

GIT_DIR = '.git'

def find_repo_root(path='.'): # Recursively searches for the .git directory to find the repository root
    path = os.path.abspath(path)
    if os.path.isdir(os.path.join(path, GIT_DIR)):
        return path
    parent_path = os.path.dirname(path)
    if parent_path == path:
        return None
    return find_repo_root(parent_path)

def git_path(repo_root, *parts):
    return os.path.join(repo_root, GIT_DIR, *parts)

def objects_path(repo_root):
    return git_path(repo_root, 'objects')
