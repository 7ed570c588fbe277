# The command: jit log
# What it does: Displays the commit history by starting at HEAD and walking backward through the parent links
# How it does: It loads the commit HEAD points to, prints it, and follows its `parent` field until it reaches the root commit
# What data structure it uses: A linear traversal of the parent chain (a Linked List embedded in the commit DAG)

import sys
from utils import repository
from utils.database import Database
from utils.refs import Refs

def run(args):
    repo_root = repository.find_repo_root()
    if not repo_root: # Check if inside a jit repository
        print("fatal: not a jit repository", file=sys.stderr)
        sys.exit(1)

    commit_hash = Refs(repository.git_path(repo_root)).read_head()
    if not commit_hash: # Check if there are any commits
        print("fatal: your repository does not have any commits yet", file=sys.stderr)
        sys.exit(1)

    database = Database(repository.objects_path(repo_root))
    try:
        for commit in iter_history(database, commit_hash):
            _print_commit(commit)
    except (OSError, ValueError) as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

def iter_history(database, commit_hash): # Yields commits from commit_hash back to the root commit
    visited = set()
    while commit_hash and commit_hash not in visited:
        visited.add(commit_hash)
        commit = database.load(commit_hash)
        if commit.type != 'commit':
            raise ValueError(f"object {commit_hash} is not a commit")
        yield commit
        commit_hash = commit.parent

def _print_commit(commit):
    author = commit.author
    print(f"commit {commit.oid}")
    print(f"Author: {author.name} <{author.email}>")
    print(f"Date:   {author.time.strftime('%a %b %d %H:%M:%S %Y %z')}")
    print()
    for line in commit.message.splitlines():
        print(f"    {line}")
    print()
