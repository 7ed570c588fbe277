# The command: jit commit [-m "<message>"]
# What it does: Creates a permanent, uniquely identified snapshot (a commit object) of every file in the working directory
# How it does: Each file becomes a blob in the object database. The (path, id, mode) triples are grouped into a Merkle Tree which is stored bottom-up, so every subtree has its id before its parent is hashed. The commit records the root tree, the previous HEAD as its parent, and the author, and HEAD is then moved to it under a lock
# What data structure it uses: Merkle Tree (the project's file structure), Directed Acyclic Graph (each commit links to its parent), Hash Table / Dictionary (the underlying object store)

import sys
from utils import repository, config
from utils.author import Author
from utils.database import Database
from utils.lockfile import LockError
from utils.objects import Blob, Commit, Tree
from utils.refs import LockDenied, Refs
from utils.workspace import Workspace

def run(args):
    repo_root = repository.find_repo_root()
    if not repo_root:
        print("fatal: not a jit repository", file=sys.stderr)
        sys.exit(1)

    message = args.message if args.message is not None else sys.stdin.read()
    if not message.strip():
        print("Aborting commit due to empty commit message.", file=sys.stderr)
        sys.exit(1)

    try:
        commit = create_commit(repo_root, message)
    except config.IdentityError as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)
    except LockDenied as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)
    except (LockError, OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)

    print(format_summary(commit))

def create_commit(repo_root, message, environ=None, rng=None): # Stores the workspace as a commit and moves HEAD to it
    workspace = Workspace(repo_root)
    database = Database(repository.objects_path(repo_root), rng=rng)
    refs = Refs(repository.git_path(repo_root))

    name, email = config.get_author_identity(repo_root, environ)

    files = []
    for path, is_regular in workspace.list_files():
        if not is_regular:
            continue
        blob = Blob(workspace.read_file(path))
        database.store(blob)
        files.append((path, blob.oid, workspace.stat_permissions(path)))

    root = Tree.build(files)
    root.traverse(database.store)

    parent = refs.read_head()
    commit = Commit(root.oid, Author.now(name, email), message, parent=parent)
    database.store(commit)
    refs.update_head(commit.oid)

    return commit

def format_summary(commit):
    root_marker = '' if commit.parent else '(root-commit) '
    return f"[{root_marker}{commit.oid}] {commit.title}"
