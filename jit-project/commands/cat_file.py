# The command: jit cat-file <object>
# What it does: Prints the contents of a single object from the database
# How it does: Reads and decompresses the object, then prints it according to its type: raw bytes for blobs, one line per entry for trees, the raw payload for commits

import sys
from utils import repository
from utils.database import Database
from utils.objects import Tree

def run(args):
    repo_root = repository.find_repo_root()
    if not repo_root:
        print("fatal: not a jit repository", file=sys.stderr)
        sys.exit(1)

    database = Database(repository.objects_path(repo_root))
    try:
        obj_type, payload = database.read_object(args.object)
        tree = Tree.parse(payload) if obj_type == 'tree' else None
    except FileNotFoundError:
        print(f"fatal: Not a valid object name {args.object}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    if tree is not None:
        for line in format_tree(tree):
            print(line)
    else:
        sys.stdout.buffer.write(payload)
        sys.stdout.flush()

def format_tree(tree): # Renders tree entries as `<mode> <type> <id>\t<name>`
    for name, entry in tree.sorted_entries():
        entry_type = 'tree' if entry.is_tree else 'blob'
        yield f"{entry.mode_string.rjust(6, '0')} {entry_type} {entry.oid}\t{name}"
