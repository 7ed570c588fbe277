# The command: jit config <section.key> <value>
# What it does: A user-facing command to set a configuration key-value pair (e.g., user.name)
# How it does: It finds the repository and hands the key and value to `write_config` in `utils/config.py`, which handles the INI parsing and file I/O

import sys
from utils import repository, config as config_utils

def run(args):
    repo_root = repository.find_repo_root()
    if not repo_root:
        print("fatal: not a jit repository", file=sys.stderr)
        sys.exit(1)

    try: # Set the configuration key-value pair
        config_utils.write_config(repo_root, args.key, args.value)
        print(f"Set {args.key} to '{args.value}'")
    except (ValueError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)
