import argparse
from commands import init, commit, config, log, cat_file

# The main entry point for the Jit version control system
def main(argv=None):
    # The main parser
    parser = argparse.ArgumentParser(description="Jit: a minimal content-addressable version control system.")
    subparsers = parser.add_subparsers(dest="command", help="Available commands", required=True)

    # Command: init
    init_parser = subparsers.add_parser("init", help="Create an empty repository or reinitialize an existing one.")
    init_parser.add_argument("path", nargs="?", help="Directory to initialize (default: current directory).")
    init_parser.set_defaults(func=init.run)

    # Command: commit
    commit_parser = subparsers.add_parser("commit", help="Record a snapshot of the working directory.")
    commit_parser.add_argument("-m", "--message", help="Commit message (read from standard input if omitted).")
    commit_parser.set_defaults(func=commit.run)

    # Command: config
    config_parser = subparsers.add_parser("config", help="Set user name and email.")
    config_parser.add_argument("key", help="The configuration key (e.g., user.name).")
    config_parser.add_argument("value", help="The configuration value.")
    config_parser.set_defaults(func=config.run)

    # Command: log
    log_parser = subparsers.add_parser("log", help="Show commit logs.")
    log_parser.set_defaults(func=log.run)

    # Command: cat-file
    cat_file_parser = subparsers.add_parser("cat-file", help="Print the contents of an object.")
    cat_file_parser.add_argument("object", help="The object id to show.")
    cat_file_parser.set_defaults(func=cat_file.run)

    # Parse the arguments
    args = parser.parse_args(argv)

    # If a command was specified, run its function
    if hasattr(args, 'func'):
        args.func(args)
    else:
        parser.print_help()

if __name__ == "__main__":
    main()
