# What it does: Manages all read/write operations for the `.git/config` file and resolves the author identity for commits
# What data structure it uses: Map / Hash Table / Dictionary (the INI file format is a map of sections to key-value pairs, managed by Python's `configparser`)

import configparser
import os
from .repository import git_path


INVALID_IDENTITY_CHARS = '<>\n\r'


class IdentityError(Exception):
    pass


def get_config_path(repo_root): # Returns the path to the config file within the repository
    return git_path(repo_root, 'config')

def read_config(repo_root): # Reads and returns the configuration as a ConfigParser object
    config = configparser.ConfigParser()
    config_path = get_config_path(repo_root)
    if os.path.exists(config_path):
        config.read(config_path)
    return config

def write_config(repo_root, key, value): # Sets a configuration key to a value and writes it to the config file
    try:
        section, option = key.split('.', 1)
    except ValueError:
        raise ValueError(f"invalid key format '{key}', should be 'section.key'")

    config = read_config(repo_root)
    if not config.has_section(section):
        config.add_section(section)
    config.set(section, option, value)

    with open(get_config_path(repo_root), 'w') as configfile:
        config.write(configfile)

def get_user_config(repo_root): # Retrieves user.name and user.email from the config, or None if not set
    config = read_config(repo_root)
    user_name = config.get('user', 'name', fallback=None)
    user_email = config.get('user', 'email', fallback=None)
    return user_name, user_email

def get_author_identity(repo_root, environ=None):
    """
    Returns (name, email) for a new commit. GIT_AUTHOR_NAME and
    GIT_AUTHOR_EMAIL win over user.name and user.email from the config.
    """
    if environ is None:
        environ = os.environ
    config_name, config_email = get_user_config(repo_root)
    name = environ.get('GIT_AUTHOR_NAME') or config_name
    email = environ.get('GIT_AUTHOR_EMAIL') or config_email
    if not name or not email:
        raise IdentityError(
            "Author identity unknown. Set GIT_AUTHOR_NAME and GIT_AUTHOR_EMAIL, "
            "or run 'jit config user.name <name>' and 'jit config user.email <email>'"
        )
    for label, value in (("name", name), ("email", email)):
        if any(c in value for c in INVALID_IDENTITY_CHARS):
            raise IdentityError(f"Author {label} {value!r} may not contain '<', '>' or line breaks")
    return name, email
