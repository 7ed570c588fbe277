# Shared pytest fixtures for Jit tests

import pytest
import os
import sys
import shutil
import tempfile

# Add jit-project to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'jit-project'))

from commands import init, commit


TEST_IDENTITY = {
    'GIT_AUTHOR_NAME': 'Test User',
    'GIT_AUTHOR_EMAIL': 'test@example.com',
}


@pytest.fixture
def temp_dir():
    # Creates a temporary directory that is cleaned up after the test
    # Also saves/restores cwd to prevent issues when tests change directories
    original_dir = os.getcwd()
    tmp = tempfile.mkdtemp()
    yield tmp
    os.chdir(original_dir)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def temp_repo(temp_dir):
    # Creates an initialized Jit repository in a temporary directory
    original_dir = os.getcwd()
    os.chdir(temp_dir)

    init.init_repository(temp_dir)

    yield temp_dir

    os.chdir(original_dir)


@pytest.fixture
def identity(monkeypatch):
    # Sets the author identity through the environment, the way the CLI reads it
    for key, value in TEST_IDENTITY.items():
        monkeypatch.setenv(key, value)
    return TEST_IDENTITY


@pytest.fixture
def repo_with_file(temp_repo):
    # Creates a repo with a single file (not committed)
    file_path = os.path.join(temp_repo, 'hello.txt')
    with open(file_path, 'w') as f:
        f.write('hi')
    return temp_repo


@pytest.fixture
def repo_with_commit(repo_with_file):
    # Creates a repo with one committed file
    root_commit = commit.create_commit(repo_with_file, 'Initial commit', environ=TEST_IDENTITY)
    return repo_with_file, root_commit


def write_file(repo_root, rel_path, content, mode=None):
    # Writes a file below repo_root, creating parent directories as needed
    full_path = os.path.join(repo_root, *rel_path.split('/'))
    os.makedirs(os.path.dirname(full_path), exist_ok=True)
    with open(full_path, 'wb') as f:
        f.write(content.encode() if isinstance(content, str) else content)
    if mode is not None:
        os.chmod(full_path, mode)
    return full_path


@pytest.fixture
def make_file():
    return write_file
