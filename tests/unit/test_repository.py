# Unit tests for utils/repository.py

import pytest
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'jit-project'))

from utils import repository


class TestFindRepoRoot:
    # Tests for repository.find_repo_root()

    def test_finds_repo_in_current_dir(self, temp_repo):
        # Should find repo when in root directory
        result = repository.find_repo_root(temp_repo)
        assert result == temp_repo

    def test_finds_repo_in_subdirectory(self, temp_repo):
        # Should find repo when in a subdirectory
        subdir = os.path.join(temp_repo, 'src', 'deep', 'nested')
        os.makedirs(subdir)
        os.chdir(subdir)

        result = repository.find_repo_root()
        # Use realpath to resolve symlinks
        assert os.path.realpath(result) == os.path.realpath(temp_repo)

    def test_returns_none_when_not_in_repo(self, temp_dir):
        # Should return None when not in a repository
        result = repository.find_repo_root(temp_dir)
        assert result is None


class TestPaths:
    # Tests for repository.git_path() and repository.objects_path()

    def test_git_path(self, temp_repo):
        assert repository.git_path(temp_repo, 'HEAD') == os.path.join(temp_repo, '.git', 'HEAD')

    def test_objects_path(self, temp_repo):
        assert repository.objects_path(temp_repo) == os.path.join(temp_repo, '.git', 'objects')
        assert os.path.isdir(repository.objects_path(temp_repo))
