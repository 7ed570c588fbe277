# Unit tests for utils/workspace.py and utils/ignore.py

import pytest
import os
import stat
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'jit-project'))

from utils import ignore
from utils.workspace import Workspace


class TestListFiles:
    # Tests for Workspace.list_files()

    def test_lists_files_recursively(self, temp_repo, make_file):
        make_file(temp_repo, 'b.txt', 'b')
        make_file(temp_repo, 'a.txt', 'a')
        make_file(temp_repo, 'src/lib/util.py', 'pass')

        result = list(Workspace(temp_repo).list_files())

        assert result == [('a.txt', True), ('b.txt', True), ('src/lib/util.py', True)]

    def test_skips_git_directory(self, temp_repo, make_file):
        make_file(temp_repo, '.git/HEAD', 'x')
        make_file(temp_repo, 'file.txt', 'x')

        paths = [path for path, _ in Workspace(temp_repo).list_files()]
        assert paths == ['file.txt']

    def test_honours_ignore_file(self, temp_repo, make_file):
        make_file(temp_repo, '.jitignore', '# comment\n*.log\nbuild/\n')
        make_file(temp_repo, 'keep.txt', 'x')
        make_file(temp_repo, 'debug.log', 'x')
        make_file(temp_repo, 'build/out.bin', 'x')

        paths = [path for path, _ in Workspace(temp_repo).list_files()]
        assert paths == ['.jitignore', 'keep.txt']

    def test_explicit_ignore_set(self, temp_repo, make_file):
        make_file(temp_repo, 'a.txt', 'x')
        make_file(temp_repo, 'skip.me', 'x')

        paths = [path for path, _ in Workspace(temp_repo, ignore_patterns={'.git', '*.me'}).list_files()]
        assert paths == ['a.txt']

    @pytest.mark.skipif(not hasattr(os, 'symlink') or os.name == 'nt', reason="needs POSIX symlinks")
    def test_symlink_is_not_regular(self, temp_repo, make_file):
        make_file(temp_repo, 'a.txt', 'x')
        os.symlink('a.txt', os.path.join(temp_repo, 'link'))

        result = dict(Workspace(temp_repo).list_files())
        assert result == {'a.txt': True, 'link': False}

    @pytest.mark.skipif(not hasattr(os, 'symlink') or os.name == 'nt', reason="needs POSIX symlinks")
    def test_symlink_to_directory_is_not_regular(self, temp_repo, make_file):
        make_file(temp_repo, 'real/inner.txt', 'x')
        os.symlink('real', os.path.join(temp_repo, 'alias'))

        result = list(Workspace(temp_repo).list_files())
        assert result == [('alias', False), ('real/inner.txt', True)]

    def test_restartable(self, temp_repo, make_file):
        make_file(temp_repo, 'a.txt', 'x')
        workspace = Workspace(temp_repo)
        assert list(workspace.list_files()) == list(workspace.list_files())


class TestReadAndStat:
    # Tests for Workspace.read_file() and Workspace.stat_permissions()

    def test_read_file(self, temp_repo, make_file):
        make_file(temp_repo, 'dir/data.bin', b'\x00\x01\x02')
        assert Workspace(temp_repo).read_file('dir/data.bin') == b'\x00\x01\x02'

    @pytest.mark.skipif(os.name == 'nt', reason="POSIX permission bits")
    def test_stat_permissions(self, temp_repo, make_file):
        make_file(temp_repo, 'run.sh', '#!/bin/sh\n', mode=0o755)
        mode = Workspace(temp_repo).stat_permissions('run.sh')

        assert stat.S_ISREG(mode)
        assert stat.S_IMODE(mode) == 0o755


class TestIgnore:
    # Tests for utils/ignore.py

    def test_default_patterns(self, temp_dir):
        assert ignore.get_ignored_patterns(temp_dir) == {'.git'}

    def test_matches_any_component(self):
        patterns = {'.git', '*.pyc'}
        assert ignore.is_ignored('.git', patterns)
        assert ignore.is_ignored('pkg/mod.pyc', patterns)
        assert not ignore.is_ignored('pkg/mod.py', patterns)
