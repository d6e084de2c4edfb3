import os
import logging
import pytest
from unittest.mock import patch
from optutils.utils.filesystem import create_directory, get_working_directory
from optutils.core.path import PathValue
from optutils.exceptions import DirectoryCreationError, InvalidPathError, WorkingDirectoryError


class TestGetWorkingDirectory:
    def test_returns_cwd(self, in_workspace):
        assert get_working_directory() == os.getcwd()
        assert os.path.isabs(get_working_directory())

    def test_failure_raises_when_strict(self):
        with patch('optutils.utils.filesystem.os.getcwd',
                   side_effect=FileNotFoundError(2, "No such file or directory")):
            with pytest.raises(WorkingDirectoryError, match="No such file or directory"):
                get_working_directory()

    def test_failure_degrades_when_not_strict(self, caplog):
        with patch('optutils.utils.filesystem.os.getcwd',
                   side_effect=FileNotFoundError(2, "No such file or directory")):
            with caplog.at_level(logging.WARNING, logger='optutils.utils.filesystem'):
                assert get_working_directory(strict=False) == ""
        assert "Cannot retrieve working directory" in caplog.text


class TestCreateDirectory:
    def test_create_single_directory(self, temp_workspace):
        target = temp_workspace / "out"
        create_directory(PathValue(str(target)))
        assert target.is_dir()

    def test_existing_directory_is_ok(self, sample_tree):
        create_directory(str(sample_tree / "air04"))
        create_directory(str(sample_tree / "air04"), recursive=True)
        assert (sample_tree / "air04" / "solution.sol").exists()

    def test_missing_parent_fails_without_recursive(self, temp_workspace):
        target = temp_workspace / "missing" / "child"
        with pytest.raises(DirectoryCreationError) as exc_info:
            create_directory(str(target))
        assert exc_info.value.path == str(target)
        assert "No such file or directory" in exc_info.value.reason
        assert not target.exists()

    def test_recursive_creates_ancestors(self, temp_workspace):
        target = PathValue(str(temp_workspace)) / "a/b/c/d"
        create_directory(target, recursive=True)
        assert (temp_workspace / "a" / "b" / "c" / "d").is_dir()

    def test_recursive_keeps_existing_ancestors(self, sample_tree):
        create_directory(PathValue(str(sample_tree)) / "air04/logs/round1", recursive=True)
        assert (sample_tree / "air04" / "logs" / "round1").is_dir()
        assert (sample_tree / "air04" / "solution.sol").read_text() == "obj 56137\n"

    def test_recursive_relative_path(self, in_workspace):
        create_directory("x/y/z", recursive=True)
        assert (in_workspace / "x" / "y" / "z").is_dir()

    def test_empty_path_is_noop(self):
        with patch('optutils.utils.filesystem.os.mkdir') as mock_mkdir:
            create_directory(PathValue(""))
            create_directory("", recursive=True)
            mock_mkdir.assert_not_called()

    def test_mode_passed_to_mkdir(self):
        with patch('optutils.utils.filesystem.os.mkdir') as mock_mkdir:
            create_directory("out", mode=0o755)
            mock_mkdir.assert_called_once_with("out", 0o755)

    def test_recursive_walks_prefixes_in_order(self):
        with patch('optutils.utils.filesystem.os.mkdir') as mock_mkdir:
            create_directory("/srv/runs/air04", recursive=True)
            created = [c.args[0] for c in mock_mkdir.call_args_list]
            assert created == ["/srv", "/srv/runs", "/srv/runs/air04"]

    def test_recursive_failure_stops_without_rollback(self, temp_workspace):
        real_mkdir = os.mkdir
        blocked = str(temp_workspace / "a" / "b")

        def fake_mkdir(path, mode=0o777):
            if path == blocked:
                raise PermissionError(13, "Permission denied")
            real_mkdir(path, mode)

        with patch('optutils.utils.filesystem.os.mkdir', side_effect=fake_mkdir):
            with pytest.raises(DirectoryCreationError) as exc_info:
                create_directory(str(temp_workspace / "a" / "b" / "c"), recursive=True)

        assert exc_info.value.path == blocked
        assert exc_info.value.reason == "Permission denied"
        assert (temp_workspace / "a").is_dir()
        assert not (temp_workspace / "a" / "b").exists()

    def test_file_in_the_way(self, temp_workspace):
        (temp_workspace / "blocker").write_text("")
        with pytest.raises(DirectoryCreationError) as exc_info:
            create_directory(str(temp_workspace / "blocker" / "x"), recursive=True)
        assert exc_info.value.path == str(temp_workspace / "blocker")
        assert exc_info.value.reason == "File exists and is not a directory"

    def test_existing_file_is_not_a_directory(self, temp_workspace):
        target = temp_workspace / "solution.sol"
        target.write_text("obj 1\n")
        with pytest.raises(DirectoryCreationError, match="not a directory"):
            create_directory(str(target))
        assert target.read_text() == "obj 1\n"

    def test_string_path_normalized_before_walk(self, in_workspace):
        create_directory("out/../results//./air04", recursive=True)
        assert sorted(os.listdir(in_workspace)) == ["results"]
        assert (in_workspace / "results" / "air04").is_dir()

    def test_cancelled_segment_not_created(self, in_workspace):
        create_directory("out/../tmpdir", recursive=True)
        assert not (in_workspace / "out").exists()
        assert (in_workspace / "tmpdir").is_dir()

    def test_string_path_above_root_rejected(self):
        with patch('optutils.utils.filesystem.os.mkdir') as mock_mkdir:
            with pytest.raises(InvalidPathError):
                create_directory("/../etc/x", recursive=True)
            mock_mkdir.assert_not_called()

    def test_error_is_os_error(self, temp_workspace):
        with pytest.raises(OSError):
            create_directory(str(temp_workspace / "nope" / "deeper"))
