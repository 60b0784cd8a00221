"""
Unit tests for the command-line interface.
"""

import os

import pytest
from click.testing import CliRunner

from movefile.cli import cli, resolve_roots


@pytest.fixture
def project(tmp_path):
    root = tmp_path / "proj"
    (root / "docs").mkdir(parents=True)
    (root / "node_modules" / "pkg").mkdir(parents=True)
    (root / "foo.txt").write_text("hello")
    return root


@pytest.fixture
def runner():
    return CliRunner()


class TestResolveRoots:
    """Tests for resolve_roots function."""

    def test_defaults_to_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert resolve_roots(()) == [os.path.abspath(os.getcwd())]

    def test_deduplicates_in_order(self, tmp_path):
        a = str(tmp_path / "a")
        b = str(tmp_path / "b")
        assert resolve_roots((b, a, b + os.sep)) == [b, a]


class TestFoldersCommand:
    """Tests for the ``folders`` command."""

    def test_lists_labels_and_paths(self, runner, project):
        result = runner.invoke(cli, ["folders", "--root", str(project)])

        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == [
            f"./\t{project}",
            f"./docs\t{project / 'docs'}",
        ]

    def test_extra_exclude(self, runner, project):
        result = runner.invoke(cli, ["folders", "--root", str(project), "--exclude", "docs"])

        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == [f"./\t{project}"]

    def test_root_from_environment(self, runner, project):
        result = runner.invoke(cli, ["folders"], env={"MOVEFILE_FOLDERS_ROOTS": str(project)})

        assert result.exit_code == 0, result.output
        assert f"./docs\t{project / 'docs'}" in result.output

    def test_missing_root_is_usage_error(self, runner, tmp_path):
        result = runner.invoke(cli, ["folders", "--root", str(tmp_path / "nope")])

        assert result.exit_code == 2


class TestMoveCommand:
    """Tests for the ``move`` command."""

    def test_pick_by_number(self, runner, project):
        result = runner.invoke(
            cli, ["move", str(project / "foo.txt"), "--root", str(project)], input="2\n"
        )

        assert result.exit_code == 0, result.output
        assert "Moved 'foo.txt' to './docs'." in result.output
        assert (project / "docs" / "foo.txt").read_text() == "hello"
        assert not (project / "foo.txt").exists()

    def test_filter_then_pick(self, runner, project):
        (project / "src" / "lib").mkdir(parents=True)

        result = runner.invoke(
            cli, ["move", str(project / "foo.txt"), "--root", str(project)], input="lib\n1\n"
        )

        assert result.exit_code == 0, result.output
        assert (project / "src" / "lib" / "foo.txt").exists()

    def test_empty_answer_cancels(self, runner, project):
        result = runner.invoke(
            cli, ["move", str(project / "foo.txt"), "--root", str(project)], input="\n"
        )

        assert result.exit_code == 0, result.output
        assert "Moved" not in result.output
        assert (project / "foo.txt").exists()

    def test_end_of_input_cancels(self, runner, project):
        result = runner.invoke(cli, ["move", str(project / "foo.txt"), "--root", str(project)])

        assert result.exit_code == 0, result.output
        assert (project / "foo.txt").exists()

    def test_out_of_range_number_asks_again(self, runner, project):
        result = runner.invoke(
            cli, ["move", str(project / "foo.txt"), "--root", str(project)], input="9\n2\n"
        )

        assert result.exit_code == 0, result.output
        assert "No folder numbered 9." in result.output
        assert (project / "docs" / "foo.txt").exists()

    def test_filter_without_matches_asks_again(self, runner, project):
        result = runner.invoke(
            cli, ["move", str(project / "foo.txt"), "--root", str(project)], input="zzz\n\n"
        )

        assert result.exit_code == 0, result.output
        assert "No folder matches 'zzz'." in result.output
        assert "Moved" not in result.output
        assert (project / "foo.txt").read_text() == "hello"
        assert not (project / "docs" / "foo.txt").exists()

    def test_same_folder(self, runner, project):
        result = runner.invoke(
            cli, ["move", str(project / "foo.txt"), "--root", str(project)], input="1\n"
        )

        assert result.exit_code == 0, result.output
        assert "File is already in the selected destination folder." in result.output
        assert (project / "foo.txt").exists()

    def test_without_file(self, runner, project):
        result = runner.invoke(cli, ["move", "--root", str(project)])

        assert result.exit_code == 1
        assert "No active file to move." in result.output

    def test_collision_exits_with_error(self, runner, project):
        (project / "docs" / "foo.txt").write_text("taken")

        result = runner.invoke(
            cli, ["move", str(project / "foo.txt"), "--root", str(project)], input="2\n"
        )

        assert result.exit_code == 1
        assert "Error moving file" in result.output
        assert (project / "foo.txt").read_text() == "hello"

    def test_directory_argument_rejected(self, runner, project):
        result = runner.invoke(cli, ["move", str(project / "docs"), "--root", str(project)])

        assert result.exit_code == 2
