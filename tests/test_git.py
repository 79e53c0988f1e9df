"""Tests for the Git facade."""

from unittest.mock import MagicMock, patch

import pytest

from gitwrap import (
    ChangeRecord,
    CommandFailedError,
    Git,
    GitConfig,
    InvalidOptionsError,
    ObjectType,
)
from gitwrap.exceptions import GitError
from gitwrap.process.runner import InvocationResult


@pytest.fixture
def recording_git(tmp_path):
    """Git facade whose runner records requests and returns empty output."""
    runner = MagicMock()
    runner.execute.return_value = InvocationResult(returncode=0, stdout="", stderr="")
    return Git(GitConfig(working_directory=tmp_path), runner=runner)


def _argv(git: Git) -> list[str]:
    return list(git.runner.execute.call_args[0][0].argv)


def test_log_argv(recording_git):
    """Test log renders flags, the revision, then -- and the path."""
    recording_git.log("v1.0..HEAD", "src", options={"limit": 5})
    assert _argv(recording_git) == [
        "git",
        "log",
        "--format=%h||%aN||%aE||%aD||%s",
        "-n",
        "5",
        "--skip=0",
        "v1.0..HEAD",
        "--",
        "src",
    ]


def test_log_options_only(recording_git):
    """Test the options-only call shape."""
    recording_git.log(options={"limit": 1})
    assert _argv(recording_git) == [
        "git",
        "log",
        "--format=%h||%aN||%aE||%aD||%s",
        "-n",
        "1",
        "--skip=0",
    ]


def test_invalid_options_spawn_nothing(recording_git):
    """Test an unknown option fails before any process is started."""
    with pytest.raises(InvalidOptionsError):
        recording_git.log(options={"limimt": 1})
    recording_git.runner.execute.assert_not_called()


def test_request_carries_config(recording_git, monkeypatch):
    """Test cwd, timeout and the merged environment reach the runner."""
    monkeypatch.setenv("GITWRAP_TEST_INHERITED", "yes")
    recording_git.set_timeout(30).set_env_var("GIT_TRACE", 0)

    recording_git.diff()

    request = recording_git.runner.execute.call_args[0][0]
    assert request.cwd == recording_git.config.working_directory
    assert request.timeout == 30
    assert request.env["GIT_TRACE"] == "0"
    assert request.env["GITWRAP_TEST_INHERITED"] == "yes"


def test_config_overrides_rendered_first(recording_git):
    """Test -c overrides come before the subcommand."""
    recording_git.config.config_overrides = {"core.quotepath": "off"}
    recording_git.tree("HEAD")
    assert _argv(recording_git) == [
        "git",
        "-c",
        "core.quotepath=off",
        "ls-tree",
        "HEAD:",
    ]


def test_tree_diff_argv(recording_git):
    """Test diff-tree flags precede both commits."""
    recording_git.tree_diff("HEAD~1", "HEAD", status=True)
    assert _argv(recording_git) == [
        "git",
        "diff-tree",
        "-r",
        "--no-commit-id",
        "--name-status",
        "--diff-filter=ACRMT",
        "HEAD~1",
        "HEAD",
    ]


def test_set_bin(recording_git):
    """Test the configured binary leads the vector."""
    recording_git.set_bin("/opt/git/bin/git").version()
    assert _argv(recording_git) == ["/opt/git/bin/git", "--version"]


def test_invalid_timeout_raises_git_error():
    """Test a rejected setter value surfaces as InvalidOptionsError."""
    git = Git()
    with pytest.raises(InvalidOptionsError, match="Invalid timeout"):
        git.set_timeout(0)
    assert git.get_timeout() == 7200

    with pytest.raises(GitError):
        git.set_timeout("soon")


def test_env_var_accessors():
    """Test overlay setters, getters and explicit unset."""
    git = Git()
    git.set_env_var("HOME", "/tmp/home")
    assert git.get_env_var("HOME") == "/tmp/home"
    assert git.get_env_vars() == {"HOME": "/tmp/home"}

    git.unset_env_var("HOME")
    assert git.get_env_var("HOME", "default") == "default"


def test_unknown_registry_name(recording_git):
    """Test dispatching an unregistered command fails."""
    with pytest.raises(GitError, match="Unknown command"):
        recording_git.execute("blame")


def test_version_real_git(git):
    """Test git --version output is returned raw."""
    assert git.version().startswith("git version")


def test_log_limit(git, commit_files):
    """Test log honours limit and lists newest first."""
    commit_files(2)

    log = git.log(options={"limit": 1})
    assert len(log) == 1
    assert log[0].title == "test2"
    assert log[0].name == "Test User"
    assert log[0].email == "test@example.com"


def test_log_reverse(git, commit_files):
    """Test log with reverse lists oldest first."""
    commit_files(3)

    log = git.log(None, None, {"reverse": True})
    assert [c.title for c in log] == ["test1", "test2", "test3"]


def test_log_path_and_search(git, commit_files):
    """Test path filtering and case-insensitive message search."""
    commit_files(3)

    assert [c.title for c in git.log("HEAD", "test2")] == ["test2"]
    assert [c.title for c in git.log(options={"search": "TEST3"})] == ["test3"]


def test_log_empty_commit_message(git, commit_files):
    """Test a commit with an empty message is listed with an empty title."""
    commit_files(1)
    git.commit("", {"allow_empty": True, "allow_empty_message": True})

    log = git.log()
    assert [c.title for c in log] == ["", "test1"]
    assert log[0].name == "Test User"


def test_log_is_idempotent(git, commit_files):
    """Test two reads of unchanged history are identical."""
    commit_files(2)
    assert git.log() == git.log()


def test_log_changed(git, commit_files):
    """Test files touched by a revision range, with and without status."""
    commit_files(3)

    assert git.log_changed("HEAD~2..HEAD") == ["test3", "test2"]
    assert git.log_changed("HEAD~1..HEAD", status=True) == [
        ChangeRecord(status="A", filename="test3")
    ]


def test_tree_listing(git, commit_files, repo_dir):
    """Test ls-tree entries, including a subdirectory."""
    commit_files(1)
    (repo_dir / "bin").mkdir()
    (repo_dir / "bin" / "run.sh").write_text("echo")
    git.add("bin")
    git.commit("Add bin")

    entries = git.tree("master")
    by_path = {e.path: e for e in entries}
    assert by_path["bin"].type is ObjectType.TREE
    assert by_path["bin"].sort_key == "1:bin"
    assert by_path["test1"].type is ObjectType.BLOB
    assert by_path["test1"].sort_key == "2:test1"
    assert [e.path for e in sorted(entries, key=lambda e: e.sort_key)] == [
        "bin",
        "test1",
    ]

    assert [e.path for e in git.tree("master", "bin")] == ["run.sh"]
    assert git.tree("master") == entries


def test_tree_diff(git, commit_files, repo_dir):
    """Test diff-tree against the parent and between two commits."""
    commit_files(2)
    (repo_dir / "test1").write_text("changed")
    git.commit("Modify test1", {"all": True})

    assert git.tree_diff("HEAD") == ["test1"]
    assert git.tree_diff("HEAD~2", "HEAD", status=True) == [
        ChangeRecord(status="M", filename="test1"),
        ChangeRecord(status="A", filename="test2"),
    ]


def test_diff_raw(git, commit_files, repo_dir):
    """Test diff output is returned untouched."""
    commit_files(1)
    (repo_dir / "test1").write_text("bar")

    output = git.diff(path="test1")
    assert "-foo" in output
    assert "+bar" in output
    assert git.diff(options={"cached": True}) == ""


def test_show(git, commit_files):
    """Test show returns raw text with the requested format."""
    commit_files(1)
    assert git.show("HEAD", {"format": "%s"}).splitlines()[0] == "test1"


def test_init_new_repository(tmp_path):
    """Test init creates a repository in the given path."""
    git = Git(GitConfig(working_directory=tmp_path))
    git.init("fresh", {"bare": True})
    assert (tmp_path / "fresh" / "HEAD").exists()


def test_command_failed_outside_repository(tmp_path):
    """Test git's non-zero exit surfaces with stderr and exit code."""
    git = Git(GitConfig(working_directory=tmp_path))
    git.set_env_var("GIT_CEILING_DIRECTORIES", str(tmp_path.parent))

    with pytest.raises(CommandFailedError) as exc_info:
        git.log()

    assert exc_info.value.exit_code != 0
    assert "not a git repository" in exc_info.value.stderr
    assert exc_info.value.command_line.startswith("git log")


def test_log_on_empty_repository_fails(git):
    """Test a log of a repository without commits fails rather than returning []."""
    with pytest.raises(CommandFailedError):
        git.log()


def test_invalid_options_never_reach_subprocess(tmp_path):
    """Test no child process is spawned for rejected options."""
    git = Git(GitConfig(working_directory=tmp_path))
    with patch("gitwrap.process.runner.subprocess.Popen") as mock_popen:
        with pytest.raises(InvalidOptionsError):
            git.diff(options={"colour": True})
    mock_popen.assert_not_called()
