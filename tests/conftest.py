import subprocess
from pathlib import Path

import pytest

from gitwrap import Git, GitConfig

IDENTITY_ENV = {
    "GIT_AUTHOR_NAME": "Test User",
    "GIT_AUTHOR_EMAIL": "test@example.com",
    "GIT_COMMITTER_NAME": "Test User",
    "GIT_COMMITTER_EMAIL": "test@example.com",
}


@pytest.fixture
def repo_dir(tmp_path):
    """Create an empty git repository for testing."""
    repo = tmp_path / "repo"
    repo.mkdir()
    subprocess.run(
        ["git", "init", "--initial-branch=master"],
        cwd=repo,
        check=True,
        capture_output=True,
    )
    return repo


@pytest.fixture
def git(repo_dir):
    """Git facade pointed at repo_dir with a commit identity in its overlay."""
    config = GitConfig(working_directory=repo_dir, timeout=60, env=dict(IDENTITY_ENV))
    with Git(config) as g:
        yield g


@pytest.fixture
def commit_files(git):
    """Return a helper committing files <prefix>1..<prefix>N, one commit each."""

    def _commit(count: int, prefix: str = "test") -> None:
        repo = Path(git.config.working_directory)
        for i in range(1, count + 1):
            name = f"{prefix}{i}"
            (repo / name).write_text("foo")
            git.add(name)
            git.commit(name)

    return _commit
