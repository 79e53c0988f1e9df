"""Tests for argument vector construction."""

from gitwrap.process.arguments import ArgumentBuilder


def test_subcommand_follows_binary():
    """Test the binary and subcommand lead the vector."""
    assert ArgumentBuilder("git").subcommand("status").build() == ["git", "status"]


def test_custom_binary():
    """Test a non-default binary path is used verbatim."""
    argv = ArgumentBuilder("/usr/local/bin/git").subcommand("log").build()
    assert argv[0] == "/usr/local/bin/git"


def test_option_rendering():
    """Test --name=value, --name and -x value renderings."""
    argv = (
        ArgumentBuilder()
        .subcommand("log")
        .option("skip", 5)
        .flag("reverse")
        .short("n", 10)
        .build()
    )
    assert argv == ["git", "log", "--skip=5", "--reverse", "-n", "10"]


def test_absent_options_contribute_nothing():
    """Test None, empty strings and disabled flags are dropped."""
    argv = (
        ArgumentBuilder()
        .subcommand("log")
        .option("since", None)
        .option("grep", "")
        .flag("reverse", False)
        .positional(None, "")
        .build()
    )
    assert argv == ["git", "log"]


def test_path_after_separator():
    """Test a path following a revision is preceded by --."""
    argv = (
        ArgumentBuilder()
        .subcommand("log")
        .positional("HEAD~3..HEAD")
        .paths("README.md")
        .build()
    )
    assert argv == ["git", "log", "HEAD~3..HEAD", "--", "README.md"]


def test_path_alone_still_separated():
    """Test a lone path is also preceded by --."""
    argv = ArgumentBuilder().subcommand("add").paths("-weird-name").build()
    assert argv == ["git", "add", "--", "-weird-name"]


def test_no_separator_without_paths():
    """Test -- only appears when a path is supplied."""
    argv = ArgumentBuilder().subcommand("diff").positional("HEAD").build()
    assert "--" not in argv


def test_multiple_paths_flattened():
    """Test lists of paths are flattened after a single separator."""
    argv = ArgumentBuilder().subcommand("add").paths(["a.txt", "b.txt"]).build()
    assert argv == ["git", "add", "--", "a.txt", "b.txt"]


def test_order_independent_of_call_order():
    """Test global flags, flags, positionals and paths keep their slots."""
    argv = (
        ArgumentBuilder()
        .paths("src")
        .positional("v1.0..HEAD")
        .option("skip", 1)
        .subcommand("log")
        .config_override("core.quotepath", "off")
        .build()
    )
    assert argv == [
        "git",
        "-c",
        "core.quotepath=off",
        "log",
        "--skip=1",
        "v1.0..HEAD",
        "--",
        "src",
    ]


def test_global_flag_without_subcommand():
    """Test a global-only invocation such as git --version."""
    assert ArgumentBuilder().global_flag("--version").build() == ["git", "--version"]
