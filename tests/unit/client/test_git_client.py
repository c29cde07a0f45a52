"""Unit tests for GitClient using FakeCommandRunner.

Test organization:
- TestGetRemote: remote lookup, caching and refresh
- TestOpenRepository: eager remote resolution
- TestFetch / TestListRemoteRefs / TestListCommits: remote and history listing
- TestSingleValueQueries: branch, last commit, message body, date
- TestForcePush: push command construction
- TestFailureModes: execution errors and non-zero exits across operations
"""

import logging
from datetime import UTC, datetime, timedelta, timezone
from pathlib import Path

import pytest

from gitwrap.client import GitClient, open_repository
from gitwrap.errors import (
    GitError,
    GitExecutionError,
    GitParseError,
    NonZeroExitError,
    NotFoundError,
)
from gitwrap.integrations.runner.fake import FakeCommandRunner
from gitwrap.integrations.runner.types import CommandResult

REPO = Path("/repo")


def ok(stdout: str) -> CommandResult:
    return CommandResult(stdout=stdout, returncode=0, stderr="")


def failed(returncode: int = 1, stdout: str = "", stderr: str = "") -> CommandResult:
    return CommandResult(stdout=stdout, returncode=returncode, stderr=stderr)


def not_started() -> CommandResult:
    return CommandResult(
        stdout=None,
        returncode=None,
        error=FileNotFoundError(2, "No such file or directory", "git"),
    )


class TestGetRemote:
    def test_single_remote(self) -> None:
        runner = FakeCommandRunner({("remote",): ok("origin\n")})
        client = GitClient(REPO, runner=runner)

        assert client.get_remote() == "origin"
        assert runner.calls == [["git", "remote"]]
        assert runner.cwds == [REPO]

    def test_multiple_remotes_uses_last(self, caplog: pytest.LogCaptureFixture) -> None:
        runner = FakeCommandRunner({("remote",): ok("origin\nupstream\n  fork  \n")})
        client = GitClient(REPO, runner=runner)

        with caplog.at_level(logging.WARNING):
            remote = client.get_remote()

        assert remote == "fork"
        assert "multiple remotes were found" in caplog.text
        assert "fork" in caplog.text

    def test_is_cached_after_first_lookup(self) -> None:
        runner = FakeCommandRunner({("remote",): ok("origin\n")})
        client = GitClient(REPO, runner=runner)

        client.get_remote()
        client.get_remote()

        assert runner.calls == [["git", "remote"]]
        assert client.remote == "origin"

    def test_supplied_remote_skips_lookup(self) -> None:
        runner = FakeCommandRunner()
        client = GitClient(REPO, runner=runner, remote="upstream")

        assert client.get_remote() == "upstream"
        assert runner.calls == []

    def test_empty_output_raises_not_found(self) -> None:
        runner = FakeCommandRunner({("remote",): ok("\n")})
        client = GitClient(REPO, runner=runner)

        with pytest.raises(NotFoundError):
            client.get_remote()
        assert client.remote is None

    def test_absent_output_raises_not_found(self) -> None:
        runner = FakeCommandRunner({("remote",): CommandResult(stdout=None, returncode=0)})
        client = GitClient(REPO, runner=runner)

        with pytest.raises(NotFoundError):
            client.get_remote()

    def test_non_zero_exit(self) -> None:
        runner = FakeCommandRunner({("remote",): failed(128, stderr="fatal: not a git repository")})
        client = GitClient(REPO, runner=runner)

        with pytest.raises(NonZeroExitError) as exc_info:
            client.get_remote()

        assert exc_info.value.operation == "remote"
        assert exc_info.value.returncode == 128
        assert "git remote command returned a non zero code" in str(exc_info.value)
        assert "fatal: not a git repository" in str(exc_info.value)

    def test_refresh_remote_runs_lookup_again(self) -> None:
        runner = FakeCommandRunner({("remote",): ok("origin\n")})
        client = GitClient(REPO, runner=runner, remote="stale")

        assert client.refresh_remote() == "origin"
        assert client.get_remote() == "origin"
        assert runner.calls == [["git", "remote"]]

    def test_custom_git_executable(self) -> None:
        runner = FakeCommandRunner({("remote",): ok("origin\n")})
        client = GitClient(REPO, runner=runner, git_executable="/usr/local/bin/git")

        client.get_remote()

        assert runner.calls == [["/usr/local/bin/git", "remote"]]


class TestOpenRepository:
    def test_resolves_remote_during_construction(self) -> None:
        runner = FakeCommandRunner({("remote",): ok("origin\n")})

        client = open_repository(REPO, runner=runner)

        assert client.remote == "origin"
        assert runner.calls == [["git", "remote"]]

    def test_fails_when_remote_cannot_be_resolved(self) -> None:
        runner = FakeCommandRunner({("remote",): ok("")})

        with pytest.raises(NotFoundError):
            open_repository(REPO, runner=runner)

    def test_lazy_constructor_runs_nothing(self) -> None:
        runner = FakeCommandRunner()

        GitClient(REPO, runner=runner)

        assert runner.calls == []

    def test_accepts_string_working_directory(self) -> None:
        runner = FakeCommandRunner()

        client = open_repository("/repo", runner=runner, remote="origin")

        assert client.working_directory == REPO
        assert runner.calls == []


class TestFetch:
    def test_fetches_resolved_remote(self) -> None:
        runner = FakeCommandRunner({("remote",): ok("origin\n")})
        client = GitClient(REPO, runner=runner)

        client.fetch()

        assert runner.calls == [["git", "remote"], ["git", "fetch", "origin"]]

    def test_non_zero_exit(self) -> None:
        runner = FakeCommandRunner({("fetch", "origin"): failed(1)})
        client = GitClient(REPO, runner=runner, remote="origin")

        with pytest.raises(NonZeroExitError) as exc_info:
            client.fetch()
        assert exc_info.value.operation == "fetch"


class TestListRemoteRefs:
    def test_parses_heads_and_skips_malformed_line(self, caplog: pytest.LogCaptureFixture) -> None:
        runner = FakeCommandRunner(
            {
                ("ls-remote", "--heads", "origin"): ok(
                    "refs/heads/main\nrefs/heads/dev\nmalformed-line\n"
                )
            }
        )
        client = GitClient(REPO, runner=runner, remote="origin")

        with caplog.at_level(logging.WARNING):
            refs = client.list_remote_refs("heads")

        assert refs == ["main", "dev"]
        assert "malformed-line" in caplog.text

    def test_parses_real_ls_remote_format(self) -> None:
        output = (
            "3f2a1b0c9d8e7f6a5b4c3d2e1f0a9b8c7d6e5f4a\trefs/tags/v1.0.0\n"
            "0a1b2c3d4e5f60718293a4b5c6d7e8f901234567\trefs/tags/v1.1.0\n"
        )
        runner = FakeCommandRunner({("ls-remote", "--tags", "origin"): ok(output)})
        client = GitClient(REPO, runner=runner, remote="origin")

        assert client.list_remote_refs("tags") == ["v1.0.0", "v1.1.0"]

    def test_preserves_tool_order(self) -> None:
        runner = FakeCommandRunner(
            {("ls-remote", "--heads", "origin"): ok("x\trefs/heads/zeta\ny\trefs/heads/alpha\n")}
        )
        client = GitClient(REPO, runner=runner, remote="origin")

        assert client.list_remote_refs("heads") == ["zeta", "alpha"]

    def test_empty_output_raises_not_found(self) -> None:
        runner = FakeCommandRunner({("ls-remote", "--heads", "origin"): ok("")})
        client = GitClient(REPO, runner=runner, remote="origin")

        with pytest.raises(NotFoundError):
            client.list_remote_refs("heads")

    def test_resolves_remote_first(self) -> None:
        runner = FakeCommandRunner(
            {
                ("remote",): ok("upstream\n"),
                ("ls-remote", "--heads", "upstream"): ok("a\trefs/heads/main\n"),
            }
        )
        client = GitClient(REPO, runner=runner)

        assert client.list_remote_refs("heads") == ["main"]
        assert runner.calls[1] == ["git", "ls-remote", "--heads", "upstream"]


class TestListCommits:
    def test_strips_quotes_and_filters_empty_lines(self) -> None:
        runner = FakeCommandRunner(
            {("log", '--pretty=format:"%H"'): ok('"abc123"\n""\n"def456"\n')}
        )
        client = GitClient(REPO, runner=runner)

        assert client.list_commits() == ["abc123", "def456"]

    def test_passes_range_through(self) -> None:
        runner = FakeCommandRunner(
            {("log", '--pretty=format:"%H"', "main..feature"): ok('"abc123"')}
        )
        client = GitClient(REPO, runner=runner)

        assert client.list_commits("main..feature") == ["abc123"]
        assert runner.calls == [["git", "log", '--pretty=format:"%H"', "main..feature"]]

    def test_empty_history_returns_empty_list(self) -> None:
        runner = FakeCommandRunner({("log", '--pretty=format:"%H"'): ok("")})
        client = GitClient(REPO, runner=runner)

        assert client.list_commits() == []

    def test_does_not_need_remote(self) -> None:
        runner = FakeCommandRunner({("log", '--pretty=format:"%H"'): ok('"abc"')})
        client = GitClient(REPO, runner=runner)

        client.list_commits()

        assert ["git", "remote"] not in runner.calls


class TestSingleValueQueries:
    def test_get_current_branch(self) -> None:
        runner = FakeCommandRunner({("rev-parse", "--abbrev-ref", "HEAD"): ok("feature/x\n")})
        client = GitClient(REPO, runner=runner)

        assert client.get_current_branch() == "feature/x"

    def test_get_last_commit_on_ref(self) -> None:
        runner = FakeCommandRunner({("rev-list", "-n", "1", "main"): ok("abc123\n")})
        client = GitClient(REPO, runner=runner)

        assert client.get_last_commit_on_ref("main") == "abc123"

    def test_get_last_commit_on_ref_without_output(self) -> None:
        runner = FakeCommandRunner({("rev-list", "-n", "1", "main"): ok("")})
        client = GitClient(REPO, runner=runner)

        with pytest.raises(NotFoundError):
            client.get_last_commit_on_ref("main")

    def test_get_commit_message_body(self) -> None:
        runner = FakeCommandRunner(
            {("log", "--format=%B", "-n", "1", "abc123"): ok("Subject\n\nBody line\n\n")}
        )
        client = GitClient(REPO, runner=runner)

        assert client.get_commit_message_body("abc123") == "Subject\n\nBody line"

    def test_get_reference_datetime(self) -> None:
        runner = FakeCommandRunner(
            {("log", "--format=%cd", "-n", "1", "main"): ok("Mon Jan 2 15:04:05 2021 +0000\n")}
        )
        client = GitClient(REPO, runner=runner)

        assert client.get_reference_datetime("main") == datetime(2021, 1, 2, 15, 4, 5, tzinfo=UTC)

    def test_get_reference_datetime_keeps_offset(self) -> None:
        runner = FakeCommandRunner(
            {("log", "--format=%cd", "-n", "1", "v1"): ok("Tue Mar 14 09:26:53 2023 -0700\n")}
        )
        client = GitClient(REPO, runner=runner)

        result = client.get_reference_datetime("v1")

        assert result.utcoffset() == timedelta(hours=-7)
        assert result == datetime(2023, 3, 14, 9, 26, 53, tzinfo=timezone(timedelta(hours=-7)))

    def test_get_reference_datetime_rejects_bad_format(self) -> None:
        runner = FakeCommandRunner({("log", "--format=%cd", "-n", "1", "main"): ok("not-a-date")})
        client = GitClient(REPO, runner=runner)

        with pytest.raises(GitParseError):
            client.get_reference_datetime("main")

    def test_get_reference_datetime_without_output(self) -> None:
        runner = FakeCommandRunner({("log", "--format=%cd", "-n", "1", "main"): ok("")})
        client = GitClient(REPO, runner=runner)

        with pytest.raises(NotFoundError):
            client.get_reference_datetime("main")


class TestForcePush:
    def test_force_push(self) -> None:
        runner = FakeCommandRunner()
        client = GitClient(REPO, runner=runner, remote="origin")

        client.force_push("abc123", "refs/heads/release")

        assert runner.calls == [["git", "push", "-f", "origin", "abc123:refs/heads/release"]]

    def test_force_push_hash_to_ref(self) -> None:
        runner = FakeCommandRunner()
        client = GitClient(REPO, runner=runner, remote="origin")

        client.force_push_hash_to_ref("abc123", "v2.0.0", "tags")

        assert runner.calls == [["git", "push", "-f", "origin", "abc123:refs/tags/v2.0.0"]]

    def test_non_zero_exit(self) -> None:
        runner = FakeCommandRunner(default=failed(1, stderr="rejected"))
        client = GitClient(REPO, runner=runner, remote="origin")

        with pytest.raises(NonZeroExitError) as exc_info:
            client.force_push("abc", "refs/heads/main")
        assert exc_info.value.operation == "push"


OPERATIONS = [
    pytest.param(lambda c: c.fetch(), id="fetch"),
    pytest.param(lambda c: c.list_remote_refs("heads"), id="list_remote_refs"),
    pytest.param(lambda c: c.list_commits(), id="list_commits"),
    pytest.param(lambda c: c.get_current_branch(), id="get_current_branch"),
    pytest.param(lambda c: c.get_last_commit_on_ref("main"), id="get_last_commit_on_ref"),
    pytest.param(lambda c: c.get_commit_message_body("abc"), id="get_commit_message_body"),
    pytest.param(lambda c: c.get_reference_datetime("main"), id="get_reference_datetime"),
    pytest.param(lambda c: c.force_push("a", "refs/heads/b"), id="force_push"),
]


class TestFailureModes:
    @pytest.mark.parametrize("operation", OPERATIONS)
    def test_non_zero_exit_wins_over_output(self, operation) -> None:
        runner = FakeCommandRunner(default=failed(2, stdout="refs/heads/main\n"))
        client = GitClient(REPO, runner=runner, remote="origin")

        with pytest.raises(NonZeroExitError):
            operation(client)

    @pytest.mark.parametrize("operation", OPERATIONS)
    def test_execution_error(self, operation) -> None:
        runner = FakeCommandRunner(default=not_started())
        client = GitClient(REPO, runner=runner, remote="origin")

        with pytest.raises(GitExecutionError) as exc_info:
            operation(client)
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_execution_error_on_remote_lookup(self) -> None:
        runner = FakeCommandRunner(default=not_started())
        client = GitClient(REPO, runner=runner)

        with pytest.raises(GitExecutionError):
            client.get_remote()

    def test_errors_share_base_class(self) -> None:
        runner = FakeCommandRunner(default=failed(1))
        client = GitClient(REPO, runner=runner, remote="origin")

        with pytest.raises(GitError):
            client.fetch()

    def test_uses_injected_logger(self, caplog: pytest.LogCaptureFixture) -> None:
        runner = FakeCommandRunner(default=not_started())
        custom = logging.getLogger("tests.custom_git_logger")
        client = GitClient(REPO, runner=runner, remote="origin", logger=custom)

        with caplog.at_level(logging.WARNING, logger="tests.custom_git_logger"):
            with pytest.raises(GitExecutionError):
                client.get_current_branch()

        assert any(r.name == "tests.custom_git_logger" for r in caplog.records)
