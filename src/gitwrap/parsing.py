"""Parsing helpers for git command output.

These functions are pure: they take raw stdout text and return structured
values, leaving subprocess handling and error reporting to the client.
"""

from datetime import datetime
from typing import NamedTuple

# Layout of git's default commit date (--format=%cd), e.g. "Mon Jan 2 15:04:05 2006 -0700"
GIT_DATE_FORMAT = "%a %b %d %H:%M:%S %Y %z"


class RemoteRefs(NamedTuple):
    """Reference names parsed from ls-remote output.

    Attributes:
        names: Short reference names in the order git emitted them
        skipped: Non-blank lines that did not match the expected format
    """

    names: list[str]
    skipped: list[str]


def parse_remote_names(output: str) -> list[str]:
    """Split `git remote` output into remote names.

    Args:
        output: Raw stdout of `git remote`

    Returns:
        Trimmed, non-empty remote names in output order
    """
    return [line.strip() for line in output.strip().split("\n") if line.strip()]


def select_remote(names: list[str]) -> str | None:
    """Pick the remote to use from a list of configured remotes.

    When several remotes exist the last one listed wins.

    Returns:
        The selected remote name, or None if the list is empty
    """
    if not names:
        return None
    return names[-1]


def build_ref_path(ref_type: str, ref: str) -> str:
    """Build a fully qualified reference path.

    Example:
        >>> build_ref_path("heads", "main")
        'refs/heads/main'
    """
    return f"refs/{ref_type}/{ref}"


def parse_remote_refs(output: str, ref_type: str) -> RemoteRefs:
    """Parse `git ls-remote --<ref_type>` output into short reference names.

    Each line is split on the literal "refs/<ref_type>/" marker. A line that
    does not split into exactly two parts is reported in `skipped`.

    Args:
        output: Raw stdout of `git ls-remote`
        ref_type: Reference category such as "heads" or "tags"

    Returns:
        RemoteRefs with parsed names and skipped lines
    """
    marker = f"refs/{ref_type}/"
    names: list[str] = []
    skipped: list[str] = []

    for line in output.split("\n"):
        if not line.strip():
            continue
        parts = line.split(marker)
        if len(parts) != 2:
            skipped.append(line)
            continue
        names.append(parts[1])

    return RemoteRefs(names=names, skipped=skipped)


def parse_commit_hashes(output: str) -> list[str]:
    """Parse `git log --pretty=format:"%H"` output into commit hashes.

    Quote characters are removed from each line, and lines left empty are dropped.
    """
    hashes: list[str] = []
    for line in output.split("\n"):
        commit_hash = line.replace('"', "").strip()
        if commit_hash:
            hashes.append(commit_hash)
    return hashes


def parse_commit_date(text: str) -> datetime | None:
    """Parse a git commit date in the default format.

    Args:
        text: Date text such as "Mon Jan 2 15:04:05 2021 +0000"

    Returns:
        Timezone-aware datetime, or None if the text does not match
    """
    try:
        return datetime.strptime(text.strip(), GIT_DATE_FORMAT)
    except ValueError:
        return None
