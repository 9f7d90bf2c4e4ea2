from __future__ import annotations
from dataclasses import dataclass
import logging
import os
import re
import subprocess
from .styles import POWERLINE_FG, Color, Segment

log = logging.getLogger(__name__)

#: Glyph shown before the Git segment's text
BRANCH_GLYPH = "\uE0A0"

#: Shown when the current branch is level with its upstream
IN_SYNC_GLYPH = "≣"

#: Shown when the current branch has no upstream
NO_UPSTREAM_GLYPH = "≢"

#: Background of the Git segment when there are no pending changes
CLEAN_BG = Color.GREEN

#: Background of the Git segment when there are pending changes
DIRTY_BG = Color.YELLOW

#: Number of hex digits of the commit hash shown for a detached ``HEAD``
SHORT_SHA_LEN = 7


@dataclass(frozen=True)
class NoUpstream:
    """The current branch does not have an upstream branch configured"""


@dataclass(frozen=True)
class Divergence:
    #: The number of commits on the branch that are not on its upstream
    ahead: int

    #: The number of commits on the upstream that are not on the branch
    behind: int


Tracking = NoUpstream | Divergence


@dataclass
class Branch:
    name: str
    tracking: Tracking

    def tracking_str(self) -> str:
        """
        Describe the branch's relation to its upstream: a distinct glyph each
        for "no upstream" and "in sync", or else the number of commits ahead
        and/or behind
        """
        if isinstance(self.tracking, NoUpstream):
            return NO_UPSTREAM_GLYPH
        ahead, behind = self.tracking.ahead, self.tracking.behind
        if not ahead and not behind:
            return IN_SYNC_GLYPH
        parts = []
        if ahead:
            parts.append(f"{ahead}↑")
        if behind:
            parts.append(f"{behind}↓")
        return " ".join(parts)


@dataclass
class GitStatus:
    #: The full hash of the commit that ``HEAD`` points to
    sha: str

    #: The currently checked-out branch, or `None` if ``HEAD`` is detached
    branch: Branch | None

    #: The number of entries reported by ``git status``, including untracked
    #: files.  Staged, unstaged, and conflicted changes are all counted alike.
    changes: int

    def tokens(self) -> list[str]:
        """
        Return the pieces of text describing the repository's state: the branch
        name (or the short commit hash if ``HEAD`` is detached), the branch's
        relation to its upstream (if on a branch), and the number of changed
        files (if any)
        """
        if self.branch is not None:
            toks = [self.branch.name, self.branch.tracking_str()]
        else:
            toks = [self.sha[:SHORT_SHA_LEN]]
        if self.changes > 0:
            toks.append(f"±{self.changes}")
        return toks

    def segment(self) -> Segment:
        return Segment(
            text=" ".join([BRANCH_GLYPH, *self.tokens()]),
            fg=POWERLINE_FG,
            bg=DIRTY_BG if self.changes else CLEAN_BG,
        )


def git_status(path: str | os.PathLike[str]) -> GitStatus | None:
    """
    If ``path`` is in a Git repository with a work tree, ``git_status()``
    returns a `GitStatus` instance describing the repository's current state.

    If ``path`` is not in a Git repository, or if Git is not installed, or if
    ``HEAD`` does not point to a commit yet, or if the work tree's status
    cannot be read, ``git_status()`` returns `None`.  Failing to determine the
    current branch's upstream only results in a `NoUpstream` tracking state.
    """

    try:
        git_dir = git("rev-parse", "--git-dir", cwd=path)
    except FileNotFoundError:
        # Git is not installed
        log.debug("git executable not found")
        return None
    if git_dir is None:
        log.debug("%s is not inside a Git repository", path)
        return None

    head = git("rev-parse", "--symbolic-full-name", "HEAD", cwd=path)
    if head is None:
        log.debug("Could not resolve HEAD")
        return None
    if head.startswith("refs/heads/"):
        branch_name: str | None = head[len("refs/heads/") :]
    else:
        branch_name = None

    sha = git("rev-parse", "--verify", "--quiet", "HEAD^{commit}", cwd=path)
    if sha is None or not re.fullmatch(r"[0-9a-f]{40}", sha):
        log.debug("HEAD does not point to a commit: %r", sha)
        return None

    branch: Branch | None
    if branch_name is not None:
        branch = Branch(name=branch_name, tracking=tracking(branch_name, sha, path))
    else:
        branch = None

    # Note: --no-optional-locks keeps `git status` from refreshing the index
    # and thus from fighting with whatever else is running in the repository.
    st = git(
        "--no-optional-locks",
        "status",
        "--porcelain",
        "-z",
        "--untracked-files=all",
        cwd=path,
        strip=False,
    )
    if st is None:
        log.debug("Could not get work tree status")
        return None
    changes = count_entries(st)

    return GitStatus(sha=sha, branch=branch, changes=changes)


def tracking(branch: str, sha: str, path: str | os.PathLike[str]) -> Tracking:
    """
    Determine how far the commit ``sha`` on branch ``branch`` has diverged
    from the branch's upstream.  If the branch has no upstream, or if the
    upstream or the divergence cannot be resolved, return `NoUpstream`.
    """
    upstream = git(
        "for-each-ref", "--format=%(upstream)", f"refs/heads/{branch}", cwd=path
    )
    if not upstream:
        log.debug("Branch %r has no upstream", branch)
        return NoUpstream()
    upstream_sha = git(
        "rev-parse", "--verify", "--quiet", f"{upstream}^{{commit}}", cwd=path
    )
    if upstream_sha is None:
        log.debug("Could not resolve upstream %r", upstream)
        return NoUpstream()
    delta = git(
        "rev-list", "--left-right", "--count", f"{sha}...{upstream_sha}", cwd=path
    )
    if delta is None:
        log.debug("Could not count commits between %s and %s", sha, upstream_sha)
        return NoUpstream()
    try:
        ahead, behind = map(int, delta.split())
    except ValueError:
        log.debug("Unexpected output from `git rev-list --count`: %r", delta)
        return NoUpstream()
    return Divergence(ahead=ahead, behind=behind)


def count_entries(porcelain: str) -> int:
    """
    Count the entries in the output of `git status --porcelain -z`.  Each entry
    is terminated by a NUL; renamed & copied entries are followed by an extra
    NUL-terminated field giving the original path, which is not counted.
    """
    fields = iter(porcelain.split("\0"))
    count = 0
    for entry in fields:
        if not entry:
            continue
        count += 1
        if "R" in entry[:2] or "C" in entry[:2]:
            next(fields, None)
    return count


def git(
    *args: str, cwd: str | os.PathLike[str] | None = None, strip: bool = True
) -> str | None:
    """
    Run a Git command (suppressing stderr) in the directory ``cwd`` and return
    its stdout, with leading & trailing whitespace stripped if ``strip`` is
    true.  If the command fails, return `None`.
    """
    try:
        out = subprocess.run(
            ["git", *args],
            cwd=cwd,
            check=True,
            encoding="utf-8",
            errors="replace",
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
        ).stdout
    except subprocess.CalledProcessError as e:
        log.debug("`git %s` failed with exit code %d", " ".join(args), e.returncode)
        return None
    return out.strip() if strip else out
