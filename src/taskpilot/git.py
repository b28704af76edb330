"""Git-backed storage: the board document lives on its own branch.

Saves write blob, tree and commit objects directly and move the branch ref,
so the working tree and index are never touched.
"""

import json
import logging
import subprocess
from pathlib import Path
from typing import Any

from git import InvalidGitRepositoryError, NoSuchPathError, Repo
from git.objects import Blob, Tree

from taskpilot.config import BRANCH_NAME, STORAGE_KEY
from taskpilot.errors import StorageError

logger = logging.getLogger(__name__)


def _tree_get(tree: Tree, name: str) -> Blob | Tree | None:
    """Get an item from a tree by name, returning None if not found."""
    try:
        return tree[name]
    except KeyError:
        return None


def _git(repo_path: Path, args: list[str], input: str | None = None) -> str:
    """Run a git command and return stdout."""
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=repo_path,
            input=input.encode("utf-8") if input is not None else None,
            capture_output=True,
            check=True,
        )
    except subprocess.CalledProcessError as e:
        stderr = e.stderr.decode("utf-8", "replace").strip()
        raise StorageError(f"git {args[0]} failed: {stderr}")
    return result.stdout.decode("utf-8").strip()


def _get_ref(repo_path: Path, ref: str) -> str | None:
    """Get the commit hash for any ref, or None if it doesn't exist."""
    result = subprocess.run(
        ["git", "rev-parse", "--verify", "--quiet", ref],
        cwd=repo_path,
        capture_output=True,
    )
    if result.returncode != 0:
        return None
    return result.stdout.decode("utf-8").strip()


class GitStorage:
    """Stores the document as <key>.json at the tip of a branch."""

    def __init__(self, repo_path: str | Path, key: str = STORAGE_KEY, branch: str = BRANCH_NAME):
        self.repo_path = Path(repo_path)
        self.key = key
        self.branch = branch

    @property
    def filename(self) -> str:
        return f"{self.key}.json"

    def _repo(self) -> Repo:
        try:
            return Repo(self.repo_path)
        except (InvalidGitRepositoryError, NoSuchPathError):
            raise StorageError(f"{self.repo_path} is not a git repository")

    def load(self) -> Any | None:
        repo = self._repo()
        if _get_ref(self.repo_path, f"refs/heads/{self.branch}") is None:
            logger.debug("branch %s not found in %s", self.branch, self.repo_path)
            return None
        blob = _tree_get(repo.commit(self.branch).tree, self.filename)
        if not isinstance(blob, Blob):
            return None
        text = blob.data_stream.read().decode("utf-8")
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise StorageError(f"{self.branch}:{self.filename}: invalid JSON: {e}")

    def save(self, document: Any, message: str = "Update boards") -> str:
        """Commit the document to the branch. Returns the new commit hash."""
        self._repo()
        parent = _get_ref(self.repo_path, f"refs/heads/{self.branch}")
        content = json.dumps(document, indent=2) + "\n"
        blob = _git(self.repo_path, ["hash-object", "-w", "--stdin"], input=content)
        entries = [f"100644 blob {blob}\t{self.filename}"]
        if parent:
            listing = _git(self.repo_path, ["ls-tree", parent])
            entries += [line for line in listing.splitlines() if line and not line.endswith(f"\t{self.filename}")]
        tree = _git(self.repo_path, ["mktree"], input="\n".join(entries) + "\n")
        parent_args = ["-p", parent] if parent else []
        commit = _git(self.repo_path, ["commit-tree", tree, *parent_args, "-m", message])
        ref_args = [parent] if parent else []
        _git(self.repo_path, ["update-ref", f"refs/heads/{self.branch}", commit, *ref_args])
        logger.debug("committed %s to %s (%s)", self.filename, self.branch, commit[:7])
        return commit
