"""Core domain models.

These dataclasses are shared across the core and adapters to avoid tight
coupling to the GitHub Actions runtime or any API client types.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.errors import OptionsError


@dataclass(frozen=True)
class RepoContext:
    """Owner and name of the repository the run operates on."""

    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    @classmethod
    def from_full_name(cls, full_name: str) -> "RepoContext":
        """Build a context from an ``owner/repo`` string."""

        owner, sep, repo = full_name.strip().partition("/")
        if not sep or not owner or not repo:
            raise OptionsError(f'Repository "{full_name}" is not in owner/repo form')
        return cls(owner=owner, repo=repo)


@dataclass(frozen=True)
class RateLimit:
    """Snapshot of the API rate limit reported by the issue processor."""

    limit: int
    used: int
    remaining: int
    reset: str
