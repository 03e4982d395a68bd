"""Compilation of only-matching-filter search terms (core domain)."""

from __future__ import annotations

from typing import Iterable, List

from core.models import RepoContext

SCOPE_QUALIFIERS = ("repo:", "owner:", "org:", "user:")
OPEN_QUALIFIER = "is:open"


def has_scope_qualifier(term: str) -> bool:
    """Return True when the term already limits itself to a repo/owner/org/user."""

    return any(qualifier in term for qualifier in SCOPE_QUALIFIERS)


def compile_filter_term(term: str, repo: RepoContext) -> str:
    """Return ``term`` scoped to ``repo`` and restricted to open items.

    Qualifiers the term already carries are left alone, so compiling an
    already compiled term is a no-op.
    """

    compiled = term
    if not has_scope_qualifier(compiled):
        compiled = f"repo:{repo.full_name} {compiled}".rstrip()
    if OPEN_QUALIFIER not in compiled:
        compiled = f"{compiled} {OPEN_QUALIFIER}"
    return compiled


def compile_filter_terms(terms: Iterable[str], repo: RepoContext) -> List[str]:
    """Compile every term, keeping order and count."""

    return [compile_filter_term(term, repo) for term in terms]
