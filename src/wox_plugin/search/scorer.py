"""
Fuzzy relevance scoring of a candidate string against a query.
"""

from __future__ import annotations

import re


_ATOM_RE = re.compile(r"[A-Za-z0-9]+")


def capital_initials(candidate: str) -> str:
    """Upper-case letters and digits of ``candidate``, in order ("GitHub" -> "GH")."""
    return "".join(ch for ch in candidate if ch.isupper() or ch.isdigit())


def split_atoms(candidate: str) -> list[str]:
    """Lower-cased ASCII alphanumeric runs of ``candidate``."""
    return [atom.lower() for atom in _ATOM_RE.findall(candidate)]


def score(query: str, candidate: str) -> float:
    """
    Score how well ``candidate`` matches ``query``.

    Rules are tried in order and the first hit wins:

    1) every query character must occur in the candidate, else 0
    2) candidate starts with the query
    3) capital/digit initials start with the query ("gh" ~ "GitHub")
    4) query equals one of the alphanumeric atoms
    5) atom initials start with (or contain) the query ("oth" ~ "one two three")
    6) query is a substring of the candidate

    Longer matched text relative to the query lowers the score. Lengths are
    code point counts. An empty query scores 0.
    """
    query = query.lower()
    if not query:
        return 0.0

    lowered = candidate.lower()
    if not set(query) <= set(lowered):
        return 0.0

    query_len = len(query)

    if lowered.startswith(query):
        return 100.0 - len(candidate) / query_len

    initials = capital_initials(candidate)
    if initials.lower().startswith(query):
        return 100.0 - len(initials) / query_len

    atoms = split_atoms(candidate)
    if query in atoms:
        return 100.0 - len(candidate) / query_len

    atom_initials = "".join(atom[0] for atom in atoms)
    if atom_initials.startswith(query):
        return 100.0 - len(atom_initials) / query_len
    if query in atom_initials:
        return 95.0 - len(atom_initials) / query_len

    if query in lowered:
        return 90.0 - len(candidate) / query_len

    return 0.0
