# read path: pure projections over a {candidate: votes} mapping
from typing import List, Mapping, Optional, Tuple

from .models import CandidateResult, Report


def total_votes(counts: Mapping[str, int]) -> int:
    return sum(counts.values())


def results(counts: Mapping[str, int]) -> List[Tuple[str, int]]:
    """
    Candidates ordered by votes descending; ties go to the lexicographically
    smaller name so the order never depends on dict insertion.
    """
    return sorted(counts.items(), key=lambda item: (-item[1], item[0]))


def leading_candidate(counts: Mapping[str, int]) -> Optional[Tuple[str, int]]:
    """
    Candidate with the most votes, or None while nothing has been cast.
    """
    if total_votes(counts) == 0:
        return None
    return results(counts)[0]


def percentage(count: int, total: int) -> float:
    if total <= 0:
        raise ValueError("percentage is undefined when no votes have been cast")
    return count / total * 100


def build_report(counts: Mapping[str, int]) -> Report:
    total = total_votes(counts)
    rows = [
        CandidateResult(
            name=name,
            votes=votes,
            percentage=percentage(votes, total) if total else None,
        )
        for name, votes in results(counts)
    ]
    return Report(total_votes=total, results=rows, leading=rows[0] if total else None)
