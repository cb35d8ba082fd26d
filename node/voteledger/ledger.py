# in-memory stores: candidate counters, voters who voted, fraud attempts
from datetime import datetime
from typing import Callable, Dict, List, Optional, Set

from .config import TIMESTAMP_FORMAT
from .models import AddOutcome, FraudLogEntry


class Ledger:
    """
    Candidate registry with one non-negative vote counter per candidate.
    Names are case-sensitive and are never validated for content.
    """

    def __init__(self) -> None:
        self._counts: Dict[str, int] = {}

    def add(self, name: str) -> AddOutcome:
        if name in self._counts:
            return AddOutcome.ALREADY_EXISTS
        self._counts[name] = 0
        return AddOutcome.ADDED

    def increment(self, name: str) -> int:
        # KeyError on unknown names: callers check membership first
        self._counts[name] += 1
        return self._counts[name]

    def votes_for(self, name: str) -> Optional[int]:
        return self._counts.get(name)

    def snapshot(self) -> Dict[str, int]:
        return dict(self._counts)

    def clear(self) -> None:
        self._counts.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._counts

    def __len__(self) -> int:
        return len(self._counts)


class VoterRegistry:
    """
    Voter IDs that have successfully voted. Presence means "has voted";
    the chosen candidate is not recorded.
    """

    def __init__(self) -> None:
        self._voters: Set[str] = set()

    def register(self, voter_id: str) -> None:
        self._voters.add(voter_id)

    def clear(self) -> None:
        self._voters.clear()

    def __contains__(self, voter_id: object) -> bool:
        return voter_id in self._voters

    def __len__(self) -> int:
        return len(self._voters)


class FraudLog:
    """
    Append-only record of rejected duplicate-vote attempts, oldest first.
    `clock` returns the local wall-clock time of an attempt.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now) -> None:
        self._clock = clock
        self._entries: List[FraudLogEntry] = []

    def record(self, voter_id: str, candidate: str) -> FraudLogEntry:
        entry = FraudLogEntry(
            voter_id=voter_id,
            timestamp=self._clock().strftime(TIMESTAMP_FORMAT),
            details=f"Attempted duplicate vote for {candidate}",
        )
        self._entries.append(entry)
        return entry

    def entries(self) -> List[FraudLogEntry]:
        return list(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
