# voting service: ledger + voter registry + fraud log behind one lock
import logging
import threading
from datetime import datetime
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from . import report as projections
from .config import DEFAULT_CANDIDATES, MIN_VOTER_ID_LENGTH
from .ledger import FraudLog, Ledger, VoterRegistry
from .models import AddOutcome, FraudLogEntry, Report, VoteOutcome

logger = logging.getLogger(__name__)


def is_valid_voter_id(voter_id: str) -> bool:
    """
    Format check only: non-empty and at least MIN_VOTER_ID_LENGTH characters.
    """
    return bool(voter_id) and len(voter_id) >= MIN_VOTER_ID_LENGTH


class VotingService:
    """
    Owns the three stores and is the only thing that mutates them.

    Every operation takes the same lock, so a node serving requests from
    several threads sees cast_vote's membership check, registry insert and
    counter increment as a single step.
    """

    def __init__(
        self,
        default_candidates: Optional[Iterable[str]] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.default_candidates: Tuple[str, ...] = tuple(
            DEFAULT_CANDIDATES if default_candidates is None else default_candidates
        )
        self.ledger = Ledger()
        self.voters = VoterRegistry()
        self.fraud_log = FraudLog(clock=clock)
        self._lock = threading.RLock()
        self._seed()

    def _seed(self) -> None:
        for name in self.default_candidates:
            self.ledger.add(name)

    def add_candidate(self, name: str) -> AddOutcome:
        with self._lock:
            outcome = self.ledger.add(name)
        if outcome is AddOutcome.ADDED:
            logger.info("candidate %r added", name)
        else:
            logger.info("candidate %r already exists", name)
        return outcome

    def cast_vote(self, voter_id: str, candidate: str) -> VoteOutcome:
        if not is_valid_voter_id(voter_id):
            logger.info("rejected vote: invalid voter id %r", voter_id)
            return VoteOutcome.INVALID_VOTER_ID

        with self._lock:
            # duplicate check precedes the candidate check, so a repeat voter
            # naming an unknown candidate is still logged as fraud
            if voter_id in self.voters:
                entry = self.fraud_log.record(voter_id, candidate)
                logger.warning(
                    "duplicate vote by %s at %s: %s",
                    entry.voter_id, entry.timestamp, entry.details,
                )
                return VoteOutcome.DUPLICATE_VOTE

            if candidate not in self.ledger:
                logger.info("rejected vote by %s: unknown candidate %r", voter_id, candidate)
                return VoteOutcome.UNKNOWN_CANDIDATE

            self.voters.register(voter_id)
            self.ledger.increment(candidate)

        logger.info("vote for %r registered", candidate)
        return VoteOutcome.ACCEPTED

    def reset(self) -> None:
        with self._lock:
            self.ledger.clear()
            self.voters.clear()
            self.fraud_log.clear()
            self._seed()
        logger.info("voting system reset to %s", list(self.default_candidates))

    # ----------- read path -----------

    def counts(self) -> Dict[str, int]:
        with self._lock:
            return self.ledger.snapshot()

    def total_votes(self) -> int:
        return projections.total_votes(self.counts())

    def results(self) -> List[Tuple[str, int]]:
        return projections.results(self.counts())

    def leading_candidate(self) -> Optional[Tuple[str, int]]:
        return projections.leading_candidate(self.counts())

    def report(self) -> Report:
        return projections.build_report(self.counts())

    def fraud_log_entries(self) -> List[FraudLogEntry]:
        with self._lock:
            return self.fraud_log.entries()
