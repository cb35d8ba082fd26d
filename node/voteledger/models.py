from enum import Enum
from typing import Dict, List, Optional
from pydantic import BaseModel, Field, computed_field


class AddOutcome(str, Enum):
    ADDED = "added"
    ALREADY_EXISTS = "already_exists"


class VoteOutcome(str, Enum):
    ACCEPTED = "accepted"
    INVALID_VOTER_ID = "invalid_voter_id"
    DUPLICATE_VOTE = "duplicate_vote"
    UNKNOWN_CANDIDATE = "unknown_candidate"


class CandidateIn(BaseModel):
    name: str = Field(..., examples=["Candidate4"])


class VoteIn(BaseModel):
    voter_id: str = Field(..., examples=["voter001"])
    candidate: str = Field(..., examples=["Candidate1"])


class FraudLogEntry(BaseModel):
    """
    One rejected duplicate-vote attempt. Entries are never modified once logged.
    """
    model_config = {"frozen": True}

    voter_id: str
    timestamp: str
    details: str


class CandidateResult(BaseModel):
    name: str
    votes: int
    # None while no votes have been cast
    percentage: Optional[float] = None


class Report(BaseModel):
    """
    Read-only snapshot of the tally:
    results are ordered by votes descending, then name ascending.
    """
    total_votes: int
    results: List[CandidateResult]
    leading: Optional[CandidateResult] = None

    @computed_field
    @property
    def no_votes_cast(self) -> bool:
        return self.total_votes == 0


class CandidatesOut(BaseModel):
    candidates: Dict[str, int]


class FraudLogOut(BaseModel):
    entries: List[FraudLogEntry]
