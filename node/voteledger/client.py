# httpx client for a running node, same surface as VotingService
from typing import List, Optional, Union

import httpx

from .config import REMOTE_TIMEOUT
from .models import AddOutcome, FraudLogEntry, FraudLogOut, Report, VoteOutcome


class RemoteVotingService:
    """
    Drives a voting node over HTTP. Rejections come back as the same
    outcome values the in-process service returns; any other non-2xx
    status is raised as httpx.HTTPStatusError.
    """

    def __init__(self, node: Union[str, httpx.Client], timeout: float = REMOTE_TIMEOUT) -> None:
        if isinstance(node, httpx.Client):
            self._client = node
            self._owns_client = False
        else:
            self._client = httpx.Client(base_url=node.rstrip("/"), timeout=timeout)
            self._owns_client = True

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "RemoteVotingService":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def add_candidate(self, name: str) -> AddOutcome:
        resp = self._client.post("/candidates", json={"name": name})
        resp.raise_for_status()
        return AddOutcome(resp.json()["outcome"])

    def cast_vote(self, voter_id: str, candidate: str) -> VoteOutcome:
        resp = self._client.post("/vote", json={"voter_id": voter_id, "candidate": candidate})
        if resp.is_success:
            return VoteOutcome(resp.json()["outcome"])

        outcome = _rejection_outcome(resp)
        if outcome is None:
            resp.raise_for_status()
        return outcome

    def report(self) -> Report:
        resp = self._client.get("/results")
        resp.raise_for_status()
        return Report.model_validate(resp.json())

    def fraud_log_entries(self) -> List[FraudLogEntry]:
        resp = self._client.get("/fraud-log")
        resp.raise_for_status()
        return FraudLogOut.model_validate(resp.json()).entries

    def reset(self) -> None:
        self._client.post("/reset").raise_for_status()


def _rejection_outcome(resp: httpx.Response) -> Optional[VoteOutcome]:
    try:
        body = resp.json()
    except ValueError:
        return None
    detail = body.get("detail") if isinstance(body, dict) else None
    # request validation errors carry a list, not an outcome
    if not isinstance(detail, dict) or "outcome" not in detail:
        return None
    return VoteOutcome(detail["outcome"])
