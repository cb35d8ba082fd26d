from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request, Response

from .config import NODE_ID
from .models import AddOutcome, CandidateIn, CandidatesOut, FraudLogOut, Report, VoteIn, VoteOutcome
from .service import VotingService

router = APIRouter()

# rejected votes -> (status code, message shown to the voter)
REJECTIONS = {
    VoteOutcome.INVALID_VOTER_ID: (422, "Invalid voter ID format."),
    VoteOutcome.DUPLICATE_VOTE: (409, "Voter has already voted."),
    VoteOutcome.UNKNOWN_CANDIDATE: (404, "Invalid candidate name."),
}


def get_service(request: Request) -> VotingService:
    return request.app.state.service


@router.get("/")
def root():
    return {"ok": True, "node": NODE_ID}


@router.post("/candidates", status_code=201)
def add_candidate(
    c: CandidateIn,
    response: Response,
    service: VotingService = Depends(get_service),
):
    outcome = service.add_candidate(c.name)
    if outcome is AddOutcome.ALREADY_EXISTS:
        response.status_code = 200
    return {
        "ok": outcome is AddOutcome.ADDED,
        "outcome": outcome.value,
        "candidate": c.name,
        "node": NODE_ID,
    }


@router.get("/candidates")
def list_candidates(service: VotingService = Depends(get_service)) -> CandidatesOut:
    return CandidatesOut(candidates=service.counts())


@router.post("/vote")
def vote(v: VoteIn, service: VotingService = Depends(get_service)):
    outcome = service.cast_vote(v.voter_id, v.candidate)
    if outcome in REJECTIONS:
        status_code, message = REJECTIONS[outcome]
        raise HTTPException(
            status_code=status_code,
            detail={"outcome": outcome.value, "message": message},
        )
    return {"ok": True, "outcome": outcome.value, "candidate": v.candidate, "node": NODE_ID}


@router.get("/results")
def results(service: VotingService = Depends(get_service)) -> Report:
    return service.report()


@router.get("/fraud-log")
def fraud_log(service: VotingService = Depends(get_service)) -> FraudLogOut:
    return FraudLogOut(entries=service.fraud_log_entries())


@router.post("/reset")
def reset(service: VotingService = Depends(get_service)):
    service.reset()
    return {"ok": True, "candidates": list(service.default_candidates), "node": NODE_ID}


def create_app(service: Optional[VotingService] = None) -> FastAPI:
    """
    Build a node around its own VotingService. Each app owns exactly one
    service; tests pass their own to start from a known state.
    """
    app = FastAPI(title=f"Voting Ledger Node ({NODE_ID})")
    app.state.service = service if service is not None else VotingService()
    app.include_router(router)
    return app
