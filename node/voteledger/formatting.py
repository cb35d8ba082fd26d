# console rendering for the menu: outcome messages + report tables
from typing import List

from .models import AddOutcome, FraudLogEntry, Report, VoteOutcome

RULE = "-" * 60
BAR_STEP = 5  # one '#' per 5%


def add_message(name: str, outcome: AddOutcome) -> str:
    if outcome is AddOutcome.ADDED:
        return f"Candidate {name} added successfully."
    return f"Candidate {name} already exists."


def vote_message(voter_id: str, candidate: str, outcome: VoteOutcome) -> str:
    if outcome is VoteOutcome.INVALID_VOTER_ID:
        return "Invalid voter ID format."
    if outcome is VoteOutcome.DUPLICATE_VOTE:
        return f"Fraud detected: Voter {voter_id} has already voted."
    if outcome is VoteOutcome.UNKNOWN_CANDIDATE:
        return "Invalid candidate name."
    return f"Vote for {candidate} registered successfully."


def bar(percentage: float) -> str:
    return "#" * int(percentage / BAR_STEP)


def render_stats(report: Report) -> str:
    lines = [
        "",
        "===== VOTING STATISTICS =====",
        f"Total votes cast: {report.total_votes}",
    ]
    if report.no_votes_cast:
        lines.append("No votes have been cast yet.")
        return "\n".join(lines)

    lines += [
        "",
        "Candidate Results:",
        f"{'CANDIDATE':<15}{'VOTES':<10}{'PERCENT':<10}VISUALIZATION",
        RULE,
    ]
    for row in report.results:
        lines.append(f"{row.name:<15}{row.votes:<10}{row.percentage:<10.2f}{bar(row.percentage)}")

    lead = report.leading
    lines += [
        "",
        f"Leading candidate: {lead.name} with {lead.votes} votes ({lead.percentage:.2f}%)",
    ]
    return "\n".join(lines)


def render_fraud_log(entries: List[FraudLogEntry]) -> str:
    lines = ["", "===== FRAUD DETECTION LOGS ====="]
    if not entries:
        lines.append("No fraud attempts detected.")
        return "\n".join(lines)

    lines += [f"{'VOTER ID':<10}{'TIMESTAMP':<25}DETAILS", RULE]
    for e in entries:
        lines.append(f"{e.voter_id:<10}{e.timestamp:<25}{e.details}")
    return "\n".join(lines)
