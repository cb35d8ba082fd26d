"""
Command line entry point.

    voteledger                      interactive menu on an in-process ledger
    voteledger menu --remote URL    same menu, driving a running node
    voteledger serve --port 8000    run a node
"""
import argparse
import logging
from typing import Callable, Optional, Sequence

import httpx

from . import config
from .formatting import add_message, render_fraud_log, render_stats, vote_message

logger = logging.getLogger(__name__)

MENU = """
===== VOTING SYSTEM MENU =====
1. Cast Vote
2. Add Candidate
3. View Statistics
4. View Fraud Logs
5. Reset System
6. Exit"""


LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def read_token(input_fn: Callable[[str], str], prompt: str) -> str:
    # blank lines are skipped, the way a whitespace-delimited read would
    while True:
        value = input_fn(prompt).strip()
        if value:
            return value


def run_menu(
    service,
    input_fn: Optional[Callable[[str], str]] = None,
    print_fn: Optional[Callable[..., None]] = None,
) -> None:
    """
    Read menu choices until Exit (or end of input) and call the service.
    `service` is a VotingService or a RemoteVotingService; an unreachable
    node is reported and the menu keeps running.
    """
    input_fn = input_fn or input
    print_fn = print_fn or print
    while True:
        print_fn(MENU)
        try:
            choice = input_fn("Enter your choice: ").strip()
            if choice == "1":
                voter_id = read_token(input_fn, "Enter your Voter ID: ")
                candidate = read_token(input_fn, "Enter candidate name: ")
                outcome = service.cast_vote(voter_id, candidate)
                print_fn(vote_message(voter_id, candidate, outcome))
            elif choice == "2":
                name = read_token(input_fn, "Enter new candidate name: ")
                print_fn(add_message(name, service.add_candidate(name)))
            elif choice == "3":
                print_fn(render_stats(service.report()))
            elif choice == "4":
                print_fn(render_fraud_log(service.fraud_log_entries()))
            elif choice == "5":
                service.reset()
                print_fn("Voting system reset successfully.")
            elif choice == "6":
                print_fn("Thank you for using the Voting System.")
                return
            else:
                print_fn("Invalid choice. Please try again.")
        except httpx.HTTPError as e:
            logger.warning("node request failed: %s", e)
            print_fn(f"Error: voting node request failed ({e.__class__.__name__}).")
        except EOFError:
            print_fn("")
            return


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="voteledger", description="In-memory voting ledger with duplicate-vote detection")
    ap.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        type=str.upper,
        choices=LOG_LEVELS,
        help="logging level (default: %(default)s)",
    )
    sub = ap.add_subparsers(dest="command")

    menu = sub.add_parser("menu", help="interactive text menu (default)")
    menu.add_argument("--remote", default=None, help="base URL of a running node, e.g. http://localhost:8000")

    serve = sub.add_parser("serve", help="run an HTTP node")
    serve.add_argument("--host", default=config.HOST)
    serve.add_argument("--port", type=int, default=config.PORT)
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "serve":
        import uvicorn

        logger.info("starting node %s on %s:%d", config.NODE_ID, args.host, args.port)
        uvicorn.run("voteledger.main:create_app", factory=True, host=args.host, port=args.port, log_level="info")
        return 0

    remote = getattr(args, "remote", None)
    if remote:
        from .client import RemoteVotingService

        with RemoteVotingService(remote) as service:
            run_menu(service)
    else:
        from .service import VotingService

        run_menu(VotingService())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
