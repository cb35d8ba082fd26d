# env vars + constants
import os

NODE_ID = os.getenv("NODE_ID", "nodeX")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))

DEFAULT_CANDIDATES = [
    c.strip()
    for c in os.getenv("DEFAULT_CANDIDATES", "Candidate1,Candidate2,Candidate3").split(",")
    if c.strip()
]
MIN_VOTER_ID_LENGTH = int(os.getenv("MIN_VOTER_ID_LENGTH", "5"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
REMOTE_TIMEOUT = float(os.getenv("REMOTE_TIMEOUT", "2.0"))

# local wall clock, second resolution
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
