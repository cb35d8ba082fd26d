from __future__ import annotations

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from voteledger.main import create_app
from voteledger.service import VotingService


FIXED_NOW = datetime(2024, 3, 5, 14, 7, 9)


@pytest.fixture
def service():
    return VotingService(clock=lambda: FIXED_NOW)


@pytest.fixture
def client(service):
    with TestClient(create_app(service)) as c:
        yield c
