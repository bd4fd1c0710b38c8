from collections.abc import Generator
from datetime import date
from pathlib import Path
import sys

import pytest
from fastapi.testclient import TestClient

sys.path.append(str(Path(__file__).resolve().parents[1]))

from vested.main import app
from vested.services.vesting import build_grant


@pytest.fixture()
def client() -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def standard_grant():
    return build_grant(amount=10_000, grant_date=date(2020, 2, 6), cliff_percentage=0.25, cliff=12, length=48)


@pytest.fixture()
def short_grant():
    return build_grant(amount=10_000, grant_date=date(2020, 2, 6), cliff_percentage=0.25, cliff=6, length=12)
