"""Global test fixtures."""

import mongomock
import pytest
from fastapi.testclient import TestClient

from blood_drive.api.v1.dependencies import get_donation_service
from blood_drive.application.services.donation_service import DonationService
from blood_drive.infrastructure.db.mongo_donor_repository import MongoDonorRepository
from blood_drive.infrastructure.db.mongo_stats_repository import MongoStatsRepository
from blood_drive.main import create_application

@pytest.fixture
def database():
    """A fresh in-memory MongoDB database per test."""
    client = mongomock.MongoClient(tz_aware=True)
    yield client["blood_drive_test"]
    client.close()


@pytest.fixture
def donor_repository(database) -> MongoDonorRepository:
    repository = MongoDonorRepository(database["donors"])
    repository.ensure_indexes()
    return repository


@pytest.fixture
def stats_repository(database) -> MongoStatsRepository:
    repository = MongoStatsRepository(database["stats"])
    repository.ensure_indexes()
    return repository


@pytest.fixture
def donation_service(donor_repository, stats_repository) -> DonationService:
    return DonationService(donor_repository=donor_repository, stats_repository=stats_repository)


@pytest.fixture
def app(donation_service):
    """App wired to the in-memory store; startup hooks are not run."""
    application = create_application()
    application.dependency_overrides[get_donation_service] = lambda: donation_service
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def valid_submission() -> dict:
    return {
        "fullName": "Jane Doe",
        "bloodGroup": "O-",
        "age": 30,
        "year": "SY",
    }
