"""
Test configuration and fixtures for TinyApp.
This centralizes all test setup, making individual tests clean.
"""

import pytest
from fastapi.testclient import TestClient
from main import app
from tinyapp.dependencies import get_state
from tinyapp.models import SessionState
from tinyapp.security.passwords import BcryptPasswordHasher
from tinyapp.state import AppState

# Cheapest bcrypt cost; production uses settings.bcrypt_rounds
TEST_BCRYPT_ROUNDS = 4


@pytest.fixture(scope="function")
def state():
    """
    Fresh application state for each test.
    This ensures tests are isolated and don't affect each other.
    """
    return AppState(hasher=BcryptPasswordHasher(rounds=TEST_BCRYPT_ROUNDS))


@pytest.fixture(scope="function")
def alice(state):
    return state.users.create("alice@example.com", "purple-monkey-dinosaur")


@pytest.fixture(scope="function")
def bob(state):
    return state.users.create("bob@example.com", "dishwasher-funk")


@pytest.fixture(scope="function")
def alice_session(alice):
    return SessionState(user_id=alice.id)


@pytest.fixture(scope="function")
def client(state):
    """
    Create a test client with the state dependency overridden.
    This is the main fixture that tests will use.
    """
    app.dependency_overrides[get_state] = lambda: state

    # Create test client
    with TestClient(app) as test_client:
        yield test_client

    # Clean up overrides
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def other_client(client):
    """A second browser (own cookie jar) against the same state"""
    with TestClient(app) as test_client:
        yield test_client
