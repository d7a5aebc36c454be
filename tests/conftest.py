import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool

from main import app
from scrimfinder.config import SESSION_COOKIE_NAME
from scrimfinder.database import get_session
from scrimfinder.models import User, UserUpsert
from scrimfinder.services.auth import create_session

# Create in-memory database for testing
TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


@pytest.fixture(name="session")
def session_fixture():
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="client")
def client_fixture(session: Session):
    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture(name="make_user")
def make_user_fixture(session: Session):
    """Insert a user row; returns the User."""
    def _make_user(user_id: str = "user-1", email: str = None, first_name: str = "Test") -> User:
        user = User(
            id=user_id,
            email=email or f"{user_id}@example.com",
            first_name=first_name,
            last_name="Player"
        )
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    return _make_user


@pytest.fixture(name="login_as")
def login_as_fixture(client: TestClient, session: Session):
    """Start a session for the user and attach its cookie to the client."""
    def _login_as(user: User) -> str:
        claims = UserUpsert(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            profile_image_url=user.profile_image_url
        )
        token = create_session(session, claims).sid
        client.cookies.set(SESSION_COOKIE_NAME, token)
        return token

    return _login_as


@pytest.fixture(name="user_token")
def user_token_fixture(make_user, login_as):
    """Create the default test user and log the client in as them."""
    return login_as(make_user())


@pytest.fixture(name="make_team")
def make_team_fixture(client: TestClient):
    """Create a team through the API as whoever is logged in."""
    def _make_team(name: str = "Night Owls", region: str = "APAC", tier: str = "Gold") -> dict:
        response = client.post("/api/teams", json={"name": name, "region": region, "tier": tier})
        assert response.status_code == 201
        return response.json()

    return _make_team
