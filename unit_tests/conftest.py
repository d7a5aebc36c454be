import pytest
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool

from scrimfinder.models import User

# Create an in-memory SQLite engine for tests
engine = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


@pytest.fixture(name="session")
def session_fixture():
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="owner")
def owner_fixture(session: Session) -> User:
    user = User(id="owner-1", email="owner@example.com", first_name="Olive")
    session.add(user)
    session.commit()
    session.refresh(user)
    return user
