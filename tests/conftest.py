import pytest
from fastapi.testclient import TestClient
from passlib.context import CryptContext
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from todo_service.clients.weather import get_weather_client
from todo_service.core.database import get_db, init_db
from todo_service.main import app
from todo_service.utils.security import PasswordEncoder

from .weather_stubs import make_weather_client, weather_ok


@pytest.fixture
def engine():
    # One shared in-memory database per test
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()

@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)

@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()

@pytest.fixture
def statements(engine):
    """SQL statements sent to the database while the test runs."""
    captured = []

    def before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
        captured.append(statement)

    event.listen(engine, "before_cursor_execute", before_cursor_execute)
    yield captured
    event.remove(engine, "before_cursor_execute", before_cursor_execute)

@pytest.fixture
def fast_encoder():
    return PasswordEncoder(CryptContext(schemes=["bcrypt"], bcrypt__rounds=4))

@pytest.fixture
def set_weather():
    """Replace the weather service answer for API calls."""
    def _set(handler):
        app.dependency_overrides[get_weather_client] = lambda: make_weather_client(handler)
    return _set

@pytest.fixture
def client(session_factory, set_weather):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    set_weather(weather_ok)
    yield TestClient(app)
    app.dependency_overrides.clear()
