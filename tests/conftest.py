import os

# Configuration is read at import time, so it must be in place before the
# application modules are imported.
os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET_KEY"] = "invoicer-test-signing-key-0123456789abcdef"
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from invoicer.database import Base, get_async_db_session  # noqa: E402
from invoicer.models import Address, Client, Invoice, Item, User  # noqa: E402
from main import app  # noqa: E402

# Speed up password hashing for tests by reducing bcrypt rounds
from invoicer.security import password as password_module  # noqa: E402

password_module.PasswordSecurity.BCRYPT_ROUNDS = 4

TEST_PASSWORD = "correct-horse-battery"


@pytest.fixture(scope="session")
def test_engine():
  """In-memory SQLite engine shared by every connection of the test run."""
  engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
  )
  Base.metadata.create_all(bind=engine)
  yield engine
  engine.dispose()


@pytest.fixture
def test_db(test_engine):
  """Database session for one test; every table is emptied afterwards."""
  TestingSessionLocal = sessionmaker(
    autocommit=False, autoflush=False, bind=test_engine
  )
  db = TestingSessionLocal()
  yield db
  db.rollback()
  # Delete in reverse dependency order
  for model in (Item, Invoice, Client, Address, User):
    db.query(model).delete()
  db.commit()
  db.close()


@pytest.fixture
def client(test_db):
  """Create a test client bound to the test database."""

  async def override_get_async_db():
    yield test_db

  app.dependency_overrides[get_async_db_session] = override_get_async_db

  yield TestClient(app)

  app.dependency_overrides = {}


@pytest.fixture
def make_user(test_db):
  """Factory for users with the shared test password."""
  from invoicer.security.password import PasswordSecurity

  def _make_user(username: str = "alice_tester") -> User:
    return User.create(
      username, PasswordSecurity.hash_password(TEST_PASSWORD), test_db
    )

  return _make_user


@pytest.fixture
def signup(client):
  """Register a user through the API and return the response body."""

  def _signup(username: str = "alice_tester", password: str = TEST_PASSWORD) -> dict:
    response = client.post(
      "/api/auth/signup", json={"username": username, "password": password}
    )
    assert response.status_code == 201, response.text
    return response.json()

  return _signup


@pytest.fixture
def auth_headers(signup):
  body = signup("alice_tester")
  return {"Authorization": f"Bearer {body['token']}"}


@pytest.fixture
def other_auth_headers(signup):
  body = signup("bob_tester")
  return {"Authorization": f"Bearer {body['token']}"}


def build_invoice_payload(**overrides) -> dict:
  """A valid invoice creation body."""
  payload = {
    "date": 1700000000000,
    "description": "Website redesign",
    "address": {
      "street": "1 Main St",
      "city": "Springfield",
      "country": "US",
      "post_code": "12345",
    },
    "client": {
      "name": "Acme Corp",
      "email": "billing@acme.example.com",
      "address": {
        "street": "99 Market St",
        "city": "Shelbyville",
        "country": "US",
        "post_code": "54321",
      },
    },
    "items": [
      {"name": "Design", "price": 1200.0, "quantity": 1},
      {"name": "Hosting", "price": 25.5, "quantity": 12},
    ],
  }
  payload.update(overrides)
  return payload


@pytest.fixture
def invoice_payload():
  return build_invoice_payload()


@pytest.fixture
def created_invoice(client, auth_headers, invoice_payload):
  """An invoice created through the API, as returned by the create endpoint."""
  response = client.post("/api/invoices", json=invoice_payload, headers=auth_headers)
  assert response.status_code == 201, response.text
  return response.json()
