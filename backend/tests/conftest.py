# backend/tests/conftest.py
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database.session import Base, get_db
from main import create_app
from models import User, Product, Order, OrderProduct
from tests.fakes import InMemoryStore


# ---------- in-memory fakes (service tests) ----------

@pytest.fixture
def store():
    s = InMemoryStore()
    s.add_user(id=1, name="Mario", email="mario@example.com", role="CLIENT")
    s.add_user(id=3, name="Giulia", email="giulia@example.com", role="EMPLOYEE")
    s.add_user(id=9, name="Anna", email="anna@farm.example.com", role="FARMER")
    s.add_user(id=10, name="Bruno", email="bruno@farm.example.com", role="FARMER")
    s.add_product(id=5, producer_id=9, name="Apples", price=2.5, quantity=50)
    s.add_product(id=6, producer_id=9, name="Pears", price=3.0, quantity=20)
    s.add_product(id=7, producer_id=10, name="Eggs", price=0.4, quantity=120, unit_of_measure="unit")
    return s


# ---------- sqlite-backed app (route tests) ----------

@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def seeded(db_session):
    db = db_session
    db.add_all([
        User(id=1, name="Mario", email="mario@example.com", role="CLIENT"),
        User(id=3, name="Giulia", email="giulia@example.com", role="EMPLOYEE"),
        User(id=9, name="Anna", email="anna@farm.example.com", role="FARMER"),
        User(id=10, name="Bruno", email="bruno@farm.example.com", role="FARMER"),
    ])
    db.add_all([
        Product(id=5, producer_id=9, name="Apples", type="FRUIT", unit_of_measure="kg", quantity=50, price=2.5),
        Product(id=6, producer_id=9, name="Pears", type="FRUIT", unit_of_measure="kg", quantity=20, price=3.0),
        Product(id=7, producer_id=10, name="Eggs", type="DAIRY", unit_of_measure="unit", quantity=120, price=0.4),
    ])
    db.add_all([
        Order(id=1, client_id=1, employee_id=3, status="CREATED"),
        Order(id=2, client_id=1, employee_id=3, status="PENDING CANCELATION"),
    ])
    db.flush()
    db.add_all([
        OrderProduct(order_id=1, product_id=5, user_id=9, amount=2, price=2.5),
        OrderProduct(order_id=1, product_id=6, user_id=9, amount=1, price=3.0),
        OrderProduct(order_id=1, product_id=7, user_id=10, amount=6, price=0.4),
        OrderProduct(order_id=2, product_id=5, user_id=9, amount=3, price=2.5),
    ])
    db.commit()
    return db


@pytest.fixture
def client(seeded):
    app = create_app(with_lifespan=False)

    def _override_get_db():
        yield seeded

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
