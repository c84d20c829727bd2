# tests/conftest.py
from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from models import (
     Base, User, Property, PropertyStatus, PropertyType, Tenant, Lease, LeaseStatus, LeaseType,
)


@pytest.fixture
def engine():
     engine = create_engine(
          "sqlite://",
          connect_args={"check_same_thread": False},
          poolclass=StaticPool,
     )
     Base.metadata.create_all(engine)
     yield engine
     engine.dispose()


@pytest.fixture
def db(engine):
     session = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)()
     yield session
     session.close()


def _make_owner(db, email: str) -> User:
     user = User(email=email, password="not-a-real-hash", name=email.split("@")[0])
     db.add(user)
     db.flush()
     return user


@pytest.fixture
def owner(db) -> User:
     return _make_owner(db, "owner@example.com")


@pytest.fixture
def other_owner(db) -> User:
     return _make_owner(db, "someone-else@example.com")


@pytest.fixture
def make_property(db):
     def _create(owner: User, **overrides) -> Property:
          values = {
               "name": "Mapo Officetel 1203",
               "property_type": PropertyType.OFFICETEL,
               "address": "Seoul Mapo-gu",
               "purchase_price": Decimal("200000000"),
               "purchase_date": date(2022, 3, 15),
               "acquisition_cost": Decimal("0"),
               "loan_amount": Decimal("0"),
               "loan_interest_rate": Decimal("0"),
               "status": PropertyStatus.VACANT,
          }
          values.update(overrides)
          prop = Property(owner_id=owner.id, **values)
          db.add(prop)
          db.flush()
          return prop

     return _create


@pytest.fixture
def make_tenant(db):
     def _create(name: str = "Kim Tenant", **overrides) -> Tenant:
          tenant = Tenant(name=name, **overrides)
          db.add(tenant)
          db.flush()
          return tenant

     return _create


@pytest.fixture
def make_lease(db, make_tenant):
     def _create(prop: Property, tenant: Tenant = None, **overrides) -> Lease:
          values = {
               "lease_type": LeaseType.MONTHLY,
               "deposit": Decimal("10000000"),
               "monthly_rent": Decimal("1000000"),
               "management_fee": Decimal("100000"),
               "has_vat": False,
               "start_date": date(2026, 1, 1),
               "end_date": date(2027, 12, 31),
               "rent_due_day": 5,
               "status": LeaseStatus.ACTIVE,
          }
          values.update(overrides)
          tenant = tenant or make_tenant()
          lease = Lease(property_id=prop.id, tenant_id=tenant.id, **values)
          db.add(lease)
          db.flush()
          return lease

     return _create


@pytest.fixture
def client(db, owner):
     """TestClient bound to the test session, authenticated as ``owner``."""
     from fastapi.testclient import TestClient

     from database import get_session
     from dependencies import create_access_token
     from main import app

     def _session_override():
          yield db

     app.dependency_overrides[get_session] = _session_override
     db.commit()

     with TestClient(app) as test_client:
          test_client.headers.update(
               {"Authorization": f"Bearer {create_access_token(owner.id, owner.email)}"}
          )
          yield test_client

     app.dependency_overrides.clear()
