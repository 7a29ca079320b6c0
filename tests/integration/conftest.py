from decimal import Decimal

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from clinic_invoicing.depends import get_session
from clinic_invoicing.domain.appointment import Appointment, AppointmentStatus
from clinic_invoicing.domain.medical_service import MedicalService


@pytest_asyncio.fixture(scope="function")
async def engine(tmp_path):
    """Create test database engine on a throwaway SQLite file"""
    test_db_url = f"sqlite+aiosqlite:///{tmp_path / 'invoicing_test.db'}"

    engine = create_async_engine(test_db_url, echo=False, future=True)

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    """Create a new database session for each test"""
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def seed(db_session):
    """Factory that inserts appointments and medical services"""

    async def _seed(appointments=(), services=()):
        for appointment_id, status in appointments:
            db_session.add(Appointment(id=appointment_id, status=status))
        for service_id, name, price, active in services:
            db_session.add(
                MedicalService(id=service_id, name=name, base_price=Decimal(price), active=active)
            )
        await db_session.commit()

    return _seed


@pytest_asyncio.fixture
async def clinic(seed):
    """Default clinic data: one appointment per status and a small catalogue"""
    await seed(
        appointments=[
            (1, AppointmentStatus.COMPLETED),
            (2, AppointmentStatus.COMPLETED),
            (3, AppointmentStatus.CANCELLED),
            (4, AppointmentStatus.SCHEDULED),
        ],
        services=[
            (10, "General consultation", "100.00", True),
            (11, "Blood test", "33.335", True),
            (12, "X-ray", "33.335", True),
            (13, "Ultrasound", "33.335", True),
            (19, "Retired service", "50.00", False),
        ],
    )


@pytest_asyncio.fixture
async def client(db_session):
    """Create test client with database session override"""
    from clinic_invoicing.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
