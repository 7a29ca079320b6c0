"""SQLAlchemy Medical Service Repository Implementation"""

from typing import Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from clinic_invoicing.app.repositories.medical_service_repository import MedicalServiceRepository
from clinic_invoicing.domain.medical_service import MedicalService


class SqlAlchemyMedicalServiceRepository(MedicalServiceRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, service_id: int) -> Optional[MedicalService]:
        statement = select(MedicalService).where(MedicalService.id == service_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()
