"""SQLAlchemy Appointment Repository Implementation"""

from typing import Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from clinic_invoicing.app.repositories.appointment_repository import AppointmentRepository
from clinic_invoicing.domain.appointment import Appointment
from clinic_invoicing.domain.base import utc_now


class SqlAlchemyAppointmentRepository(AppointmentRepository):
    """SQLAlchemy implementation of AppointmentRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, appointment_id: int) -> Optional[Appointment]:
        statement = select(Appointment).where(Appointment.id == appointment_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def update(self, appointment: Appointment) -> Appointment:
        appointment.updated_at = utc_now()
        self.session.add(appointment)
        await self.session.flush()
        await self.session.refresh(appointment)
        return appointment
