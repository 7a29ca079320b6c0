"""Appointment Repository Interface

Defines the contract for appointment persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional
from clinic_invoicing.domain.appointment import Appointment


class AppointmentRepository(ABC):
    """
    Repository interface for Appointment persistence

    Provides access to appointment data for invoicing operations.
    """

    @abstractmethod
    async def get_by_id(self, appointment_id: int) -> Optional[Appointment]:
        """
        Retrieve appointment by ID

        Args:
            appointment_id: Appointment ID

        Returns:
            Appointment if found, None otherwise
        """
        pass

    @abstractmethod
    async def update(self, appointment: Appointment) -> Appointment:
        """
        Update an existing appointment

        Args:
            appointment: Appointment entity with updated values

        Returns:
            Updated Appointment
        """
        pass
