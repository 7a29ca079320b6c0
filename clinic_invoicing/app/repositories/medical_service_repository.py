"""Medical Service Repository Interface"""

from abc import ABC, abstractmethod
from typing import Optional
from clinic_invoicing.domain.medical_service import MedicalService


class MedicalServiceRepository(ABC):
    """Read-only access to the medical service catalogue"""

    @abstractmethod
    async def get_by_id(self, service_id: int) -> Optional[MedicalService]:
        """Return the service, or None if it does not exist"""
        pass
