"""Invoice Repository Interface

Defines the contract for invoice persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from clinic_invoicing.domain.invoice import Invoice
from clinic_invoicing.domain.invoice_line import InvoiceLine


class InvoiceRepository(ABC):
    """
    Repository interface for Invoice persistence

    Provides access to invoice data for invoicing operations.
    """

    @abstractmethod
    async def create(self, invoice: Invoice, lines: List[InvoiceLine]) -> Invoice:
        """
        Create a new invoice together with its lines

        The invoice row and every line row are written in the same
        transaction; lines receive the generated invoice_id.

        Args:
            invoice: Invoice entity to persist
            lines: Priced lines, in display order

        Returns:
            Created Invoice with generated ID
        """
        pass

    @abstractmethod
    async def get_by_id(self, invoice_id: int) -> Optional[Invoice]:
        """
        Retrieve invoice by ID

        Args:
            invoice_id: Invoice ID

        Returns:
            Invoice if found, None otherwise
        """
        pass

    @abstractmethod
    async def update(self, invoice: Invoice) -> Invoice:
        """
        Update an existing invoice

        Args:
            invoice: Invoice entity with updated values

        Returns:
            Updated Invoice
        """
        pass

    @abstractmethod
    async def exists_by_appointment_id(self, appointment_id: int) -> bool:
        """
        Check if an invoice already exists for the appointment

        Used to prevent issuing a second invoice when the appointment's own
        invoice reference is stale.

        Args:
            appointment_id: Appointment ID

        Returns:
            True if invoice exists, False otherwise
        """
        pass
