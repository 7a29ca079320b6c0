"""SQLAlchemy Invoice Repository Implementation

Implements invoice persistence using SQLAlchemy async session.
"""

from typing import Optional, List
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from clinic_invoicing.app.repositories.invoice_repository import InvoiceRepository
from clinic_invoicing.domain.invoice import Invoice
from clinic_invoicing.domain.invoice_line import InvoiceLine
from clinic_invoicing.domain.base import utc_now


class SqlAlchemyInvoiceRepository(InvoiceRepository):
    """
    SQLAlchemy implementation of InvoiceRepository

    Uses async session for database operations. Writes are flushed, never
    committed; the unit of work owns the transaction.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, invoice: Invoice, lines: List[InvoiceLine]) -> Invoice:
        """
        Create a new invoice together with its lines

        Args:
            invoice: Invoice entity to persist
            lines: Priced lines, in display order

        Returns:
            Created Invoice with generated ID
        """
        self.session.add(invoice)
        await self.session.flush()

        for line in lines:
            line.invoice_id = invoice.id
            self.session.add(line)
        await self.session.flush()

        await self.session.refresh(invoice)
        for line in lines:
            await self.session.refresh(line)
        return invoice

    async def get_by_id(self, invoice_id: int) -> Optional[Invoice]:
        """
        Retrieve invoice by ID

        Args:
            invoice_id: Invoice ID

        Returns:
            Invoice if found, None otherwise
        """
        statement = select(Invoice).where(Invoice.id == invoice_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def update(self, invoice: Invoice) -> Invoice:
        """
        Update an existing invoice

        Args:
            invoice: Invoice entity with updated values

        Returns:
            Updated Invoice
        """
        invoice.updated_at = utc_now()
        self.session.add(invoice)
        await self.session.flush()
        await self.session.refresh(invoice)
        return invoice

    async def exists_by_appointment_id(self, appointment_id: int) -> bool:
        """
        Check if an invoice already exists for the appointment

        Args:
            appointment_id: Appointment ID

        Returns:
            True if invoice exists, False otherwise
        """
        statement = (
            select(func.count())
            .select_from(Invoice)
            .where(Invoice.appointment_id == appointment_id)
        )
        result = await self.session.execute(statement)
        count = result.scalar_one()
        return count > 0
