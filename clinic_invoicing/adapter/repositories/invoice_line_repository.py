"""SQLAlchemy Invoice Line Repository Implementation

Implements invoice line reads using SQLAlchemy async session.
"""

from typing import List
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from clinic_invoicing.app.repositories.invoice_line_repository import InvoiceLineRepository
from clinic_invoicing.domain.invoice_line import InvoiceLine


class SqlAlchemyInvoiceLineRepository(InvoiceLineRepository):
    """
    SQLAlchemy implementation of InvoiceLineRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_invoice_id(self, invoice_id: int) -> List[InvoiceLine]:
        """
        Retrieve all line items for an invoice, in creation order

        Args:
            invoice_id: Invoice ID

        Returns:
            List of InvoiceLine items
        """
        statement = (
            select(InvoiceLine)
            .where(InvoiceLine.invoice_id == invoice_id)
            .order_by(InvoiceLine.id)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())
