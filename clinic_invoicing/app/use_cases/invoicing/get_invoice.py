"""GetInvoice Use Case

Retrieves an invoice with its lines.
"""

import logging
from clinic_invoicing.libs.result import Result, Return, Error
from clinic_invoicing.app.repositories.invoice_repository import InvoiceRepository
from clinic_invoicing.app.repositories.invoice_line_repository import InvoiceLineRepository
from . import errors
from .dtos import InvoiceResponseDTO, to_invoice_response

logger = logging.getLogger(__name__)


class GetInvoice:
    """Use Case: Read an invoice and its lines"""

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        invoice_line_repo: InvoiceLineRepository,
    ):
        self.invoice_repo = invoice_repo
        self.invoice_line_repo = invoice_line_repo

    async def execute(self, invoice_id: int) -> Result[InvoiceResponseDTO]:
        try:
            invoice = await self.invoice_repo.get_by_id(invoice_id)

            if not invoice:
                return Return.err(
                    Error(
                        code=errors.INVOICE_NOT_FOUND,
                        message=f"Invoice not found with id: {invoice_id}",
                        reason="Invoice does not exist",
                    )
                )

            lines = await self.invoice_line_repo.get_by_invoice_id(invoice_id)
            return Return.ok(to_invoice_response(invoice, lines))

        except Exception as e:
            logger.exception(f"Failed to retrieve invoice {invoice_id}")
            return Return.err(
                Error(
                    code=errors.GET_INVOICE_FAILED,
                    message="Failed to retrieve invoice",
                    reason=str(e),
                )
            )
