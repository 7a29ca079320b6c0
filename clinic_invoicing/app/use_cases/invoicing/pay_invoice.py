"""PayInvoice Use Case

Settles a pending invoice.
"""

import logging
from clinic_invoicing.libs.result import Result, Return, Error
from clinic_invoicing.app.services.unit_of_work import UnitOfWork
from clinic_invoicing.app.repositories.invoice_repository import InvoiceRepository
from clinic_invoicing.app.repositories.invoice_line_repository import InvoiceLineRepository
from clinic_invoicing.domain.base import utc_now
from clinic_invoicing.domain.invoice import InvoiceStatus
from . import errors
from .dtos import PayInvoiceCommandDTO, InvoiceResponseDTO, to_invoice_response

logger = logging.getLogger(__name__)


class PayInvoice:
    """
    Use Case: Pay invoice

    Business Rules:
    1. Invoice must exist
    2. Only PENDING invoices can be paid; PAID is terminal
    3. Paying sets status=PAID, paid_at=now and the payment method

    Flow:
    1. Retrieve invoice by ID
    2. Validate status is PENDING
    3. Mark as paid and persist
    4. Commit transaction
    5. Return response with lines
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        invoice_line_repo: InvoiceLineRepository,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.invoice_line_repo = invoice_line_repo

    async def execute(self, invoice_id: int, command: PayInvoiceCommandDTO) -> Result[InvoiceResponseDTO]:
        """
        Execute invoice payment

        Args:
            invoice_id: Invoice to pay
            command: PayInvoiceCommandDTO with payment method

        Returns:
            Result[InvoiceResponseDTO]: Success with updated invoice or error
        """
        try:
            # Step 1: Retrieve invoice
            invoice = await self.invoice_repo.get_by_id(invoice_id)

            if not invoice:
                return Return.err(
                    Error(
                        code=errors.INVOICE_NOT_FOUND,
                        message=f"Invoice not found with id: {invoice_id}",
                        reason="Invoice does not exist",
                    )
                )

            # Step 2: Validate status is pending
            if invoice.status != InvoiceStatus.PENDING:
                logger.warning(
                    f"Payment rejected for invoice {invoice_id}: status is {invoice.status.value}"
                )
                return Return.err(
                    Error(
                        code=errors.INVALID_INVOICE_STATUS,
                        message=f"Invoice cannot be paid from status: {invoice.status.value}",
                        reason="Only PENDING invoices can be paid",
                    )
                )

            # Step 3: Mark as paid
            invoice.mark_paid(command.payment_method, paid_at=utc_now())
            updated_invoice = await self.invoice_repo.update(invoice)
            lines = await self.invoice_line_repo.get_by_invoice_id(invoice_id)

            # Step 4: Commit transaction
            await self.uow.commit()

            logger.info(
                f"Invoice {invoice_id} paid by {command.payment_method.value}, total={updated_invoice.total}"
            )

            # Step 5: Build response
            return Return.ok(to_invoice_response(updated_invoice, lines))

        except Exception as e:
            await self.uow.rollback()
            logger.exception(f"Failed to pay invoice {invoice_id}")
            return Return.err(
                Error(
                    code=errors.PAY_INVOICE_FAILED,
                    message="Failed to pay invoice",
                    reason=str(e),
                )
            )
