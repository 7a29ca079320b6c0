"""Invoice API Routes

FastAPI routes for reading and paying invoices.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from clinic_invoicing.api.schemas.invoice_request import PayInvoiceRequestSchema
from clinic_invoicing.app.use_cases.invoicing.dtos import InvoiceResponseDTO, PayInvoiceCommandDTO
from clinic_invoicing.app.use_cases.invoicing.get_invoice import GetInvoice
from clinic_invoicing.app.use_cases.invoicing.pay_invoice import PayInvoice
from clinic_invoicing.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from clinic_invoicing.adapter.repositories.invoice_line_repository import SqlAlchemyInvoiceLineRepository
from clinic_invoicing.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from clinic_invoicing.depends import get_session
from clinic_invoicing.api.error import ClientError

router = APIRouter(prefix="/invoices", tags=["Invoices"])


@router.get(
    "/{invoice_id}",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={404: {"description": "Invoice not found"}},
)
async def get_invoice(
    invoice_id: int,
    session: AsyncSession = Depends(get_session)
):
    """
    Retrieve an invoice with its lines.

    **Returns:**
    - 200: Invoice found
    - 404: Invoice not found
    """
    invoice_repo = SqlAlchemyInvoiceRepository(session)
    invoice_line_repo = SqlAlchemyInvoiceLineRepository(session)

    use_case = GetInvoice(invoice_repo, invoice_line_repo)
    result = await use_case.execute(invoice_id)

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.patch(
    "/{invoice_id}/pay",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={
        404: {
            "description": "Invoice not found",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "INVOICE_NOT_FOUND",
                            "message": "Invoice not found with id: 123"
                        }
                    }
                }
            }
        },
        409: {
            "description": "Invoice is not pending",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "INVALID_INVOICE_STATUS",
                            "message": "Invoice cannot be paid from status: PAID"
                        }
                    }
                }
            }
        }
    }
)
async def pay_invoice(
    invoice_id: int,
    request: PayInvoiceRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Pay a pending invoice.

    **Path parameters:**
    - `invoice_id` (required): Invoice ID

    **Example request:**
    ```json
    {"payment_method": "CARD"}
    ```

    **Returns:**
    - 200: Invoice paid
    - 404: Invoice not found
    - 409: Invoice is not in PENDING status
    """
    uow = SqlAlchemyUnitOfWork(session)
    invoice_repo = SqlAlchemyInvoiceRepository(session)
    invoice_line_repo = SqlAlchemyInvoiceLineRepository(session)

    command = PayInvoiceCommandDTO(payment_method=request.payment_method)

    use_case = PayInvoice(uow, invoice_repo, invoice_line_repo)
    result = await use_case.execute(invoice_id, command)

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value
