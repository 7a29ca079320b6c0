"""Appointment API Routes

FastAPI routes for issuing invoices against appointments.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from clinic_invoicing.api.schemas.invoice_request import IssueInvoiceRequestSchema
from clinic_invoicing.app.use_cases.invoicing.dtos import (
    InvoiceResponseDTO,
    IssueInvoiceCommandDTO,
    InvoiceLineCommandDTO,
)
from clinic_invoicing.app.use_cases.invoicing.issue_invoice import IssueInvoice
from clinic_invoicing.adapter.repositories.appointment_repository import SqlAlchemyAppointmentRepository
from clinic_invoicing.adapter.repositories.medical_service_repository import SqlAlchemyMedicalServiceRepository
from clinic_invoicing.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from clinic_invoicing.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from clinic_invoicing.depends import get_session
from clinic_invoicing.api.error import ClientError

router = APIRouter(prefix="/appointments", tags=["Appointments"])


@router.post(
    "/{appointment_id}/invoice",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {
            "description": "Duplicate medical service in request",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "DUPLICATE_MEDICAL_SERVICE",
                            "message": "Duplicate medical service id in lines: 3"
                        }
                    }
                }
            }
        },
        404: {"description": "Appointment or medical service not found"},
        409: {
            "description": "Appointment already invoiced",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "APPOINTMENT_ALREADY_INVOICED",
                            "message": "Appointment 10 already has an invoice"
                        }
                    }
                }
            }
        },
        422: {"description": "Appointment not completed, cancelled, or service inactive"},
    }
)
async def issue_invoice(
    appointment_id: int,
    request: IssueInvoiceRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Issue an invoice for a completed appointment.

    Each line is priced from the medical service's current base price with
    VAT 21% and no discount. The invoice is created in PENDING status.

    **Path parameters:**
    - `appointment_id` (required): Appointment ID

    **Example request:**
    ```json
    {
      "lines": [
        {"medical_service_id": 3, "quantity": 2}
      ]
    }
    ```

    **Returns:**
    - 201: Invoice issued
    - 400: Duplicate medical service in lines
    - 404: Appointment or medical service not found
    - 409: Appointment already invoiced
    - 422: Appointment cancelled / not completed, or medical service inactive
    """
    # Create UnitOfWork and repositories
    uow = SqlAlchemyUnitOfWork(session)
    appointment_repo = SqlAlchemyAppointmentRepository(session)
    medical_service_repo = SqlAlchemyMedicalServiceRepository(session)
    invoice_repo = SqlAlchemyInvoiceRepository(session)

    # Convert request schema to command DTO
    command = IssueInvoiceCommandDTO(
        lines=[
            InvoiceLineCommandDTO(
                medical_service_id=line.medical_service_id,
                quantity=line.quantity,
            )
            for line in request.lines
        ]
    )

    # Execute use case
    use_case = IssueInvoice(uow, appointment_repo, medical_service_repo, invoice_repo)
    result = await use_case.execute(appointment_id, command)

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value
