"""IssueInvoice Use Case

Issues a pending invoice for a completed appointment.
"""

import logging
from typing import List
from sqlalchemy.exc import IntegrityError
from clinic_invoicing.libs.result import Result, Return, Error
from clinic_invoicing.app.services.unit_of_work import UnitOfWork
from clinic_invoicing.app.repositories.appointment_repository import AppointmentRepository
from clinic_invoicing.app.repositories.medical_service_repository import MedicalServiceRepository
from clinic_invoicing.app.repositories.invoice_repository import InvoiceRepository
from clinic_invoicing.domain.appointment import AppointmentStatus
from clinic_invoicing.domain.invoice import Invoice, InvoiceStatus
from clinic_invoicing.domain.invoice_line import InvoiceLine, DiscountType
from clinic_invoicing.domain.base import utc_now
from clinic_invoicing.domain.money import ZERO
from . import errors
from .dtos import IssueInvoiceCommandDTO, InvoiceLineCommandDTO, InvoiceResponseDTO, to_invoice_response
from .pricing import DEFAULT_VAT_RATE, TotalsAccumulator, price_line

logger = logging.getLogger(__name__)


class IssueInvoice:
    """
    Use Case: Issue invoice for an appointment

    Business Rules:
    1. A medical service may appear only once per request
    2. Appointment must exist
    3. Appointment must not be invoiced already
    4. Appointment must not be CANCELLED
    5. Appointment must be COMPLETED
    6. Every service must exist and be active
    7. Lines carry no discount and VAT 21%
    8. Invoice is created with status=PENDING

    Flow:
    1. Reject duplicate services (no store access)
    2. Load appointment and validate its state
    3. Validate and price each line in request order
    4. Round aggregate totals
    5. Link appointment, persist invoice with lines
    6. Commit transaction
    7. Return response
    """

    def __init__(
        self,
        uow: UnitOfWork,
        appointment_repo: AppointmentRepository,
        medical_service_repo: MedicalServiceRepository,
        invoice_repo: InvoiceRepository,
    ):
        self.uow = uow
        self.appointment_repo = appointment_repo
        self.medical_service_repo = medical_service_repo
        self.invoice_repo = invoice_repo

    async def execute(
        self, appointment_id: int, command: IssueInvoiceCommandDTO
    ) -> Result[InvoiceResponseDTO]:
        """
        Execute invoice issuance

        Args:
            appointment_id: Appointment to invoice
            command: IssueInvoiceCommandDTO with requested lines

        Returns:
            Result[InvoiceResponseDTO]: Success with invoice details or error
        """
        # Step 1: Duplicate services are rejected before touching any store
        duplicate_error = self._check_duplicate_services(command.lines)
        if duplicate_error:
            return self._reject(duplicate_error)

        try:
            # Step 2: Load appointment
            appointment = await self.appointment_repo.get_by_id(appointment_id)

            if not appointment:
                return self._reject(
                    Error(
                        code=errors.APPOINTMENT_NOT_FOUND,
                        message=f"Appointment not found with id: {appointment_id}",
                        reason="Appointment does not exist",
                    )
                )

            # The loaded reference may be stale, so the invoices table is asked too
            if (
                appointment.invoice_id is not None
                or await self.invoice_repo.exists_by_appointment_id(appointment_id)
            ):
                return self._reject(self._already_invoiced(appointment_id))

            if appointment.status == AppointmentStatus.CANCELLED:
                return self._reject(
                    Error(
                        code=errors.APPOINTMENT_CANCELLED,
                        message=f"Cannot issue invoice for cancelled appointment {appointment_id}",
                        reason="Appointment is cancelled",
                    )
                )

            if appointment.status != AppointmentStatus.COMPLETED:
                return self._reject(
                    Error(
                        code=errors.APPOINTMENT_NOT_COMPLETED,
                        message=f"Cannot issue invoice for non-completed appointment {appointment_id}. "
                                f"Current status: {appointment.status.value}",
                        reason="Only completed appointments can be invoiced",
                    )
                )

            # Step 3: Validate and price lines in request order
            lines: List[InvoiceLine] = []
            totals = TotalsAccumulator()

            for line_command in command.lines:
                service_id = line_command.medical_service_id
                service = await self.medical_service_repo.get_by_id(service_id)

                if not service:
                    return self._reject(
                        Error(
                            code=errors.MEDICAL_SERVICE_NOT_FOUND,
                            message=f"Medical service not found with id: {service_id}",
                            reason="Medical service does not exist",
                        )
                    )

                if not service.active:
                    return self._reject(
                        Error(
                            code=errors.MEDICAL_SERVICE_INACTIVE,
                            message=f"Medical service is not active: {service_id}",
                            reason="Inactive services cannot be invoiced",
                        )
                    )

                unit_price = service.base_price
                price = price_line(unit_price, line_command.quantity, DEFAULT_VAT_RATE)
                totals.add(price)

                lines.append(
                    InvoiceLine(
                        medical_service_id=service.id,
                        description=service.name,
                        quantity=line_command.quantity,
                        unit_price=unit_price,
                        discount_type=DiscountType.NONE,
                        discount_value=ZERO,
                        vat_rate=DEFAULT_VAT_RATE,
                        line_total=price.line_total,
                    )
                )

            # Step 4: Round aggregates once
            invoice_totals = totals.finalize()

            invoice = Invoice(
                status=InvoiceStatus.PENDING,
                subtotal=invoice_totals.subtotal,
                tax_total=invoice_totals.tax_total,
                total=invoice_totals.total,
                issued_at=utc_now(),
            )

            # Step 5: Link last, then write invoice and lines together
            invoice.appointment_id = appointment.id
            created_invoice = await self.invoice_repo.create(invoice, lines)

            appointment.invoice_id = created_invoice.id
            await self.appointment_repo.update(appointment)

            # Step 6: Commit transaction
            await self.uow.commit()

            logger.info(
                f"Issued invoice {created_invoice.id} for appointment {appointment_id}: "
                f"subtotal={created_invoice.subtotal}, tax={created_invoice.tax_total}, "
                f"total={created_invoice.total}, lines={len(lines)}"
            )

            # Step 7: Build response
            return Return.ok(to_invoice_response(created_invoice, lines))

        except Exception as e:
            await self.uow.rollback()
            if isinstance(e, IntegrityError) and self._is_duplicate_appointment(e):
                # Concurrent issuance caught by the unique index on invoices.appointment_id
                logger.warning(f"Invoice issuance for appointment {appointment_id} lost a race: {e.orig}")
                return Return.err(self._already_invoiced(appointment_id))
            logger.exception(f"Failed to issue invoice for appointment {appointment_id}")
            return Return.err(
                Error(
                    code=errors.ISSUE_INVOICE_FAILED,
                    message="Failed to issue invoice",
                    reason=str(e),
                )
            )

    @staticmethod
    def _check_duplicate_services(lines: List[InvoiceLineCommandDTO]):
        seen = set()
        for line in lines:
            if line.medical_service_id in seen:
                return Error(
                    code=errors.DUPLICATE_MEDICAL_SERVICE,
                    message=f"Duplicate medical service id in lines: {line.medical_service_id}",
                    reason="Each medical service may appear only once per invoice",
                )
            seen.add(line.medical_service_id)
        return None

    @staticmethod
    def _already_invoiced(appointment_id: int) -> Error:
        return Error(
            code=errors.APPOINTMENT_ALREADY_INVOICED,
            message=f"Appointment {appointment_id} already has an invoice",
            reason="An appointment can be invoiced only once",
        )

    @staticmethod
    def _reject(error: Error) -> Result:
        logger.warning(f"Invoice issuance rejected: {error.code} - {error.message}")
        return Return.err(error)

    @staticmethod
    def _is_duplicate_appointment(error: IntegrityError) -> bool:
        """True when the violated constraint is the unique index on invoices.appointment_id"""
        detail = str(error.orig)
        if "ix_invoices_appointment_id" in detail:
            return True
        return "UNIQUE" in detail.upper() and "invoices.appointment_id" in detail
