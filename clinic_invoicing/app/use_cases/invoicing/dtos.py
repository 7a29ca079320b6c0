"""Data Transfer Objects for Invoicing Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from clinic_invoicing.domain.invoice import Invoice, PaymentMethod
from clinic_invoicing.domain.invoice_line import InvoiceLine

UNPAID_PAYMENT_METHOD = "UNPAID"


class InvoiceLineCommandDTO(BaseModel):
    """Requested service line"""

    medical_service_id: int = Field(
        ...,
        description="Medical service to invoice"
    )

    quantity: int = Field(
        ...,
        gt=0,
        description="Number of units (must be > 0)"
    )


class IssueInvoiceCommandDTO(BaseModel):
    """
    Command DTO for issuing an invoice

    Used as input to IssueInvoice use case. Line order is preserved on the invoice.
    """

    lines: List[InvoiceLineCommandDTO] = Field(
        ...,
        min_length=1,
        description="Requested service lines"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "lines": [
                    {"medical_service_id": 3, "quantity": 2},
                    {"medical_service_id": 7, "quantity": 1}
                ]
            }
        }
    )


class PayInvoiceCommandDTO(BaseModel):
    """Command DTO for paying an invoice"""

    payment_method: PaymentMethod = Field(
        ...,
        description="Payment method (CASH, CARD, TRANSFER)"
    )


class InvoiceLineDTO(BaseModel):
    """Line item in invoice response"""

    id: int = Field(..., description="Line item ID")
    medical_service_id: int = Field(..., description="Priced medical service ID")
    service_name: str = Field(..., description="Service name at issue time")
    quantity: int = Field(..., description="Number of units")
    unit_price: Decimal = Field(..., description="Unit price at issue time")
    vat_rate: str = Field(..., description="VAT rate label (e.g., VAT_21)")
    line_total: Decimal = Field(..., description="Line total including tax")


class InvoiceResponseDTO(BaseModel):
    """
    Response DTO for invoice operations

    Returned by IssueInvoice, PayInvoice and GetInvoice.
    """

    id: int = Field(..., description="Invoice ID")
    appointment_id: int = Field(..., description="Invoiced appointment ID")
    status: str = Field(..., description="Invoice status (PENDING, PAID)")
    subtotal: Decimal = Field(..., description="Total before tax")
    tax_total: Decimal = Field(..., description="Total tax")
    total: Decimal = Field(..., description="subtotal + tax_total")
    issued_at: datetime = Field(..., description="Issue timestamp")
    paid_at: Optional[datetime] = Field(default=None, description="Payment timestamp")
    payment_method: str = Field(
        default=UNPAID_PAYMENT_METHOD,
        description="Payment method, or UNPAID while pending"
    )
    lines: List[InvoiceLineDTO] = Field(default_factory=list, description="Invoice lines")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "appointment_id": 10,
                "status": "PENDING",
                "subtotal": "200.00",
                "tax_total": "42.00",
                "total": "242.00",
                "issued_at": "2024-02-01T10:00:00Z",
                "paid_at": None,
                "payment_method": "UNPAID",
                "lines": [
                    {
                        "id": 1,
                        "medical_service_id": 3,
                        "service_name": "General consultation",
                        "quantity": 2,
                        "unit_price": "100.000000",
                        "vat_rate": "VAT_21",
                        "line_total": "242.00"
                    }
                ]
            }
        }
    )


def to_invoice_response(invoice: Invoice, lines: List[InvoiceLine]) -> InvoiceResponseDTO:
    """Project an invoice and its lines into the read-only response"""
    return InvoiceResponseDTO(
        id=invoice.id,
        appointment_id=invoice.appointment_id,
        status=invoice.status.value,
        subtotal=invoice.subtotal,
        tax_total=invoice.tax_total,
        total=invoice.total,
        issued_at=invoice.issued_at,
        paid_at=invoice.paid_at,
        payment_method=(
            invoice.payment_method.value if invoice.payment_method else UNPAID_PAYMENT_METHOD
        ),
        lines=[
            InvoiceLineDTO(
                id=line.id,
                medical_service_id=line.medical_service_id,
                service_name=line.description,
                quantity=line.quantity,
                unit_price=line.unit_price,
                vat_rate=line.vat_rate.value,
                line_total=line.line_total,
            )
            for line in lines
        ],
    )
