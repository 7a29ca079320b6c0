"""Request schemas for Invoicing API

Pydantic models for validating incoming HTTP requests.
"""

from typing import List
from pydantic import BaseModel, ConfigDict, Field
from clinic_invoicing.domain.invoice import PaymentMethod


class InvoiceLineRequestSchema(BaseModel):
    """Requested service line"""

    medical_service_id: int = Field(
        ...,
        gt=0,
        description="Medical service identifier"
    )

    quantity: int = Field(
        ...,
        gt=0,
        description="Number of units (must be > 0)"
    )


class IssueInvoiceRequestSchema(BaseModel):
    """
    Request schema for issuing an invoice

    Used for POST /appointments/{appointment_id}/invoice endpoint.
    """

    lines: List[InvoiceLineRequestSchema] = Field(
        ...,
        min_length=1,
        description="Service lines to invoice (at least one)"
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


class PayInvoiceRequestSchema(BaseModel):
    """
    Request schema for paying an invoice

    Used for PATCH /invoices/{invoice_id}/pay endpoint.
    """

    payment_method: PaymentMethod = Field(
        ...,
        description="Payment method (CASH, CARD, TRANSFER)"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"payment_method": "CARD"}
        }
    )
