"""Invoice Domain Entity

Tracks appointment invoices and payment status.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from pydantic import ConfigDict
from sqlmodel import Field, Column, Index
from sqlalchemy import BigInteger, ForeignKey, Numeric
from clinic_invoicing.domain.base import BaseModel, IdType, TimestampType, utc_now


class InvoiceStatus(str, Enum):
    """Invoice status types"""
    PENDING = "PENDING"
    PAID = "PAID"


class PaymentMethod(str, Enum):
    """Accepted payment methods"""
    CASH = "CASH"
    CARD = "CARD"
    TRANSFER = "TRANSFER"


class Invoice(BaseModel, table=True):
    """
    Invoice - Billing invoice for a completed appointment

    Domain Rules:
    - One invoice per appointment (unique appointment_id)
    - Created with status=PENDING; PENDING -> PAID is the only transition
    - total = subtotal + tax_total, each rounded half-up to 2 decimals
    - paid_at and payment_method are set only when the invoice is paid
    """

    __tablename__ = "invoices"
    __table_args__ = (
        Index('ix_invoices_appointment_id', 'appointment_id', unique=True),
        Index('ix_invoices_status', 'status'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique invoice identifier (auto-increment)"
    )

    appointment_id: Optional[int] = Field(
        default=None,
        sa_column=Column(BigInteger, ForeignKey("appointments.id"), nullable=False),
        description="Invoiced appointment"
    )

    status: InvoiceStatus = Field(
        default=InvoiceStatus.PENDING,
        description="Invoice status (PENDING, PAID)"
    )

    subtotal: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Sum of line bases before tax"
    )

    tax_total: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Sum of line taxes"
    )

    total: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="subtotal + tax_total"
    )

    issued_at: datetime = Field(
        default_factory=utc_now,
        sa_type=TimestampType,
        description="Timestamp when invoice was issued"
    )

    paid_at: Optional[datetime] = Field(
        default=None,
        sa_type=TimestampType,
        description="Timestamp when invoice was paid"
    )

    payment_method: Optional[PaymentMethod] = Field(
        default=None,
        description="Payment method used to settle the invoice"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_type=TimestampType,
        description="Invoice creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_type=TimestampType,
        description="Last update timestamp"
    )

    def mark_paid(self, payment_method: PaymentMethod, paid_at: Optional[datetime] = None) -> None:
        """Transition PENDING -> PAID. Callers check the current status first."""
        self.status = InvoiceStatus.PAID
        self.paid_at = paid_at or utc_now()
        self.payment_method = payment_method

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
                "payment_method": None,
                "created_at": "2024-02-01T10:00:00Z",
                "updated_at": "2024-02-01T10:00:00Z"
            }
        }
    )
