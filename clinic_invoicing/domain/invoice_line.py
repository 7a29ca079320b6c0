"""Invoice Line Domain Entity

Tracks individual priced services within an invoice.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from pydantic import ConfigDict
from sqlmodel import Field, Column, Index
from sqlalchemy import BigInteger, ForeignKey, Integer, Numeric, String
from clinic_invoicing.domain.base import BaseModel, IdType, TimestampType, utc_now


class DiscountType(str, Enum):
    """Line discount types"""
    NONE = "NONE"


class VatRate(str, Enum):
    """VAT rates applicable to invoice lines"""
    VAT_21 = "VAT_21"

    @property
    def rate(self) -> Decimal:
        return _VAT_RATES[self]


_VAT_RATES = {
    VatRate.VAT_21: Decimal("0.21"),
}


class InvoiceLine(BaseModel, table=True):
    """
    Invoice Line - Priced medical service within an invoice

    Domain Rules:
    - Each line belongs to exactly one invoice
    - unit_price and description are snapshots of the service at issue time
    - line_total = round_half_up(quantity * unit_price * (1 + vat rate), 2)
    - Immutable once created
    """

    __tablename__ = "invoice_lines"
    __table_args__ = (
        Index('ix_invoice_lines_invoice_id', 'invoice_id'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique invoice line identifier (auto-increment)"
    )

    invoice_id: Optional[int] = Field(
        default=None,
        sa_column=Column(BigInteger, ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to Invoice"
    )

    medical_service_id: int = Field(
        sa_column=Column(BigInteger, ForeignKey("medical_services.id"), nullable=False),
        description="Priced medical service"
    )

    description: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Service name at issue time"
    )

    quantity: int = Field(
        sa_column=Column(Integer, nullable=False),
        description="Number of units (> 0)"
    )

    unit_price: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Service base price at issue time (precision: 18,6)"
    )

    discount_type: DiscountType = Field(
        default=DiscountType.NONE,
        description="Discount applied to the line"
    )

    discount_value: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Discount amount or percentage"
    )

    vat_rate: VatRate = Field(
        default=VatRate.VAT_21,
        description="VAT rate applied to the line"
    )

    line_total: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Line total including tax, rounded to 2 decimals"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_type=TimestampType,
        description="Line item creation timestamp"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "invoice_id": 1,
                "medical_service_id": 3,
                "description": "General consultation",
                "quantity": 2,
                "unit_price": "100.000000",
                "discount_type": "NONE",
                "discount_value": "0.00",
                "vat_rate": "VAT_21",
                "line_total": "242.00",
                "created_at": "2024-02-01T10:00:00Z"
            }
        }
    )
