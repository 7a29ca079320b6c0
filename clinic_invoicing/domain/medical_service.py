"""Medical Service Domain Entity

Catalogue entry priced on invoice lines.
"""

from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import Boolean, Numeric, String
from clinic_invoicing.domain.base import BaseModel, IdType


class MedicalService(BaseModel, table=True):
    """
    Medical Service - Billable service offered by the clinic

    Domain Rules:
    - base_price is non-negative
    - Inactive services cannot be invoiced
    - Read-only from the invoicing point of view
    """

    __tablename__ = "medical_services"

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique medical service identifier (auto-increment)"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Service name shown on invoices"
    )

    base_price: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Unit price before tax (precision: 18,6)"
    )

    active: bool = Field(
        default=True,
        sa_column=Column(Boolean, nullable=False, default=True),
        description="Whether the service can be invoiced"
    )
