"""Appointment Domain Entity

A patient appointment that may be invoiced once it is completed.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import BigInteger
from clinic_invoicing.domain.base import BaseModel, IdType, TimestampType, utc_now


class AppointmentStatus(str, Enum):
    """Appointment status types"""
    SCHEDULED = "SCHEDULED"
    CONFIRMED = "CONFIRMED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
    NO_SHOW = "NO_SHOW"


class Appointment(BaseModel, table=True):
    """
    Appointment - Scheduled visit of a patient

    Domain Rules:
    - An appointment has zero or one invoice
    - Only COMPLETED appointments can be invoiced
    - invoice_id mirrors Invoice.appointment_id; the invoice side is authoritative
    """

    __tablename__ = "appointments"

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique appointment identifier (auto-increment)"
    )

    status: AppointmentStatus = Field(
        default=AppointmentStatus.SCHEDULED,
        description="Appointment status"
    )

    invoice_id: Optional[int] = Field(
        default=None,
        sa_column=Column(BigInteger, nullable=True),
        description="Invoice issued for this appointment, if any"
    )

    scheduled_at: Optional[datetime] = Field(
        default=None,
        sa_type=TimestampType,
        description="Scheduled start time"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_type=TimestampType,
        description="Creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_type=TimestampType,
        description="Last update timestamp"
    )
