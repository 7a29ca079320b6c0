from .base import BaseModel
from .appointment import Appointment, AppointmentStatus
from .medical_service import MedicalService
from .invoice import Invoice, InvoiceStatus, PaymentMethod
from .invoice_line import InvoiceLine, DiscountType, VatRate
from .money import round_money

__all__ = [
    "BaseModel",
    "Appointment",
    "AppointmentStatus",
    "MedicalService",
    "Invoice",
    "InvoiceStatus",
    "PaymentMethod",
    "InvoiceLine",
    "DiscountType",
    "VatRate",
    "round_money",
]
