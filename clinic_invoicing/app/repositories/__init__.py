from .appointment_repository import AppointmentRepository
from .medical_service_repository import MedicalServiceRepository
from .invoice_repository import InvoiceRepository
from .invoice_line_repository import InvoiceLineRepository

__all__ = [
    "AppointmentRepository",
    "MedicalServiceRepository",
    "InvoiceRepository",
    "InvoiceLineRepository",
]
