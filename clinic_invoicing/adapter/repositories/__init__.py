from .appointment_repository import SqlAlchemyAppointmentRepository
from .medical_service_repository import SqlAlchemyMedicalServiceRepository
from .invoice_repository import SqlAlchemyInvoiceRepository
from .invoice_line_repository import SqlAlchemyInvoiceLineRepository

__all__ = [
    "SqlAlchemyAppointmentRepository",
    "SqlAlchemyMedicalServiceRepository",
    "SqlAlchemyInvoiceRepository",
    "SqlAlchemyInvoiceLineRepository",
]
