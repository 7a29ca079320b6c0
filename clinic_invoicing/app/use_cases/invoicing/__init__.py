from .issue_invoice import IssueInvoice
from .pay_invoice import PayInvoice
from .get_invoice import GetInvoice
from .errors import ErrorKind, kind_of
from .dtos import (
    IssueInvoiceCommandDTO,
    InvoiceLineCommandDTO,
    PayInvoiceCommandDTO,
    InvoiceResponseDTO,
    InvoiceLineDTO,
)

__all__ = [
    "IssueInvoice",
    "PayInvoice",
    "GetInvoice",
    "ErrorKind",
    "kind_of",
    "IssueInvoiceCommandDTO",
    "InvoiceLineCommandDTO",
    "PayInvoiceCommandDTO",
    "InvoiceResponseDTO",
    "InvoiceLineDTO",
]
