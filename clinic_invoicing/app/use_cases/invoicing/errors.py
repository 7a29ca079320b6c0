"""Error codes returned by invoicing use cases

Every code belongs to exactly one ErrorKind; the API maps kinds to HTTP statuses.
"""

from enum import Enum


class ErrorKind(str, Enum):
    BAD_REQUEST = "bad_request"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    BUSINESS_RULE = "business_rule"
    INTERNAL = "internal"


DUPLICATE_MEDICAL_SERVICE = "DUPLICATE_MEDICAL_SERVICE"

APPOINTMENT_NOT_FOUND = "APPOINTMENT_NOT_FOUND"
INVOICE_NOT_FOUND = "INVOICE_NOT_FOUND"
MEDICAL_SERVICE_NOT_FOUND = "MEDICAL_SERVICE_NOT_FOUND"

APPOINTMENT_ALREADY_INVOICED = "APPOINTMENT_ALREADY_INVOICED"
INVALID_INVOICE_STATUS = "INVALID_INVOICE_STATUS"

APPOINTMENT_CANCELLED = "APPOINTMENT_CANCELLED"
APPOINTMENT_NOT_COMPLETED = "APPOINTMENT_NOT_COMPLETED"
MEDICAL_SERVICE_INACTIVE = "MEDICAL_SERVICE_INACTIVE"

ISSUE_INVOICE_FAILED = "ISSUE_INVOICE_FAILED"
PAY_INVOICE_FAILED = "PAY_INVOICE_FAILED"
GET_INVOICE_FAILED = "GET_INVOICE_FAILED"

ERROR_KINDS = {
    DUPLICATE_MEDICAL_SERVICE: ErrorKind.BAD_REQUEST,
    APPOINTMENT_NOT_FOUND: ErrorKind.NOT_FOUND,
    INVOICE_NOT_FOUND: ErrorKind.NOT_FOUND,
    MEDICAL_SERVICE_NOT_FOUND: ErrorKind.NOT_FOUND,
    APPOINTMENT_ALREADY_INVOICED: ErrorKind.CONFLICT,
    INVALID_INVOICE_STATUS: ErrorKind.CONFLICT,
    APPOINTMENT_CANCELLED: ErrorKind.BUSINESS_RULE,
    APPOINTMENT_NOT_COMPLETED: ErrorKind.BUSINESS_RULE,
    MEDICAL_SERVICE_INACTIVE: ErrorKind.BUSINESS_RULE,
    ISSUE_INVOICE_FAILED: ErrorKind.INTERNAL,
    PAY_INVOICE_FAILED: ErrorKind.INTERNAL,
    GET_INVOICE_FAILED: ErrorKind.INTERNAL,
}


def kind_of(code: str) -> ErrorKind:
    return ERROR_KINDS.get(code, ErrorKind.INTERNAL)
