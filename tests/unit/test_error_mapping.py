"""Unit tests for error kinds and their HTTP statuses"""

import pytest

from clinic_invoicing.api.error import ClientError
from clinic_invoicing.app.use_cases.invoicing.errors import ERROR_KINDS, ErrorKind, kind_of
from clinic_invoicing.libs.result import Error


@pytest.mark.parametrize(
    "code, status_code",
    [
        ("DUPLICATE_MEDICAL_SERVICE", 400),
        ("APPOINTMENT_NOT_FOUND", 404),
        ("INVOICE_NOT_FOUND", 404),
        ("MEDICAL_SERVICE_NOT_FOUND", 404),
        ("APPOINTMENT_ALREADY_INVOICED", 409),
        ("INVALID_INVOICE_STATUS", 409),
        ("APPOINTMENT_CANCELLED", 422),
        ("APPOINTMENT_NOT_COMPLETED", 422),
        ("MEDICAL_SERVICE_INACTIVE", 422),
        ("ISSUE_INVOICE_FAILED", 500),
    ],
)
def test_client_error_status(code, status_code):
    error = ClientError.from_error(Error(code=code, message="m"))

    assert error.status_code == status_code
    assert error.error.code == code


def test_unknown_code_is_internal():
    assert kind_of("SOMETHING_ELSE") == ErrorKind.INTERNAL


def test_every_kind_is_used():
    assert set(ERROR_KINDS.values()) == set(ErrorKind)
