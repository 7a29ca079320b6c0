"""Unit tests for OpenAPI examples declared on request and response models"""

from clinic_invoicing.api.schemas.invoice_request import IssueInvoiceRequestSchema, PayInvoiceRequestSchema
from clinic_invoicing.app.use_cases.invoicing.dtos import IssueInvoiceCommandDTO, InvoiceResponseDTO


class TestSchemaExamples:

    def test_request_schemas_publish_examples(self):
        issue_example = IssueInvoiceRequestSchema.model_json_schema()["example"]
        pay_example = PayInvoiceRequestSchema.model_json_schema()["example"]

        assert issue_example["lines"][0] == {"medical_service_id": 3, "quantity": 2}
        assert pay_example == {"payment_method": "CARD"}

    def test_examples_validate_against_their_models(self):
        IssueInvoiceRequestSchema.model_validate(IssueInvoiceRequestSchema.model_json_schema()["example"])
        IssueInvoiceCommandDTO.model_validate(IssueInvoiceCommandDTO.model_json_schema()["example"])

    def test_response_example_shows_unpaid_placeholder(self):
        example = InvoiceResponseDTO.model_json_schema()["example"]

        assert example["status"] == "PENDING"
        assert example["payment_method"] == "UNPAID"
