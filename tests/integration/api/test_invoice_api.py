"""Integration tests for Invoicing API endpoints"""

import pytest
from decimal import Decimal
from httpx import AsyncClient


class TestInvoiceAPIIntegration:
    """Integration test suite for invoice issuance and payment endpoints"""

    @pytest.mark.asyncio
    async def test_issue_invoice_success(self, client: AsyncClient, clinic):
        """POST /appointments/{id}/invoice with valid lines returns 201"""
        payload = {"lines": [{"medical_service_id": 10, "quantity": 2}]}

        response = await client.post("/api/appointments/1/invoice", json=payload)

        assert response.status_code == 201
        data = response.json()
        assert data["appointment_id"] == 1
        assert data["status"] == "PENDING"
        assert Decimal(data["subtotal"]) == Decimal("200.00")
        assert Decimal(data["tax_total"]) == Decimal("42.00")
        assert Decimal(data["total"]) == Decimal("242.00")
        assert data["paid_at"] is None
        assert data["payment_method"] == "UNPAID"
        assert data["lines"][0]["service_name"] == "General consultation"
        assert data["lines"][0]["vat_rate"] == "VAT_21"
        assert Decimal(data["lines"][0]["line_total"]) == Decimal("242.00")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "appointment_id, lines, status_code, code",
        [
            (1, [{"medical_service_id": 10, "quantity": 1}, {"medical_service_id": 10, "quantity": 2}],
             400, "DUPLICATE_MEDICAL_SERVICE"),
            (404, [{"medical_service_id": 10, "quantity": 1}], 404, "APPOINTMENT_NOT_FOUND"),
            (1, [{"medical_service_id": 999, "quantity": 1}], 404, "MEDICAL_SERVICE_NOT_FOUND"),
            (3, [{"medical_service_id": 10, "quantity": 1}], 422, "APPOINTMENT_CANCELLED"),
            (4, [{"medical_service_id": 10, "quantity": 1}], 422, "APPOINTMENT_NOT_COMPLETED"),
            (1, [{"medical_service_id": 19, "quantity": 1}], 422, "MEDICAL_SERVICE_INACTIVE"),
        ],
    )
    async def test_issue_invoice_errors(
        self, client: AsyncClient, clinic, appointment_id, lines, status_code, code
    ):
        response = await client.post(
            f"/api/appointments/{appointment_id}/invoice", json={"lines": lines}
        )

        assert response.status_code == status_code
        data = response.json()
        assert data["error"]["code"] == code
        assert isinstance(data["error"]["message"], str)

    @pytest.mark.asyncio
    async def test_issue_invoice_twice_returns_409(self, client: AsyncClient, clinic):
        payload = {"lines": [{"medical_service_id": 10, "quantity": 1}]}

        first = await client.post("/api/appointments/2/invoice", json=payload)
        second = await client.post("/api/appointments/2/invoice", json=payload)

        assert first.status_code == 201
        assert second.status_code == 409
        assert second.json()["error"]["code"] == "APPOINTMENT_ALREADY_INVOICED"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {"lines": []},
            {"lines": [{"medical_service_id": 10, "quantity": 0}]},
            {"lines": [{"medical_service_id": 10, "quantity": -1}]},
            {},
        ],
    )
    async def test_issue_invoice_validation_error(self, client: AsyncClient, clinic, payload):
        response = await client.post("/api/appointments/1/invoice", json=payload)

        assert response.status_code == 422  # Pydantic validation error

    @pytest.mark.asyncio
    async def test_pay_invoice_flow(self, client: AsyncClient, clinic):
        issued = await client.post(
            "/api/appointments/1/invoice",
            json={"lines": [{"medical_service_id": 10, "quantity": 2}]},
        )
        invoice_id = issued.json()["id"]

        paid = await client.patch(f"/api/invoices/{invoice_id}/pay", json={"payment_method": "CARD"})
        again = await client.patch(f"/api/invoices/{invoice_id}/pay", json={"payment_method": "CASH"})
        fetched = await client.get(f"/api/invoices/{invoice_id}")

        assert paid.status_code == 200
        assert paid.json()["status"] == "PAID"
        assert paid.json()["payment_method"] == "CARD"
        assert paid.json()["paid_at"] is not None

        assert again.status_code == 409
        assert again.json()["error"]["code"] == "INVALID_INVOICE_STATUS"
        assert "PAID" in again.json()["error"]["message"]

        assert fetched.status_code == 200
        assert fetched.json()["payment_method"] == "CARD"
        assert len(fetched.json()["lines"]) == 1

    @pytest.mark.asyncio
    async def test_pay_missing_invoice_returns_404(self, client: AsyncClient, clinic):
        response = await client.patch("/api/invoices/999/pay", json={"payment_method": "CARD"})

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "INVOICE_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_pay_with_unknown_method_returns_422(self, client: AsyncClient, clinic):
        response = await client.patch("/api/invoices/1/pay", json={"payment_method": "BITCOIN"})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_get_missing_invoice_returns_404(self, client: AsyncClient, clinic):
        response = await client.get("/api/invoices/999")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "INVOICE_NOT_FOUND"
