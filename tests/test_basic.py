"""
Basic application tests.

Validates that the app built by create_app() answers failed
requests with the shared JSON error body.
"""

from fastapi.testclient import TestClient

from shopkart.domain.product.errors import ProductNotFoundError
from shopkart.main import create_app

app = create_app()


@app.get("/products/{product_id}")
def get_product(product_id: int) -> dict:
    raise ProductNotFoundError.for_id(product_id)


@app.get("/broken")
def broken() -> dict:
    raise ValueError("stock level unreadable")


client = TestClient(app)


class TestErrorWiring:
    """Tests for the error handling installed by create_app()."""

    def test_domain_error_mapped(self) -> None:
        """Product errors raised by mounted routes get the JSON body."""
        response = client.get("/products/42")
        assert response.status_code == 404
        assert response.json()["message"] == "Product Not Found"

    def test_unexpected_error_mapped(self) -> None:
        response = client.get("/broken")
        assert response.status_code == 500
        assert response.json()["details"] == "stock level unreadable"

    def test_request_validation_mapped(self) -> None:
        response = client.get("/products/abc")
        assert response.status_code == 400
        assert response.json()["message"] == "Validation Error"

    def test_unknown_route_keeps_framework_handling(self) -> None:
        """Routing errors are not part of the error responder."""
        response = client.get("/no-such-route")
        assert response.status_code == 404
        assert response.json() == {"detail": "Not Found"}
