"""Test the Flask application routes."""
from flask.testing import FlaskClient
import pytest


@pytest.mark.parametrize(
    "operation,a,b,expected",
    [
        ("add", 10, 5, 15),
        ("add", -3, 3, 0),
        ("subtract", 20, 8, 12),
        ("subtract", 5, 9, -4),
        ("multiply", 6, 7, 42),
        ("multiply", -4, 5, -20),
        ("multiply", 2147483647, 2, 4294967294),
    ],
)
def test_integer_operations(client: FlaskClient, operation: str, a: int, b: int, expected: int) -> None:
    """add, subtract and multiply return the exact integer result."""
    response = client.get(f"/api/{operation}/{a}/{b}")
    assert response.status_code == 200
    assert response.mimetype == "application/json"
    assert response.get_json() == {"operation": operation, "a": a, "b": b, "result": expected}


def test_multiply_body_is_compact(client: FlaskClient) -> None:
    """The JSON body matches the documented shape byte for byte."""
    response = client.get("/api/multiply/6/7")
    assert response.get_data(as_text=True) == '{"operation":"multiply","a":6,"b":7,"result":42}'


@pytest.mark.parametrize(
    "a,b,expected",
    [
        (50, 5, "10.00"),
        (10, 3, "3.33"),
        (2, 3, "0.67"),
        (-1, 2, "-0.50"),
        (1, 8, "0.13"),
        (201, 200, "1.01"),
        (203, 200, "1.02"),
        (2009, 200, "10.05"),
    ],
)
def test_divide_two_decimals(client: FlaskClient, a: int, b: int, expected: str) -> None:
    """divide renders the quotient with exactly two decimals."""
    response = client.get(f"/api/divide/{a}/{b}")
    assert response.status_code == 200
    assert response.get_data(as_text=True) == (
        f'{{"operation":"divide","a":{a},"b":{b},"result":{expected}}}'
    )


def test_divide_by_zero(client: FlaskClient) -> None:
    """Division by zero returns 400 with an error payload and no result."""
    response = client.get("/api/divide/5/0")
    assert response.status_code == 400
    payload = response.get_json()
    assert "result" not in payload
    assert payload == {"error": "Division by zero is not allowed"}


@pytest.mark.parametrize(
    "path",
    [
        "/api/add/foo/3",
        "/api/subtract/1/bar",
        "/api/multiply/1.5/2",
        "/api/divide/x/0",
        "/api/add/99999999999/1",
    ],
)
def test_invalid_numbers(client: FlaskClient, path: str) -> None:
    """Malformed operands return 400 with a fixed error message."""
    response = client.get(path)
    assert response.status_code == 400
    assert response.mimetype == "application/json"
    assert response.get_data(as_text=True) == '{"error":"Invalid numbers provided"}'


def test_health(client: FlaskClient) -> None:
    """Health check always reports UP."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.mimetype == "application/json"
    assert response.get_json() == {
        "status": "UP",
        "application": "arithmetic-web-server",
        "version": "1.0.0",
    }


def test_home_page(client: FlaskClient) -> None:
    """Home page is HTML with the calculator form."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.mimetype == "text/html"
    body = response.get_data(as_text=True)
    assert "Interactive Calculator" in body
    assert "/api/${operation}/" in body


def test_api_docs_page(client: FlaskClient) -> None:
    """API documentation page lists the endpoints."""
    response = client.get("/api")
    assert response.status_code == 200
    assert response.mimetype == "text/html"
    body = response.get_data(as_text=True)
    assert "API Documentation" in body
    assert "GET /api/divide/:a/:b" in body


@pytest.mark.parametrize(
    "path",
    [
        "/nonexistent",
        "/api/modulo/1/2",
        "/api/add/1",
        "/api/add/1/2/3",
    ],
)
def test_not_found(client: FlaskClient, path: str) -> None:
    """Unmatched paths return the 404 page."""
    response = client.get(path)
    assert response.status_code == 404
    assert response.mimetype == "text/html"
    assert "404 - Page Not Found" in response.get_data(as_text=True)


def test_unsupported_method_is_not_found(client: FlaskClient) -> None:
    """Methods other than GET on a known path are treated as unmatched."""
    response = client.post("/health")
    assert response.status_code == 404
    assert "404 - Page Not Found" in response.get_data(as_text=True)


@pytest.mark.parametrize("path", ["/", "/health", "/api/add/1/2", "/api/divide/1/0", "/nonexistent"])
def test_cors_headers_on_every_response(client: FlaskClient, path: str) -> None:
    """Every response carries the permissive CORS headers."""
    response = client.get(path)
    assert response.headers["Access-Control-Allow-Origin"] == "*"
    assert response.headers["Access-Control-Allow-Methods"] == "GET, POST, PUT, DELETE, OPTIONS"
    assert response.headers["Access-Control-Allow-Headers"] == "Content-Type, Authorization"


@pytest.mark.parametrize("path", ["/api/add/1/2", "/anything/at/all"])
def test_preflight_short_circuits(client: FlaskClient, path: str) -> None:
    """OPTIONS on any path answers OK with the default CORS headers."""
    response = client.options(path)
    assert response.status_code == 200
    assert response.get_data(as_text=True) == "OK"
    assert response.headers["Access-Control-Allow-Origin"] == "*"
    assert response.headers["Access-Control-Allow-Methods"] == "GET, POST, PUT, DELETE, OPTIONS"


def test_preflight_echoes_requested_headers(client: FlaskClient) -> None:
    """Requested headers and method are echoed back verbatim."""
    response = client.options(
        "/api/add/1/2",
        headers={
            "Origin": "http://example.com",
            "Access-Control-Request-Method": "PATCH",
            "Access-Control-Request-Headers": "X-Custom, Content-Type",
        },
    )
    assert response.status_code == 200
    assert response.headers["Access-Control-Allow-Methods"] == "PATCH"
    assert response.headers["Access-Control-Allow-Headers"] == "X-Custom, Content-Type"
    assert response.headers["Access-Control-Allow-Origin"] == "*"
