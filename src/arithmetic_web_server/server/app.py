"""Flask application routing arithmetic requests to JSON responses."""
from typing import Optional

from flask import Flask, Response, request
from werkzeug.exceptions import MethodNotAllowed, NotFound

from arithmetic_web_server.common.arithmetic import OPERATIONS, DivisionByZeroError, compute
from arithmetic_web_server.common.logger import logger
from arithmetic_web_server.common.models import (
    ErrorResponse,
    HealthStatus,
    InvalidOperandError,
    OperationResult,
    Operands,
)
from arithmetic_web_server.server import pages

JSON_MIMETYPE: str = "application/json"

# Headers added to every response
CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}

# URL rule matching only the operations the API exposes, e.g. /api/add/1/2
OPERATION_RULE: str = f"/api/<any({', '.join(OPERATIONS)}):operation>/<a>/<b>"


def _json_response(body: str, status: int = 200) -> Response:
    return Response(body, status=status, mimetype=JSON_MIMETYPE)


def create_app() -> Flask:
    """
    Create the Flask application serving the calculator API and pages.

    Routes:
        - GET /                      home page
        - GET /api/<op>/<a>/<b>      arithmetic result as JSON
        - GET /health                health check
        - GET /api                   API documentation page
        - OPTIONS on any path        CORS preflight
        - anything else              404 page

    :return: Configured application
    :rtype: Flask
    """
    app = Flask(__name__)

    @app.before_request
    def answer_preflight() -> Optional[Response]:
        """Short-circuit OPTIONS requests on any path, echoing the requested headers and method."""
        if request.method != "OPTIONS":
            return None
        response = Response("OK", status=200, mimetype="text/plain")
        requested_headers: Optional[str] = request.headers.get("Access-Control-Request-Headers")
        if requested_headers is not None:
            response.headers["Access-Control-Allow-Headers"] = requested_headers
        requested_method: Optional[str] = request.headers.get("Access-Control-Request-Method")
        if requested_method is not None:
            response.headers["Access-Control-Allow-Methods"] = requested_method
        return response

    @app.after_request
    def add_cors_headers(response: Response) -> Response:
        # Preflight responses keep their echoed values
        for name, value in CORS_HEADERS.items():
            response.headers.setdefault(name, value)
        return response

    @app.get("/")
    def home() -> Response:
        return Response(pages.home_page(), mimetype="text/html")

    @app.get(OPERATION_RULE)
    def calculate(operation: str, a: str, b: str) -> Response:
        """Parse both operands, apply the operation and return the result as JSON."""
        operands = Operands.from_path(a, b)
        result = OperationResult(
            operation=operation,
            a=operands.a,
            b=operands.b,
            result=compute(operation, operands.a, operands.b),
        )
        body: str = result.to_json()
        logger.info(f"🧮✅ {operation} {operands.a} {operands.b} -> {body}")
        return _json_response(body)

    @app.get("/health")
    def health() -> Response:
        return _json_response(HealthStatus().to_json())

    @app.get("/api")
    def api_docs() -> Response:
        return Response(pages.api_docs_page(), mimetype="text/html")

    @app.errorhandler(InvalidOperandError)
    def invalid_operands(exc: InvalidOperandError) -> Response:
        logger.warning(f"🧮❌ Rejected {request.path}: {exc}")
        return _json_response(ErrorResponse(error=str(exc)).to_json(), status=400)

    @app.errorhandler(DivisionByZeroError)
    def division_by_zero(exc: DivisionByZeroError) -> Response:
        logger.warning(f"🧮❌ Rejected {request.path}: {exc}")
        return _json_response(ErrorResponse(error=str(exc)).to_json(), status=400)

    # Unknown paths and unsupported methods on known paths both get the 404 page
    @app.errorhandler(NotFound)
    @app.errorhandler(MethodNotAllowed)
    def not_found(exc: Exception) -> Response:
        logger.warning(f"🔍❌ No route for {request.method} {request.path}")
        return Response(pages.not_found_page(), status=404, mimetype="text/html")

    return app
