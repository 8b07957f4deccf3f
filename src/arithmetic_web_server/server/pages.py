"""Static HTML pages served by the web server."""
from flask import render_template

HOME_TEMPLATE: str = "home.html"
API_DOCS_TEMPLATE: str = "api.html"
NOT_FOUND_TEMPLATE: str = "not_found.html"


def home_page() -> str:
    """Home page with the interactive calculator."""
    return render_template(HOME_TEMPLATE)


def api_docs_page() -> str:
    """API documentation page."""
    return render_template(API_DOCS_TEMPLATE)


def not_found_page() -> str:
    """Page returned for unmatched routes."""
    return render_template(NOT_FOUND_TEMPLATE)
