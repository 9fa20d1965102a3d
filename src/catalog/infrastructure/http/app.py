"""HTTP interface: a Flask application exposing the product catalog as JSON.

Routes translate requests into handler calls; error handlers translate
DomainException subclasses into status codes. Storage details never
reach the response body.
"""

from __future__ import annotations

import logging

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from catalog.application.add_product import AddProductHandler
from catalog.application.check_health import CheckHealthHandler
from catalog.application.delete_product import DeleteProductHandler
from catalog.application.list_products import ListProductsHandler
from catalog.application.show_product import ShowProductHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.exceptions import (
    EntityNotFoundError,
    InvalidFieldError,
    InvalidIdentifierError,
    StorageError,
    ValidationError,
)
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


def create_app(product_repo: ProductRepository | None = None) -> Flask:
    """Build the application.

    Without an explicit repository the SQL one is wired from the
    environment, so importing this module never touches the database.
    """
    if product_repo is None:
        from catalog.infrastructure.bootstrap import product_repository

        product_repo = product_repository()

    app = Flask(__name__)
    app.json.sort_keys = False
    _register_routes(app, product_repo)
    _register_error_handlers(app)
    return app


def _json_body(missing: object) -> object:
    """Decoded request body, or ``missing`` when the body is empty.

    A body that is present but does not decode is a ValidationError.
    """
    if not request.get_data(cache=True):
        return missing
    body = request.get_json(silent=True)
    if body is None:
        raise ValidationError("Request body must be valid JSON")
    return body


def _register_routes(app: Flask, repo: ProductRepository) -> None:

    @app.get("/")
    def home():
        return jsonify({"Products API - Home Page": "Welcome to the Products API!"}), 200

    @app.get("/health")
    def health():
        status = CheckHealthHandler(repo).handle()
        body = {"status": status.status, "database": status.database}
        return jsonify(body), 200 if status.healthy else 500

    @app.get("/products")
    def list_products():
        products = ListProductsHandler(repo).handle()
        return jsonify([p.to_dict() for p in products]), 200

    @app.get("/products/<product_id>")
    def get_product(product_id: str):
        product = ShowProductHandler(repo).handle(product_id)
        return jsonify(product.to_dict()), 200

    @app.post("/products")
    def create_product():
        product = AddProductHandler(repo).handle(_json_body(missing=None))
        return jsonify(product.to_dict()), 201

    @app.put("/products/<product_id>")
    def update_product(product_id: str):
        # A missing body is an empty patch, i.e. a no-op read.
        product = UpdateProductHandler(repo).handle(product_id, _json_body(missing={}))
        return jsonify(product.to_dict()), 200

    @app.delete("/products/<product_id>")
    def delete_product(product_id: str):
        DeleteProductHandler(repo).handle(product_id)
        return "", 204


def _register_error_handlers(app: Flask) -> None:

    @app.errorhandler(InvalidIdentifierError)
    def invalid_identifier(exc: InvalidIdentifierError):
        return jsonify({"error": "Invalid product ID"}), 400

    @app.errorhandler(InvalidFieldError)
    def invalid_field(exc: InvalidFieldError):
        return jsonify({"error": str(exc), "field": exc.field}), 400

    @app.errorhandler(ValidationError)
    def invalid_request(exc: ValidationError):
        return jsonify({"error": str(exc)}), 400

    @app.errorhandler(EntityNotFoundError)
    def not_found(exc: EntityNotFoundError):
        return jsonify({"error": str(exc)}), 404

    @app.errorhandler(StorageError)
    def storage_failure(exc: StorageError):
        # Already logged with the failing statement by the repository.
        return jsonify({"error": "Internal Server Error"}), 500

    @app.errorhandler(HTTPException)
    def http_error(exc: HTTPException):
        return jsonify({"error": exc.name}), exc.code

    @app.errorhandler(Exception)
    def unexpected(exc: Exception):
        logger.exception("Unhandled error while serving %s %s", request.method, request.path)
        return jsonify({"error": "Internal Server Error"}), 500
