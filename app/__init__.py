import typing as t
from typing import Any

from flask import Flask, jsonify, render_template, request
from flask.typing import ResponseReturnValue
from jinja2 import ChoiceLoader, PackageLoader
from werkzeug.exceptions import InternalServerError, NotFound
from werkzeug.routing import BaseConverter, ValidationError

from app import logging
from app.api.types import ErrorResponse
from app.config import get_settings
from app.extensions import subscription_service, talisman
from app.sentry import init_sentry
from app.types import FormStatus, FormVariant

init_sentry()


def _wants_json() -> bool:
    return request.path.startswith("/api/")


def _register_global_error_handlers(app: Flask) -> None:
    @app.errorhandler(NotFound)
    def handle_404(error: NotFound) -> ResponseReturnValue:
        if _wants_json():
            return jsonify(ErrorResponse(error="Not found").model_dump(mode="json")), 404
        return render_template("common/errors/404.html"), 404

    @app.errorhandler(InternalServerError)
    def handle_500(error: InternalServerError) -> ResponseReturnValue:
        if _wants_json():
            return jsonify(ErrorResponse(error="Internal server error").model_dump(mode="json")), 500
        return render_template("common/errors/500.html"), 500


def _register_custom_converters(app: Flask) -> None:
    """
    Lets routes take the signup form variant straight from the URL, eg:

        @app.route("/subscribe/<form_variant:variant>")
        def handler(variant: FormVariant):
            ...

    Anything that isn't a known variant is a 404.
    """

    class FormVariantConverter(BaseConverter):
        def to_python(self, value: str) -> t.Any:
            try:
                return FormVariant(value.lower())
            except ValueError as e:
                raise ValidationError() from e

        def to_url(self, value: t.Any) -> str:
            return str(value).lower()

    app.url_map.converters["form_variant"] = FormVariantConverter


def create_app() -> Flask:
    app = Flask(__name__, static_folder="static", static_url_path="/static")
    app.config.from_object(get_settings())

    # Initialise extensions
    logging.init_app(app)
    subscription_service.init_app(app)
    talisman.init_app(app, **app.config["TALISMAN_SETTINGS"])

    # Generate https URLs when deployed behind a reverse proxy, and http ones on localhost.
    from werkzeug.middleware.proxy_fix import ProxyFix

    app.wsgi_app = (  # type: ignore[method-assign]
        ProxyFix(app.wsgi_app, x_proto=app.config["PROXY_FIX_PROTO"], x_host=app.config["PROXY_FIX_HOST"])
    )

    # Configure templates
    app.jinja_loader = ChoiceLoader(
        [
            PackageLoader("app.common"),
            PackageLoader("app.landing"),
            PackageLoader("app.assessment"),
        ]
    )

    @app.context_processor
    def _jinja_template_context() -> dict[str, Any]:
        return dict(
            enum=dict(
                form_status=FormStatus,
                form_variant=FormVariant,
            ),
        )

    # Attach routes
    _register_custom_converters(app)

    from app.api import api_blueprint
    from app.assessment import assessment_blueprint
    from app.healthcheck import healthcheck_blueprint
    from app.landing import landing_blueprint

    app.register_blueprint(healthcheck_blueprint)
    app.register_blueprint(landing_blueprint)
    app.register_blueprint(assessment_blueprint)
    app.register_blueprint(api_blueprint)

    _register_global_error_handlers(app)

    app.config["SEND_FILE_MAX_AGE_DEFAULT"] = 3600
    return app
