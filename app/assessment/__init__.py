from flask import Blueprint

assessment_blueprint = Blueprint(name="assessment", import_name=__name__, url_prefix="/assessment")

from app.assessment import routes  # noqa: E402, F401
