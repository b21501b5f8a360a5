from flask import Blueprint

landing_blueprint = Blueprint(name="landing", import_name=__name__)

from app.landing import routes  # noqa: E402, F401
