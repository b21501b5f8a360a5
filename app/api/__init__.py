from flask import Blueprint, current_app, jsonify, request
from flask.typing import ResponseReturnValue
from pydantic import ValidationError

from app.api.types import ErrorResponse, SubscribeRequest, SubscribeSuccessResponse
from app.extensions import subscription_service
from app.services.subscriptions import InvalidSubscriberError, SubscriptionError

api_blueprint = Blueprint("api", __name__, url_prefix="/api")


def _error(message: str, status: int) -> ResponseReturnValue:
    return jsonify(ErrorResponse(error=message).model_dump(mode="json")), status


@api_blueprint.post("/subscribe")
def subscribe() -> ResponseReturnValue:
    """
    Called by the signup forms' script. The body is `{"email": ..., "first_name": ..., "source": ...}`; only `email`
    is required, and it only has to contain an "@".
    """
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return _error(InvalidSubscriberError().message, 400)

    try:
        data = SubscribeRequest.model_validate(payload)
    except ValidationError:
        return _error(InvalidSubscriberError().message, 400)

    try:
        subscription_service.subscribe(data.email, first_name=data.first_name, source=data.source)
    except InvalidSubscriberError as e:
        return _error(e.message, 400)
    except SubscriptionError as e:
        current_app.logger.warning("Subscription via API failed for source %(source)s", dict(source=data.source))
        return _error(e.message, 500)

    return jsonify(SubscribeSuccessResponse().model_dump(mode="json")), 200
