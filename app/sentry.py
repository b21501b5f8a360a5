import logging
import os

import sentry_sdk
from sentry_sdk.integrations.logging import LoggingIntegration
from sentry_sdk.types import Event, Hint

from app.config import Environment

_UNSAMPLED_PATHS = {"/healthcheck"}


def _is_unsampled_request(sampling_context: Hint) -> bool:
    wsgi_environ = sampling_context.get("wsgi_environ")
    return bool(wsgi_environ and wsgi_environ.get("PATH_INFO") in _UNSAMPLED_PATHS)


def errors_sampler(event: Event, hint: Hint) -> float:
    return float(os.getenv("SENTRY_ERRORS_SAMPLE_RATE", "1"))


def traces_sampler(sampling_context: Hint) -> float:
    if _is_unsampled_request(sampling_context):
        return 0
    return float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "0.05"))


def profiles_sampler(sampling_context: Hint) -> float:
    if _is_unsampled_request(sampling_context):
        return 0
    return float(os.getenv("SENTRY_PROFILES_SAMPLE_RATE", "0.05"))


def init_sentry() -> None:
    if not os.getenv("SENTRY_DSN"):
        return

    # Assume production if unset so that subscriber emails are never shipped to Sentry by mistake.
    env = Environment(os.getenv("FLASK_ENV", Environment.PROD.value))

    sentry_sdk.init(
        environment=env.value,
        send_default_pii=env is not Environment.PROD,
        error_sampler=errors_sampler,
        traces_sampler=traces_sampler,
        profiles_sampler=profiles_sampler,
        release=os.getenv("GITHUB_SHA"),
        _experiments={
            "enable_logs": True,
        },
        integrations=[
            LoggingIntegration(sentry_logs_level=logging.INFO),
        ],
    )
