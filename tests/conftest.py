import os
import typing as t
from typing import Any, Generator
from unittest.mock import patch

import html5lib
import pytest
from flask import Flask, template_rendered
from flask.testing import FlaskClient
from freezegun import freeze_time
from freezegun.api import FrozenDateTimeFactory
from jinja2 import Template
from werkzeug.test import TestResponse

from app import create_app
from app.services.sendfox import SendFoxClient
from app.services.subscriptions import SendFoxSubscriberSink, SubscriberSink
from tests.types import TTemplatesRendered
from tests.utils import RecordingSubscriberSink

html5parser = html5lib.HTMLParser(strict=False)

SENDFOX_TEST_TOKEN = "sendfox-test-token"  # pragma: allowlist secret
SENDFOX_TEST_LIST_ID = 12345


class LaunchSiteTestClient(FlaskClient):
    def open(
        self,
        *args: t.Any,
        buffered: bool = False,
        follow_redirects: bool = False,
        **kwargs: t.Any,
    ) -> TestResponse:
        response = super().open(*args, buffered=buffered, follow_redirects=follow_redirects, **kwargs)

        # Validate that our HTML is well-structured.
        if response.content_type.startswith("text/html"):
            html = response.data.decode()
            html5parser.parse(html)

            if html5parser.errors:
                location, error, _extra_info = html5parser.errors[-1]
                line_number, character_number = location
                line_with_context = "\n".join(html.splitlines()[max(line_number - 10, 0) : line_number])
                raise html5lib.html5parser.ParseError(
                    f"\n\n{line_with_context}\n{' ' * (character_number - 1)}^ {error}"
                )

        return response


@pytest.fixture(scope="session")
def app() -> Generator[Flask, None, None]:
    with patch.dict(os.environ, {"FLASK_ENV": "unit_test"}):
        # Whatever is configured in the developer's shell, tests start from the log-only sink.
        os.environ.pop("SENDFOX_API_TOKEN", None)
        os.environ.pop("SENDFOX_LIST_ID", None)
        app = create_app()

    app.test_client_class = LaunchSiteTestClient
    app.config.update({"TESTING": True})

    for template_name in app.jinja_env.list_templates():
        app.jinja_env.get_template(template_name)

    yield app


@pytest.fixture(scope="function", autouse=True)
def app_context(app: Flask) -> Generator[None, None, None]:
    with app.app_context():
        yield


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()


@pytest.fixture()
def templates_rendered(app: Flask) -> Generator[TTemplatesRendered, None, None]:
    recorded: TTemplatesRendered = []

    def record(sender: Flask, template: Template, context: dict[str, Any], **extra: dict[str, Any]) -> None:
        recorded.append((template, context))

    template_rendered.connect(record, app)
    try:
        yield recorded
    finally:
        template_rendered.disconnect(record, app)


def _swap_sink(app: Flask, sink: SubscriberSink) -> Generator[SubscriberSink, None, None]:
    original = app.extensions["subscription_service.sink"]
    app.extensions["subscription_service.sink"] = sink
    try:
        yield sink
    finally:
        app.extensions["subscription_service.sink"] = original


@pytest.fixture()
def subscriber_sink(app: Flask) -> Generator[RecordingSubscriberSink, None, None]:
    yield from _swap_sink(app, RecordingSubscriberSink())  # type: ignore[misc]


@pytest.fixture()
def failing_subscriber_sink(app: Flask) -> Generator[RecordingSubscriberSink, None, None]:
    yield from _swap_sink(app, RecordingSubscriberSink(fail=True))  # type: ignore[misc]


@pytest.fixture()
def sendfox_sink(app: Flask) -> Generator[SendFoxSubscriberSink, None, None]:
    """Route subscriptions to SendFox, as if both credentials were configured. Pair with `responses`."""
    sink = SendFoxSubscriberSink(
        SendFoxClient(SENDFOX_TEST_TOKEN, SENDFOX_TEST_LIST_ID, base_url=app.config["SENDFOX_API_BASE_URL"])
    )
    yield from _swap_sink(app, sink)  # type: ignore[misc]


@pytest.fixture(scope="function", autouse=True)
def time_freezer(request: pytest.FixtureRequest) -> Generator[FrozenDateTimeFactory | None, None, None]:
    marker = request.node.get_closest_marker("freeze_time")
    if marker:
        with freeze_time(marker.args[0]) as frozen:
            yield frozen
    else:
        yield None
