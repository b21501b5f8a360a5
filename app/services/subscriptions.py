"""
Accepting an email address from one of the site's capture forms.

Where a submission ends up is decided once, when the app starts: if SendFox credentials are configured then every
subscriber is created as a SendFox contact; otherwise the submission is only written to the application log. Both
destinations implement `SubscriberSink`, so tests (and anything else) can swap in their own.
"""

import dataclasses
from typing import Protocol

from flask import Flask, current_app

from app.services.sendfox import SendFoxClient, SendFoxError

UNKNOWN_SOURCE = "unknown"


class InvalidSubscriberError(ValueError):
    def __init__(self, message: str = "Valid email is required") -> None:
        self.message = message
        super().__init__(self.message)


class SubscriptionError(Exception):
    def __init__(self, message: str = "Failed to subscribe") -> None:
        self.message = message
        super().__init__(self.message)


@dataclasses.dataclass(frozen=True)
class Subscriber:
    email: str
    first_name: str = ""
    source: str = UNKNOWN_SOURCE

    @classmethod
    def build(cls, email: str | None, first_name: str | None = None, source: str | None = None) -> "Subscriber":
        email = (email or "").strip()
        if not email or "@" not in email:
            raise InvalidSubscriberError()

        return cls(email=email, first_name=(first_name or "").strip(), source=source or UNKNOWN_SOURCE)


class SubscriberSink(Protocol):
    def add(self, subscriber: Subscriber) -> None: ...


class LoggingSubscriberSink:
    def add(self, subscriber: Subscriber) -> None:
        current_app.logger.info(
            "New subscriber: %(email)s (name: %(first_name)s, source: %(source)s)",
            dict(email=subscriber.email, first_name=subscriber.first_name or "N/A", source=subscriber.source),
        )
        current_app.logger.warning("SendFox not configured. Set SENDFOX_API_TOKEN and SENDFOX_LIST_ID env vars.")


class SendFoxSubscriberSink:
    def __init__(self, client: SendFoxClient) -> None:
        self.client = client

    def add(self, subscriber: Subscriber) -> None:
        try:
            self.client.create_contact(subscriber.email, first_name=subscriber.first_name)
        except SendFoxError as e:
            raise SubscriptionError() from e

        current_app.logger.info(
            "New subscriber: %(email)s (source: %(source)s, SendFox: success)",
            dict(email=subscriber.email, source=subscriber.source),
        )


def build_subscriber_sink(app: Flask) -> SubscriberSink:
    api_token, list_id = app.config["SENDFOX_API_TOKEN"], app.config["SENDFOX_LIST_ID"]
    if api_token and list_id:
        return SendFoxSubscriberSink(
            SendFoxClient(
                api_token,
                list_id,
                base_url=app.config["SENDFOX_API_BASE_URL"],
                timeout=app.config["SENDFOX_TIMEOUT_SECONDS"],
            )
        )
    return LoggingSubscriberSink()


class SubscriptionService:
    def __init__(self, sink: SubscriberSink | None = None) -> None:
        self._sink = sink

    def init_app(self, app: Flask) -> None:
        app.extensions["subscription_service"] = self
        app.extensions["subscription_service.sink"] = self._sink or build_subscriber_sink(app)

    @property
    def sink(self) -> SubscriberSink:
        return current_app.extensions["subscription_service.sink"]  # type: ignore[no-any-return]

    def subscribe(self, email: str | None, *, first_name: str | None = None, source: str | None = None) -> Subscriber:
        """Validate a submission and hand it to the configured sink.

        Raises `InvalidSubscriberError` if the email is missing or has no "@", without touching the sink, and
        `SubscriptionError` if the sink could not accept the subscriber.
        """
        subscriber = Subscriber.build(email, first_name, source)
        self.sink.add(subscriber)
        return subscriber
