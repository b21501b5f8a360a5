import dataclasses
from typing import Any

import requests
from flask import current_app


class SendFoxError(Exception):
    def __init__(
        self,
        message: str = "There was a problem adding the contact to SendFox",
        status_code: int | None = None,
    ):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


@dataclasses.dataclass(frozen=True)
class SendFoxContact:
    id: int | None
    email: str


class SendFoxClient:
    """A thin client for the one SendFox endpoint we use: creating a contact on a list.

    See https://help.sendfox.com/article/278-endpoints
    """

    def __init__(
        self,
        api_token: str,
        list_id: int,
        *,
        base_url: str = "https://api.sendfox.com",
        timeout: float = 10,
        session: requests.Session | None = None,
    ) -> None:
        self.api_token = api_token
        self.list_id = list_id
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def create_contact(self, email: str, *, first_name: str = "") -> SendFoxContact:
        payload: dict[str, Any] = {
            "email": email,
            "first_name": first_name,
            "lists": [int(self.list_id)],
        }

        try:
            response = self.session.post(
                f"{self.base_url}/contacts",
                json=payload,
                headers={"Authorization": f"Bearer {self.api_token}"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            current_app.logger.error("SendFox request failed: %(error)s", dict(error=str(e)))
            raise SendFoxError() from e

        if not response.ok:
            current_app.logger.error(
                "SendFox error: %(status)s %(body)s",
                dict(status=response.status_code, body=response.text),
            )
            raise SendFoxError(status_code=response.status_code)

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}
        return SendFoxContact(id=body.get("id"), email=body.get("email", email))
