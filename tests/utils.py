from typing import cast

from bs4 import BeautifulSoup, Tag

from app.services.subscriptions import Subscriber, SubscriptionError


class RecordingSubscriberSink:
    """
    Stands in for the configured subscriber sink, remembering every subscriber it is given. Set `fail` to make it
    behave like a mailing-list provider that rejected the request.
    """

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.subscribers: list[Subscriber] = []

    def add(self, subscriber: Subscriber) -> None:
        if self.fail:
            raise SubscriptionError()
        self.subscribers.append(subscriber)


def get_h1_text(soup: BeautifulSoup) -> str:
    h1 = soup.h1
    assert h1, "Could not find <h1> on page"
    return cast(str, h1.text).strip()


def get_signup(soup: BeautifulSoup, variant: str) -> Tag:
    signup = soup.find("div", attrs={"data-signup": True, "data-variant": variant})
    assert isinstance(signup, Tag), f"Could not find the {variant} signup form on page"
    return signup


def is_visible(element: Tag | None) -> bool:
    return element is not None and not element.has_attr("hidden")
