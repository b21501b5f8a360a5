from flask_talisman import Talisman

from app.services.subscriptions import SubscriptionService

subscription_service = SubscriptionService()
talisman = Talisman()


__all__ = [
    "subscription_service",
    "talisman",
]
