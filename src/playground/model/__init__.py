"""Observable records and their subscriptions.

This is the model side of the playground: records whose field assignments are
pushed synchronously to every subscribed observer.
"""

from .errors import (
    BindingError,
    ForeignSubscriptionError,
    NotificationLoopError,
    StaleSubscriptionError,
    UnknownFieldError,
)
from .form import FormState
from .mix import Mix
from .observable import MAX_NOTIFICATION_PASSES, ObservableRecord, Published, Subscription

__all__ = [
    "BindingError",
    "ForeignSubscriptionError",
    "FormState",
    "MAX_NOTIFICATION_PASSES",
    "Mix",
    "NotificationLoopError",
    "ObservableRecord",
    "Published",
    "StaleSubscriptionError",
    "Subscription",
    "UnknownFieldError",
]
