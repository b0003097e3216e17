"""Observable records.

An ObservableRecord subclass declares its fields with Published descriptors.
Every assignment to a field is followed by a synchronous notification of all
subscribed observers, in subscription order. Observers are zero-argument
callables; they read whatever they need back from the record.

Assignments made by an observer while a notification pass is running are
written through immediately, and each one queues a further full pass that runs
once the current pass is over. The outermost set() only returns when no passes
are left.
"""

import itertools
from typing import Any, Callable

from .. import log
from .errors import (
    ForeignSubscriptionError,
    NotificationLoopError,
    StaleSubscriptionError,
    UnknownFieldError,
)

logger = log.get_logger("model")

# Upper bound on passes triggered by a single outermost set()
MAX_NOTIFICATION_PASSES = 100

Observer = Callable[[], Any]


class Published:
    """Declares an observable field on an ObservableRecord subclass."""

    def __init__(self, default: Any = None, *, default_factory: Callable[[], Any] | None = None):
        self.default = default
        self.default_factory = default_factory
        self.name = ""

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(self, record, owner=None):
        if record is None:
            return self
        return record.get(self.name)

    def __set__(self, record, value):
        record.set(self.name, value)

    def initial_value(self) -> Any:
        """Value a new record starts with when none is given."""
        if self.default_factory is not None:
            return self.default_factory()
        return self.default


class Subscription:
    """Handle for one observer attached to one record."""

    def __init__(self, record: "ObservableRecord", subscription_id: int, observer: Observer):
        self._record = record
        self._id = subscription_id
        self._observer = observer
        self._active = True

    @property
    def record(self) -> "ObservableRecord":
        return self._record

    @property
    def id(self) -> int:
        return self._id

    @property
    def observer(self) -> Observer:
        return self._observer

    @property
    def active(self) -> bool:
        """False once the subscription has been removed from its record."""
        return self._active

    def unsubscribe(self) -> None:
        """Detach the observer. Calling this more than once does nothing."""
        self._record.unsubscribe(self)

    def refresh(self) -> None:
        """Invoke the observer now, outside of any mutation.

        Raises:
            StaleSubscriptionError: If the subscription was already removed.
        """
        if not self._active:
            raise StaleSubscriptionError(
                f"subscription {self._id} on {type(self._record).__name__} was unsubscribed"
            )
        self._observer()

    def __repr__(self):
        state = "active" if self._active else "inactive"
        return f"<Subscription {self._id} {type(self._record).__name__} {state}>"


class ObservableRecord:
    """Mutable record whose field assignments are pushed to observers."""

    _fields: dict[str, Published] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        fields = {}
        for base in reversed(cls.__mro__):
            for name, value in vars(base).items():
                if isinstance(value, Published):
                    fields[name] = value
        cls._fields = fields

    def __init__(self, **initial: Any):
        for name in initial:
            if name not in self._fields:
                raise UnknownFieldError(type(self).__name__, name)

        self._values = {
            name: initial[name] if name in initial else published.initial_value()
            for name, published in self._fields.items()
        }
        self._subscriptions: dict[int, Subscription] = {}
        self._ids = itertools.count(1)
        self._notifying = False
        self._pending_passes = 0

    def __setattr__(self, name, value):
        if name.startswith("_") or name in self._fields:
            object.__setattr__(self, name, value)
            return
        raise UnknownFieldError(type(self).__name__, name)

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        """Names of the declared fields, in declaration order."""
        return tuple(cls._fields)

    @property
    def observer_count(self) -> int:
        return len(self._subscriptions)

    def get(self, field: str) -> Any:
        """Return the current value of a field."""
        if not isinstance(field, str) or field not in self._values:
            raise UnknownFieldError(type(self).__name__, field)
        return self._values[field]

    def set(self, field: str, value: Any) -> None:
        """Replace a field's value and notify every live observer.

        Equal values are not filtered out; every assignment notifies.
        """
        if not isinstance(field, str) or field not in self._values:
            raise UnknownFieldError(type(self).__name__, field)
        self._values[field] = value
        logger.debug("field set", record=type(self).__name__, field=field, observers=len(self._subscriptions))
        self._notify()

    def as_dict(self) -> dict[str, Any]:
        """Shallow copy of the current field values."""
        return dict(self._values)

    def subscribe(self, observer: Observer) -> Subscription:
        """Attach an observer and invoke it once with the current state.

        Returns:
            Handle used to unsubscribe.
        """
        if not callable(observer):
            raise TypeError(f"observer must be callable, got {type(observer).__name__}")

        subscription = Subscription(self, next(self._ids), observer)
        self._subscriptions[subscription.id] = subscription
        logger.debug(
            "observer subscribed",
            record=type(self).__name__,
            subscription=subscription.id,
            observers=len(self._subscriptions),
        )

        def initial_render():
            try:
                observer()
            except Exception:
                # A view that cannot render its initial state is not mounted
                self._discard(subscription)
                raise

        # The initial render counts as a notification: sets made from it are
        # deferred like any other re-entrant set
        if self._notifying:
            initial_render()
        else:
            self._dispatch(initial_render)
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        """Detach an observer. Unsubscribing twice is a no-op.

        Raises:
            ForeignSubscriptionError: If the handle belongs to another record.
        """
        if subscription.record is not self:
            raise ForeignSubscriptionError(
                f"subscription {subscription.id} was issued by another {type(subscription.record).__name__}"
            )
        if self._discard(subscription):
            logger.debug(
                "observer unsubscribed",
                record=type(self).__name__,
                subscription=subscription.id,
                observers=len(self._subscriptions),
            )

    def _discard(self, subscription: Subscription) -> bool:
        removed = self._subscriptions.pop(subscription.id, None) is not None
        subscription._active = False
        return removed

    def _notify(self) -> None:
        if self._notifying:
            # Re-entrant set: run another pass once the current one is done
            self._pending_passes += 1
            return

        self._dispatch(self._notify_all)

    def _notify_all(self) -> None:
        # Snapshot: observers added mid-pass start with the next pass
        for subscription in list(self._subscriptions.values()):
            if subscription.active:
                subscription.observer()

    def _dispatch(self, first_pass: Callable[[], None]) -> None:
        """Run first_pass, then every full pass queued by re-entrant sets."""
        self._notifying = True
        self._pending_passes = 0
        passes = 1
        try:
            first_pass()
            while self._pending_passes:
                self._pending_passes -= 1
                passes += 1
                if passes > MAX_NOTIFICATION_PASSES:
                    raise NotificationLoopError(type(self).__name__, MAX_NOTIFICATION_PASSES)
                self._notify_all()
        finally:
            self._notifying = False
            self._pending_passes = 0

        if passes > 1:
            logger.debug("re-entrant updates settled", record=type(self).__name__, passes=passes)

    def __repr__(self):
        values = ", ".join(f"{name}={value!r}" for name, value in self._values.items())
        return f"{type(self).__name__}({values})"
