"""Errors raised when an observable record is misused.

None of these are recoverable conditions. They report binding bugs in the
calling code and are meant to surface immediately.
"""


class BindingError(Exception):
    """Base class for observable record misuse."""


class UnknownFieldError(BindingError, AttributeError):
    """A field name outside the record's declared set was used."""

    def __init__(self, record_name: str, field: str):
        super().__init__(f"{record_name} has no field {field!r}")
        self.record_name = record_name
        self.field = field


class StaleSubscriptionError(BindingError):
    """A subscription handle was used after it was unsubscribed."""


class ForeignSubscriptionError(BindingError):
    """A subscription handle was passed to a record that did not issue it."""


class NotificationLoopError(BindingError):
    """Re-entrant updates kept scheduling notification passes without settling."""

    def __init__(self, record_name: str, passes: int):
        super().__init__(f"{record_name} still changing after {passes} notification passes")
        self.record_name = record_name
        self.passes = passes
