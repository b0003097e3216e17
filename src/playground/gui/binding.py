"""Bindings between observable records and Qt widgets.

A BoundView keeps its record subscriptions only while it is on screen: it
subscribes when shown and unsubscribes when hidden. The bind_* helpers register
observers on a BoundView that push record values into widgets. The two-way
ones also push user edits back into the record.
"""

from contextlib import contextmanager
from typing import Any, Callable

from PySide6.QtWidgets import QButtonGroup, QComboBox, QLabel, QLineEdit, QListWidget, QSpinBox, QWidget

from .. import log
from ..model import ObservableRecord, Subscription
from ..model.observable import Observer

logger = log.get_logger("binding")


class BoundView(QWidget):
    """Widget whose record subscriptions follow its visibility."""

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self._observers: list[tuple[ObservableRecord, Observer]] = []
        self._subscriptions: list[Subscription] = []
        self._mounted = False

    @property
    def is_mounted(self) -> bool:
        return self._mounted

    @property
    def subscriptions(self) -> list[Subscription]:
        return list(self._subscriptions)

    def observe(self, record: ObservableRecord, observer: Observer) -> None:
        """Render with observer whenever record changes while mounted."""
        self._observers.append((record, observer))
        if self._mounted:
            self._subscriptions.append(record.subscribe(observer))

    def mount(self) -> None:
        """Subscribe every registered observer. No-op when already mounted."""
        if self._mounted:
            return
        self._mounted = True
        for record, observer in self._observers:
            self._subscriptions.append(record.subscribe(observer))
        logger.debug("view mounted", view=type(self).__name__, subscriptions=len(self._subscriptions))

    def unmount(self) -> None:
        """Drop every subscription. No-op when not mounted."""
        if not self._mounted:
            return
        self._mounted = False
        for subscription in self._subscriptions:
            subscription.unsubscribe()
        self._subscriptions.clear()
        logger.debug("view unmounted", view=type(self).__name__)

    def showEvent(self, event):
        super().showEvent(event)
        self.mount()

    def hideEvent(self, event):
        super().hideEvent(event)
        self.unmount()


@contextmanager
def _signals_blocked(obj):
    """Keep widget updates coming from the record from echoing back."""
    previous = obj.blockSignals(True)
    try:
        yield obj
    finally:
        obj.blockSignals(previous)


def bind_text(view: BoundView, line_edit: QLineEdit, record: ObservableRecord, field: str) -> None:
    """Two-way binding between a line edit and a text field."""
    record.get(field)

    def render():
        text = record.get(field)
        # Only touch the widget when needed so the cursor stays put while typing
        if line_edit.text() != text:
            with _signals_blocked(line_edit):
                line_edit.setText(text)

    line_edit.textEdited.connect(lambda text: record.set(field, text))
    view.observe(record, render)


def bind_index(view: BoundView, combo: QComboBox, record: ObservableRecord, field: str) -> None:
    """Two-way binding between a combo box selection and an index field."""
    record.get(field)

    def render():
        with _signals_blocked(combo):
            combo.setCurrentIndex(record.get(field))

    combo.currentIndexChanged.connect(lambda index: record.set(field, index))
    view.observe(record, render)


def bind_value(view: BoundView, spin: QSpinBox, record: ObservableRecord, field: str) -> None:
    """Two-way binding between a spin box and an integer field."""
    record.get(field)

    def render():
        with _signals_blocked(spin):
            spin.setValue(record.get(field))

    spin.valueChanged.connect(lambda value: record.set(field, value))
    view.observe(record, render)


def bind_checked(view: BoundView, group: QButtonGroup, record: ObservableRecord, field: str) -> None:
    """Two-way binding between an exclusive button group and an index field.

    Button ids are the indexes stored in the field.
    """
    record.get(field)

    def render():
        button = group.button(record.get(field))
        if button is not None:
            with _signals_blocked(group):
                button.setChecked(True)

    group.idClicked.connect(lambda button_id: record.set(field, button_id))
    view.observe(record, render)


def bind_label(
    view: BoundView,
    label: QLabel,
    record: ObservableRecord,
    field: str,
    fmt: Callable[[Any], str] = str,
) -> None:
    """One-way binding: the label shows fmt(value)."""
    record.get(field)
    view.observe(record, lambda: label.setText(fmt(record.get(field))))


def bind_list(view: BoundView, list_widget: QListWidget, record: ObservableRecord, field: str) -> None:
    """One-way binding: one row per item of a sequence field."""
    record.get(field)

    def render():
        list_widget.clear()
        list_widget.addItems([str(item) for item in record.get(field)])

    view.observe(record, render)
