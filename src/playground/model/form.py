"""Editable state behind the form view."""

from .observable import ObservableRecord, Published


class FormState(ObservableRecord):
    """Values entered in the form, kept in sync with its widgets."""

    name = Published("")
    location_index = Published(0)
    building_number = Published(0)
    building_type_index = Published(0)
