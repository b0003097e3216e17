"""Catalog views: forms, stacks, buttons, framed layouts and lists."""

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QButtonGroup,
    QComboBox,
    QDialog,
    QFormLayout,
    QFrame,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QMessageBox,
    QPushButton,
    QSpinBox,
    QStyle,
    QVBoxLayout,
    QWidget,
)

from .. import log
from ..model import FormState
from .binding import BoundView, bind_checked, bind_index, bind_text, bind_value

logger = log.get_logger("views")

MAX_BUILDING_NUMBER = 99999


def bordered(widget: QWidget) -> QWidget:
    """Padded, blue, slightly rounded background. Returns the widget."""
    widget.setStyleSheet(
        widget.styleSheet() + "padding: 8px; background-color: #1e6fd9; color: white; border-radius: 4px;"
    )
    return widget


def scaled_font(widget: QWidget, factor: float) -> QFont:
    """Copy of the widget font, scaled by factor."""
    font = QFont(widget.font())
    if font.pointSize() > 0:
        font.setPointSize(int(font.pointSize() * factor))
    return font


def _row(*widgets: QWidget) -> QHBoxLayout:
    """Leading-aligned horizontal row."""
    row = QHBoxLayout()
    for widget in widgets:
        row.addWidget(widget)
    row.addStretch()
    return row


class InfoView(QDialog):
    """Sheet shown from the info button."""

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.setWindowTitle("Info")
        self.setModal(True)
        layout = QVBoxLayout(self)
        layout.addWidget(QLabel("Info View"), 0, Qt.AlignmentFlag.AlignCenter)


class FormView(BoundView):
    """Personal info form, two-way bound to a FormState."""

    TITLE = "Form"

    def __init__(
        self,
        locations: list[str],
        building_types: list[str],
        state: FormState | None = None,
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        self._state = state if state is not None else FormState()

        layout = QVBoxLayout(self)

        # ==================== PERSONAL INFO ====================
        personal_group = QGroupBox("Personal Info")
        personal_layout = QFormLayout(personal_group)

        self._name_edit = QLineEdit()
        self._name_edit.setPlaceholderText("Name")
        personal_layout.addRow(self._name_edit)

        self._location_combo = QComboBox()
        self._location_combo.addItems(locations)
        personal_layout.addRow("Location", self._location_combo)

        self._building_spin = QSpinBox()
        self._building_spin.setRange(0, MAX_BUILDING_NUMBER)
        self._building_spin.setToolTip("Building")
        personal_layout.addRow("Building", self._building_spin)

        # Segmented picker: exclusive checkable buttons, id = index
        self._building_type_group = QButtonGroup(self)
        self._building_type_group.setExclusive(True)
        segment_container = QWidget()
        segment_layout = QHBoxLayout(segment_container)
        segment_layout.setContentsMargins(0, 0, 0, 0)
        segment_layout.setSpacing(0)
        for index, building_type in enumerate(building_types):
            button = QPushButton(building_type)
            button.setCheckable(True)
            self._building_type_group.addButton(button, index)
            segment_layout.addWidget(button)
        personal_layout.addRow("Building type", segment_container)

        layout.addWidget(personal_group)

        # ==================== ROWS ====================
        rows_group = QGroupBox("Rows")
        rows_layout = QVBoxLayout(rows_group)
        for index in range(3):
            rows_layout.addWidget(QLabel(f"Row {index}"))
        layout.addWidget(rows_group)

        layout.addStretch()

        bind_text(self, self._name_edit, self._state, "name")
        bind_index(self, self._location_combo, self._state, "location_index")
        bind_value(self, self._building_spin, self._state, "building_number")
        bind_checked(self, self._building_type_group, self._state, "building_type_index")

    @property
    def state(self) -> FormState:
        return self._state


class StackView(QWidget):
    """Two leading rows and a button raising an alert."""

    TITLE = "Stacks"

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self._showing_alert = False

        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(8)
        layout.addLayout(_row(QLabel("Row 1")))
        layout.addLayout(_row(QLabel("Row 2")))

        self._alert_btn = QPushButton("Alert")
        self._alert_btn.clicked.connect(self.show_alert)
        layout.addLayout(_row(self._alert_btn))
        layout.addStretch()

        self._alert = QMessageBox(
            QMessageBox.Icon.NoIcon,
            "Alert",
            "Alert message",
            QMessageBox.StandardButton.Ok,
            self,
        )
        self._alert.button(QMessageBox.StandardButton.Ok).setText("OK")
        self._alert.finished.connect(self._on_alert_dismissed)

    @property
    def showing_alert(self) -> bool:
        return self._showing_alert

    def show_alert(self):
        """Present the alert without blocking the event loop."""
        self._showing_alert = True
        self._alert.open()

    def _on_alert_dismissed(self, result: int):
        self._showing_alert = False


class ButtonView(QWidget):
    """A row of icon buttons with different chrome."""

    TITLE = "Buttons"

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setSpacing(8)
        style = self.style()

        self._send_btn = QPushButton()
        self._send_btn.setIcon(style.standardIcon(QStyle.StandardPixmap.SP_ArrowRight))
        self._send_btn.clicked.connect(lambda: logger.info("button pressed"))
        bordered(self._send_btn)
        layout.addWidget(self._send_btn, 0, Qt.AlignmentFlag.AlignTop)

        self._add_btn = QPushButton()
        self._add_btn.setIcon(style.standardIcon(QStyle.StandardPixmap.SP_FileDialogNewFolder))
        self._add_btn.setStyleSheet("padding: 8px; border: 1px solid black; border-radius: 14px;")
        self._add_btn.clicked.connect(lambda: logger.info("other button"))
        layout.addWidget(self._add_btn, 0, Qt.AlignmentFlag.AlignTop)

        self._map_btn = QPushButton()
        self._map_btn.setIcon(style.standardIcon(QStyle.StandardPixmap.SP_DirHomeIcon))
        self._map_btn.setStyleSheet("padding: 8px; background-color: #1e6fd9; border-radius: 14px;")
        self._map_btn.clicked.connect(self._map)
        layout.addWidget(self._map_btn, 0, Qt.AlignmentFlag.AlignTop)

        layout.addStretch()

    def _map(self):
        logger.info("map")


class FramedView(QWidget):
    """Centered title, nested colored borders and a fixed-size button."""

    TITLE = "Framed"
    BORDER_COLORS = ("red", "blue", "green", "yellow")

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.setObjectName("framed")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setStyleSheet("#framed { background-color: #5ac8d8; }")

        layout = QVBoxLayout(self)

        header = QVBoxLayout()
        header.setContentsMargins(8, 8, 8, 8)
        header.setSpacing(8)
        title = QLabel("Title")
        title.setFont(scaled_font(title, 2))
        header.addWidget(title, 0, Qt.AlignmentFlag.AlignHCenter)
        header.addLayout(_row(QLabel("SwiftUI")))
        layout.addLayout(header)

        # Each color wraps the previous one, innermost first
        content: QWidget = QLabel("Borders")
        for color in self.BORDER_COLORS:
            content = self._framed(content, color)
        self._borders = content
        layout.addWidget(self._borders, 0, Qt.AlignmentFlag.AlignHCenter)

        layout.addStretch()

        self._done_btn = QPushButton("Done")
        self._done_btn.setFixedSize(100, 40)
        self._done_btn.setStyleSheet("background-color: yellow; border-radius: 4px;")
        layout.addWidget(self._done_btn, 0, Qt.AlignmentFlag.AlignHCenter)

    @staticmethod
    def _framed(content: QWidget, color: str) -> QFrame:
        frame = QFrame()
        frame.setObjectName(f"border_{color}")
        frame.setStyleSheet(f"#border_{color} {{ background-color: {color}; border-radius: 16px; }}")
        frame_layout = QVBoxLayout(frame)
        frame_layout.setContentsMargins(16, 16, 16, 16)
        frame_layout.addWidget(content)
        return frame

    @property
    def border_depth(self) -> int:
        return len(self.BORDER_COLORS)


class ListView(QWidget):
    """A grouped list of sections followed by a plain list of food."""

    TITLE = "List"

    def __init__(self, food: list[str], parent: QWidget | None = None):
        super().__init__(parent)
        layout = QVBoxLayout(self)

        self._grouped = QListWidget()
        sections = {
            "Section 1": ["first", "second"],
            "Section 2": [f"row {index}" for index in range(1, 3)],
        }
        for header, rows in sections.items():
            header_item = QListWidgetItem(header.upper())
            header_item.setFlags(Qt.ItemFlag.NoItemFlags)
            font = QFont(header_item.font())
            font.setBold(True)
            header_item.setFont(font)
            self._grouped.addItem(header_item)
            self._grouped.addItems(rows)
        layout.addWidget(self._grouped)

        self._food = QListWidget()
        self._food.addItems(food)
        layout.addWidget(self._food)

    def grouped_rows(self) -> list[str]:
        return [self._grouped.item(i).text() for i in range(self._grouped.count())]

    def food_rows(self) -> list[str]:
        return [self._food.item(i).text() for i in range(self._food.count())]
