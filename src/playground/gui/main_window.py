"""Main window: navigation list of playground views and the info sheet."""

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QStyle,
    QVBoxLayout,
    QWidget,
)

from .. import log
from ..config import Config
from ..model import Mix
from .binding import BoundView
from .binding_view import BindingView
from .views import ButtonView, FormView, FramedView, InfoView, ListView, StackView, scaled_font

logger = log.get_logger("navigation")

ROOT_TITLE = "SwiftUI"


class MainWindow(QMainWindow):
    """Root of the navigation stack.

    Owns the one Mix shared with every BindingView it pushes.
    """

    def __init__(self, config: Config, mix: Mix | None = None):
        super().__init__()
        self._config = config
        self._mix = mix if mix is not None else Mix()

        self.setWindowTitle(config.window_title)
        self.resize(config.window_width, config.window_height)

        # State
        self._show_sheet = False
        self._appeared = False
        self._titles: list[str] = []

        # Destination factories, in menu order. A new view is built per push.
        self._destinations: dict[str, Callable[[], QWidget]] = {
            "Form": lambda: FormView(config.locations, config.building_types),
            "Stacks": StackView,
            "Buttons": ButtonView,
            "Framed": FramedView,
            "List": lambda: ListView(config.food),
            "Data Binding": lambda: BindingView(
                self._mix, config.sample_mix_name, config.sample_mix_ingredients
            ),
        }

        self._setup_ui()

        self._info_view = InfoView(self)
        self._info_view.finished.connect(self._on_sheet_dismissed)

    def _setup_ui(self):
        """Set up the navigation bar and the view stack."""
        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)

        # ==================== NAVIGATION BAR ====================
        bar = QHBoxLayout()
        bar.setContentsMargins(8, 4, 8, 4)

        self._back_btn = QPushButton("Back")
        self._back_btn.setIcon(self.style().standardIcon(QStyle.StandardPixmap.SP_ArrowBack))
        self._back_btn.setFlat(True)
        self._back_btn.clicked.connect(self.pop)
        bar.addWidget(self._back_btn)

        self._title_label = QLabel(ROOT_TITLE)
        self._title_label.setFont(scaled_font(self._title_label, 1.2))
        self._title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        bar.addWidget(self._title_label, 1)

        self._info_btn = QPushButton()
        self._info_btn.setIcon(self.style().standardIcon(QStyle.StandardPixmap.SP_MessageBoxInformation))
        self._info_btn.setFlat(True)
        self._info_btn.setToolTip("Info")
        self._info_btn.clicked.connect(self.toggle_info)
        bar.addWidget(self._info_btn)

        layout.addLayout(bar)

        # ==================== VIEW STACK ====================
        self._stack = QStackedWidget()
        self._menu = QListWidget()
        for title in self._destinations:
            self._menu.addItem(QListWidgetItem(title))
        self._menu.itemClicked.connect(lambda item: self.navigate(item.text()))
        self._stack.addWidget(self._menu)
        self._titles.append(ROOT_TITLE)
        layout.addWidget(self._stack, 1)

        self._update_bar()

    @property
    def mix(self) -> Mix:
        return self._mix

    @property
    def show_sheet(self) -> bool:
        return self._show_sheet

    @property
    def depth(self) -> int:
        """Number of views on the stack, root menu included."""
        return self._stack.count()

    @property
    def current_title(self) -> str:
        return self._titles[-1]

    def destinations(self) -> list[str]:
        return list(self._destinations)

    def current_view(self) -> QWidget:
        return self._stack.currentWidget()

    def navigate(self, destination: str) -> QWidget:
        """Build the named destination and push it.

        Raises:
            KeyError: If there is no such destination.
        """
        factory = self._destinations[destination]
        view = factory()
        self.push(view, getattr(view, "TITLE", destination))
        return view

    def push(self, view: QWidget, title: str) -> None:
        self._stack.addWidget(view)
        self._titles.append(title)
        self._stack.setCurrentWidget(view)
        self._update_bar()
        logger.info("view pushed", title=title, depth=self.depth)

    def pop(self) -> None:
        """Remove the top view. The root menu is never popped."""
        if self.depth <= 1:
            return
        view = self._stack.currentWidget()
        title = self._titles.pop()
        # Showing the previous view hides this one, which unmounts it
        self._stack.setCurrentIndex(self._stack.count() - 2)
        if isinstance(view, BoundView):
            view.unmount()
        self._stack.removeWidget(view)
        view.deleteLater()
        self._update_bar()
        logger.info("view popped", title=title, depth=self.depth)

    def toggle_info(self):
        """Flip the info sheet between hidden and visible."""
        self._show_sheet = not self._show_sheet
        if self._show_sheet:
            self._info_view.open()
        else:
            self._info_view.reject()

    def _on_sheet_dismissed(self, result: int):
        self._show_sheet = False

    def _update_bar(self):
        self._title_label.setText(self.current_title)
        self._back_btn.setVisible(self.depth > 1)

    def showEvent(self, event):
        super().showEvent(event)
        if not self._appeared:
            self._appeared = True
            logger.info("appeared")

    def cleanup(self):
        """Unwind the navigation stack so every bound view unsubscribes."""
        while self.depth > 1:
            self.pop()
