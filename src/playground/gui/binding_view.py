"""Data binding view: renders a shared Mix and loads a sample into it."""

from PySide6.QtWidgets import QLabel, QListWidget, QPushButton, QVBoxLayout, QWidget

from .. import log
from ..model import Mix
from .binding import BoundView, bind_label, bind_list
from .views import bordered, scaled_font

logger = log.get_logger("views")


class BindingView(BoundView):
    """Shows the name and ingredients of the mix it was given.

    The mix is shared with whoever created this view. Changes made elsewhere
    show up here as long as the view is on screen.
    """

    TITLE = "Binding"

    def __init__(
        self,
        mix: Mix,
        sample_name: str,
        sample_ingredients: list[str],
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        self._mix = mix
        self._sample_name = sample_name
        self._sample_ingredients = list(sample_ingredients)

        layout = QVBoxLayout(self)

        self._name_label = QLabel()
        self._name_label.setFont(scaled_font(self._name_label, 1.5))
        bordered(self._name_label)
        layout.addWidget(self._name_label)

        self._ingredients_list = QListWidget()
        layout.addWidget(self._ingredients_list)

        self._load_btn = QPushButton("Load")
        self._load_btn.clicked.connect(self.load)
        layout.addWidget(self._load_btn)

        bind_label(self, self._name_label, self._mix, "name")
        bind_list(self, self._ingredients_list, self._mix, "ingredients")

    @property
    def mix(self) -> Mix:
        return self._mix

    def displayed_name(self) -> str:
        return self._name_label.text()

    def displayed_ingredients(self) -> list[str]:
        return [self._ingredients_list.item(i).text() for i in range(self._ingredients_list.count())]

    def load(self):
        """Push the sample drink into the shared mix."""
        logger.info("loading sample mix", name=self._sample_name)
        self._mix.load(self._sample_name, self._sample_ingredients)
