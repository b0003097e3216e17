"""Shared drink model displayed by the data binding view."""

from .observable import ObservableRecord, Published


class Mix(ObservableRecord):
    """A drink: its name and the ingredients that go into it.

    Mix() starts empty, with name "" and no ingredients.
    """

    name = Published("")
    ingredients = Published(default_factory=list)

    def load(self, name: str, ingredients: list[str]) -> None:
        """Replace both fields, name first."""
        self.name = name
        self.ingredients = list(ingredients)
