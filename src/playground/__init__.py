"""Playground - declarative view composition and data binding demos.

Views built with PySide6 render an observable model: records whose field
assignments are pushed synchronously to every subscribed view.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
