"""PySide6 GUI module for Playground.

This module provides the graphical user interface including:
- Navigation window listing the playground views
- Catalog views (form, stacks, buttons, framed, list)
- Record-to-widget bindings and the data binding view
"""

from .app import run

__all__ = ["run"]
