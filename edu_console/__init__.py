"""
Top-level package for the education console.

This package exposes the core architecture (domain, views, UI adapters).
Most code should import from submodules such as:
    edu_console.core
    edu_console.views
    edu_console.ui
"""

__all__: list[str] = []
