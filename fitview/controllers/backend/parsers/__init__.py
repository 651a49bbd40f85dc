"""Backend payload parsers."""

from fitview.controllers.backend.parsers.fit_parser import FitParser

__all__ = ["FitParser"]
