"""fitview - terminal UI for ranking and inspecting model hardware-fit assessments."""

__version__ = "0.1.0"
