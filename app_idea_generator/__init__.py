"""App Idea Generator - turn an application idea into build, code and style guides."""

__version__ = "0.3.0"
