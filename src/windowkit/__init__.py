from .window import WindowError, WindowStatus, WindowStructure

__all__ = ["WindowError", "WindowStatus", "WindowStructure"]
