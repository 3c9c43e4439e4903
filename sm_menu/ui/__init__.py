from .display import DisplayManager, console

__all__ = ["DisplayManager", "console"]
