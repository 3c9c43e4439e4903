"""sm-menu: an interactive hierarchical command menu"""

from .version import __version__

__all__ = ["__version__"]
