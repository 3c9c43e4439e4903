#!/usr/bin/env python3
"""sm-menu version information"""

__app_name__ = "sm-menu"
__version__ = "0.3.0"
__status__ = "STABLE"
