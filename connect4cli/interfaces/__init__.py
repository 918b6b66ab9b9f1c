"""
connect4cli.interfaces - Terminal front end for Connect Four

This package contains the renderer and the interactive command-line driver.
"""

# Don't import anything here to avoid circular imports
__all__ = []
