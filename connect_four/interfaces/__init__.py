"""
connect_four.interfaces - Front ends for Connect Four

Presentation layers that drive the engine through its public API.
"""

# Don't import anything here to avoid circular imports
__all__ = []
