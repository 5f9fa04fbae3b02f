"""
connect_four - Connect Four rules engine

This package provides the board engine (drops, win and tie detection, turn
order), an immutable player record, a thread-safe game session, a Gymnasium
environment, and a terminal front end for hot-seat play.
"""

# Version number
__version__ = '0.1.0'
