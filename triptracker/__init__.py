"""
Trip Tracker client: session management and trip bookkeeping over a
generic JSON resource API.
"""

__version__ = "1.0.0"
