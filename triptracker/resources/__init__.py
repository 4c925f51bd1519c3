"""
Resource API modules: thin coroutines over the HTTP transport for the
`users` and `trips` collections of the JSON resource server.
"""

from triptracker.resources import trips, users

__all__ = ["trips", "users"]
