from .router import InMemoryRouter, RouteEntry

__all__ = ["InMemoryRouter", "RouteEntry"]
