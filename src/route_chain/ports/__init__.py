from .handler import Handler, IHandlerDecorator, MiddlewareGenerator, NextFunction
from .router import IRouter

__all__ = [
    "Handler",
    "IHandlerDecorator",
    "IRouter",
    "MiddlewareGenerator",
    "NextFunction",
]
