from .border_repository import IBorderRepository

__all__ = [
    "IBorderRepository",
]
