"""Repository exports."""

from .classes_repo import ClassesRepository
from .races_repo import RacesRepository
from .templates_repo import TemplatesRepository

__all__ = [
    "ClassesRepository",
    "RacesRepository",
    "TemplatesRepository",
]
