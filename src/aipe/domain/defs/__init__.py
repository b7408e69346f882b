"""Domain definition exports."""

from .class_def import ClassDef
from .race_def import RaceDef
from .template_def import CharacterTemplateDef

__all__ = [
    "CharacterTemplateDef",
    "ClassDef",
    "RaceDef",
]
