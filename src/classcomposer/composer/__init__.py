"""
Class body composition.

Collects generated code per category and renders it, in a fixed structural
order, as one compilable Java class.
"""

from classcomposer.composer.composer import EMISSION_ORDER, ClassBodyComposer, resolve_category
from classcomposer.composer.exceptions import (
    ComposerError,
    ManifestError,
    MissingArgumentError,
    UnroutableCategoryError,
)

__all__ = [
    "ClassBodyComposer",
    "ComposerError",
    "EMISSION_ORDER",
    "ManifestError",
    "MissingArgumentError",
    "UnroutableCategoryError",
    "resolve_category",
]
