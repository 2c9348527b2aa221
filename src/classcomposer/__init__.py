"""
classcomposer - assemble generated Java fragments into one compilable class.
"""

from classcomposer.composer import ClassBodyComposer
from classcomposer.config.models import ClassTemplate, CodeCategory

__version__ = "1.0.0"

__all__ = [
    "ClassBodyComposer",
    "ClassTemplate",
    "CodeCategory",
    "__version__",
]
