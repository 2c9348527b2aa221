"""
Exceptions raised while composing a class body.
"""


class ComposerError(Exception):
    """Base class for all composition failures."""

    pass


class MissingArgumentError(ComposerError):
    """Raised when a category that needs a value is submitted without one."""

    pass


class UnroutableCategoryError(ComposerError):
    """Raised when a submission names a category outside the closed set."""

    def __init__(self, category: object):
        self.category = category
        super().__init__(f"No section handles category: {category!r}")


class ManifestError(ComposerError):
    """Raised when a fragment manifest cannot be read."""

    pass
