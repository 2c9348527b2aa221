"""
Class body composer.

Collects the code generated for each data source of a query and assembles it,
together with the class header and the execution routine, into one compilable
Java class.
"""

import logging

from classcomposer.composer.exceptions import UnroutableCategoryError
from classcomposer.composer.sections import (
    ClassHeaderSection,
    ImportSection,
    InnerClassSection,
    MethodSection,
    Section,
    SentenceSection,
)
from classcomposer.config.models import ClassTemplate, CodeCategory, Discipline

logger = logging.getLogger(__name__)

# Output structural order. The class header wraps everything after it.
EMISSION_ORDER: tuple[CodeCategory, ...] = (
    CodeCategory.IMPORT,
    CodeCategory.CLASS,
    CodeCategory.INNER_CLASS,
    CodeCategory.METHOD,
    CodeCategory.SENTENCE,
)

CATEGORY_ALIASES: dict[str, CodeCategory] = {
    "nested_type": CodeCategory.INNER_CLASS,
    "statement": CodeCategory.SENTENCE,
}


def resolve_category(category: CodeCategory | str) -> CodeCategory:
    """
    Coerce a category given as an enum member, value or member name.

    Raises:
        UnroutableCategoryError: If the value names no known category
    """
    if isinstance(category, CodeCategory):
        return category
    if isinstance(category, str):
        key = category.strip().lower()
        if key in CATEGORY_ALIASES:
            return CATEGORY_ALIASES[key]
        try:
            return CodeCategory(key)
        except ValueError:
            pass
    raise UnroutableCategoryError(category)


class ClassBodyComposer:
    """
    Assembles categorized code fragments into a complete Java class.

    A composer is created once per generated class. Generators submit code
    with ``submit`` in any order, and ``render`` returns the class text from
    the current state. Rendering never mutates state, so it can be called
    any number of times.

    Not thread-safe: concurrent ``submit`` calls must be serialized by the caller.
    """

    def __init__(self, template: ClassTemplate | None = None):
        self.template = template or ClassTemplate()
        self._header = ClassHeaderSection(self.template.default_class_name)
        sections: list[Section] = [
            ImportSection(),
            self._header,
            InnerClassSection(),
            MethodSection(),
            SentenceSection(),
        ]
        self._sections: dict[CodeCategory, Section] = {s.category: s for s in sections}

    @property
    def class_name(self) -> str:
        """Name of the generated class (last submitted, or the template default)."""
        return self._header.class_name

    def submit(self, category: CodeCategory | str, *codes: str) -> None:
        """
        Store code under a category.

        Args:
            category: CodeCategory, e.g. CodeCategory.IMPORT, or its name
            codes: Generated code texts

        Raises:
            UnroutableCategoryError: If the category is not a known one
            MissingArgumentError: If a CLASS submission carries no name
        """
        resolved = resolve_category(category)
        logger.debug(f"Submitting {len(codes)} fragment(s) as {resolved.value}")
        self._sections[resolved].add(*codes)

    # Name used by the per-data-source generators
    handle_composition = submit

    def fragments(self, category: CodeCategory | str) -> tuple[str, ...]:
        """Return the fragments stored for a category, in render order."""
        return self._sections[resolve_category(category)].fragments

    def render(self) -> str:
        """Return the code of the complete class."""
        out: list[str] = []
        for category in EMISSION_ORDER:
            self._sections[category].render(out, self.template)
        self._header.render_close(out, self.template)
        return "".join(out)

    def describe(self) -> list[tuple[CodeCategory, Discipline, int]]:
        """Return (category, discipline, fragment count) for each section, in emission order."""
        return [(c, self._sections[c].discipline, len(self._sections[c].fragments)) for c in EMISSION_ORDER]

    def __repr__(self) -> str:
        counts = ", ".join(
            f"{c.value}={n}" for c, _, n in self.describe() if c != CodeCategory.CLASS
        )
        return f"ClassBodyComposer(class_name={self.class_name!r}, {counts})"
