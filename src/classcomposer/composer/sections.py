"""
Sections of a generated class body.

Each section owns every fragment submitted under one CodeCategory and knows
how to render them. The composer decides the order in which sections render.
"""

import logging
from abc import ABC, abstractmethod

from classcomposer.composer.exceptions import MissingArgumentError
from classcomposer.config.models import ClassTemplate, CodeCategory, Discipline

logger = logging.getLogger(__name__)


class Section(ABC):
    """Accumulates the fragments of one category."""

    category: CodeCategory
    discipline: Discipline

    @abstractmethod
    def add(self, *codes: str) -> None:
        """Absorb submitted code texts."""

    @property
    @abstractmethod
    def fragments(self) -> tuple[str, ...]:
        """Stored fragments, in render order."""

    @abstractmethod
    def render(self, out: list[str], template: ClassTemplate) -> None:
        """Append this section's text to ``out`` without mutating state."""


class ImportSection(Section):
    """Deduplicated import statements, rendered before the class."""

    category = CodeCategory.IMPORT
    discipline = Discipline.SET

    def __init__(self):
        # dict keys give set semantics with a stable iteration order
        self._imports: dict[str, None] = {}

    def add(self, *codes: str) -> None:
        for code in codes:
            if code in self._imports:
                logger.debug(f"Skipping duplicate import: {code}")
                continue
            self._imports[code] = None

    @property
    def fragments(self) -> tuple[str, ...]:
        return tuple(self._imports)

    def render(self, out: list[str], template: ClassTemplate) -> None:
        for code in self._imports:
            out.append(f"{code};\n")


class ClassHeaderSection(Section):
    """
    The class declaration and its constructor.

    Holds a single class name. Submitting a new name replaces the previous
    one, so the last submission wins. Rendering is split in two: the opening
    declaration goes before every nested type, method and statement, and the
    closing brace goes after them.
    """

    category = CodeCategory.CLASS
    discipline = Discipline.SINGLE

    def __init__(self, default_name: str):
        self._class_name = default_name

    @property
    def class_name(self) -> str:
        return self._class_name

    def add(self, *codes: str) -> None:
        if len(codes) < 1:
            raise MissingArgumentError("Need a class name")
        if len(codes) > 1:
            logger.debug(f"Ignoring extra class name arguments: {codes[1:]}")
        if self._class_name != codes[0]:
            logger.debug(f"Class name changed: {self._class_name} -> {codes[0]}")
        self._class_name = codes[0]

    @property
    def fragments(self) -> tuple[str, ...]:
        return (self._class_name,)

    def render(self, out: list[str], template: ClassTemplate) -> None:
        name = self._class_name
        ind = template.indent
        out.append(f"public class {name} extends {template.base_type} {{\n")
        out.append(f"{ind}public {name}({template.session_type} {template.session_param}){{\n")
        out.append(f"{ind * 2}super({template.session_param});\n")
        out.append(f"{ind}}}\n")

    def render_close(self, out: list[str], template: ClassTemplate) -> None:
        out.append("}\n")


class OrderedSection(Section):
    """Fragments kept in submission order, duplicates included."""

    discipline = Discipline.ORDERED

    def __init__(self):
        self._codes: list[str] = []

    def add(self, *codes: str) -> None:
        self._codes.extend(codes)

    @property
    def fragments(self) -> tuple[str, ...]:
        return tuple(self._codes)

    def render(self, out: list[str], template: ClassTemplate) -> None:
        for code in self._codes:
            out.append(f"{code}\n")


class InnerClassSection(OrderedSection):
    """Nested type declarations, emitted verbatim inside the class."""

    category = CodeCategory.INNER_CLASS


class MethodSection(OrderedSection):
    """Method texts, emitted verbatim after the nested types."""

    category = CodeCategory.METHOD


class SentenceSection(OrderedSection):
    """Executable statements, wrapped in the generated execution routine."""

    category = CodeCategory.SENTENCE

    def render(self, out: list[str], template: ClassTemplate) -> None:
        ind = template.indent
        out.append(f"{ind}public void {template.execute_routine}(){{\n")
        out.append(f"{ind * 2}{template.temp_row_type} {template.temp_var};\n")
        for code in self._codes:
            out.append(f"{ind * 2}{code}\n")
        out.append(f"{ind}}}\n")
