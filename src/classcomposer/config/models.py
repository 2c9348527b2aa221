"""
Core configuration models for classcomposer.

Defines the code categories, the class template (the fixed skeleton of the
generated Java class) and the fragment manifest, using Pydantic for validation.
"""

from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from classcomposer.composer.composer import ClassBodyComposer

JAVA_IDENTIFIER = r"^[A-Za-z_$][A-Za-z0-9_$]*$"


class CodeCategory(str, Enum):
    """Structural role of a generated code fragment."""

    IMPORT = "import"
    CLASS = "class"
    INNER_CLASS = "inner_class"
    METHOD = "method"
    SENTENCE = "sentence"


class Discipline(str, Enum):
    """How a section accumulates fragments."""

    SET = "set"  # Duplicates collapse
    ORDERED = "ordered"  # Submission order preserved
    SINGLE = "single"  # Last write wins


# ============================================================================
# Class Template
# ============================================================================


class ClassTemplate(BaseModel):
    """
    Fixed skeleton of the generated class.

    Rendered as:

        public class <name> extends <base_type> {
          public <name>(<session_type> <session_param>){
            super(<session_param>);
          }
          ...
          public void <execute_routine>(){
            <temp_row_type> <temp_var>;
            ...
          }
        }
    """

    base_type: str = Field(
        default="SparkRequirement", pattern=JAVA_IDENTIFIER, description="Superclass of the generated class"
    )
    session_type: str = Field(
        default="SparkSession", pattern=JAVA_IDENTIFIER, description="Constructor argument type"
    )
    session_param: str = Field(
        default="spark", pattern=JAVA_IDENTIFIER, description="Constructor argument name"
    )
    temp_row_type: str = Field(
        default="Dataset<Row>", min_length=1, description="Type of the temporary result variable"
    )
    temp_var: str = Field(default="tmp", pattern=JAVA_IDENTIFIER, description="Temporary variable name")
    execute_routine: str = Field(
        default="execute", pattern=JAVA_IDENTIFIER, description="Name of the generated execution method"
    )
    default_class_name: str = Field(
        default="DefaultRequirement_0",
        pattern=JAVA_IDENTIFIER,
        description="Class name used when none is submitted",
    )
    indent: str = Field(default="  ", pattern=r"^[ \t]*$", description="One level of indentation")


# ============================================================================
# Main Configuration
# ============================================================================


class ComposerConfig(BaseModel):
    """Root configuration model for classcomposer."""

    template: ClassTemplate = Field(default_factory=ClassTemplate)
    output_dir: Path = Field(default=Path("./generated"), description="Where class files are written")
    log_level: str = Field(default="INFO", description="Logging level for the CLI")


# ============================================================================
# Fragment Manifest Models
# ============================================================================


class ManifestEntry(BaseModel):
    """One submission: a category and the code texts submitted under it."""

    # Kept as a string so unknown categories surface as routing errors
    category: str
    codes: list[str] = Field(default_factory=list)


class FragmentManifest(BaseModel):
    """A document listing submissions for one generated class."""

    class_name: str | None = Field(default=None, description="Shortcut for a CLASS submission")
    fragments: list[ManifestEntry] = Field(default_factory=list)

    def apply(self, composer: "ClassBodyComposer") -> None:
        """Submit every entry to a composer, in document order."""
        if self.class_name is not None:
            composer.submit(CodeCategory.CLASS, self.class_name)
        for entry in self.fragments:
            composer.submit(entry.category, *entry.codes)
