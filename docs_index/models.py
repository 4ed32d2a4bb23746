"""Documentation tree models.

Field names are snake_case in Python and camelCase on the wire, matching what
the frontend docs viewer expects.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class DocFile(BaseModel):
    """One markdown file in the documentation tree."""
    model_config = ConfigDict(frozen=True)

    name: str
    title: str
    description: str = ""
    path: str
    size: int


class DocSubsection(BaseModel):
    """A second-level directory under a section."""
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    path: str
    files: List[DocFile] = Field(default_factory=list)


class DocSection(BaseModel):
    """A first-level directory under the documentation root."""
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    path: str
    files: List[DocFile] = Field(default_factory=list)
    subsections: List[DocSubsection] = Field(default_factory=list)


class DocsStructure(BaseModel):
    """The full documentation tree plus aggregate counts."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    sections: List[DocSection] = Field(default_factory=list)
    total_files: int = Field(default=0, alias="totalFiles")
    total_tutorials: int = Field(default=0, alias="totalTutorials")

    def iter_files(self):
        """Yield ``(file, depth)`` for every file in tree order.

        Within a section its direct files come before its subsection files.
        """
        for section in self.sections:
            for doc in section.files:
                yield doc, 1
            for subsection in section.subsections:
                for doc in subsection.files:
                    yield doc, 2


class DocContent(BaseModel):
    """Response body for a single documentation file."""
    content: str
    path: str
