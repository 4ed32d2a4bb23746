"""API schemas for examples and guides (camelCase on the wire)."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ExampleCreate(_CamelModel):
    title: str
    description: str
    project_type: str = Field(alias="projectType")
    repository_structure: str = Field(alias="repositoryStructure")
    generated_agents_md: str = Field(alias="generatedAgentsMd")
    tags: Optional[List[str]] = None


class ExampleOut(ExampleCreate):
    id: int
    tags: List[str] = Field(default_factory=list)


class GuideCreate(_CamelModel):
    title: str
    description: str
    video_url: Optional[str] = Field(default=None, alias="videoUrl")
    thumbnail_color: str = Field(alias="thumbnailColor")
    category: str


class GuideOut(GuideCreate):
    id: int
