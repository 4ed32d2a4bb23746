"""Database models for examples and guides."""
from typing import Any, Dict
from sqlalchemy import Column, Integer, String, Text, JSON
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class Example(Base):
    """A project example with its generated AGENTS.md file."""
    __tablename__ = 'examples'

    id = Column(Integer, primary_key=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    project_type = Column(Text, nullable=False)
    repository_structure = Column(Text, nullable=False)
    generated_agents_md = Column(Text, nullable=False)
    tags = Column(JSON, nullable=True, default=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'project_type': self.project_type,
            'repository_structure': self.repository_structure,
            'generated_agents_md': self.generated_agents_md,
            'tags': list(self.tags or []),
        }


class Guide(Base):
    """A tutorial or video guide."""
    __tablename__ = 'guides'

    id = Column(Integer, primary_key=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    video_url = Column(String(2048), nullable=True)
    thumbnail_color = Column(String(100), nullable=False)
    category = Column(String(100), nullable=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'video_url': self.video_url,
            'thumbnail_color': self.thumbnail_color,
            'category': self.category,
        }
