"""Storage layer for examples and guides.

Routes talk to ``DatabaseStorage`` rather than to SQLAlchemy directly, so
tests can swap in any object with the same methods.
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import sessionmaker

from .shared.models import Example, Guide
from .shared.schemas import ExampleCreate, ExampleOut, GuideCreate, GuideOut

logger = logging.getLogger(__name__)


class DatabaseStorage:
    """Examples and guides backed by a SQLAlchemy session factory."""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    # ===== Examples =====

    def get_examples(self) -> List[ExampleOut]:
        with self.session_factory() as session:
            rows = session.scalars(select(Example).order_by(Example.id)).all()
            return [ExampleOut.model_validate(row.to_dict()) for row in rows]

    def get_example(self, example_id: int) -> Optional[ExampleOut]:
        with self.session_factory() as session:
            row = session.get(Example, example_id)
            return ExampleOut.model_validate(row.to_dict()) if row else None

    def create_example(self, data: ExampleCreate) -> ExampleOut:
        with self.session_factory() as session:
            row = Example(
                title=data.title,
                description=data.description,
                project_type=data.project_type,
                repository_structure=data.repository_structure,
                generated_agents_md=data.generated_agents_md,
                tags=list(data.tags or []),
            )
            session.add(row)
            session.commit()
            logger.info(f"Created example {row.id}: {row.title}")
            return ExampleOut.model_validate(row.to_dict())

    def has_examples(self) -> bool:
        with self.session_factory() as session:
            return session.scalars(select(Example.id).limit(1)).first() is not None

    # ===== Guides =====

    def get_guides(self) -> List[GuideOut]:
        with self.session_factory() as session:
            rows = session.scalars(select(Guide).order_by(Guide.id)).all()
            return [GuideOut.model_validate(row.to_dict()) for row in rows]

    def get_guide(self, guide_id: int) -> Optional[GuideOut]:
        with self.session_factory() as session:
            row = session.get(Guide, guide_id)
            return GuideOut.model_validate(row.to_dict()) if row else None

    def create_guide(self, data: GuideCreate) -> GuideOut:
        with self.session_factory() as session:
            row = Guide(
                title=data.title,
                description=data.description,
                video_url=data.video_url,
                thumbnail_color=data.thumbnail_color,
                category=data.category,
            )
            session.add(row)
            session.commit()
            logger.info(f"Created guide {row.id}: {row.title}")
            return GuideOut.model_validate(row.to_dict())
