"""Sample examples and guides loaded into an empty database."""

import logging
from typing import List

from .shared.schemas import ExampleCreate, GuideCreate
from .storage import DatabaseStorage

logger = logging.getLogger(__name__)

_ECOMMERCE_AGENTS_MD = """# AGENTS.md

> Conventions for multi-agent prompts on this repository
> **Repo: React E-commerce Application**

## 1. Agent Roster & Scope

| ID | Owns / Touches | Typical Outputs |
| -- | -------------- | --------------- |
| **ARCHITECT** | ADRs, high-level design, ticket breakdown | `ADR-00X.md`, diagrams |
| **BACKEND** | `/server/**`, API routes, payments, auth | API routes, middleware |
| **FRONTEND** | `/src/**`, components, styling, state | TSX files, hooks |
| **QA** | E2E tests, payment flow validation | test specs |

### Ownership Heuristics

* Files under `/src/**` default to **FRONTEND**.
* Files under `/server/**` default to **BACKEND**.
* Payment integration changes need **BACKEND** and **QA**.
"""

_FULLSTACK_AGENTS_MD = """# AGENTS.md

> Conventions for multi-agent prompts on this repository
> **Repo: Full-Stack Node.js Application**

## 1. Agent Roster & Scope

| ID | Owns / Touches | Typical Outputs |
| -- | -------------- | --------------- |
| **ARCHITECT** | Database schema, API architecture | ER diagrams, API specs |
| **BACKEND** | `/server/**`, routes, models, caching | SQL migrations, endpoints |
| **FRONTEND** | `/client/**`, admin dashboard | components, charts |
| **INFRA** | Docker, PostgreSQL, Redis, deployment | `docker-compose.yml` |

### Ownership Heuristics

* Files under `/server/**` default to **BACKEND**.
* Files under `/client/**` default to **FRONTEND**.
* Database migrations need **BACKEND** and **INFRA**.
"""

SAMPLE_EXAMPLES: List[ExampleCreate] = [
    ExampleCreate(
        title="React E-commerce App",
        description="Modern React application with TypeScript, Tailwind CSS, and Stripe integration",
        project_type="Frontend Heavy",
        repository_structure="├── src/\n│   ├── components/\n│   ├── pages/\n│   └── hooks/\n├── public/\n└── package.json",
        generated_agents_md=_ECOMMERCE_AGENTS_MD,
        tags=["React", "TypeScript", "E-commerce", "Frontend"],
    ),
    ExampleCreate(
        title="Full-Stack Node.js API",
        description="Express.js backend with PostgreSQL, Redis, and React admin dashboard",
        project_type="Full Stack",
        repository_structure="├── server/\n│   ├── routes/\n│   └── models/\n├── client/\n├── shared/\n└── docker-compose.yml",
        generated_agents_md=_FULLSTACK_AGENTS_MD,
        tags=["Node.js", "Express", "PostgreSQL", "Full Stack", "API"],
    ),
]

SAMPLE_GUIDES: List[GuideCreate] = [
    GuideCreate(
        title="Getting Started with AGENTS.md",
        description="Generate your first AGENTS.md file and set up multi-agent workflows.",
        thumbnail_color="from-blue-500 to-blue-700",
        category="Getting Started",
    ),
    GuideCreate(
        title="Clean Git Workflows for AI Development",
        description="Keep a clean commit history and branching strategy when working with AI coding assistants.",
        thumbnail_color="from-purple-500 to-purple-700",
        category="Best Practices",
    ),
    GuideCreate(
        title="Multi-Agent Project Management",
        description="Manage complex projects with several AI agents working on different components.",
        thumbnail_color="from-red-500 to-red-700",
        category="Advanced",
    ),
    GuideCreate(
        title="Debugging AI-Generated Code",
        description="Review, test, and debug code generated by AI assistants and multi-agent systems.",
        thumbnail_color="from-yellow-500 to-yellow-700",
        category="Debugging",
    ),
]


def seed_database(storage: DatabaseStorage) -> bool:
    """Insert the sample rows once. Returns False when data already exists."""
    if storage.has_examples():
        logger.info("Database already seeded, skipping...")
        return False

    logger.info("Seeding database with sample data...")
    for example in SAMPLE_EXAMPLES:
        storage.create_example(example)
    for guide in SAMPLE_GUIDES:
        storage.create_guide(guide)
    logger.info("Database seeded successfully")
    return True
