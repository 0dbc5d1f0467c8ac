"""Domain layer: ORM models, repositories and services per resource.

Each resource package follows the same split:

- **models**: SQLAlchemy tables
- **repository**: resource-specific queries on top of BaseRepository
- **service**: business rules, the second validation layer after the schemas
"""
