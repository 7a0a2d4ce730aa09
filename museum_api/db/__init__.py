"""Database declarative layer: the SQLAlchemy Base shared by models and alembic."""
