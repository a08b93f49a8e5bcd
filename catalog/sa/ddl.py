# catalog/sa/ddl.py
from typing import List

from sqlalchemy import MetaData, create_mock_engine

from .models import Base


def _detached_metadata() -> MetaData:
    """Copy of the schema metadata.

    create_all for a dialect that adds cyclic foreign keys with ALTER TABLE
    changes the tables it renders; Base.metadata must keep creating them
    inline on SQLite.
    """
    metadata = MetaData()
    for table in Base.metadata.sorted_tables:
        table.to_metadata(metadata)
    return metadata


def schema_statements(dialect_name: str = "sqlite") -> List[str]:
    """Collect the DDL statements create_all would emit for a dialect.

    Args:
        dialect_name: SQLAlchemy dialect name, e.g. "sqlite", "postgresql", "mysql"

    Returns:
        CREATE TABLE / CREATE INDEX (and ALTER TABLE where the dialect
        supports it) statements in execution order
    """
    statements: List[str] = []

    def executor(sql, *multiparams, **params):
        statements.append(str(sql.compile(dialect=engine.dialect)).strip())

    engine = create_mock_engine(f"{dialect_name}://", executor)
    _detached_metadata().create_all(engine, checkfirst=False)
    return statements


def render_ddl(dialect_name: str = "sqlite") -> str:
    """Render the whole schema as one SQL script"""
    return ";\n\n".join(schema_statements(dialect_name)) + ";\n"
