# tests/test_sa/utils.py
from typing import List, Dict, Any
from sqlalchemy import inspect, text
from sqlalchemy.orm import Session


class DBInspector:
    def __init__(self, session: Session):
        self.session = session
        self.engine = session.get_bind()
        self.inspector = inspect(self.engine)

    def get_table_info(self, table_name: str) -> Dict[str, Any]:
        """Get detailed information about a specific table"""
        return {
            'columns': self.inspector.get_columns(table_name),
            'primary_key': self.inspector.get_pk_constraint(table_name),
            'foreign_keys': self.inspector.get_foreign_keys(table_name),
            'indexes': self.inspector.get_indexes(table_name),
            'unique_constraints': self.inspector.get_unique_constraints(table_name),
            'check_constraints': self.inspector.get_check_constraints(table_name),
        }

    def get_all_tables(self) -> List[str]:
        """Get list of all tables in database"""
        return self.inspector.get_table_names()

    def get_index_names(self, table_name: str) -> List[str]:
        return sorted(idx['name'] for idx in self.inspector.get_indexes(table_name))

    def get_check_names(self, table_name: str) -> List[str]:
        return sorted(c['name'] for c in self.inspector.get_check_constraints(table_name) if c.get('name'))

    def count_rows(self, table_name: str) -> int:
        """Get row count for a table"""
        result = self.session.execute(text(f'SELECT COUNT(*) FROM "{table_name}"'))
        return result.scalar()

    def describe_table(self, table_name: str) -> str:
        """Get a human-readable description of a table"""
        info = self.get_table_info(table_name)

        description = [f"\nTable: {table_name}"]
        description.append("\nColumns:")
        for col in info['columns']:
            nullable = "NULL" if col['nullable'] else "NOT NULL"
            default = f"DEFAULT {col['default']}" if col['default'] is not None else ""
            description.append(f"  - {col['name']}: {col['type']} {nullable} {default}")

        if info['primary_key']['constrained_columns']:
            description.append("\nPrimary Key:")
            description.append(f"  {', '.join(info['primary_key']['constrained_columns'])}")

        if info['foreign_keys']:
            description.append("\nForeign Keys:")
            for fk in info['foreign_keys']:
                description.append(
                    f"  - {', '.join(fk['constrained_columns'])} -> "
                    f"{fk['referred_table']}({', '.join(fk['referred_columns'])})"
                )

        if info['indexes']:
            description.append("\nIndexes:")
            for idx in info['indexes']:
                unique = "UNIQUE " if idx['unique'] else ""
                description.append(
                    f"  - {unique}INDEX {idx['name']} ON ({', '.join(idx['column_names'])})"
                )

        description.append(f"\nRow Count: {self.count_rows(table_name)}")
        return "\n".join(description)


def print_table_schema(session: Session, table_name: str):
    """Print detailed schema information for a table"""
    print(DBInspector(session).describe_table(table_name))


def compare_model_to_db(session: Session, model_class) -> List[str]:
    """Compare SQLAlchemy model to actual database table"""
    differences = []
    db_info = DBInspector(session).get_table_info(model_class.__tablename__)

    model_columns = {c.key: c for c in inspect(model_class).columns}
    db_columns = {c['name']: c for c in db_info['columns']}

    for col_name, column in model_columns.items():
        if col_name not in db_columns:
            differences.append(f"Column '{col_name}' exists in model but not in database")
        elif db_columns[col_name]['nullable'] != column.nullable and not column.primary_key:
            differences.append(f"Column '{col_name}' nullability differs from the model")

    for col_name in db_columns:
        if col_name not in model_columns:
            differences.append(f"Column '{col_name}' exists in database but not in model")

    model_pk = [c.name for c in inspect(model_class).primary_key]
    if sorted(db_info['primary_key']['constrained_columns']) != sorted(model_pk):
        differences.append(f"Primary key differs: {db_info['primary_key']['constrained_columns']} vs {model_pk}")

    return differences
