"""
Helpers for building WHERE clause fragments.
"""

from typing import Optional


def escape_sql_string(value) -> str:
    """Quote a value as an SQL string literal, doubling embedded quotes"""
    return "'" + str(value).replace("'", "''") + "'"


def equality_clause(table: str, column: str, value) -> str:
    """Return "<table>.<column> = '<value>'" """
    return f"{table}.{column} = {escape_sql_string(value)}"


def concatenate_clauses_with_and(*clauses: Optional[str]) -> Optional[str]:
    return _concatenate_clauses("AND", clauses)


def concatenate_clauses_with_or(*clauses: Optional[str]) -> Optional[str]:
    return _concatenate_clauses("OR", clauses)


def _concatenate_clauses(operation: str, clauses) -> Optional[str]:
    """
    Join clauses with the given boolean operation.

    None and empty clauses carry no constraint and are skipped. Returns None
    when nothing is left, the clause itself when only one is left, and
    "(c1) OP (c2) ..." otherwise.
    """
    non_empty = [clause for clause in clauses if clause]
    if not non_empty:
        return None
    if len(non_empty) == 1:
        return non_empty[0]
    return f" {operation} ".join(f"({clause})" for clause in non_empty)
