import re

from sqlalchemy import Select, select
from sqlalchemy.dialects import postgresql

# Athena accepts ANSI double-quoted identifiers and single-quoted literals,
# which is what the PostgreSQL compiler emits. A percent paramstyle would
# double every % inside inlined literals.
_dialect = postgresql.dialect(paramstyle="named")

_LINE_BREAK = re.compile(r"[ \t]*\n[ \t]*")


def new_query(*columns) -> Select:
    """Get an empty SELECT over the given columns."""
    return select(*columns)


def render_query(query: Select) -> str:
    """Render a query as single-line SQL text with literal values inlined."""
    compiled = query.compile(dialect=_dialect, compile_kwargs={"literal_binds": True})
    return _LINE_BREAK.sub(" ", str(compiled)).strip()
