"""Book SQL query constants.

All queries are parameterized by schema; values are always passed as
positional parameters.
"""

BOOKS_CREATE_TABLE = """
    CREATE TABLE IF NOT EXISTS {schema}.books (
        id BIGSERIAL PRIMARY KEY,
        title TEXT NOT NULL,
        author TEXT NOT NULL,
        isbn TEXT NOT NULL DEFAULT ''
    )
"""

BOOK_INSERT = """
    INSERT INTO {schema}.books (title, author, isbn)
    VALUES ($1, $2, $3)
    RETURNING id
"""

BOOK_GET_BY_ID = """
    SELECT id, title, author, isbn FROM {schema}.books WHERE id = $1
"""

BOOK_UPDATE = """
    UPDATE {schema}.books SET
        title = $2,
        author = $3,
        isbn = $4
    WHERE id = $1
"""

BOOK_DELETE = """
    DELETE FROM {schema}.books WHERE id = $1
"""

BOOK_LIST = """
    SELECT id, title, author, isbn FROM {schema}.books
    {where_clause}
    ORDER BY id
    OFFSET ${offset_param} LIMIT ${limit_param}
"""

BOOK_LIST_ALL = """
    SELECT id, title, author, isbn FROM {schema}.books ORDER BY id
"""

# Columns a BookFilter may constrain
FILTER_COLUMNS = ("title", "author", "isbn")
