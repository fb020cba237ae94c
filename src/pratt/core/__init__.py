"""Parser core: operator table, cursor and sink, the parser itself, and its errors."""
