"""
Relational storage layer.

Responsibilities:
- Build the SQLAlchemy engine from ``DATABASE_URL``.
- Hand out one session per request.
- Create the schema on startup.
"""
