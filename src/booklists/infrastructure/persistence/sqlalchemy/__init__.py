"""SQLAlchemy persistence for booklists (async engine, asyncpg / aiosqlite)."""
