# Infrastructure layer - record storage
"""
Infrastructure layer contains the employee record stores
(SQLite, aiosqlite and in-memory).

This layer depends on the domain model, not vice versa.
"""
