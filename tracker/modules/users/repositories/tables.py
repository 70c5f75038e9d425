"""
Table Definitions

SQLAlchemy metadata for the user store. Queries are built against these
tables and executed through `databases`.
"""
from sqlalchemy import Column, Date, Integer, MetaData, String, Table

metadata = MetaData()

users = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("first_name", String(255), nullable=False),
    Column("last_name", String(255), nullable=False),
    Column("birthdate", Date, nullable=False),
    # Not unique: lookups by email return the first match by id.
    Column("email", String(255), nullable=False, index=True),
)
