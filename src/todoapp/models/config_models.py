"""Configuration models for todoapp.

The configuration selects one of two storage backends (MongoDB or a
relational database) and carries the connection parameters for each.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class DatabaseType(str, Enum):
    """Supported storage backends."""

    MONGODB = "mongodb"
    MYSQL = "mysql"


class MongoConfig(BaseModel):
    """MongoDB connection parameters."""

    host: str = Field(default="localhost")
    port: int = Field(default=27017)
    database: str = Field(default="todoapp")


class MySqlConfig(BaseModel):
    """Relational database connection parameters.

    ``url`` is any SQLAlchemy database URL; credentials given separately are
    merged into it when the URL does not already carry them.
    """

    url: str = Field(default="mysql+pymysql://localhost:3306/todoapp")
    username: str | None = Field(default="todouser")
    password: str | None = Field(default="todopassword")
    echo: bool = Field(default=False, description="Log emitted SQL statements")


class DatabaseConfig(BaseModel):
    """Backend selection."""

    type: str | None = Field(default=DatabaseType.MONGODB.value, description="mongodb or mysql")

    @field_validator("type")
    @classmethod
    def normalize_type(cls, v: str | None) -> str | None:
        """Normalize backend names to lowercase without surrounding blanks."""
        if v is None:
            return None
        return v.strip().lower()


class AppConfig(BaseModel):
    """Main application configuration."""

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    mongodb: MongoConfig = Field(default_factory=MongoConfig)
    mysql: MySqlConfig = Field(default_factory=MySqlConfig)
