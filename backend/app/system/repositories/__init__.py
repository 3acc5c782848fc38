"""
资源存储层
"""
from app.system.repositories.resource_store import ResourceStore, SqlResourceStore
from app.system.repositories.memory_store import InMemoryResourceStore

__all__ = ["ResourceStore", "SqlResourceStore", "InMemoryResourceStore"]
