"""
系统管理领域对象
"""
from app.system.domain.resource import Resource, ResourceType

__all__ = ["Resource", "ResourceType"]
