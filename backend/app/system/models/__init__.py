"""
系统管理 ORM 模型
"""
from app.system.models.resource import SysResource

__all__ = ["SysResource"]
