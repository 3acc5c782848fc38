"""
资源管理 ORM 模型
"""
from datetime import datetime, UTC

from sqlalchemy import Column, Integer, String, DateTime

from app.database import Base
from app.system.domain.resource import (
    NAME_MAX_LENGTH, PERMISSION_MAX_LENGTH, ROUTE_MAX_LENGTH, ICON_MAX_LENGTH, VIEW_MAX_LENGTH,
)


class SysResource(Base):
    __tablename__ = "sys_resource"

    id = Column(Integer, primary_key=True, autoincrement=True)
    pid = Column(Integer, nullable=True, index=True, comment="父资源编号，为空表示顶级资源")
    name = Column(String(NAME_MAX_LENGTH), nullable=False, comment="资源名字")
    type = Column(String(20), nullable=False, comment="类型: menu|button")
    sort = Column(Integer, default=0, nullable=False, comment="排序")
    permission = Column(String(PERMISSION_MAX_LENGTH), nullable=True, comment="权限标识")
    route = Column(String(ROUTE_MAX_LENGTH), nullable=True, comment="前端路由，仅菜单")
    icon = Column(String(ICON_MAX_LENGTH), nullable=True, comment="图标，仅菜单")
    view = Column(String(VIEW_MAX_LENGTH), nullable=True, comment="前端组件路径")
    created_at = Column(DateTime, default=lambda: datetime.now(UTC))
    updated_at = Column(DateTime, default=lambda: datetime.now(UTC), onupdate=lambda: datetime.now(UTC))
