"""
资源领域对象

资源是权限树上的一个节点：菜单（MENU）或按钮（BUTTON）。
Service 与 Store 之间只传递 Resource，不暴露 ORM 行。
"""
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class ResourceType(str, Enum):
    """资源类型"""
    MENU = "menu"
    BUTTON = "button"


# 各字段最大长度，与 sys_resource 表列宽一致
NAME_MAX_LENGTH = 50
PERMISSION_MAX_LENGTH = 100
ROUTE_MAX_LENGTH = 200
ICON_MAX_LENGTH = 50
VIEW_MAX_LENGTH = 200


@dataclass
class Resource:
    """
    资源

    Attributes:
        id: 资源编号，插入时由存储层分配
        pid: 父资源编号，None 表示顶级资源
        name: 资源名字，同一父资源下唯一
        type: 资源类型
        sort: 排序
        permission: 权限标识，例如 system:resource:add
        route: 前端路由，仅菜单有效
        icon: 图标，仅菜单有效
        view: 前端组件路径
    """

    name: str
    type: ResourceType
    id: Optional[int] = None
    pid: Optional[int] = None
    sort: int = 0
    permission: Optional[str] = None
    route: Optional[str] = None
    icon: Optional[str] = None
    view: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_menu(self) -> bool:
        return self.type == ResourceType.MENU
