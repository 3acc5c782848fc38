"""
系统管理 Pydantic 模式定义
用于 API 请求/响应验证
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict

from app.system.domain.resource import (
    ResourceType, NAME_MAX_LENGTH, PERMISSION_MAX_LENGTH, ROUTE_MAX_LENGTH, ICON_MAX_LENGTH, VIEW_MAX_LENGTH,
)


# ============== 资源 Schemas ==============

class ResourceBase(BaseModel):
    pid: Optional[int] = Field(None, ge=1, description="父资源编号，为空表示顶级资源")
    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    type: ResourceType
    sort: int = Field(default=0, ge=0)
    permission: Optional[str] = Field(None, max_length=PERMISSION_MAX_LENGTH)
    route: Optional[str] = Field(None, max_length=ROUTE_MAX_LENGTH)
    icon: Optional[str] = Field(None, max_length=ICON_MAX_LENGTH)
    view: Optional[str] = Field(None, max_length=VIEW_MAX_LENGTH)


class ResourceCreate(ResourceBase):
    pass


class ResourceUpdate(ResourceBase):
    """整体覆盖，字段与创建一致"""
    pass


class ResourceResponse(ResourceBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)
