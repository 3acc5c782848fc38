"""
资源 Service — 菜单/按钮权限资源的 CRUD

校验顺序固定，遇到第一个不通过的校验立即返回失败结果，不做错误聚合。
"""
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from app.system.domain.resource import (
    Resource, ResourceType,
    NAME_MAX_LENGTH, PERMISSION_MAX_LENGTH, ROUTE_MAX_LENGTH, ICON_MAX_LENGTH, VIEW_MAX_LENGTH,
)
from app.system.repositories.resource_store import ResourceStore
from app.system.result import ResourceErrorCode, ServiceResult

logger = logging.getLogger(__name__)

OPTIONAL_FIELD_MAX_LENGTHS = {
    "permission": PERMISSION_MAX_LENGTH,
    "route": ROUTE_MAX_LENGTH,
    "icon": ICON_MAX_LENGTH,
    "view": VIEW_MAX_LENGTH,
}


@dataclass
class ResourceCreateInput:
    """创建资源入参"""
    name: str
    type: ResourceType
    pid: Optional[int] = None
    sort: int = 0
    permission: Optional[str] = None
    route: Optional[str] = None
    icon: Optional[str] = None
    view: Optional[str] = None


@dataclass
class ResourceUpdateInput:
    """更新资源入参，整体覆盖"""
    id: int
    name: str
    type: ResourceType
    pid: Optional[int] = None
    sort: int = 0
    permission: Optional[str] = None
    route: Optional[str] = None
    icon: Optional[str] = None
    view: Optional[str] = None


def _is_positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class ResourceService:
    """资源管理服务"""

    def __init__(self, store: ResourceStore):
        self.store = store

    def create_resource(self, data: ResourceCreateInput) -> ServiceResult[Resource]:
        """
        创建资源

        Args:
            data: 创建资源入参

        Returns:
            成功时 data 为新资源（含编号）
        """
        invalid = self._check_input(data)
        if invalid:
            return invalid
        # 校验父资源
        failure = self._check_parent_resource(data.pid, None)
        if failure:
            return self._reject("create", failure)
        # 校验同级资源名
        failure = self._check_resource_name(data.pid, data.name, None)
        if failure:
            return self._reject("create", failure)

        resource = Resource(
            pid=data.pid,
            name=data.name,
            type=ResourceType(data.type),
            sort=data.sort,
            permission=data.permission,
            route=data.route,
            icon=data.icon,
            view=data.view,
        )
        self._init_resource_property(resource)
        resource = self.store.insert(resource)
        logger.info(f"Resource created: id={resource.id} name='{resource.name}' pid={resource.pid}")
        return ServiceResult.ok(resource)

    def update_resource(self, data: ResourceUpdateInput) -> ServiceResult[Resource]:
        """
        更新资源（整体覆盖）

        Args:
            data: 更新资源入参

        Returns:
            成功时 data 为更新后的资源
        """
        invalid = self._check_input(data)
        if invalid:
            return invalid
        if not _is_positive_int(data.id):
            return self._invalid("资源编号不能为空")
        # 校验更新的资源是否存在
        if self.store.select_by_id(data.id) is None:
            return self._reject("update", ResourceErrorCode.RESOURCE_NOT_EXISTS)
        failure = self._check_parent_resource(data.pid, data.id)
        if failure:
            return self._reject("update", failure)
        failure = self._check_resource_name(data.pid, data.name, data.id)
        if failure:
            return self._reject("update", failure)

        resource = Resource(
            id=data.id,
            pid=data.pid,
            name=data.name,
            type=ResourceType(data.type),
            sort=data.sort,
            permission=data.permission,
            route=data.route,
            icon=data.icon,
            view=data.view,
        )
        self._init_resource_property(resource)
        self.store.update_by_id(resource)
        logger.info(f"Resource updated: id={resource.id} name='{resource.name}' pid={resource.pid}")
        return ServiceResult.ok(resource)

    def delete_resource(self, resource_id: int) -> ServiceResult[None]:
        """删除资源，存在子资源时不可删除"""
        if not _is_positive_int(resource_id):
            return self._invalid("资源编号不能为空")
        if self.store.select_by_id(resource_id) is None:
            return self._reject("delete", ResourceErrorCode.RESOURCE_NOT_EXISTS)
        if self.store.select_count_by_pid(resource_id) > 0:
            return self._reject("delete", ResourceErrorCode.RESOURCE_HAS_CHILDREN)

        self.store.delete_by_id(resource_id)
        logger.info(f"Resource deleted: id={resource_id}")
        return ServiceResult.ok()

    def get_resource(self, resource_id: int) -> Optional[Resource]:
        return self.store.select_by_id(resource_id)

    def list_resource(self, resource_ids: Iterable[int]) -> List[Resource]:
        """批量获取资源，不存在的编号直接忽略"""
        ids = list(resource_ids)
        if not ids:
            return []
        return self.store.select_batch_ids(ids)

    # ---- 校验 ----

    def _check_parent_resource(self, pid: Optional[int],
                               child_id: Optional[int]) -> Optional[ResourceErrorCode]:
        """
        校验父资源是否合法

        1. 不能设置自己为父资源
        2. 父资源必须存在
        3. 父资源必须是菜单类型
        """
        if pid is None:
            return None
        if pid == child_id:
            return ResourceErrorCode.RESOURCE_PARENT_IS_SELF
        parent = self.store.select_by_id(pid)
        if parent is None:
            return ResourceErrorCode.RESOURCE_PARENT_NOT_EXISTS
        if not parent.is_menu:
            return ResourceErrorCode.RESOURCE_PARENT_NOT_MENU
        return None

    def _check_resource_name(self, pid: Optional[int], name: str,
                             resource_id: Optional[int]) -> Optional[ResourceErrorCode]:
        """校验同一父资源下是否存在相同名字的资源"""
        existing = self.store.select_by_pid_and_name(pid, name)
        if existing is None:
            return None
        # 创建时没有编号可比较，存在即重复
        if resource_id is None:
            return ResourceErrorCode.RESOURCE_NAME_DUPLICATE
        if existing.id != resource_id:
            return ResourceErrorCode.RESOURCE_NAME_DUPLICATE
        return None

    @staticmethod
    def _init_resource_property(resource: Resource) -> None:
        # 按钮无需 route 和 icon
        if resource.type == ResourceType.BUTTON:
            resource.route = None
            resource.icon = None

    def _check_input(self, data) -> Optional[ServiceResult]:
        """入参前置校验，替代注解式校验"""
        if not isinstance(data.name, str) or not data.name.strip():
            return self._invalid("资源名字不能为空")
        if len(data.name) > NAME_MAX_LENGTH:
            return self._invalid(f"资源名字不能超过 {NAME_MAX_LENGTH} 个字符")
        try:
            ResourceType(data.type)
        except ValueError:
            return self._invalid(f"资源类型 '{data.type}' 不正确")
        if data.pid is not None and not _is_positive_int(data.pid):
            return self._invalid("父资源编号不正确")
        if not isinstance(data.sort, int) or isinstance(data.sort, bool) or data.sort < 0:
            return self._invalid("排序不能为负数")
        for field, max_length in OPTIONAL_FIELD_MAX_LENGTHS.items():
            value = getattr(data, field)
            if value is None:
                continue
            if not isinstance(value, str):
                return self._invalid(f"{field} 必须是字符串")
            if len(value) > max_length:
                return self._invalid(f"{field} 不能超过 {max_length} 个字符")
        return None

    @staticmethod
    def _invalid(message: str) -> ServiceResult:
        return ServiceResult.fail(ResourceErrorCode.INVALID_PARAMETER, message)

    @staticmethod
    def _reject(operation: str, error_code: ResourceErrorCode) -> ServiceResult:
        logger.info(f"Resource {operation} rejected: {error_code.value}")
        return ServiceResult.fail(error_code)
