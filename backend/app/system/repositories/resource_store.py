"""
资源存储 — Store 协议 + 基于 SQLAlchemy 的实现
"""
from typing import Iterable, List, Optional, Protocol, runtime_checkable

from sqlalchemy.orm import Session

from app.system.domain.resource import Resource, ResourceType
from app.system.models.resource import SysResource


@runtime_checkable
class ResourceStore(Protocol):
    """资源存储协议

    ResourceService 只依赖这组能力，不关心背后是数据库还是内存。
    """

    def select_by_id(self, resource_id: int) -> Optional[Resource]:
        ...

    def select_batch_ids(self, resource_ids: Iterable[int]) -> List[Resource]:
        """按编号批量查询，只返回存在的资源"""
        ...

    def select_by_pid_and_name(self, pid: Optional[int], name: str) -> Optional[Resource]:
        ...

    def select_count_by_pid(self, pid: int) -> int:
        ...

    def insert(self, resource: Resource) -> Resource:
        """插入资源，并回填编号"""
        ...

    def update_by_id(self, resource: Resource) -> None:
        """按编号整体覆盖"""
        ...

    def delete_by_id(self, resource_id: int) -> None:
        ...


def to_resource(row: SysResource) -> Resource:
    return Resource(
        id=row.id,
        pid=row.pid,
        name=row.name,
        type=ResourceType(row.type),
        sort=row.sort,
        permission=row.permission,
        route=row.route,
        icon=row.icon,
        view=row.view,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _copy_fields(resource: Resource, row: SysResource) -> None:
    row.pid = resource.pid
    row.name = resource.name
    row.type = resource.type.value
    row.sort = resource.sort
    row.permission = resource.permission
    row.route = resource.route
    row.icon = resource.icon
    row.view = resource.view


class SqlResourceStore:
    """基于 sys_resource 表的资源存储"""

    def __init__(self, db: Session):
        self.db = db

    def _get_row(self, resource_id: int) -> Optional[SysResource]:
        return self.db.query(SysResource).filter(SysResource.id == resource_id).first()

    def select_by_id(self, resource_id: int) -> Optional[Resource]:
        row = self._get_row(resource_id)
        return to_resource(row) if row else None

    def select_batch_ids(self, resource_ids: Iterable[int]) -> List[Resource]:
        ids = list(resource_ids)
        if not ids:
            return []
        rows = self.db.query(SysResource).filter(SysResource.id.in_(ids)).all()
        return [to_resource(row) for row in rows]

    def select_by_pid_and_name(self, pid: Optional[int], name: str) -> Optional[Resource]:
        query = self.db.query(SysResource).filter(SysResource.name == name)
        if pid is None:
            query = query.filter(SysResource.pid.is_(None))
        else:
            query = query.filter(SysResource.pid == pid)
        row = query.first()
        return to_resource(row) if row else None

    def select_count_by_pid(self, pid: int) -> int:
        return self.db.query(SysResource).filter(SysResource.pid == pid).count()

    def insert(self, resource: Resource) -> Resource:
        row = SysResource()
        _copy_fields(resource, row)
        self.db.add(row)
        self.db.commit()
        self.db.refresh(row)
        resource.id = row.id
        resource.created_at = row.created_at
        resource.updated_at = row.updated_at
        return resource

    def update_by_id(self, resource: Resource) -> None:
        row = self._get_row(resource.id)
        if row is None:
            return
        _copy_fields(resource, row)
        self.db.commit()
        self.db.refresh(row)
        resource.created_at = row.created_at
        resource.updated_at = row.updated_at

    def delete_by_id(self, resource_id: int) -> None:
        row = self._get_row(resource_id)
        if row is None:
            return
        self.db.delete(row)
        self.db.commit()
