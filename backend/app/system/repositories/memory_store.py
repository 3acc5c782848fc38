"""
内存资源存储

与 SqlResourceStore 行为一致，用于单元测试和无数据库场景。
读写都做拷贝，调用方修改返回值不会影响已存储的数据。
"""
from dataclasses import replace
from datetime import datetime, UTC
from typing import Dict, Iterable, List, Optional

from app.system.domain.resource import Resource


class InMemoryResourceStore:
    """基于字典的资源存储"""

    def __init__(self):
        self._rows: Dict[int, Resource] = {}
        self._next_id = 1

    def select_by_id(self, resource_id: int) -> Optional[Resource]:
        row = self._rows.get(resource_id)
        return replace(row) if row else None

    def select_batch_ids(self, resource_ids: Iterable[int]) -> List[Resource]:
        result = []
        seen = set()
        for resource_id in resource_ids:
            if resource_id in self._rows and resource_id not in seen:
                seen.add(resource_id)
                result.append(replace(self._rows[resource_id]))
        return result

    def select_by_pid_and_name(self, pid: Optional[int], name: str) -> Optional[Resource]:
        for row in self._rows.values():
            if row.pid == pid and row.name == name:
                return replace(row)
        return None

    def select_count_by_pid(self, pid: int) -> int:
        return sum(1 for row in self._rows.values() if row.pid == pid)

    def insert(self, resource: Resource) -> Resource:
        now = datetime.now(UTC)
        resource.id = self._next_id
        resource.created_at = now
        resource.updated_at = now
        self._next_id += 1
        self._rows[resource.id] = replace(resource)
        return resource

    def update_by_id(self, resource: Resource) -> None:
        existing = self._rows.get(resource.id)
        if existing is None:
            return
        resource.created_at = existing.created_at
        resource.updated_at = datetime.now(UTC)
        self._rows[resource.id] = replace(resource)

    def delete_by_id(self, resource_id: int) -> None:
        self._rows.pop(resource_id, None)

    def __len__(self) -> int:
        return len(self._rows)
