"""
SqlResourceStore 测试 — 基于内存 SQLite
"""
import pytest

from app.system.domain.resource import Resource, ResourceType
from app.system.models.resource import SysResource
from app.system.repositories.memory_store import InMemoryResourceStore
from app.system.repositories.resource_store import ResourceStore, SqlResourceStore
from app.system.result import ResourceErrorCode
from app.system.services.resource_service import ResourceService, ResourceCreateInput


@pytest.fixture
def store(db_session):
    return SqlResourceStore(db_session)


@pytest.fixture
def menu(store) -> Resource:
    return store.insert(Resource(name="系统管理", type=ResourceType.MENU, route="/system"))


def test_both_stores_satisfy_protocol(db_session):
    assert isinstance(SqlResourceStore(db_session), ResourceStore)
    assert isinstance(InMemoryResourceStore(), ResourceStore)


def test_insert_assigns_id(store, db_session, menu):
    assert menu.id is not None
    assert menu.created_at is not None
    row = db_session.query(SysResource).filter(SysResource.id == menu.id).first()
    assert row.type == "menu"
    assert row.route == "/system"


def test_select_by_id(store, menu):
    found = store.select_by_id(menu.id)
    assert found.name == "系统管理"
    assert found.type == ResourceType.MENU
    assert store.select_by_id(999) is None


def test_select_by_pid_and_name_root(store, menu):
    assert store.select_by_pid_and_name(None, "系统管理").id == menu.id
    assert store.select_by_pid_and_name(menu.id, "系统管理") is None


def test_select_by_pid_and_name_child(store, menu):
    child = store.insert(Resource(name="资源管理", type=ResourceType.MENU, pid=menu.id))
    assert store.select_by_pid_and_name(menu.id, "资源管理").id == child.id
    assert store.select_by_pid_and_name(None, "资源管理") is None


def test_select_count_by_pid(store, menu):
    assert store.select_count_by_pid(menu.id) == 0
    store.insert(Resource(name="新增", type=ResourceType.BUTTON, pid=menu.id))
    store.insert(Resource(name="删除", type=ResourceType.BUTTON, pid=menu.id))
    assert store.select_count_by_pid(menu.id) == 2


def test_select_batch_ids(store, menu):
    other = store.insert(Resource(name="商品管理", type=ResourceType.MENU))
    found = store.select_batch_ids([menu.id, other.id, 404])
    assert sorted(r.id for r in found) == sorted([menu.id, other.id])
    assert store.select_batch_ids([]) == []


def test_update_by_id_overwrites(store, menu):
    store.update_by_id(Resource(id=menu.id, name="系统设置", type=ResourceType.MENU, sort=5))
    found = store.select_by_id(menu.id)
    assert found.name == "系统设置"
    assert found.sort == 5
    assert found.route is None


def test_delete_by_id(store, menu):
    store.delete_by_id(menu.id)
    assert store.select_by_id(menu.id) is None


def test_overlong_name_rejected_before_insert(store, db_session):
    result = ResourceService(store).create_resource(
        ResourceCreateInput(name="x" * 80, type=ResourceType.MENU)
    )
    assert result.error_code == ResourceErrorCode.INVALID_PARAMETER
    assert db_session.query(SysResource).count() == 0
