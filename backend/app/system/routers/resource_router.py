"""
资源管理 API 路由
前缀: /system/resources
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.system.repositories.resource_store import SqlResourceStore
from app.system.result import ResourceErrorCode, ServiceResult
from app.system.schemas import ResourceCreate, ResourceUpdate, ResourceResponse
from app.system.services.resource_service import (
    ResourceService, ResourceCreateInput, ResourceUpdateInput,
)

router = APIRouter(prefix="/system/resources", tags=["资源管理"])

ERROR_STATUS = {
    ResourceErrorCode.INVALID_PARAMETER: 422,
    ResourceErrorCode.RESOURCE_NOT_EXISTS: status.HTTP_404_NOT_FOUND,
}


def get_resource_service(db: Session = Depends(get_db)) -> ResourceService:
    return ResourceService(SqlResourceStore(db))


def _raise_for_failure(result: ServiceResult) -> None:
    if result.success:
        return
    raise HTTPException(
        status_code=ERROR_STATUS.get(result.error_code, status.HTTP_400_BAD_REQUEST),
        detail=result.message,
        headers={"X-Error-Code": result.error_code.value},
    )


@router.get("", response_model=List[ResourceResponse])
def list_resources(
    ids: List[int] = Query(default=[]),
    service: ResourceService = Depends(get_resource_service),
):
    """按编号批量获取资源，不存在的编号忽略"""
    return [ResourceResponse.model_validate(r) for r in service.list_resource(ids)]


@router.get("/{resource_id}", response_model=ResourceResponse)
def get_resource(
    resource_id: int,
    service: ResourceService = Depends(get_resource_service),
):
    """获取资源详情"""
    resource = service.get_resource(resource_id)
    if not resource:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="资源不存在")
    return ResourceResponse.model_validate(resource)


@router.post("", response_model=ResourceResponse, status_code=status.HTTP_201_CREATED)
def create_resource(
    data: ResourceCreate,
    service: ResourceService = Depends(get_resource_service),
):
    """创建资源"""
    result = service.create_resource(ResourceCreateInput(**data.model_dump()))
    _raise_for_failure(result)
    return ResourceResponse.model_validate(result.data)


@router.put("/{resource_id}", response_model=ResourceResponse)
def update_resource(
    resource_id: int,
    data: ResourceUpdate,
    service: ResourceService = Depends(get_resource_service),
):
    """更新资源（整体覆盖）"""
    result = service.update_resource(ResourceUpdateInput(id=resource_id, **data.model_dump()))
    _raise_for_failure(result)
    return ResourceResponse.model_validate(result.data)


@router.delete("/{resource_id}")
def delete_resource(
    resource_id: int,
    service: ResourceService = Depends(get_resource_service),
):
    """删除资源（存在子资源时不可删除）"""
    result = service.delete_resource(resource_id)
    _raise_for_failure(result)
    return {"success": True, "message": "资源已删除"}
