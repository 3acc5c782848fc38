"""
资源操作结果类型

Service 不抛业务异常，而是返回 ServiceResult：
成功时携带数据，失败时携带唯一的错误码和提示信息，由调用方负责翻译为响应。
"""
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ResourceErrorCode(str, Enum):
    """资源错误码"""
    INVALID_PARAMETER = "INVALID_PARAMETER"
    RESOURCE_NOT_EXISTS = "RESOURCE_NOT_EXISTS"
    RESOURCE_PARENT_IS_SELF = "RESOURCE_PARENT_IS_SELF"
    RESOURCE_PARENT_NOT_EXISTS = "RESOURCE_PARENT_NOT_EXISTS"
    RESOURCE_PARENT_NOT_MENU = "RESOURCE_PARENT_NOT_MENU"
    RESOURCE_NAME_DUPLICATE = "RESOURCE_NAME_DUPLICATE"
    RESOURCE_HAS_CHILDREN = "RESOURCE_HAS_CHILDREN"

    @property
    def message(self) -> str:
        return ERROR_MESSAGES[self]


ERROR_MESSAGES = {
    ResourceErrorCode.INVALID_PARAMETER: "请求参数不正确",
    ResourceErrorCode.RESOURCE_NOT_EXISTS: "资源不存在",
    ResourceErrorCode.RESOURCE_PARENT_IS_SELF: "不能设置自己为父资源",
    ResourceErrorCode.RESOURCE_PARENT_NOT_EXISTS: "父资源不存在",
    ResourceErrorCode.RESOURCE_PARENT_NOT_MENU: "父资源必须是菜单类型",
    ResourceErrorCode.RESOURCE_NAME_DUPLICATE: "已经存在该名字的资源",
    ResourceErrorCode.RESOURCE_HAS_CHILDREN: "存在子资源，无法删除",
}


@dataclass
class ServiceResult(Generic[T]):
    """
    统一的 Service 操作结果

    Attributes:
        success: 是否成功
        data: 成功时的返回数据
        error_code: 失败时的错误码
        message: 提示信息
    """
    success: bool
    data: Optional[T] = None
    error_code: Optional[ResourceErrorCode] = None
    message: str = ""

    @staticmethod
    def ok(data: Optional[T] = None, message: str = "") -> "ServiceResult[T]":
        """快速创建成功结果"""
        return ServiceResult(success=True, data=data, message=message)

    @staticmethod
    def fail(error_code: ResourceErrorCode, message: Optional[str] = None) -> "ServiceResult[T]":
        """快速创建失败结果，未指定 message 时使用错误码默认提示"""
        return ServiceResult(
            success=False,
            error_code=error_code,
            message=message or error_code.message,
        )
