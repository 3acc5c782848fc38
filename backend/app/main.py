"""
系统服务主应用入口
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.database import init_db
from app.system.routers import resource_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else settings.LOG_LEVEL,
        format=settings.LOG_FORMAT,
    )
    # 初始化数据库
    init_db()
    logger.info(f"{settings.APP_NAME} started")

    yield


# 创建应用
app = FastAPI(
    title=settings.APP_NAME,
    description="后台管理系统 - 菜单/按钮权限资源管理",
    version="1.0.0",
    lifespan=lifespan
)

# CORS 配置
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # 生产环境应限制具体域名
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 注册路由
app.include_router(resource_router.router)


@app.get("/")
def root():
    """根路径"""
    return {
        "name": settings.APP_NAME,
        "version": "1.0.0",
    }


@app.get("/health")
def health_check():
    """健康检查"""
    return {"status": "healthy"}
