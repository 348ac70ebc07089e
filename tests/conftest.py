# tests/conftest.py

import os

# 必须在导入任何应用模块之前设置，engine 在导入时即被创建
os.environ["APP_ENV"] = "test"
os.environ["DATABASE_URL_OVERRIDE"] = "sqlite+aiosqlite:///:memory:"
os.environ["DB_AUTO_CREATE"] = "false"
os.environ["FCM_RELAY_BASE_URL"] = "https://relay.test/api/fcm"

import json
from dataclasses import dataclass, field
from typing import Any, AsyncGenerator, Callable, Dict, List, Optional
import httpx
import pytest
from httpx import AsyncClient, ASGITransport
from fastapi import status
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool
from remote_config.main import app
from remote_config.db.base import Base
from remote_config.db.session import get_db
from remote_config.services.notification.notification_relay import NotificationRelay
from remote_config import models  # noqa: F401

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# ==============================================================================
# 1. 数据库 Fixtures
# ==============================================================================

@pytest.fixture(scope="function")
async def test_engine():
    """每个测试使用一个全新的内存数据库，StaticPool 保证所有会话共享同一个连接。"""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()

@pytest.fixture(scope="function")
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    TestSessionLocal = async_sessionmaker(
        autocommit=False, autoflush=False, expire_on_commit=False, bind=test_engine, class_=AsyncSession
    )
    async with TestSessionLocal() as session:
        try:
            yield session
        finally:
            await session.rollback()

# ==============================================================================
# 2. 推送转发上游 Mock
# ==============================================================================

@dataclass
class FakeRelayUpstream:
    """记录发往推送服务的请求，并按预设返回响应。"""
    status_code: int = 200
    body: Any = field(default_factory=lambda: {"success": True, "messageId": "projects/demo/messages/1"})
    raise_connect_error: bool = False
    requests: List[httpx.Request] = field(default_factory=list)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raise_connect_error:
            raise httpx.ConnectError("connection refused", request=request)
        if isinstance(self.body, (dict, list)):
            return httpx.Response(self.status_code, json=self.body)
        return httpx.Response(self.status_code, text=str(self.body))

    def last_json(self) -> Dict[str, Any]:
        return json.loads(self.requests[-1].content)

@pytest.fixture(scope="function")
def fcm_upstream() -> FakeRelayUpstream:
    return FakeRelayUpstream()

@pytest.fixture(scope="function")
async def notification_relay(fcm_upstream: FakeRelayUpstream) -> AsyncGenerator[NotificationRelay, None]:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(fcm_upstream.handler))
    relay = NotificationRelay(client=http_client)
    yield relay
    await relay.close()

# ==============================================================================
# 3. Client Fixture
# ==============================================================================

@pytest.fixture(scope="function")
async def client(
    db_session: AsyncSession,
    notification_relay: NotificationRelay,
) -> AsyncGenerator[AsyncClient, None]:
    """
    只覆盖最底层的 get_db 依赖，让 FastAPI 的 DI 系统构建 AppContext。
    所有请求共用同一个测试会话，测试结束时整体回滚。
    """
    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    # 模拟应用启动时设置的 app.state
    app.state.notification_relay = notification_relay

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
    app.state.notification_relay = None

@pytest.fixture(scope="function")
async def transactional_client(
    tmp_path,
    notification_relay: NotificationRelay,
) -> AsyncGenerator[AsyncClient, None]:
    """
    与生产环境的 get_db 一致：每个请求一个独立会话和一个事务，成功提交、异常回滚。
    使用文件数据库，使每个会话拿到自己的连接，回滚只影响当前请求。
    """
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'transactional.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    RequestSessionLocal = async_sessionmaker(
        autocommit=False, autoflush=False, expire_on_commit=False, bind=engine, class_=AsyncSession
    )

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with RequestSessionLocal() as session:
            async with session.begin():
                yield session

    app.dependency_overrides[get_db] = override_get_db
    app.state.notification_relay = notification_relay

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
    app.state.notification_relay = None
    await engine.dispose()

# ==============================================================================
# 4. 数据工厂 Fixtures (通过 API 创建)
# ==============================================================================

@pytest.fixture
def app_payload_factory() -> Callable[..., Dict[str, Any]]:
    counter = {"n": 0}

    def _factory(**overrides) -> Dict[str, Any]:
        counter["n"] += 1
        payload = {
            "app_name": f"Test App {counter['n']}",
            "app_id": f"com.test.app{counter['n']}",
            "package_name": f"com.test.app{counter['n']}",
            "description": "Created by tests",
        }
        payload.update(overrides)
        return payload
    return _factory

@pytest.fixture
def created_app_factory(client: AsyncClient, app_payload_factory: Callable):
    async def _factory(**overrides) -> Dict[str, Any]:
        response = await client.post("/api/apps", json=app_payload_factory(**overrides))
        assert response.status_code == status.HTTP_201_CREATED, response.text
        return response.json()["data"]
    return _factory

@pytest.fixture
async def created_app(created_app_factory: Callable) -> Dict[str, Any]:
    return await created_app_factory()

def _entity_factory(client: AsyncClient, collection: str, defaults: Callable[[int], Dict[str, Any]]):
    counter = {"n": 0}

    async def _factory(app_uuid: str, **overrides) -> Dict[str, Any]:
        counter["n"] += 1
        payload = defaults(counter["n"])
        payload.update(overrides)
        response = await client.post(f"/api/apps/{app_uuid}/{collection}", json=payload)
        assert response.status_code == status.HTTP_201_CREATED, response.text
        return response.json()["data"]
    return _factory

@pytest.fixture
def menu_factory(client: AsyncClient):
    return _entity_factory(client, "menus", lambda n: {
        "menu_id": f"menu_{n}",
        "title": f"Menu {n}",
        "order_index": n,
        "menu_type": "item",
        "action_type": "navigate",
        "action_value": f"/menu/{n}",
    })

@pytest.fixture
def toolbar_factory(client: AsyncClient):
    return _entity_factory(client, "toolbars", lambda n: {
        "toolbar_id": f"toolbar_{n}",
        "title": f"Toolbar {n}",
        "position": "top",
        "buttons": [
            {"id": "btn_home", "title": "Home", "icon": "home", "action_type": "navigate", "action_value": "/home", "order_index": 0},
        ],
    })

@pytest.fixture
def fcm_topic_factory(client: AsyncClient):
    return _entity_factory(client, "fcm_topics", lambda n: {
        "topic_name": f"Topic {n}",
        "topic_id": f"topic_{n}",
    })

@pytest.fixture
def style_factory(client: AsyncClient):
    return _entity_factory(client, "styles", lambda n: {
        "style_key": f"style_{n}",
        "style_value": f"#00000{n % 10}",
        "style_category": "color",
    })
