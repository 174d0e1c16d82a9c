"""테스트 설정"""

import os
from typing import Generator

import pytest
import pytest_asyncio
from docker import from_env
from docker.errors import DockerException
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from testcontainers.postgres import PostgresContainer

from app.core.config import settings
from app.core.database import Base
from app.domains.creators.feed import CreatorFeed, get_creator_feed
from app.domains.creators.pricing import load_price_buckets
from app.domains.creators.types import CreatorRecord, CreatorStats
from app.main import app


def _is_docker_available() -> bool:
    """로컬 환경에서 Docker 접근 가능 여부 확인"""
    if os.getenv("FORCE_DOCKER_TESTS", "").lower() in {"1", "true"}:
        return True
    if os.getenv("SKIP_DOCKER_TESTS", "").lower() in {"1", "true"}:
        return False

    try:
        client = from_env()
        client.ping()
        return True
    except DockerException:
        return False
    except Exception:
        return False


DOCKER_AVAILABLE = _is_docker_available()


def make_creator(**overrides) -> CreatorRecord:
    """테스트용 크리에이터 생성 (지정하지 않은 필드는 기본값)"""
    values = {
        "name": "Test Creator",
        "handle": "@test",
        "location": "Seoul, KR",
        "tagline": "",
        "starting_price": 300,
        "content_types": ("Tutorial",),
        "platforms": ("YouTube",),
        "attributes": ("Tech",),
        "stats": CreatorStats(audience_size=1000, avg_views=100),
    }
    values.update(overrides)
    for key in ("content_types", "platforms", "attributes"):
        if isinstance(values[key], list):
            values[key] = tuple(values[key])
    return CreatorRecord(**values)


@pytest.fixture
def creator_factory():
    """크리에이터 팩토리"""
    return make_creator


@pytest.fixture
def sample_creators() -> list[CreatorRecord]:
    """가격 경계와 누락 배열을 포함한 샘플 목록"""
    return [
        make_creator(
            id=1,
            name="Mina Park",
            handle="@minabuilds",
            tagline="Product demos for developer tools",
            starting_price=450,
            content_types=["Product demo", "Tutorial"],
            platforms=["YouTube", "LinkedIn"],
            attributes=["B2B", "SaaS", "AI"],
            verified=True,
        ),
        make_creator(
            id=2,
            name="Jordan Lee",
            handle="@jordanfounds",
            location="Austin, TX",
            tagline="Founder stories and fintech threads",
            starting_price=250,
            content_types=["Founder story", "Thread"],
            platforms=["X"],
            attributes=["Fintech", "B2B"],
        ),
        make_creator(
            id=3,
            name="Ava Chen",
            handle="@avaunboxes",
            location="Vancouver, CA",
            tagline="Unboxing and honest reviews",
            starting_price=1200,
            content_types=["Unboxing", "Livestream"],
            platforms=["Twitch"],
            attributes=["Consumer", "Live"],
        ),
        make_creator(
            id=4,
            name="Noor Haddad",
            handle="@noorwell",
            location="Dubai, AE",
            tagline="Wellness community host",
            starting_price=700,
            content_types=None,
            platforms=None,
            attributes=None,
        ),
    ]


@pytest.fixture
def price_buckets():
    """기본 가격 구간 표"""
    return load_price_buckets()


@pytest.fixture
def loaded_feed(sample_creators) -> CreatorFeed:
    """샘플 목록이 게시된 피드"""

    async def loader():
        return sample_creators

    feed = CreatorFeed(loader=loader)
    feed.publish(sample_creators)
    return feed


@pytest.fixture
def loading_feed() -> CreatorFeed:
    """아직 한 번도 불러오지 않은 피드"""

    async def loader():
        return []

    return CreatorFeed(loader=loader)


@pytest.fixture
def failing_loader():
    """항상 실패하는 데이터 소스"""

    async def loader():
        raise ConnectionError("database unreachable")

    return loader


# NOTE:
# client 픽스처는 feed 픽스처를 직접 받지 않고, 테스트에서 app_feed를
# 오버라이드해 원하는 피드 상태를 주입
@pytest.fixture
def app_feed(loaded_feed) -> CreatorFeed:
    """API 테스트에서 사용할 피드 (기본: 로드 완료)"""
    return loaded_feed


@pytest_asyncio.fixture
async def client(app_feed: CreatorFeed):
    """비동기 테스트 클라이언트 (피드 의존성 오버라이드)"""
    app.dependency_overrides[get_creator_feed] = lambda: app_feed

    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport, base_url="http://test"
    ) as client:
        yield client

    # 정리
    app.dependency_overrides.clear()


@pytest.fixture
def anyio_backend():
    """anyio 백엔드 설정"""
    return "asyncio"


@pytest.fixture
def api_key_header():
    """Internal API Key 헤더"""
    return {"X-Internal-Api-Key": settings.internal_api_key}


@pytest.fixture(scope="session")
def postgres_container() -> Generator[PostgresContainer, None, None]:
    """PostgreSQL 테스트 컨테이너"""
    if not DOCKER_AVAILABLE:
        pytest.skip("Docker is not available; skipping container-based tests.")

    with PostgresContainer("postgres:16-alpine") as postgres:
        yield postgres


@pytest.fixture(scope="session")
def test_database_url(postgres_container: PostgresContainer) -> str:
    """테스트 데이터베이스 URL"""
    # asyncpg를 위한 URL 생성
    return str(
        postgres_container.get_connection_url().replace(
            "postgresql+psycopg2://", "postgresql+asyncpg://"
        )
    )


@pytest_asyncio.fixture
async def db_session(test_database_url: str):
    """테스트 데이터베이스 세션"""
    engine = create_async_engine(test_database_url, echo=False)

    # 각 테스트마다 깨끗한 스키마 유지
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    async_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    await engine.dispose()
