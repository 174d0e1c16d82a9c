"""마이그레이션 자동 실행 유틸리티

서버 시작 시 Alembic 마이그레이션을 자동으로 확인하고 업데이트합니다.
"""

from pathlib import Path
from typing import Optional, TypedDict

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import create_engine

from app.core.config import settings
from app.core.logging import get_logger

logger = get_logger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[2]


class MigrationStatus(TypedDict):
    current: Optional[str]
    head: Optional[str]
    is_up_to_date: bool


def get_sync_database_url(database_url: Optional[str] = None) -> str:
    """async 드라이버 URL을 alembic용 sync URL로 변환"""
    url = database_url or settings.database_url
    return url.replace("+asyncpg", "+psycopg2")


def get_alembic_config() -> Config:
    """Alembic 설정 객체 반환"""
    config = Config(str(PROJECT_ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(PROJECT_ROOT / "migrations"))
    config.set_main_option("sqlalchemy.url", get_sync_database_url())
    config.attributes["configure_logger"] = False
    return config


def get_current_revision() -> Optional[str]:
    """현재 데이터베이스의 마이그레이션 버전 조회"""
    engine = create_engine(get_sync_database_url())
    try:
        with engine.connect() as conn:
            context = MigrationContext.configure(conn)
            rev = context.get_current_revision()
            return str(rev) if rev else None
    finally:
        engine.dispose()


def get_head_revision() -> Optional[str]:
    """최신 마이그레이션 버전 조회"""
    script = ScriptDirectory.from_config(get_alembic_config())
    head = script.get_current_head()
    return str(head) if head else None


def check_migration_status() -> MigrationStatus:
    """마이그레이션 상태 확인"""
    current = get_current_revision()
    head = get_head_revision()
    return {
        "current": current,
        "head": head,
        "is_up_to_date": current == head,
    }


def run_migrations() -> None:
    """head 리비전까지 업그레이드"""
    logger.info("🔄 마이그레이션 업데이트 중...")
    command.upgrade(get_alembic_config(), "head")
    logger.info("✅ 마이그레이션 완료")


def run_migrations_on_startup(auto_migrate: bool = True) -> None:
    """서버 시작 시 마이그레이션 확인 및 실행

    데이터베이스에 연결할 수 없으면 개발 환경에서는 경고만 남기고
    계속 진행합니다. 이 경우 크리에이터 피드는 실패 상태로 노출됩니다.

    Args:
        auto_migrate: True면 자동 마이그레이션, False면 상태만 확인
    """
    try:
        status = check_migration_status()

        if status["is_up_to_date"]:
            logger.info(
                f"✅ 마이그레이션 상태: 최신 (revision: {status['current']})"
            )
            return

        logger.warning(
            f"⚠️ 마이그레이션이 최신 상태가 아닙니다. "
            f"(현재: {status['current']}, 최신: {status['head']})"
        )
        if auto_migrate:
            run_migrations()

    except Exception as e:
        logger.error(f"❌ 마이그레이션 확인 실패: {e}")
        if settings.is_production:
            raise RuntimeError("프로덕션 환경에서 마이그레이션 확인 실패") from e
        logger.warning("⚠️ 개발 환경이므로 서버를 계속 시작합니다.")
