"""크리에이터 피드

데이터 소스에서 크리에이터 목록을 비동기로 읽어 최신 스냅샷 하나만
보관합니다. 스냅샷은 Loading | Loaded | FeedFailed 중 하나이며,
'아직 불러오는 중'과 '불러왔지만 비어 있음'을 타입으로 구분합니다.

갱신은 단일 백그라운드 태스크가 담당하고, 읽는 쪽은 참조 교체만 보므로
별도 잠금이 필요 없습니다.
"""

import asyncio
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Awaitable, Callable, ClassVar, Sequence, Union

from app.core.database import session_scope
from app.core.logging import get_logger
from app.core.utils.datetime import now_utc
from app.domains.creators.repository import CreatorRepository
from app.domains.creators.types import CreatorRecord

logger = get_logger(__name__)


class FeedStatus(str, Enum):
    """피드 상태"""

    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass(frozen=True)
class Loading:
    status: ClassVar[FeedStatus] = FeedStatus.LOADING


@dataclass(frozen=True)
class Loaded:
    creators: tuple[CreatorRecord, ...]
    loaded_at: datetime = field(default_factory=now_utc)
    status: ClassVar[FeedStatus] = FeedStatus.LOADED


@dataclass(frozen=True)
class FeedFailed:
    """한 번도 불러오지 못한 채 데이터 소스가 실패한 상태"""

    reason: str
    status: ClassVar[FeedStatus] = FeedStatus.FAILED


FeedSnapshot = Union[Loading, Loaded, FeedFailed]

CreatorLoader = Callable[[], Awaitable[Sequence[CreatorRecord]]]


async def load_creators_from_database() -> list[CreatorRecord]:
    """DB에서 전체 크리에이터를 노출 순서대로 읽기"""
    async with session_scope() as session:
        rows = await CreatorRepository(session).list_all()
        return [CreatorRecord.from_model(row) for row in rows]


class CreatorFeed:
    """최신 크리에이터 목록 스냅샷 보관소

    Example::

        feed = CreatorFeed(loader=load_creators_from_database)
        await feed.refresh()
        if isinstance(feed.snapshot, Loaded):
            creators = feed.snapshot.creators
    """

    def __init__(self, loader: CreatorLoader = load_creators_from_database):
        self._loader = loader
        self._snapshot: FeedSnapshot = Loading()
        # 갱신은 한 번에 하나씩 (나중에 시작한 읽기가 항상 마지막에 게시됨)
        self._refresh_lock = asyncio.Lock()

    @property
    def snapshot(self) -> FeedSnapshot:
        return self._snapshot

    def publish(self, creators: Sequence[CreatorRecord]) -> Loaded:
        """새 목록을 게시

        내용이 직전 목록과 같으면 기존 스냅샷을 유지해 옵션 캐시가
        불필요하게 무효화되지 않도록 합니다.
        """
        current = self._snapshot
        new_creators = tuple(creators)
        if isinstance(current, Loaded) and current.creators == new_creators:
            return current

        loaded = Loaded(creators=new_creators)
        self._snapshot = loaded
        logger.info(f"Creator feed loaded: {len(new_creators)} creators")
        return loaded

    async def refresh(self) -> FeedSnapshot:
        """데이터 소스를 다시 읽어 스냅샷 갱신

        실패 시 이미 불러온 목록이 있으면 그대로 유지하고,
        없으면 FeedFailed로 전환합니다. 동시에 호출되면 순서대로 실행됩니다.
        """
        async with self._refresh_lock:
            try:
                creators = await self._loader()
            except Exception as e:
                logger.exception("Creator feed refresh failed")
                if not isinstance(self._snapshot, Loaded):
                    self._snapshot = FeedFailed(
                        reason=str(e) or type(e).__name__
                    )
                return self._snapshot

            return self.publish(creators)

    async def run(self, interval_seconds: float) -> None:
        """interval_seconds 간격으로 계속 갱신 (취소될 때까지)"""
        while True:
            await self.refresh()
            await asyncio.sleep(interval_seconds)


creator_feed = CreatorFeed()


def get_creator_feed() -> CreatorFeed:
    """CreatorFeed 의존성"""
    return creator_feed
