"""Creators 도메인 서비스

피드 스냅샷, 필터 옵션, 필터 엔진을 묶어 화면에 필요한 카탈로그 뷰를
만듭니다. 모든 계산은 동기적이며 요청마다 전체 목록을 다시 평가합니다.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from app.core.config import settings
from app.core.logging import get_logger
from app.core.utils.time import measure_time
from app.domains.creators.exceptions import (
    CreatorFeedUnavailableException,
    InvalidPriceBucketException,
)
from app.domains.creators.facets import FacetOptionCache, FacetOptions
from app.domains.creators.feed import (
    CreatorFeed,
    FeedFailed,
    FeedSnapshot,
    FeedStatus,
    Loaded,
)
from app.domains.creators.filters import apply_filters
from app.domains.creators.pricing import find_price_bucket, load_price_buckets
from app.domains.creators.state import FilterState, has_active_filters
from app.domains.creators.types import CreatorRecord, PriceBucket

logger = get_logger(__name__)

NO_CREATORS: tuple[CreatorRecord, ...] = ()


@dataclass(frozen=True)
class CatalogView:
    """프레젠테이션 계층으로 나가는 결과

    status가 loading이면 creators는 None입니다 (0건과 구분).
    """

    status: FeedStatus
    state: FilterState
    creators: Optional[tuple[CreatorRecord, ...]]
    has_active_filters: bool
    facets: FacetOptions
    price_buckets: tuple[PriceBucket, ...]

    @property
    def is_loading(self) -> bool:
        return self.status == FeedStatus.LOADING

    @property
    def match_count(self) -> Optional[int]:
        if self.creators is None:
            return None
        return len(self.creators)


class CatalogService:
    """크리에이터 카탈로그 서비스"""

    def __init__(
        self,
        feed: CreatorFeed,
        option_cache: Optional[FacetOptionCache] = None,
        price_buckets: Optional[Sequence[PriceBucket]] = None,
    ):
        self.feed = feed
        self.option_cache = option_cache or FacetOptionCache(
            settings.catalog_content_types, settings.catalog_attributes
        )
        self.price_buckets = (
            tuple(price_buckets)
            if price_buckets is not None
            else load_price_buckets()
        )

    def validate_state(self, state: FilterState) -> None:
        """가격 구간 키가 설정된 표에 있는지 확인

        Raises:
            InvalidPriceBucketException: 알 수 없는 가격 구간 키
        """
        if find_price_bucket(self.price_buckets, state.price_bucket_key) is None:
            raise InvalidPriceBucketException(
                price_bucket=state.price_bucket_key
            )

    def _read_snapshot(self) -> FeedSnapshot:
        snapshot = self.feed.snapshot
        if isinstance(snapshot, FeedFailed):
            raise CreatorFeedUnavailableException(reason=snapshot.reason)
        return snapshot

    def get_facets(self) -> FacetOptions:
        """현재 데이터셋 기준 필터 옵션 (로딩 중이면 기본 옵션만)

        Raises:
            CreatorFeedUnavailableException: 피드를 불러오지 못한 경우
        """
        snapshot = self._read_snapshot()
        creators = (
            snapshot.creators if isinstance(snapshot, Loaded) else NO_CREATORS
        )
        return self.option_cache.get(creators)

    def browse(self, state: FilterState) -> CatalogView:
        """필터 상태를 적용한 카탈로그 뷰

        Args:
            state: 필터 상태

        Returns:
            CatalogView

        Raises:
            InvalidPriceBucketException: 알 수 없는 가격 구간 키
            CreatorFeedUnavailableException: 피드를 불러오지 못한 경우
        """
        self.validate_state(state)
        snapshot = self._read_snapshot()

        if not isinstance(snapshot, Loaded):
            return CatalogView(
                status=snapshot.status,
                state=state,
                creators=None,
                has_active_filters=has_active_filters(state),
                facets=self.option_cache.get(NO_CREATORS),
                price_buckets=self.price_buckets,
            )

        facets = self.option_cache.get(snapshot.creators)
        with measure_time() as timer:
            filtered = apply_filters(snapshot.creators, state, self.price_buckets)

        logger.debug(
            f"Creator filters applied: {len(filtered)}/{len(snapshot.creators)} "
            f"matched in {timer['elapsed_ms']:.2f}ms"
        )

        return CatalogView(
            status=snapshot.status,
            state=state,
            creators=tuple(filtered),
            has_active_filters=has_active_filters(state),
            facets=facets,
            price_buckets=self.price_buckets,
        )

    async def refresh(self) -> FeedSnapshot:
        """피드 강제 갱신"""
        snapshot = await self.feed.refresh()
        logger.info(f"Creator feed refreshed on demand: {snapshot.status.value}")
        return snapshot
