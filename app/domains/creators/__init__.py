"""Creators 도메인 모듈

구매자가 크리에이터 목록을 검색어, 가격 구간, 콘텐츠 타입, 속성으로
좁혀 보는 카탈로그 도메인입니다.

구조:
    - types.py: 도메인 값 객체 (CreatorRecord, PriceBucket)
    - models.py: SQLAlchemy 모델 정의 (Creator)
    - repository.py: 데이터 접근 계층
    - feed.py: 비동기 크리에이터 피드 (Loading | Loaded | FeedFailed)
    - facets.py: 필터 옵션 계산 및 캐시
    - search.py: 검색어 토큰화 및 매칭
    - pricing.py: 가격 구간 분류
    - filters.py: 필터 엔진
    - state.py: 필터 상태와 상태 전이
    - service.py: 카탈로그 뷰 조합
    - schemas.py: Pydantic 스키마
    - router.py: API 엔드포인트
    - exceptions.py: 도메인 예외
"""

from app.domains.creators.exceptions import (
    CreatorErrorCode,
    CreatorFeedUnavailableException,
    InvalidPriceBucketException,
)
from app.domains.creators.facets import FacetOptionCache, resolve_options
from app.domains.creators.feed import (
    CreatorFeed,
    FeedFailed,
    FeedStatus,
    Loaded,
    Loading,
    creator_feed,
)
from app.domains.creators.filters import apply_filters
from app.domains.creators.models import Creator
from app.domains.creators.service import CatalogService, CatalogView
from app.domains.creators.state import (
    FilterState,
    clear_filters,
    has_active_filters,
    toggle_attribute,
)
from app.domains.creators.types import CreatorRecord, CreatorStats, PriceBucket

__all__ = [
    "Creator",
    "CreatorRecord",
    "CreatorStats",
    "PriceBucket",
    "CreatorFeed",
    "FeedStatus",
    "Loading",
    "Loaded",
    "FeedFailed",
    "creator_feed",
    "FacetOptionCache",
    "resolve_options",
    "apply_filters",
    "FilterState",
    "toggle_attribute",
    "clear_filters",
    "has_active_filters",
    "CatalogService",
    "CatalogView",
    "CreatorErrorCode",
    "InvalidPriceBucketException",
    "CreatorFeedUnavailableException",
]
