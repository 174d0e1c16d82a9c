"""Creators 도메인 라우터

크리에이터 카탈로그 조회 및 필터 조작 API 엔드포인트입니다.
필터 상태는 서버에 저장하지 않고 매 요청마다 전달받습니다.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.core.config import settings
from app.core.dependencies import verify_internal_api_key
from app.core.schemas import APIResponse, create_response
from app.domains.creators.facets import FacetOptionCache
from app.domains.creators.feed import CreatorFeed, get_creator_feed
from app.domains.creators.pricing import ANY_PRICE
from app.domains.creators.schemas import (
    CatalogResponse,
    FacetOptionsResponse,
    FeedStatusResponse,
    FilterStateResponse,
    FilterStateSchema,
    ToggleAttributeRequest,
)
from app.domains.creators.service import CatalogService
from app.domains.creators.state import (
    ALL_CONTENT_TYPES,
    FilterState,
    clear_filters,
    has_active_filters,
    toggle_attribute,
    with_content_type,
    with_price_bucket,
    with_query,
)

router = APIRouter()

# 옵션 캐시는 요청 간에 공유해야 데이터셋이 바뀔 때만 재계산됨
facet_option_cache = FacetOptionCache(
    settings.catalog_content_types, settings.catalog_attributes
)


def get_catalog_service(
    feed: CreatorFeed = Depends(get_creator_feed),
) -> CatalogService:
    """CatalogService 의존성"""
    return CatalogService(feed, option_cache=facet_option_cache)


def _filter_state_response(state: FilterState) -> FilterStateResponse:
    return FilterStateResponse(
        filters=FilterStateSchema.from_state(state),
        has_active_filters=has_active_filters(state),
    )


@router.get("", response_model=APIResponse[CatalogResponse])
async def browse_creators(
    q: str = Query("", description="검색어"),
    price: str = Query(ANY_PRICE, min_length=1, description="가격 구간 키"),
    content_type: str = Query(
        ALL_CONTENT_TYPES, min_length=1, description="콘텐츠 타입"
    ),
    attributes: Optional[list[str]] = Query(
        None, description="선택된 속성 (반복 지정, 모두 만족해야 함)"
    ),
    service: CatalogService = Depends(get_catalog_service),
):
    """크리에이터 목록 필터링 조회"""
    state = FilterState.create(active_attributes=attributes or ())
    state = with_query(state, q)
    state = with_price_bucket(state, price)
    state = with_content_type(state, content_type)
    view = service.browse(state)
    message = (
        "크리에이터 목록을 불러오는 중입니다."
        if view.is_loading
        else "크리에이터 목록을 조회했습니다."
    )
    return create_response(data=CatalogResponse.from_view(view), message=message)


@router.get("/facets", response_model=APIResponse[FacetOptionsResponse])
async def get_facets(
    service: CatalogService = Depends(get_catalog_service),
):
    """필터 선택지 조회"""
    facets = service.get_facets()
    return create_response(
        data=FacetOptionsResponse.build(facets, service.price_buckets),
        message="필터 옵션을 조회했습니다.",
    )


@router.post(
    "/filters/toggle-attribute",
    response_model=APIResponse[FilterStateResponse],
)
async def toggle_filter_attribute(
    request: ToggleAttributeRequest,
    service: CatalogService = Depends(get_catalog_service),
):
    """속성 필터 토글"""
    state = toggle_attribute(request.filters.to_state(), request.attribute)
    service.validate_state(state)
    return create_response(
        data=_filter_state_response(state),
        message="속성 필터를 변경했습니다.",
    )


@router.post("/filters/clear", response_model=APIResponse[FilterStateResponse])
async def clear_all_filters(filters: FilterStateSchema):
    """모든 필터 초기화"""
    state = clear_filters(filters.to_state())
    return create_response(
        data=_filter_state_response(state),
        message="필터를 초기화했습니다.",
    )


@router.get("/feed", response_model=APIResponse[FeedStatusResponse])
async def get_feed_status(feed: CreatorFeed = Depends(get_creator_feed)):
    """크리에이터 피드 상태 조회"""
    return create_response(
        data=FeedStatusResponse.from_snapshot(feed.snapshot),
        message="피드 상태를 조회했습니다.",
    )


@router.post(
    "/feed/refresh",
    response_model=APIResponse[FeedStatusResponse],
    dependencies=[Depends(verify_internal_api_key)],
)
async def refresh_feed(
    service: CatalogService = Depends(get_catalog_service),
):
    """크리에이터 피드 강제 갱신 (내부용)"""
    snapshot = await service.refresh()
    return create_response(
        data=FeedStatusResponse.from_snapshot(snapshot),
        message="피드를 갱신했습니다.",
    )
