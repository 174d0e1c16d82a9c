"""Creators 도메인 스키마 정의

카탈로그 조회, 필터 조작, 시드 데이터 입력을 위한 Pydantic 스키마입니다.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.domains.creators.facets import FacetOptions
from app.domains.creators.feed import FeedSnapshot, FeedStatus, Loaded
from app.domains.creators.models import Creator
from app.domains.creators.pricing import ANY_PRICE
from app.domains.creators.service import CatalogView
from app.domains.creators.state import (
    ALL_CONTENT_TYPES,
    FilterState,
    with_content_type,
    with_price_bucket,
    with_query,
)
from app.domains.creators.types import CreatorRecord, PriceBucket

# Filter Schemas


class FilterStateSchema(BaseModel):
    """필터 상태 (요청/응답 공용)"""

    search_query: str = Field("", description="검색어")
    price_bucket: str = Field(ANY_PRICE, min_length=1, description="가격 구간 키")
    content_type: str = Field(
        ALL_CONTENT_TYPES, min_length=1, description="콘텐츠 타입 ('all'은 전체)"
    )
    attributes: list[str] = Field(
        default_factory=list, description="선택된 속성 (모두 만족해야 함)"
    )

    @field_validator("attributes")
    @classmethod
    def validate_attributes(cls, v: list[str]) -> list[str]:
        if len(v) > 50:
            raise ValueError("속성은 최대 50개까지 선택할 수 있습니다.")
        return v

    def to_state(self) -> FilterState:
        state = FilterState.create(active_attributes=self.attributes)
        state = with_query(state, self.search_query)
        state = with_price_bucket(state, self.price_bucket)
        return with_content_type(state, self.content_type)

    @classmethod
    def from_state(cls, state: FilterState) -> "FilterStateSchema":
        return cls(
            search_query=state.search_query,
            price_bucket=state.price_bucket_key,
            content_type=state.content_type_key,
            attributes=sorted(state.active_attributes),
        )


class ToggleAttributeRequest(BaseModel):
    """속성 토글 요청"""

    filters: FilterStateSchema = Field(default_factory=FilterStateSchema)
    attribute: str = Field(..., min_length=1, description="속성")


class FilterStateResponse(BaseModel):
    """필터 조작 결과"""

    filters: FilterStateSchema
    has_active_filters: bool


# Creator Schemas


class CreatorStatsResponse(BaseModel):
    audience_size: int
    avg_views: int
    engagement_rate: float


class CreatorResponse(BaseModel):
    """크리에이터 응답 스키마 (누락된 배열은 빈 목록으로 응답)"""

    id: Optional[int] = None
    name: str
    handle: str
    location: str
    tagline: str
    avatar_url: str
    starting_price: float
    content_types: list[str]
    platforms: list[str]
    attributes: list[str]
    stats: CreatorStatsResponse
    response_time_hours: int
    turnaround_days: int
    next_available_days: int
    verified: bool

    @classmethod
    def from_record(cls, record: CreatorRecord) -> "CreatorResponse":
        return cls(
            id=record.id,
            name=record.name,
            handle=record.handle,
            location=record.location,
            tagline=record.tagline,
            avatar_url=record.avatar_url,
            starting_price=record.starting_price,
            content_types=list(record.content_types or []),
            platforms=list(record.platforms or []),
            attributes=list(record.attributes or []),
            stats=CreatorStatsResponse(
                audience_size=record.stats.audience_size,
                avg_views=record.stats.avg_views,
                engagement_rate=record.stats.engagement_rate,
            ),
            response_time_hours=record.response_time_hours,
            turnaround_days=record.turnaround_days,
            next_available_days=record.next_available_days,
            verified=record.is_verified,
        )


# Facet Schemas


class PriceBucketResponse(BaseModel):
    key: str
    label: str
    min: Optional[float] = None
    max: Optional[float] = None

    @classmethod
    def from_bucket(cls, bucket: PriceBucket) -> "PriceBucketResponse":
        return cls(
            key=bucket.key, label=bucket.label, min=bucket.min, max=bucket.max
        )


class FacetOptionsResponse(BaseModel):
    """필터 선택지 (기본 옵션 + 데이터에서 발견된 옵션)"""

    content_types: list[str]
    attributes: list[str]
    price_buckets: list[PriceBucketResponse]

    @classmethod
    def build(
        cls, facets: FacetOptions, price_buckets: tuple[PriceBucket, ...]
    ) -> "FacetOptionsResponse":
        return cls(
            content_types=list(facets.content_types),
            attributes=list(facets.attributes),
            price_buckets=[
                PriceBucketResponse.from_bucket(b) for b in price_buckets
            ],
        )


class CatalogResponse(BaseModel):
    """카탈로그 조회 응답

    status가 'loading'이면 creators와 match_count는 null입니다.
    """

    status: FeedStatus
    creators: Optional[list[CreatorResponse]] = None
    match_count: Optional[int] = None
    has_active_filters: bool
    filters: FilterStateSchema
    facets: FacetOptionsResponse

    @classmethod
    def from_view(cls, view: CatalogView) -> "CatalogResponse":
        creators = (
            None
            if view.creators is None
            else [CreatorResponse.from_record(c) for c in view.creators]
        )
        return cls(
            status=view.status,
            creators=creators,
            match_count=view.match_count,
            has_active_filters=view.has_active_filters,
            filters=FilterStateSchema.from_state(view.state),
            facets=FacetOptionsResponse.build(view.facets, view.price_buckets),
        )


class FeedStatusResponse(BaseModel):
    """피드 상태 응답"""

    status: FeedStatus
    creator_count: Optional[int] = None
    loaded_at: Optional[datetime] = None
    reason: Optional[str] = None

    @classmethod
    def from_snapshot(cls, snapshot: FeedSnapshot) -> "FeedStatusResponse":
        if isinstance(snapshot, Loaded):
            return cls(
                status=snapshot.status,
                creator_count=len(snapshot.creators),
                loaded_at=snapshot.loaded_at,
            )
        return cls(
            status=snapshot.status,
            reason=getattr(snapshot, "reason", None),
        )


# Seed Schemas


class CreatorStatsSeed(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    audience_size: int = Field(0, ge=0)
    avg_views: int = Field(0, ge=0)
    engagement_rate: float = Field(0.0, ge=0, le=100)


class CreatorSeed(BaseModel):
    """시드 파일 항목

    snake_case, camelCase 키를 모두 허용하며 배열 필드는 생략할 수 있습니다.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = ""
    handle: str = ""
    location: str = ""
    tagline: str = ""
    avatar_url: str = ""
    starting_price: Decimal = Field(
        Decimal("0"),
        ge=0,
        lt=10**8,
        decimal_places=2,
        description="시작 가격 (USD, 센트 단위까지)",
    )
    content_types: Optional[list[str]] = None
    platforms: Optional[list[str]] = None
    attributes: Optional[list[str]] = None
    stats: CreatorStatsSeed = Field(default_factory=CreatorStatsSeed)
    response_time_hours: int = Field(0, ge=0)
    turnaround_days: int = Field(0, ge=0)
    next_available_days: int = Field(0, ge=0)
    verified: Optional[bool] = None

    def to_model(self, display_order: int) -> Creator:
        return Creator(
            name=self.name,
            handle=self.handle,
            location=self.location,
            tagline=self.tagline,
            avatar_url=self.avatar_url,
            starting_price=float(self.starting_price),
            content_types=self.content_types,
            platforms=self.platforms,
            attributes=self.attributes,
            audience_size=self.stats.audience_size,
            avg_views=self.stats.avg_views,
            engagement_rate=self.stats.engagement_rate,
            response_time_hours=self.response_time_hours,
            turnaround_days=self.turnaround_days,
            next_available_days=self.next_available_days,
            verified=self.verified,
            display_order=display_order,
        )
