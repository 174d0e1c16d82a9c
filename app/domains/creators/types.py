"""크리에이터 도메인 타입 정의

필터링 코어가 다루는 읽기 전용 값 객체입니다. ORM 모델이나 요청 스키마는
이 타입으로 변환된 뒤 필터 엔진에 전달됩니다.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Sequence

if TYPE_CHECKING:
    from app.domains.creators.models import Creator


def _as_tuple(values: Optional[Sequence[str]]) -> Optional[tuple[str, ...]]:
    if values is None:
        return None
    return tuple(values)


@dataclass(frozen=True)
class CreatorStats:
    """크리에이터 채널 지표"""

    audience_size: int = 0
    avg_views: int = 0
    engagement_rate: float = 0.0


@dataclass(frozen=True)
class CreatorRecord:
    """필터링 대상 크리에이터

    배열 필드(content_types, platforms, attributes)는 데이터 소스에서
    누락될 수 있으므로 None을 허용하며, 필터 엔진은 None을 빈 컬렉션으로
    취급합니다.

    Example::

        creator = CreatorRecord(
            name="Mina Park",
            handle="@minabuilds",
            starting_price=450,
            content_types=("Short-form video", "Tutorial"),
            attributes=("B2B", "SaaS"),
        )
    """

    name: str = ""
    handle: str = ""
    location: str = ""
    tagline: str = ""
    avatar_url: str = ""
    starting_price: float = 0.0
    content_types: Optional[tuple[str, ...]] = None
    platforms: Optional[tuple[str, ...]] = None
    attributes: Optional[tuple[str, ...]] = None
    stats: CreatorStats = field(default_factory=CreatorStats)
    response_time_hours: int = 0
    turnaround_days: int = 0
    next_available_days: int = 0
    verified: Optional[bool] = None
    id: Optional[int] = None

    @property
    def is_verified(self) -> bool:
        return bool(self.verified)

    @classmethod
    def from_model(cls, model: "Creator") -> "CreatorRecord":
        """ORM 모델을 도메인 레코드로 변환"""
        return cls(
            id=model.id,
            name=model.name or "",
            handle=model.handle or "",
            location=model.location or "",
            tagline=model.tagline or "",
            avatar_url=model.avatar_url or "",
            starting_price=float(model.starting_price or 0),
            content_types=_as_tuple(model.content_types),
            platforms=_as_tuple(model.platforms),
            attributes=_as_tuple(model.attributes),
            stats=CreatorStats(
                audience_size=model.audience_size or 0,
                avg_views=model.avg_views or 0,
                engagement_rate=float(model.engagement_rate or 0),
            ),
            response_time_hours=model.response_time_hours or 0,
            turnaround_days=model.turnaround_days or 0,
            next_available_days=model.next_available_days or 0,
            verified=model.verified,
        )


@dataclass(frozen=True)
class PriceBucket:
    """가격 구간 (min/max 모두 포함 경계)

    Attributes:
        key: 버킷 식별자 (예: 'under-250')
        label: 표시용 이름
        min: 하한 (없으면 None)
        max: 상한 (없으면 None)
    """

    key: str
    label: str
    min: Optional[float] = None
    max: Optional[float] = None

    @property
    def is_unbounded(self) -> bool:
        return self.min is None and self.max is None
