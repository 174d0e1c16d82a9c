"""Creators 도메인 모델 정의

마켓플레이스에 노출되는 크리에이터 프로필 테이블입니다.
필터링 코어는 이 모델을 직접 다루지 않고 CreatorRecord로 변환해 사용합니다.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import (
    ARRAY,
    Boolean,
    DateTime,
    Float,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base


class Creator(Base):
    """크리에이터 프로필 모델

    배열 컬럼은 NULL을 허용합니다 (NULL은 빈 목록으로 취급).
    목록 순서는 display_order, id 순으로 결정됩니다.
    """

    __tablename__ = "creators"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="크리에이터 ID",
    )

    # Identity
    name: Mapped[str] = mapped_column(
        String(200), nullable=False, server_default="", comment="이름"
    )
    handle: Mapped[str] = mapped_column(
        String(100), nullable=False, server_default="", comment="핸들 (@name)"
    )
    location: Mapped[str] = mapped_column(
        String(200), nullable=False, server_default="", comment="활동 지역"
    )
    tagline: Mapped[str] = mapped_column(
        Text, nullable=False, server_default="", comment="한 줄 소개"
    )
    avatar_url: Mapped[str] = mapped_column(
        Text, nullable=False, server_default="", comment="아바타 이미지 URL"
    )

    # Pricing
    starting_price: Mapped[float] = mapped_column(
        Numeric(10, 2, asdecimal=False),
        nullable=False,
        server_default="0",
        comment="시작 가격 (USD)",
    )

    # Tags
    content_types: Mapped[Optional[list[str]]] = mapped_column(
        ARRAY(String), nullable=True, comment="제작 가능한 콘텐츠 타입"
    )
    platforms: Mapped[Optional[list[str]]] = mapped_column(
        ARRAY(String), nullable=True, comment="활동 플랫폼 (순서 유지)"
    )
    attributes: Mapped[Optional[list[str]]] = mapped_column(
        ARRAY(String), nullable=True, comment="속성 태그 (B2B, SaaS 등)"
    )

    # Stats
    audience_size: Mapped[int] = mapped_column(
        Integer, nullable=False, server_default="0", comment="구독자/팔로워 수"
    )
    avg_views: Mapped[int] = mapped_column(
        Integer, nullable=False, server_default="0", comment="평균 조회수"
    )
    engagement_rate: Mapped[float] = mapped_column(
        Float, nullable=False, server_default="0", comment="참여율 (0-100)"
    )

    # Availability
    response_time_hours: Mapped[int] = mapped_column(
        Integer, nullable=False, server_default="0", comment="평균 응답 시간"
    )
    turnaround_days: Mapped[int] = mapped_column(
        Integer, nullable=False, server_default="0", comment="제작 소요일"
    )
    next_available_days: Mapped[int] = mapped_column(
        Integer, nullable=False, server_default="0", comment="다음 가능일까지 남은 일수"
    )
    verified: Mapped[Optional[bool]] = mapped_column(
        Boolean, nullable=True, comment="인증 여부 (NULL은 미인증)"
    )

    display_order: Mapped[int] = mapped_column(
        Integer, nullable=False, server_default="0", comment="목록 노출 순서"
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        comment="생성 일시",
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        onupdate=func.now(),
        nullable=True,
        comment="수정 일시",
    )

    __table_args__ = (
        Index("ix_creators_display_order", "display_order", "id"),
    )

    def __repr__(self) -> str:
        return (
            f"<Creator(id={self.id}, handle={self.handle!r}, "
            f"starting_price={self.starting_price})>"
        )
