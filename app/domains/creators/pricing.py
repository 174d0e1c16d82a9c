"""가격 구간 분류"""

from typing import Iterable, Optional, Sequence

from app.core.config import PriceBucketSetting, settings
from app.domains.creators.types import CreatorRecord, PriceBucket

ANY_PRICE = "any"


def load_price_buckets(
    configured: Optional[Iterable[PriceBucketSetting]] = None,
) -> tuple[PriceBucket, ...]:
    """설정의 가격 구간 표를 도메인 타입으로 변환"""
    source = settings.catalog_price_buckets if configured is None else configured
    return tuple(
        PriceBucket(
            key=bucket.key,
            label=bucket.label,
            min=bucket.min,
            max=bucket.max,
        )
        for bucket in source
    )


def find_price_bucket(
    buckets: Sequence[PriceBucket], key: str
) -> Optional[PriceBucket]:
    return next((bucket for bucket in buckets if bucket.key == key), None)


def price_passes(creator: CreatorRecord, bucket: PriceBucket) -> bool:
    """시작 가격이 구간 안에 있는지 (양쪽 경계 포함)

    경계값(250, 500, 1000)은 인접한 두 구간을 모두 통과합니다.
    """
    if bucket.is_unbounded:
        return True
    if bucket.min is not None and creator.starting_price < bucket.min:
        return False
    if bucket.max is not None and creator.starting_price > bucket.max:
        return False
    return True
