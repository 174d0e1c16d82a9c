"""크리에이터 필터 엔진

검색, 가격, 콘텐츠 타입, 속성 네 가지 조건을 모두 통과한 크리에이터만
원래 순서 그대로 반환합니다. 호출할 때마다 전체 목록을 다시 평가합니다.
"""

from typing import AbstractSet, Optional, Sequence

from app.domains.creators.pricing import find_price_bucket, price_passes
from app.domains.creators.search import matches, tokenize
from app.domains.creators.state import ALL_CONTENT_TYPES, FilterState
from app.domains.creators.types import CreatorRecord, PriceBucket


def content_type_passes(creator: CreatorRecord, key: str) -> bool:
    if key == ALL_CONTENT_TYPES:
        return True
    return key in (creator.content_types or ())


def attributes_pass(creator: CreatorRecord, active: AbstractSet[str]) -> bool:
    """선택된 속성을 모두 가지고 있는지 (AND)"""
    if not active:
        return True
    attributes = set(creator.attributes or ())
    return all(attribute in attributes for attribute in active)


def creator_passes(
    creator: CreatorRecord,
    state: FilterState,
    tokens: Sequence[str],
    bucket: Optional[PriceBucket],
) -> bool:
    """단일 크리에이터에 대한 통과 여부

    Args:
        creator: 평가할 크리에이터
        state: 필터 상태
        tokens: tokenize(state.search_query) 결과
        bucket: 선택된 가격 구간 (None이면 가격 조건 없음)
    """
    if not matches(creator, tokens):
        return False
    if bucket is not None and not price_passes(creator, bucket):
        return False
    if not content_type_passes(creator, state.content_type_key):
        return False
    return attributes_pass(creator, state.active_attributes)


def apply_filters(
    creators: Sequence[CreatorRecord],
    state: FilterState,
    buckets: Sequence[PriceBucket],
) -> list[CreatorRecord]:
    """필터를 통과한 크리에이터 목록 (입력 순서 유지)

    Args:
        creators: 전체 크리에이터 목록
        state: 필터 상태
        buckets: 가격 구간 표

    Returns:
        네 가지 조건을 모두 통과한 크리에이터의 부분 수열
    """
    tokens = tokenize(state.search_query)
    bucket = find_price_bucket(buckets, state.price_bucket_key)
    return [
        creator
        for creator in creators
        if creator_passes(creator, state, tokens, bucket)
    ]
