"""필터 상태와 상태 전이

FilterState는 불변 값이며, 모든 조작은 새 상태를 반환합니다.
"""

from dataclasses import dataclass, field, replace
from typing import Iterable

from app.domains.creators.pricing import ANY_PRICE

ALL_CONTENT_TYPES = "all"


@dataclass(frozen=True)
class FilterState:
    """사용자가 선택한 필터 값

    Attributes:
        search_query: 자유 텍스트 검색어 (원문 그대로 보관)
        price_bucket_key: 가격 구간 키 (기본 'any')
        content_type_key: 'all' 또는 특정 콘텐츠 타입
        active_attributes: 선택된 속성 집합 (AND 조건)
    """

    search_query: str = ""
    price_bucket_key: str = ANY_PRICE
    content_type_key: str = ALL_CONTENT_TYPES
    active_attributes: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def create(
        cls,
        search_query: str = "",
        price_bucket_key: str = ANY_PRICE,
        content_type_key: str = ALL_CONTENT_TYPES,
        active_attributes: Iterable[str] = (),
    ) -> "FilterState":
        return cls(
            search_query=search_query,
            price_bucket_key=price_bucket_key,
            content_type_key=content_type_key,
            active_attributes=frozenset(active_attributes),
        )


def with_query(state: FilterState, query: str) -> FilterState:
    return replace(state, search_query=query)


def with_price_bucket(state: FilterState, key: str) -> FilterState:
    return replace(state, price_bucket_key=key)


def with_content_type(state: FilterState, key: str) -> FilterState:
    return replace(state, content_type_key=key)


def toggle_attribute(state: FilterState, attribute: str) -> FilterState:
    """속성이 선택돼 있으면 해제, 아니면 추가"""
    if attribute in state.active_attributes:
        attributes = state.active_attributes - {attribute}
    else:
        attributes = state.active_attributes | {attribute}
    return replace(state, active_attributes=attributes)


def clear_filters(state: FilterState) -> FilterState:
    """모든 필터를 기본값으로 초기화"""
    return FilterState()


def has_active_filters(state: FilterState) -> bool:
    return (
        bool(state.search_query.strip())
        or state.price_bucket_key != ANY_PRICE
        or state.content_type_key != ALL_CONTENT_TYPES
        or bool(state.active_attributes)
    )
