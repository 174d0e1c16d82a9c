"""필터 옵션(facet) 계산

기본 옵션 목록에 현재 데이터셋에서 발견된 추가 값을 이어 붙여
콘텐츠 타입/속성 선택지를 만듭니다.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence

from app.domains.creators.types import CreatorRecord

Extractor = Callable[[CreatorRecord], Optional[Iterable[str]]]


def resolve_options(
    defaults: Sequence[str],
    creators: Iterable[CreatorRecord],
    extract: Extractor,
) -> list[str]:
    """기본 옵션 + 데이터에서 발견된 추가 옵션

    크리에이터 목록 순서, 각 크리에이터의 태그 순서대로 훑으며
    기본 옵션에 없는 값을 처음 발견된 순서로 한 번씩만 추가합니다.

    Args:
        defaults: 순서가 있는 중복 없는 기본 옵션
        creators: 크리에이터 목록
        extract: 크리에이터에서 태그 목록을 꺼내는 함수 (None은 빈 목록)

    Returns:
        defaults + extras

    Example::

        resolve_options(["A", "B"], creators, lambda c: c.attributes)
        # creators의 attributes가 ["B", "C"], ["D"]이면 ["A", "B", "C", "D"]
    """
    seen = set(defaults)
    extras: list[str] = []

    for creator in creators:
        for value in extract(creator) or ():
            if value not in seen:
                seen.add(value)
                extras.append(value)

    return [*defaults, *extras]


def extract_content_types(creator: CreatorRecord) -> Sequence[str]:
    return creator.content_types or ()


def extract_attributes(creator: CreatorRecord) -> Sequence[str]:
    return creator.attributes or ()


@dataclass(frozen=True)
class FacetOptions:
    """화면에 노출할 선택지 목록"""

    content_types: tuple[str, ...]
    attributes: tuple[str, ...]


class FacetOptionCache:
    """크리에이터 목록 객체 단위로 옵션 계산 결과를 캐싱

    같은 목록 객체가 다시 들어오면 이전 결과를 그대로 반환하고,
    다른 객체가 들어오면 다시 계산합니다. 필터 상태 변경만으로는
    재계산하지 않습니다.
    """

    def __init__(
        self,
        default_content_types: Sequence[str],
        default_attributes: Sequence[str],
    ):
        self.default_content_types = tuple(default_content_types)
        self.default_attributes = tuple(default_attributes)
        self._source: Optional[Sequence[CreatorRecord]] = None
        self._options: Optional[FacetOptions] = None

    def get(self, creators: Sequence[CreatorRecord]) -> FacetOptions:
        if self._options is not None and self._source is creators:
            return self._options

        options = FacetOptions(
            content_types=tuple(
                resolve_options(
                    self.default_content_types, creators, extract_content_types
                )
            ),
            attributes=tuple(
                resolve_options(
                    self.default_attributes, creators, extract_attributes
                )
            ),
        )
        self._source = creators
        self._options = options
        return options
