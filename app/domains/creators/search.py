"""자유 텍스트 검색 매칭

검색어를 토큰으로 나누고, 모든 토큰이 크리에이터 텍스트에
부분 문자열로 포함되는지 확인합니다 (단어 경계 매칭이 아님).
"""

from typing import Optional, Sequence

from app.domains.creators.types import CreatorRecord


def tokenize(query: Optional[str]) -> list[str]:
    """검색어 → 소문자 토큰 목록 (공백만 있으면 빈 목록)"""
    if not query:
        return []
    return query.strip().lower().split()


def _join(values: Optional[Sequence[str]]) -> str:
    return " ".join(values) if values else ""


def build_haystack(creator: CreatorRecord) -> str:
    """검색 대상 텍스트

    이름, 핸들, 지역, 소개, 플랫폼, 콘텐츠 타입, 속성 순으로
    비어 있지 않은 값만 공백 하나로 이어 붙입니다.
    """
    parts = [
        creator.name,
        creator.handle,
        creator.location,
        creator.tagline,
        _join(creator.platforms),
        _join(creator.content_types),
        _join(creator.attributes),
    ]
    return " ".join(part for part in parts if part).lower()


def matches(creator: CreatorRecord, tokens: Sequence[str]) -> bool:
    if not tokens:
        return True
    haystack = build_haystack(creator)
    return all(token in haystack for token in tokens)
