"""필터 옵션(facet) 계산 테스트"""

from app.domains.creators.facets import (
    FacetOptionCache,
    extract_attributes,
    resolve_options,
)


class TestResolveOptions:
    """resolve_options 테스트"""

    def test_extras_appended_in_first_seen_order(self, creator_factory):
        """기본 옵션 뒤에 처음 발견된 순서로 추가"""
        creators = [
            creator_factory(attributes=["B", "C"]),
            creator_factory(attributes=["D"]),
        ]

        result = resolve_options(["A", "B"], creators, extract_attributes)

        assert result == ["A", "B", "C", "D"]

    def test_empty_creators_returns_defaults(self):
        """크리에이터가 없으면 기본 옵션 그대로"""
        assert resolve_options(["A", "B"], [], extract_attributes) == ["A", "B"]

    def test_duplicates_across_creators_added_once(self, creator_factory):
        """여러 크리에이터에 반복된 값은 한 번만 추가"""
        creators = [
            creator_factory(attributes=["X", "Y"]),
            creator_factory(attributes=["Y", "X", "Z"]),
        ]

        result = resolve_options(["A"], creators, extract_attributes)

        assert result == ["A", "X", "Y", "Z"]

    def test_missing_array_treated_as_empty(self, creator_factory):
        """배열이 없는 크리에이터는 건너뜀"""
        creators = [
            creator_factory(attributes=None),
            creator_factory(attributes=["New"]),
        ]

        result = resolve_options(["A"], creators, extract_attributes)

        assert result == ["A", "New"]

    def test_extractor_returning_none(self, creator_factory):
        """extract가 None을 돌려줘도 실패하지 않음"""
        result = resolve_options(
            ["A"], [creator_factory()], lambda creator: None
        )

        assert result == ["A"]

    def test_defaults_prefix_and_no_duplicates(self, sample_creators):
        """결과는 기본 옵션으로 시작하고 중복이 없음"""
        defaults = ["B2B", "SaaS"]

        result = resolve_options(defaults, sample_creators, extract_attributes)

        assert result[: len(defaults)] == defaults
        assert len(result) == len(set(result))

    def test_case_sensitive(self, creator_factory):
        """대소문자가 다르면 다른 옵션"""
        result = resolve_options(
            ["AI"], [creator_factory(attributes=["ai"])], extract_attributes
        )

        assert result == ["AI", "ai"]


class TestFacetOptionCache:
    """FacetOptionCache 테스트"""

    def test_builds_both_facets(self, sample_creators):
        """콘텐츠 타입과 속성 옵션을 함께 계산"""
        cache = FacetOptionCache(["Tutorial"], ["B2B"])

        options = cache.get(sample_creators)

        assert options.content_types[0] == "Tutorial"
        assert "Unboxing" in options.content_types
        assert options.attributes[0] == "B2B"
        assert "Live" in options.attributes

    def test_same_list_returns_cached_result(self, sample_creators):
        """같은 목록 객체면 이전 결과 재사용"""
        cache = FacetOptionCache(["Tutorial"], ["B2B"])

        first = cache.get(sample_creators)
        second = cache.get(sample_creators)

        assert first is second

    def test_new_list_recomputes(self, sample_creators, creator_factory):
        """목록 객체가 바뀌면 다시 계산"""
        cache = FacetOptionCache(["Tutorial"], ["B2B"])
        first = cache.get(sample_creators)

        updated = [*sample_creators, creator_factory(attributes=["Gaming"])]
        second = cache.get(updated)

        assert first is not second
        assert "Gaming" in second.attributes
        assert "Gaming" not in first.attributes
