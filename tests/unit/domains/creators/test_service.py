"""CatalogService 단위 테스트"""

import pytest

from app.domains.creators.exceptions import (
    CreatorErrorCode,
    CreatorFeedUnavailableException,
    InvalidPriceBucketException,
)
from app.domains.creators.facets import FacetOptionCache
from app.domains.creators.feed import CreatorFeed, FeedStatus
from app.domains.creators.service import CatalogService
from app.domains.creators.state import FilterState


@pytest.fixture
def option_cache():
    return FacetOptionCache(["Tutorial", "Story"], ["B2B", "AI"])


class TestBrowse:
    """browse 테스트"""

    def test_loaded_feed_applies_filters(self, loaded_feed, option_cache):
        service = CatalogService(loaded_feed, option_cache=option_cache)

        view = service.browse(FilterState.create(active_attributes=["B2B"]))

        assert view.status == FeedStatus.LOADED
        assert [c.id for c in view.creators] == [1, 2]
        assert view.match_count == 2
        assert view.has_active_filters is True

    def test_loading_feed_has_no_creators(self, loading_feed, option_cache):
        """로딩 중에는 creators가 None이고 기본 옵션만 노출"""
        service = CatalogService(loading_feed, option_cache=option_cache)

        view = service.browse(FilterState())

        assert view.is_loading
        assert view.creators is None
        assert view.match_count is None
        assert view.facets.content_types == ("Tutorial", "Story")
        assert view.facets.attributes == ("B2B", "AI")

    def test_no_matches_is_empty_not_none(self, loaded_feed, option_cache):
        """로드된 상태에서 0건이면 빈 튜플"""
        service = CatalogService(loaded_feed, option_cache=option_cache)

        view = service.browse(FilterState(search_query="zzz"))

        assert view.creators == ()
        assert view.match_count == 0

    def test_facets_include_dataset_extras(self, loaded_feed, option_cache):
        service = CatalogService(loaded_feed, option_cache=option_cache)

        view = service.browse(FilterState())

        assert view.facets.attributes[:2] == ("B2B", "AI")
        assert "Fintech" in view.facets.attributes

    def test_filter_changes_do_not_recompute_facets(
        self, loaded_feed, option_cache
    ):
        """필터만 바뀌면 옵션 계산 결과 재사용"""
        service = CatalogService(loaded_feed, option_cache=option_cache)

        first = service.browse(FilterState())
        second = service.browse(FilterState(search_query="ava"))

        assert first.facets is second.facets

    def test_unknown_price_bucket(self, loaded_feed, option_cache):
        service = CatalogService(loaded_feed, option_cache=option_cache)

        with pytest.raises(InvalidPriceBucketException) as exc_info:
            service.browse(FilterState(price_bucket_key="cheap"))

        assert exc_info.value.status_code == 400
        assert exc_info.value.error_code == CreatorErrorCode.INVALID_PRICE_BUCKET
        assert exc_info.value.detail_info == {"price_bucket": "cheap"}

    @pytest.mark.asyncio
    async def test_failed_feed_raises(self, failing_loader, option_cache):
        """피드를 불러오지 못하면 503 예외"""
        feed = CreatorFeed(loader=failing_loader)
        await feed.refresh()
        service = CatalogService(feed, option_cache=option_cache)

        with pytest.raises(CreatorFeedUnavailableException) as exc_info:
            service.browse(FilterState())

        assert exc_info.value.status_code == 503
        assert exc_info.value.detail_info == {"reason": "database unreachable"}

        with pytest.raises(CreatorFeedUnavailableException):
            service.get_facets()


class TestRefresh:
    """refresh 테스트"""

    @pytest.mark.asyncio
    async def test_refresh_loads_feed(self, sample_creators, option_cache):
        async def loader():
            return sample_creators

        service = CatalogService(CreatorFeed(loader=loader), option_cache)

        snapshot = await service.refresh()

        assert snapshot.status == FeedStatus.LOADED
        assert service.browse(FilterState()).match_count == len(
            sample_creators
        )
