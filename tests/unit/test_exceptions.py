"""예외 단위 테스트"""

import json
from types import SimpleNamespace

import pytest

from app.core.exceptions import (
    BadRequestException,
    BaseAPIException,
    ErrorCode,
    ServiceUnavailableException,
    UnauthorizedException,
    base_exception_handler,
    generic_exception_handler,
)
from app.domains.creators.exceptions import (
    CreatorErrorCode,
    CreatorFeedUnavailableException,
    InvalidPriceBucketException,
)


class TestGlobalExceptions:
    """전역 예외 테스트"""

    def test_base_exception_custom(self):
        """BaseAPIException 커스텀 메시지와 상세 정보"""
        exc = BaseAPIException(
            status_code=409,
            error_code="CONFLICT",
            message="이미 존재합니다.",
            detail={"handle": "@mina"},
        )

        assert exc.status_code == 409
        assert exc.message == "이미 존재합니다."
        assert exc.detail_info == {"handle": "@mina"}

    def test_bad_request_exception(self):
        """BadRequestException"""
        exc = BadRequestException(message="잘못된 입력입니다.")

        assert exc.status_code == 400
        assert exc.error_code == ErrorCode.BAD_REQUEST

    def test_unauthorized_exception(self):
        """UnauthorizedException"""
        exc = UnauthorizedException()

        assert exc.status_code == 401
        assert exc.error_code == ErrorCode.UNAUTHORIZED

    def test_service_unavailable_exception(self):
        exc = ServiceUnavailableException()

        assert exc.status_code == 503
        assert exc.error_code == ErrorCode.SERVICE_UNAVAILABLE


class TestCreatorExceptions:
    """크리에이터 도메인 예외 테스트"""

    def test_invalid_price_bucket(self):
        """InvalidPriceBucketException"""
        exc = InvalidPriceBucketException(price_bucket="cheap")

        assert exc.status_code == 400
        assert exc.error_code == CreatorErrorCode.INVALID_PRICE_BUCKET
        assert exc.message == "알 수 없는 가격 구간입니다."
        assert exc.detail_info == {"price_bucket": "cheap"}

    def test_creator_feed_unavailable(self):
        """CreatorFeedUnavailableException"""
        exc = CreatorFeedUnavailableException(reason="timeout")

        assert exc.status_code == 503
        assert exc.error_code == CreatorErrorCode.CREATOR_FEED_UNAVAILABLE
        assert exc.detail_info == {"reason": "timeout"}

    def test_creator_feed_unavailable_without_reason(self):
        exc = CreatorFeedUnavailableException()

        assert exc.detail_info == {}


class TestExceptionHandlers:
    """예외 핸들러 응답 구조 테스트"""

    @pytest.mark.asyncio
    async def test_base_exception_handler(self):
        exc = ServiceUnavailableException(detail={"reason": "down"})

        response = await base_exception_handler(None, exc)
        body = json.loads(response.body)

        assert response.status_code == 503
        assert body["success"] is False
        assert body["error"]["code"] == "SERVICE_UNAVAILABLE"
        assert body["error"]["detail"] == {"reason": "down"}

    @pytest.mark.asyncio
    async def test_generic_exception_handler(self):
        """처리되지 않은 예외는 INTERNAL_ERROR 500"""
        request = SimpleNamespace(
            method="GET", url=SimpleNamespace(path="/api/v1/creators")
        )

        response = await generic_exception_handler(
            request, RuntimeError("boom")
        )
        body = json.loads(response.body)

        assert response.status_code == 500
        assert body["error"]["code"] == "INTERNAL_ERROR"
