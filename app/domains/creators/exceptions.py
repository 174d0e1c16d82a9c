"""Creators 도메인 예외 정의"""

from enum import Enum

from app.core.exceptions import BadRequestException, ServiceUnavailableException


class CreatorErrorCode(str, Enum):
    """크리에이터 도메인 에러 코드"""

    INVALID_PRICE_BUCKET = "INVALID_PRICE_BUCKET"
    CREATOR_FEED_UNAVAILABLE = "CREATOR_FEED_UNAVAILABLE"


class InvalidPriceBucketException(BadRequestException):
    """설정에 없는 가격 구간 키가 요청된 경우"""

    def __init__(self, price_bucket: str | None = None):
        detail = {"price_bucket": price_bucket} if price_bucket else {}
        super().__init__(
            message="알 수 없는 가격 구간입니다.",
            error_code=CreatorErrorCode.INVALID_PRICE_BUCKET,
            detail=detail,
        )


class CreatorFeedUnavailableException(ServiceUnavailableException):
    """크리에이터 목록을 한 번도 불러오지 못한 경우"""

    def __init__(self, reason: str | None = None):
        detail = {"reason": reason} if reason else {}
        super().__init__(
            message="크리에이터 목록을 불러올 수 없습니다.",
            error_code=CreatorErrorCode.CREATOR_FEED_UNAVAILABLE,
            detail=detail,
        )
