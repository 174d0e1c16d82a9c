"""요청 ID 컨텍스트 관리

미들웨어가 설정한 요청 ID를 로그 필터와 서비스 계층에서 조회합니다.
"""

import contextvars
import uuid
from typing import Optional

request_id_ctx: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "request_id", default=None
)


def get_request_id() -> Optional[str]:
    """현재 요청 ID 반환"""
    return request_id_ctx.get()


def set_request_id(
    request_id: Optional[str] = None,
) -> tuple[str, contextvars.Token]:
    """요청 ID 설정 (없으면 새로 생성)

    Returns:
        (요청 ID, 복원용 토큰) 튜플
    """
    if not request_id:
        request_id = str(uuid.uuid4())
    token = request_id_ctx.set(request_id)
    return request_id, token


def reset_request_id(token: contextvars.Token) -> None:
    """요청 처리 종료 후 이전 컨텍스트로 복원"""
    request_id_ctx.reset(token)
