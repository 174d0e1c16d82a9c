"""Creators 도메인 리포지토리

크리에이터 프로필 데이터 접근 계층입니다.
"""

from typing import Sequence, cast

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domains.creators.models import Creator


class CreatorRepository:
    """크리에이터 리포지토리"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_all(self) -> Sequence[Creator]:
        """전체 크리에이터를 노출 순서대로 조회

        Returns:
            display_order, id 오름차순으로 정렬된 크리에이터 목록
        """
        query = select(Creator).order_by(
            Creator.display_order.asc(), Creator.id.asc()
        )
        result = await self.session.execute(query)
        return cast(Sequence[Creator], result.scalars().all())

    async def count(self) -> int:
        """크리에이터 수 조회"""
        result = await self.session.execute(select(func.count(Creator.id)))
        return int(result.scalar_one())

    async def bulk_create(self, creators: Sequence[Creator]) -> int:
        """크리에이터 일괄 생성

        Args:
            creators: 생성할 크리에이터 객체 목록

        Returns:
            생성된 크리에이터 수
        """
        self.session.add_all(creators)
        await self.session.flush()
        return len(creators)

    async def delete_all(self) -> int:
        """전체 크리에이터 삭제 (시드 재적재용)

        Returns:
            삭제된 크리에이터 수
        """
        result = await self.session.execute(delete(Creator))
        return int(result.rowcount or 0)
