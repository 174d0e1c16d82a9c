#!/usr/bin/env python3
"""크리에이터 시드 데이터 적재 스크립트

JSON 파일(목록 또는 {"creators": [...]})을 읽어 creators 테이블에 넣습니다.
파일 내 순서가 목록 노출 순서(display_order)가 됩니다.

Usage::

    python scripts/seed_creators.py scripts/data/creators.sample.json
    python scripts/seed_creators.py creators.json --replace
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from app.core.database import close_db, session_scope  # noqa: E402
from app.core.logging import get_logger, setup_logging  # noqa: E402
from app.domains.creators.repository import CreatorRepository  # noqa: E402
from app.domains.creators.schemas import CreatorSeed  # noqa: E402

logger = get_logger("seed_creators")


def load_seed_file(path: Path) -> list[CreatorSeed]:
    """시드 파일 파싱 및 검증"""
    raw: Any = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(raw, dict):
        raw = raw.get("creators", [])
    if not isinstance(raw, list):
        raise ValueError(f"{path}: expected a list of creators")

    seeds: list[CreatorSeed] = []
    for index, item in enumerate(raw, 1):
        try:
            seeds.append(CreatorSeed.model_validate(item))
        except ValidationError as e:
            raise ValueError(f"{path}: invalid creator #{index}: {e}") from e
    return seeds


async def seed(path: Path, replace: bool) -> int:
    seeds = load_seed_file(path)

    try:
        async with session_scope() as session:
            repository = CreatorRepository(session)
            if replace:
                deleted = await repository.delete_all()
                logger.info(f"Deleted {deleted} existing creators")

            offset = 0 if replace else await repository.count()
            return await repository.bulk_create(
                [
                    s.to_model(display_order=offset + i)
                    for i, s in enumerate(seeds)
                ]
            )
    finally:
        await close_db()


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed the creators table")
    parser.add_argument("path", type=Path, help="JSON 시드 파일 경로")
    parser.add_argument(
        "--replace",
        action="store_true",
        help="기존 크리에이터를 모두 삭제한 뒤 적재",
    )
    args = parser.parse_args()

    setup_logging()
    try:
        created = asyncio.run(seed(args.path, args.replace))
    except (OSError, ValueError) as e:
        logger.error(f"❌ 시드 적재 실패: {e}")
        return 1

    logger.info(f"✅ {created}명의 크리에이터를 적재했습니다.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
