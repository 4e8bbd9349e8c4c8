"""공통 레코드 베이스 및 응답 스키마"""
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict


class Record(BaseModel):
    """원격 JSON 레코드 공통 베이스

    - 알 수 없는 upstream 필드는 그대로 보존 (extra="allow")
    - 출력 시 없는 선택 필드는 생략 (exclude_none)
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class HealthResponse(BaseModel):
    """헬스 체크 응답"""
    status: str
    timestamp: datetime
    version: str
    datasets: dict[str, bool]
