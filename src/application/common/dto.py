# -*- coding: utf-8 -*-
"""
Common DTO - 공통 데이터 전송 객체

Base DTO 정의
"""

from pydantic import BaseModel, ConfigDict


# ==================== Base DTO ====================


class BaseDTO(BaseModel):
    """
    Base DTO 클래스

    모든 DTO의 기본 클래스
    """

    model_config = ConfigDict(
        from_attributes=True,  # ORM 모델에서 변환 가능
        populate_by_name=True,  # alias와 실제 이름 모두 사용 가능
        use_enum_values=True,  # Enum을 값으로 직렬화
    )
