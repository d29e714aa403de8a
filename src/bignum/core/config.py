"""
ArithmeticConfig — конфигурация арифметики Bignum

Immutable Pydantic модель с параметрами по умолчанию. Совместима с
JSON Schema контрактом contracts/schema/arithmetic_config.json.

Параметры:
- base: основание внутреннего представления новых значений
- karatsuba_cutoff: порог (в цифрах) перехода Karatsuba на умножение в столбик
- parallel: использовать fork-join вариант Karatsuba
- max_workers: размер общего пула потоков (None: по умолчанию executor)
"""

from typing import Optional

from pydantic import BaseModel, Field

from src.bignum.core.types import (
    DEFAULT_BASE,
    DEFAULT_KARATSUBA_CUTOFF,
    MAX_BASE,
    MIN_BASE,
    MIN_KARATSUBA_CUTOFF,
)


class ArithmeticConfig(BaseModel):
    """Конфигурация арифметики."""

    base: int = Field(
        default=DEFAULT_BASE,
        ge=MIN_BASE,
        le=MAX_BASE,
        description="Основание внутреннего представления",
    )
    karatsuba_cutoff: int = Field(
        default=DEFAULT_KARATSUBA_CUTOFF,
        ge=MIN_KARATSUBA_CUTOFF,
        description="Порог перехода на умножение в столбик (цифры)",
    )
    parallel: bool = Field(
        default=False,
        description="Fork-join вариант Karatsuba",
    )
    max_workers: Optional[int] = Field(
        default=None,
        ge=1,
        description="Размер пула потоков (None: по умолчанию)",
    )

    model_config = {"frozen": True, "extra": "forbid"}
