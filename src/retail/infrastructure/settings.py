"""Runtime settings read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

from retail.domain.exceptions import ValidationError
from retail.domain.model.value_objects import Money
from retail.domain.service.shipping_service import DEFAULT_FEE_PER_ITEM

SHIPPING_FEE_ENV = "RETAIL_SHIPPING_FEE"
LOG_LEVEL_ENV = "RETAIL_LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    shipping_fee: Money = DEFAULT_FEE_PER_ITEM
    log_level: int = logging.WARNING

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from ``RETAIL_*`` variables, falling back to defaults."""
        env = os.environ if environ is None else environ

        shipping_fee = DEFAULT_FEE_PER_ITEM
        raw_fee = env.get(SHIPPING_FEE_ENV)
        if raw_fee:
            shipping_fee = Money.of(raw_fee)

        log_level = logging.WARNING
        raw_level = env.get(LOG_LEVEL_ENV)
        if raw_level:
            level = logging.getLevelName(raw_level.strip().upper())
            if not isinstance(level, int):
                raise ValidationError(f"Unknown log level: {raw_level!r}")
            log_level = level

        return cls(shipping_fee=shipping_fee, log_level=log_level)
