import os
from collections.abc import Mapping

from hotel_desk.domain.reservation import (
    DEFAULT_BREAKFAST_MULTIPLIER,
    DEFAULT_HOTEL_NAME,
    DEFAULT_PRICE_PER_CLIENT,
)
from hotel_desk.manager import ManagerConfig


def config_from_env(environ: Mapping[str, str] | None = None) -> ManagerConfig:
    """
    Factory: build the desk configuration from environment variables.

    HOTEL_NAME, PRICE_PER_CLIENT and BREAKFAST_MULTIPLIER are all optional.
    Pass a mapping explicitly to read from somewhere other than os.environ.
    """
    env = os.environ if environ is None else environ

    hotel_name = env.get("HOTEL_NAME", DEFAULT_HOTEL_NAME).strip()
    if not hotel_name:
        raise ValueError("HOTEL_NAME must not be blank")

    return ManagerConfig(
        hotel_name=hotel_name,
        price_per_client=_non_negative_float(env, "PRICE_PER_CLIENT", DEFAULT_PRICE_PER_CLIENT),
        breakfast_multiplier=_non_negative_float(
            env, "BREAKFAST_MULTIPLIER", DEFAULT_BREAKFAST_MULTIPLIER
        ),
    )


def _non_negative_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
    if not value >= 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value
