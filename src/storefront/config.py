"""Runtime configuration, read from the environment at startup."""

import os

from pydantic import BaseModel, Field

_LOG_LEVELS = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}


class StorefrontConfig(BaseModel):
    # Every nth order placed across all users issues a discount code
    nth_order_for_discount: int = Field(default=3, ge=1)
    environment: str = "development"
    log_level: str | None = None
    log_dir: str | None = None
    host: str = "0.0.0.0"
    port: int = Field(default=3001, ge=1, le=65535)

    model_config = {"frozen": True}

    @property
    def effective_log_level(self) -> str:
        return (self.log_level or _LOG_LEVELS.get(self.environment, "INFO")).upper()

    @classmethod
    def from_env(cls, environ=None) -> "StorefrontConfig":
        environ = os.environ if environ is None else environ

        values = {
            "environment": (
                environ.get("STOREFRONT_ENV") or environ.get("ENVIRONMENT") or "development"
            ).lower(),
            "log_level": environ.get("LOG_LEVEL"),
            "log_dir": environ.get("STOREFRONT_LOG_DIR"),
        }
        if "STOREFRONT_NTH_ORDER_FOR_DISCOUNT" in environ:
            values["nth_order_for_discount"] = environ["STOREFRONT_NTH_ORDER_FOR_DISCOUNT"]
        if "HOST" in environ:
            values["host"] = environ["HOST"]
        if "PORT" in environ:
            values["port"] = environ["PORT"]

        return cls(**values)
