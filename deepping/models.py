from __future__ import annotations

import threading

from pydantic import BaseModel, ConfigDict, Field

from deepping.checks.http_check import build_url


class CheckConfig(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    protocol: str = "http"
    host: str = Field(..., min_length=1)
    port: int = Field(default=80, ge=1, le=65535)
    path: str = ""
    warning: float = Field(default=10.0, ge=0)
    critical: float = Field(default=15.0, ge=0)
    # queue and lock waits reject anything above TIMEOUT_MAX
    timeout: float = Field(default=30.0, gt=0, le=threading.TIMEOUT_MAX)
    checkstr: str = "Ok"

    @property
    def url(self) -> str:
        return build_url(self.protocol, self.host, self.port, self.path)
