from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .envelope import Envelope


class RunRequest(BaseModel):
    """Forecast parameters, forwarded upstream under their upper-case wire names."""

    model_config = ConfigDict(populate_by_name=True, strict=True)

    prometheus_url: str = Field("", alias="PROMETHEUS_URL")
    metric_name: str = Field("", alias="METRIC_NAME")
    train_days: int = Field(0, alias="TRAIN_DAYS")
    battery_capacity_wh: float = Field(0.0, alias="BATTERY_CAPACITY_WH")
    initial_soc_percent: float = Field(0.0, alias="INITIAL_SOC_PERCENT")
    constant_load_w: float = Field(0.0, alias="CONSTANT_LOAD_W")
    charge_efficiency: float = Field(0.0, alias="CHARGE_EFFICIENCY")
    discharge_efficiency: float = Field(0.0, alias="DISCHARGE_EFFICIENCY")
    detailed_summary: bool = Field(False, alias="DETAILED_SUMMARY")
    # Alternate computation path on the upstream side
    use_cython: bool = Field(False, alias="USE_CYTHON")


class RunResponse(Envelope):
    status: str = ""
    result: Optional[Dict[str, Any]] = None
    message: Optional[str] = None
    timestamp: Optional[str] = None


class RunWithEnvResponse(Envelope):
    status: str = ""
    session_id: str = ""
    result: Optional[Dict[str, Any]] = None
    timestamp: Optional[str] = None
