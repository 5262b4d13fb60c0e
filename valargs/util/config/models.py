# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 valargs Rui Pinheiro

from pydantic import BaseModel, ConfigDict


class BaseConfigModel(BaseModel):
    """Base class for every configuration model.

    Configuration is immutable once validated, and unknown keys are rejected rather than ignored.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )
