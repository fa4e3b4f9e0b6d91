# SPDX-FileCopyrightText: © 2023-2024 Devon D. Sparks 
# SPDX-License-Identifier: AGPL-3.0

from __future__ import annotations
import os
from dataclasses import dataclass


STRATEGIES = ("direct", "expanded")


@dataclass(frozen=True)
class Settings:
    bundles_path: str = "static/bundles.json"
    base_url: str = "http://localhost:5000"
    record_type: str = "fedora_resource"
    resolution_strategy: str = "direct"
    log_level: str = "INFO"

    def __post_init__(self):
        if self.resolution_strategy not in STRATEGIES:
            raise ValueError("Unknown resolution strategy {!r}, expected one of {}".format(
                self.resolution_strategy, ", ".join(STRATEGIES)))


def get_settings() -> Settings:
    return Settings(
        bundles_path=os.getenv("BUNDLES_PATH", "static/bundles.json"),
        base_url=os.getenv("BASE_URL", "http://localhost:5000").rstrip("/"),
        record_type=os.getenv("RECORD_TYPE", "fedora_resource"),
        resolution_strategy=os.getenv("RESOLUTION_STRATEGY", "direct").lower(),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
