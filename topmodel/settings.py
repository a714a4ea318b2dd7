# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Runtime settings for topmodel."""

import os
import logging
from dataclasses import dataclass

from .utils.logging_utils import configure_split_stream_logging


@dataclass
class TopModelSettings:
    """Settings read from the environment."""
    log_level: str = "INFO"
    print_level: str = "WARNING"
    cache_enabled: bool = False

    @classmethod
    def from_env(cls) -> 'TopModelSettings':
        """Create settings from environment variables."""
        return cls(
            log_level=os.getenv('TOPMODEL_LOG_LEVEL', 'INFO'),
            print_level=os.getenv('TOPMODEL_PRINT_LEVEL', 'WARNING'),
            cache_enabled=os.getenv('TOPMODEL_CACHE_ENABLED', 'false').lower() == 'true',
        )

    def set_logging(self) -> logging.Logger:
        """Setup console logging based on these settings."""
        return configure_split_stream_logging(
            level=self.log_level,
            stderr_level=self.print_level,
            logger_name='topmodel',
        )


# Global settings instance
settings = TopModelSettings.from_env()
