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

"""Configuration management for the JSON schema validator."""

import os
import logging
from dataclasses import dataclass

from .utils.logging_utils import configure_split_stream_logging

ENV_PREFIX = "JSON_SCHEMA_VALIDATOR_"


@dataclass
class ValidatorConfig:
    """Configuration class for validator instances."""
    default_draft: str = "draft3"
    # -1 means unlimited (collect every error)
    allowed_errors: int = 0
    max_depth: int = 128
    max_ref_chain: int = 32
    log_level: str = "INFO"
    print_level: str = "ERROR"

    @classmethod
    def from_env(cls) -> 'ValidatorConfig':
        """Create configuration from environment variables."""
        return cls(
            default_draft=os.getenv(ENV_PREFIX + 'DEFAULT_DRAFT', 'draft3'),
            allowed_errors=int(os.getenv(ENV_PREFIX + 'ALLOWED_ERRORS', '0')),
            max_depth=int(os.getenv(ENV_PREFIX + 'MAX_DEPTH', '128')),
            max_ref_chain=int(os.getenv(ENV_PREFIX + 'MAX_REF_CHAIN', '32')),
            log_level=os.getenv(ENV_PREFIX + 'LOG_LEVEL', 'INFO'),
            print_level=os.getenv(ENV_PREFIX + 'PRINT_LEVEL', 'ERROR'),
        )

    def set_logging(self) -> logging.Logger:
        """Setup logging for the package logger based on configuration."""
        level = getattr(logging, self.log_level.upper(), logging.INFO)
        stderr_level = getattr(logging, self.print_level.upper(), logging.ERROR)

        formatter = logging.Formatter('%(name)s - %(levelname)s - %(message)s')
        return configure_split_stream_logging(
            'json_schema_validator',
            level=level,
            stderr_level=stderr_level,
            formatter=formatter,
        )


# Global configuration instance
validator_config = ValidatorConfig.from_env()
