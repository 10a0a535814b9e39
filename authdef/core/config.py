# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Configuration for the authdef command line tools.
"""

from dataclasses import dataclass
import logging

from ..errors import ConfigError
from ..util.config import get_config_value, get_int_config

OUTPUT_FORMATS = ("json", "yaml")


@dataclass
class Config:
    """Settings for converting definition files"""
    log_level: str = "WARNING"
    output_format: str = "json"
    indent: int = 2

    @classmethod
    def from_env(cls) -> "Config":
        """Create configuration from environment variables"""
        return cls(
            log_level=get_config_value("log_level", "WARNING"),
            output_format=get_config_value("output_format", "json"),
            indent=get_int_config("indent", 2),
        )

    def validate(self) -> bool:
        """Validate the configuration"""
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigError("log_level is not a logging level", "log_level", self.log_level)
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigError(
                f"output_format must be one of: {', '.join(OUTPUT_FORMATS)}",
                "output_format", self.output_format,
            )
        if self.indent < 0:
            raise ConfigError("indent must be >= 0", "indent", self.indent)
        return True
