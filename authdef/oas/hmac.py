# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
HMAC request signing authentication mode.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..apidef.types import APIDefinition, AuthConfig, AuthMode
from ..util.encoding import expect_list, expect_mapping, get_value
from .auth_sources import AuthSources


@dataclass
class HMAC:
    """
    HMAC authentication mode.

    Legacy origin: `enable_signature_checking` and `auth_configs["hmac"]`.

    allowed_algorithms lists the accepted values of the algorithm header,
    e.g. `hmac-sha1`, `hmac-sha256`, `hmac-sha384`, `hmac-sha512`.
    allowed_clock_skew is in milliseconds; 0 turns skew checks off.
    """
    enabled: bool = False
    auth_sources: AuthSources = field(default_factory=AuthSources)
    allowed_algorithms: List[str] = field(default_factory=list)
    allowed_clock_skew: float = 0.0

    def fill(self, api: APIDefinition) -> None:
        self.enabled = api.enable_signature_checking
        self.auth_sources.fill(api.auth_config(AuthMode.HMAC))

        self.allowed_algorithms = list(api.hmac_allowed_algorithms)
        self.allowed_clock_skew = api.hmac_allowed_clock_skew

    def extract_to(self, api: APIDefinition) -> None:
        api.enable_signature_checking = self.enabled

        auth_config = AuthConfig()
        self.auth_sources.extract_to(auth_config)
        api.set_auth_config(AuthMode.HMAC, auth_config)

        api.hmac_allowed_algorithms = list(self.allowed_algorithms)
        api.hmac_allowed_clock_skew = self.allowed_clock_skew

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        result = {'enabled': self.enabled}
        result.update(self.auth_sources.to_dict())

        if self.allowed_algorithms:
            result['allowedAlgorithms'] = list(self.allowed_algorithms)
        if self.allowed_clock_skew:
            result['allowedClockSkew'] = self.allowed_clock_skew

        return result

    @classmethod
    def from_dict(cls, data: Any, path: str = "hmac") -> 'HMAC':
        """Create from dictionary."""
        data = expect_mapping(data, path)
        return cls(
            enabled=get_value(data, 'enabled', False),
            auth_sources=AuthSources.from_dict(data, path),
            allowed_algorithms=expect_list(data.get('allowedAlgorithms'), f"{path}.allowedAlgorithms"),
            allowed_clock_skew=get_value(data, 'allowedClockSkew', 0.0),
        )
