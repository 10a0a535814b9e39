# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Credential locations shared by every authentication mode.

AuthSources is embedded by value into each mode and serialized inline, so
its `header`, `param` and `cookie` keys sit next to the mode's own fields.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from ..apidef.types import AuthConfig
from ..util.encoding import expect_mapping, get_value, optional_object
from .omit import omit_if_zero

logger = logging.getLogger(__name__)


@dataclass
class HeaderAuthSource:
    """Header auth source. Always active; an empty name means the default header."""
    name: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {'name': self.name}

    @classmethod
    def from_dict(cls, data: Any, path: str = "header") -> 'HeaderAuthSource':
        """Create from dictionary."""
        data = expect_mapping(data, path)
        return cls(name=get_value(data, 'name', ""))


@dataclass
class AuthSource:
    """Optional param or cookie auth source."""
    enabled: bool = False
    name: str = ""

    def fill(self, enabled: bool, name: str) -> None:
        self.enabled = enabled
        self.name = name

    def extract_to(self) -> Tuple[bool, str]:
        """Return the legacy (use_X, X_name) pair."""
        return self.enabled, self.name

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        result = {'enabled': self.enabled}

        if self.name:
            result['name'] = self.name

        return result

    @classmethod
    def from_dict(cls, data: Any, path: str = "source") -> 'AuthSource':
        """Create from dictionary."""
        data = expect_mapping(data, path)
        return cls(enabled=get_value(data, 'enabled', False), name=get_value(data, 'name', ""))


@dataclass
class AuthSources:
    """Header, param and cookie locations of a credential."""
    header: HeaderAuthSource = field(default_factory=HeaderAuthSource)
    param: Optional[AuthSource] = None
    cookie: Optional[AuthSource] = None

    def fill(self, auth_config: AuthConfig) -> None:
        """Populate from a legacy auth config entry."""
        self.header = HeaderAuthSource(auth_config.auth_header_name)

        if self.param is None:
            self.param = AuthSource()
        self.param.fill(auth_config.use_param, auth_config.param_name)
        self.param = omit_if_zero(self.param)

        if self.cookie is None:
            self.cookie = AuthSource()
        self.cookie.fill(auth_config.use_cookie, auth_config.cookie_name)
        self.cookie = omit_if_zero(self.cookie)

        logger.debug(
            f"Filled auth sources: header={self.header.name!r} "
            f"param={self.param is not None} cookie={self.cookie is not None}"
        )

    def extract_to(self, auth_config: AuthConfig) -> None:
        """Write into a legacy auth config entry. Absent sources leave it as is."""
        auth_config.auth_header_name = self.header.name

        if self.param is not None:
            auth_config.use_param, auth_config.param_name = self.param.extract_to()

        if self.cookie is not None:
            auth_config.use_cookie, auth_config.cookie_name = self.cookie.extract_to()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, ready to be merged inline into a mode."""
        result = {'header': self.header.to_dict()}

        if self.cookie is not None:
            result['cookie'] = self.cookie.to_dict()
        if self.param is not None:
            result['param'] = self.param.to_dict()

        return result

    @classmethod
    def from_dict(cls, data: Any, path: str = "$") -> 'AuthSources':
        """Create from the inline keys of a mode dictionary."""
        data = expect_mapping(data, path)

        param = optional_object(data.get('param'), f"{path}.param")
        cookie = optional_object(data.get('cookie'), f"{path}.cookie")

        return cls(
            header=HeaderAuthSource.from_dict(data.get('header'), f"{path}.header"),
            param=AuthSource.from_dict(param, f"{path}.param") if param is not None else None,
            cookie=AuthSource.from_dict(cookie, f"{path}.cookie") if cookie is not None else None,
        )
