# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Basic authentication mode.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..apidef.types import APIDefinition, AuthConfig, AuthMode
from ..util.encoding import expect_mapping, get_value, optional_object
from .auth_sources import AuthSources
from .omit import omit_if_zero

logger = logging.getLogger(__name__)


@dataclass
class ExtractCredentialsFromBody:
    """
    Extraction of username and password from the request body, e.g. for SOAP.

    The regexes are stored as given, `<User>(.*)</User>` style.
    """
    enabled: bool = False
    user_regexp: str = ""
    password_regexp: str = ""

    def fill(self, api: APIDefinition) -> None:
        self.enabled = api.basic_auth.extract_from_body
        self.user_regexp = api.basic_auth.body_user_regexp
        self.password_regexp = api.basic_auth.body_password_regexp

    def extract_to(self, api: APIDefinition) -> None:
        api.basic_auth.extract_from_body = self.enabled
        api.basic_auth.body_user_regexp = self.user_regexp
        api.basic_auth.body_password_regexp = self.password_regexp

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        result = {'enabled': self.enabled}

        if self.user_regexp:
            result['userRegexp'] = self.user_regexp
        if self.password_regexp:
            result['passwordRegexp'] = self.password_regexp

        return result

    @classmethod
    def from_dict(cls, data: Any, path: str = "extractCredentialsFromBody") -> 'ExtractCredentialsFromBody':
        """Create from dictionary."""
        data = expect_mapping(data, path)
        return cls(
            enabled=get_value(data, 'enabled', False),
            user_regexp=get_value(data, 'userRegexp', ""),
            password_regexp=get_value(data, 'passwordRegexp', ""),
        )


@dataclass
class Basic:
    """
    Basic authentication mode.

    Legacy origin: `use_basic_auth`, `auth_configs["basic"]` and `basic_auth`.
    """
    enabled: bool = False
    auth_sources: AuthSources = field(default_factory=AuthSources)
    disable_caching: bool = False
    # seconds
    cache_ttl: int = 0
    extract_credentials_from_body: Optional[ExtractCredentialsFromBody] = None

    def fill(self, api: APIDefinition) -> None:
        self.enabled = api.use_basic_auth
        self.auth_sources.fill(api.auth_config(AuthMode.BASIC))

        self.disable_caching = api.basic_auth.disable_caching
        self.cache_ttl = api.basic_auth.cache_ttl

        if self.extract_credentials_from_body is None:
            self.extract_credentials_from_body = ExtractCredentialsFromBody()
        self.extract_credentials_from_body.fill(api)
        self.extract_credentials_from_body = omit_if_zero(self.extract_credentials_from_body)

        if self.extract_credentials_from_body is None:
            logger.debug("Basic body credential extraction is unset, omitting it")

    def extract_to(self, api: APIDefinition) -> None:
        api.use_basic_auth = self.enabled

        auth_config = AuthConfig()
        self.auth_sources.extract_to(auth_config)
        api.set_auth_config(AuthMode.BASIC, auth_config)

        api.basic_auth.disable_caching = self.disable_caching
        api.basic_auth.cache_ttl = self.cache_ttl

        if self.extract_credentials_from_body is not None:
            self.extract_credentials_from_body.extract_to(api)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        result = {'enabled': self.enabled}
        result.update(self.auth_sources.to_dict())

        if self.disable_caching:
            result['disableCaching'] = self.disable_caching
        if self.cache_ttl:
            result['cacheTTL'] = self.cache_ttl
        if self.extract_credentials_from_body is not None:
            result['extractCredentialsFromBody'] = self.extract_credentials_from_body.to_dict()

        return result

    @classmethod
    def from_dict(cls, data: Any, path: str = "basic") -> 'Basic':
        """Create from dictionary."""
        data = expect_mapping(data, path)
        body_path = f"{path}.extractCredentialsFromBody"
        extract = optional_object(data.get('extractCredentialsFromBody'), body_path)

        return cls(
            enabled=get_value(data, 'enabled', False),
            auth_sources=AuthSources.from_dict(data, path),
            disable_caching=get_value(data, 'disableCaching', False),
            cache_ttl=get_value(data, 'cacheTTL', 0),
            extract_credentials_from_body=ExtractCredentialsFromBody.from_dict(extract, body_path)
            if extract is not None else None,
        )
