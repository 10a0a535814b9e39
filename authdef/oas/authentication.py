"""
Top-level authentication section of the modern definition.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

Mode presence after fill follows two rules:

- Token, Basic, OAuth and HMAC are created when their key is in the legacy
  auth_configs map and dropped again if they come out all-zero.
- JWT is created when the `jwt` key is present and is never dropped.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..apidef.types import APIDefinition, AuthMode, AuthTypeEnum
from ..util.encoding import (
    enum_from_value, enum_to_value, expect_mapping, get_value, optional_object,
)
from .basic import Basic
from .hmac import HMAC
from .jwt import JWT
from .oauth import OAuth
from .omit import omit_if_zero
from .token import Token

logger = logging.getLogger(__name__)


@dataclass
class Authentication:
    """
    Authentication section.

    enabled is the inverse of the legacy `use_keyless` flag.
    base_identity_provider picks the mode whose session object drives rate
    limits, ACL rules and quotas when several modes are enabled.
    """
    enabled: bool = False
    strip_authorization_data: bool = False
    base_identity_provider: AuthTypeEnum = AuthTypeEnum.NONE
    token: Optional[Token] = None
    jwt: Optional[JWT] = None
    basic: Optional[Basic] = None
    oauth: Optional[OAuth] = None
    hmac: Optional[HMAC] = None

    def fill(self, api: APIDefinition) -> None:
        """Populate from a legacy definition."""
        self.enabled = not api.use_keyless_access
        self.strip_authorization_data = api.strip_auth_data
        self.base_identity_provider = api.base_identity_provided_by

        if not api.auth_configs:
            logger.debug("Legacy definition has no auth configs, no modes to fill")
            return

        if api.has_auth_config(AuthMode.AUTH_TOKEN):
            if self.token is None:
                self.token = Token()
            self.token.fill(api)
            self.token = omit_if_zero(self.token)

        # JWT stays even when all-zero; its presence follows the map key only
        if api.has_auth_config(AuthMode.JWT):
            if self.jwt is None:
                self.jwt = JWT()
            self.jwt.fill(api)

        if api.has_auth_config(AuthMode.BASIC):
            if self.basic is None:
                self.basic = Basic()
            self.basic.fill(api)
            self.basic = omit_if_zero(self.basic)

        if api.has_auth_config(AuthMode.OAUTH):
            if self.oauth is None:
                self.oauth = OAuth()
            self.oauth.fill(api)
            self.oauth = omit_if_zero(self.oauth)

        if api.has_auth_config(AuthMode.HMAC):
            if self.hmac is None:
                self.hmac = HMAC()
            self.hmac.fill(api)
            self.hmac = omit_if_zero(self.hmac)

        logger.debug(f"Filled authentication, modes present: {self.modes()}")

    def extract_to(self, api: APIDefinition) -> None:
        """
        Write into a legacy definition.

        Absent modes write nothing, so auth_configs entries already in api
        for those modes are kept.
        """
        api.use_keyless_access = not self.enabled
        api.strip_auth_data = self.strip_authorization_data
        api.base_identity_provided_by = self.base_identity_provider

        if self.token is not None:
            self.token.extract_to(api)

        if self.jwt is not None:
            self.jwt.extract_to(api)

        if self.basic is not None:
            self.basic.extract_to(api)

        if self.oauth is not None:
            self.oauth.extract_to(api)

        if self.hmac is not None:
            self.hmac.extract_to(api)

        logger.debug(f"Extracted authentication, modes written: {self.modes()}")

    def modes(self) -> List[AuthMode]:
        """Keys of the modes currently present."""
        present = [
            (AuthMode.AUTH_TOKEN, self.token),
            (AuthMode.JWT, self.jwt),
            (AuthMode.BASIC, self.basic),
            (AuthMode.OAUTH, self.oauth),
            (AuthMode.HMAC, self.hmac),
        ]
        return [mode for mode, value in present if value is not None]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        result = {'enabled': self.enabled}

        if self.strip_authorization_data:
            result['stripAuthorizationData'] = self.strip_authorization_data
        if enum_to_value(self.base_identity_provider):
            result['baseIdentityProvider'] = enum_to_value(self.base_identity_provider)
        if self.token is not None:
            result['token'] = self.token.to_dict()
        if self.jwt is not None:
            result['jwt'] = self.jwt.to_dict()
        if self.basic is not None:
            result['basic'] = self.basic.to_dict()
        if self.oauth is not None:
            result['oauth'] = self.oauth.to_dict()
        if self.hmac is not None:
            result['hmac'] = self.hmac.to_dict()

        return result

    @classmethod
    def from_dict(cls, data: Any) -> 'Authentication':
        """Create from dictionary."""
        data = expect_mapping(data, "authentication")

        token = optional_object(data.get('token'), "authentication.token")
        jwt = optional_object(data.get('jwt'), "authentication.jwt")
        basic = optional_object(data.get('basic'), "authentication.basic")
        oauth = optional_object(data.get('oauth'), "authentication.oauth")
        hmac = optional_object(data.get('hmac'), "authentication.hmac")

        return cls(
            enabled=get_value(data, 'enabled', False),
            strip_authorization_data=get_value(data, 'stripAuthorizationData', False),
            base_identity_provider=enum_from_value(
                AuthTypeEnum, get_value(data, 'baseIdentityProvider', "")
            ),
            token=Token.from_dict(token, "authentication.token") if token is not None else None,
            jwt=JWT.from_dict(jwt, "authentication.jwt") if jwt is not None else None,
            basic=Basic.from_dict(basic, "authentication.basic") if basic is not None else None,
            oauth=OAuth.from_dict(oauth, "authentication.oauth") if oauth is not None else None,
            hmac=HMAC.from_dict(hmac, "authentication.hmac") if hmac is not None else None,
        )
