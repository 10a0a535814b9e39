# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Standard token authentication mode.
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
class Signature:
    """Request signature validation settings."""
    enabled: bool = False
    algorithm: str = ""
    header: str = ""
    secret: str = ""
    allowed_clock_skew: int = 0
    error_code: int = 0
    error_message: str = ""

    def fill(self, auth_config: AuthConfig) -> None:
        signature = auth_config.signature

        self.enabled = auth_config.validate_signature
        self.algorithm = signature.algorithm
        self.header = signature.header
        self.secret = signature.secret
        self.allowed_clock_skew = signature.allowed_clock_skew
        self.error_code = signature.error_code
        self.error_message = signature.error_message

    def extract_to(self, auth_config: AuthConfig) -> None:
        auth_config.validate_signature = self.enabled

        auth_config.signature.algorithm = self.algorithm
        auth_config.signature.header = self.header
        auth_config.signature.secret = self.secret
        auth_config.signature.allowed_clock_skew = self.allowed_clock_skew
        auth_config.signature.error_code = self.error_code
        auth_config.signature.error_message = self.error_message

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        result = {'enabled': self.enabled}

        if self.algorithm:
            result['algorithm'] = self.algorithm
        if self.header:
            result['header'] = self.header
        if self.secret:
            result['secret'] = self.secret
        if self.allowed_clock_skew:
            result['allowedClockSkew'] = self.allowed_clock_skew
        if self.error_code:
            result['errorCode'] = self.error_code
        if self.error_message:
            result['errorMessage'] = self.error_message

        return result

    @classmethod
    def from_dict(cls, data: Any, path: str = "signatureValidation") -> 'Signature':
        """Create from dictionary."""
        data = expect_mapping(data, path)
        return cls(
            enabled=get_value(data, 'enabled', False),
            algorithm=get_value(data, 'algorithm', ""),
            header=get_value(data, 'header', ""),
            secret=get_value(data, 'secret', ""),
            allowed_clock_skew=get_value(data, 'allowedClockSkew', 0),
            error_code=get_value(data, 'errorCode', 0),
            error_message=get_value(data, 'errorMessage', ""),
        )


@dataclass
class Token:
    """
    Token based authentication mode.

    Legacy origin: `use_standard_auth` and `auth_configs["authToken"]`.
    """
    enabled: bool = False
    auth_sources: AuthSources = field(default_factory=AuthSources)
    enable_client_certificate: bool = False
    signature: Optional[Signature] = None

    def fill(self, api: APIDefinition) -> None:
        auth_token = api.auth_config(AuthMode.AUTH_TOKEN)

        self.enabled = api.use_standard_auth
        self.auth_sources.fill(auth_token)
        self.enable_client_certificate = auth_token.use_certificate

        if self.signature is None:
            self.signature = Signature()
        self.signature.fill(auth_token)
        self.signature = omit_if_zero(self.signature)

        if self.signature is None:
            logger.debug("Token signature validation is unset, omitting it")

    def extract_to(self, api: APIDefinition) -> None:
        api.use_standard_auth = self.enabled

        auth_config = AuthConfig()
        auth_config.use_certificate = self.enable_client_certificate
        self.auth_sources.extract_to(auth_config)

        if self.signature is not None:
            self.signature.extract_to(auth_config)

        api.set_auth_config(AuthMode.AUTH_TOKEN, auth_config)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        result = {'enabled': self.enabled}
        result.update(self.auth_sources.to_dict())

        if self.enable_client_certificate:
            result['enableClientCertificate'] = self.enable_client_certificate
        if self.signature is not None:
            result['signatureValidation'] = self.signature.to_dict()

        return result

    @classmethod
    def from_dict(cls, data: Any, path: str = "token") -> 'Token':
        """Create from dictionary."""
        data = expect_mapping(data, path)
        signature = optional_object(data.get('signatureValidation'), f"{path}.signatureValidation")

        return cls(
            enabled=get_value(data, 'enabled', False),
            auth_sources=AuthSources.from_dict(data, path),
            enable_client_certificate=get_value(data, 'enableClientCertificate', False),
            signature=Signature.from_dict(signature, f"{path}.signatureValidation")
            if signature is not None else None,
        )
