# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Legacy API definition types.

The legacy definition is flat: one enable flag per authentication mode, a
keyed map of per-mode auth configs, and mode-specific settings in separate
top-level fields. Only the authentication-related part is modelled here.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from ..util.encoding import (
    enum_from_value, enum_to_value, expect_list, expect_mapping, get_value, string_map,
)


class AuthTypeEnum(str, Enum):
    """Base identity provider selector."""
    NONE = ""
    AUTH_TOKEN = "auth_token"
    HMAC_KEY = "hmac_key"
    BASIC_AUTH_USER = "basic_auth_user"
    JWT_CLAIM = "jwt_claim"
    OIDC_USER = "oidc_user"
    OAUTH_KEY = "oauth_key"

    def __str__(self) -> str:
        return self.value


class AuthMode(str, Enum):
    """Keys of the legacy auth_configs map."""
    AUTH_TOKEN = "authToken"
    JWT = "jwt"
    BASIC = "basic"
    OAUTH = "oauth"
    HMAC = "hmac"

    def __str__(self) -> str:
        return self.value


class AccessRequestType(str, Enum):
    """OAuth2 access request (grant) types."""
    AUTHORIZATION_CODE = "authorization_code"
    REFRESH_TOKEN = "refresh_token"
    PASSWORD = "password"
    CLIENT_CREDENTIALS = "client_credentials"
    ASSERTION = "assertion"
    IMPLICIT = "__implicit"


class AuthorizeRequestType(str, Enum):
    """OAuth2 authorize request (response) types."""
    CODE = "code"
    TOKEN = "token"


@dataclass
class SignatureConfig:
    """Request signature settings of an auth config entry."""
    algorithm: str = ""
    header: str = ""
    secret: str = ""
    allowed_clock_skew: int = 0
    error_code: int = 0
    error_message: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'algorithm': self.algorithm,
            'header': self.header,
            'secret': self.secret,
            'allowed_clock_skew': self.allowed_clock_skew,
            'error_code': self.error_code,
            'error_message': self.error_message,
        }

    @classmethod
    def from_dict(cls, data: Any, path: str = "signature") -> 'SignatureConfig':
        """Create from dictionary."""
        data = expect_mapping(data, path)
        return cls(
            algorithm=get_value(data, 'algorithm', ""),
            header=get_value(data, 'header', ""),
            secret=get_value(data, 'secret', ""),
            allowed_clock_skew=get_value(data, 'allowed_clock_skew', 0),
            error_code=get_value(data, 'error_code', 0),
            error_message=get_value(data, 'error_message', ""),
        )


@dataclass
class AuthConfig:
    """One entry of the auth_configs map."""
    use_param: bool = False
    param_name: str = ""
    use_cookie: bool = False
    cookie_name: str = ""
    auth_header_name: str = ""
    use_certificate: bool = False
    validate_signature: bool = False
    signature: SignatureConfig = field(default_factory=SignatureConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'use_param': self.use_param,
            'param_name': self.param_name,
            'use_cookie': self.use_cookie,
            'cookie_name': self.cookie_name,
            'auth_header_name': self.auth_header_name,
            'use_certificate': self.use_certificate,
            'validate_signature': self.validate_signature,
            'signature': self.signature.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Any, path: str = "auth_config") -> 'AuthConfig':
        """Create from dictionary."""
        data = expect_mapping(data, path)
        return cls(
            use_param=get_value(data, 'use_param', False),
            param_name=get_value(data, 'param_name', ""),
            use_cookie=get_value(data, 'use_cookie', False),
            cookie_name=get_value(data, 'cookie_name', ""),
            auth_header_name=get_value(data, 'auth_header_name', ""),
            use_certificate=get_value(data, 'use_certificate', False),
            validate_signature=get_value(data, 'validate_signature', False),
            signature=SignatureConfig.from_dict(data.get('signature'), f"{path}.signature"),
        )


@dataclass
class BasicAuthMeta:
    """Basic authentication settings."""
    disable_caching: bool = False
    cache_ttl: int = 0
    extract_from_body: bool = False
    body_user_regexp: str = ""
    body_password_regexp: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'disable_caching': self.disable_caching,
            'cache_ttl': self.cache_ttl,
            'extract_from_body': self.extract_from_body,
            'body_user_regexp': self.body_user_regexp,
            'body_password_regexp': self.body_password_regexp,
        }

    @classmethod
    def from_dict(cls, data: Any, path: str = "basic_auth") -> 'BasicAuthMeta':
        """Create from dictionary."""
        data = expect_mapping(data, path)
        return cls(
            disable_caching=get_value(data, 'disable_caching', False),
            cache_ttl=get_value(data, 'cache_ttl', 0),
            extract_from_body=get_value(data, 'extract_from_body', False),
            body_user_regexp=get_value(data, 'body_user_regexp', ""),
            body_password_regexp=get_value(data, 'body_password_regexp', ""),
        )


@dataclass
class OAuth2Meta:
    """OAuth2 settings."""
    allowed_access_types: List[AccessRequestType] = field(default_factory=list)
    allowed_authorize_types: List[AuthorizeRequestType] = field(default_factory=list)
    authorize_login_redirect: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'allowed_access_types': [enum_to_value(t) for t in self.allowed_access_types],
            'allowed_authorize_types': [enum_to_value(t) for t in self.allowed_authorize_types],
            'auth_login_redirect': self.authorize_login_redirect,
        }

    @classmethod
    def from_dict(cls, data: Any, path: str = "oauth_meta") -> 'OAuth2Meta':
        """Create from dictionary."""
        data = expect_mapping(data, path)
        access_types = expect_list(data.get('allowed_access_types'), f"{path}.allowed_access_types")
        authorize_types = expect_list(data.get('allowed_authorize_types'), f"{path}.allowed_authorize_types")
        return cls(
            allowed_access_types=[enum_from_value(AccessRequestType, t) for t in access_types],
            allowed_authorize_types=[enum_from_value(AuthorizeRequestType, t) for t in authorize_types],
            authorize_login_redirect=get_value(data, 'auth_login_redirect', ""),
        )


@dataclass
class NotificationsManager:
    """Notification hooks, used by OAuth key rotation."""
    shared_secret: str = ""
    oauth_key_change_url: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'shared_secret': self.shared_secret,
            'oauth_on_keychange_url': self.oauth_key_change_url,
        }

    @classmethod
    def from_dict(cls, data: Any, path: str = "notifications") -> 'NotificationsManager':
        """Create from dictionary."""
        data = expect_mapping(data, path)
        return cls(
            shared_secret=get_value(data, 'shared_secret', ""),
            oauth_key_change_url=get_value(data, 'oauth_on_keychange_url', ""),
        )


@dataclass
class APIDefinition:
    """Authentication-related part of a legacy API definition."""
    use_keyless_access: bool = False
    strip_auth_data: bool = False
    base_identity_provided_by: AuthTypeEnum = AuthTypeEnum.NONE

    # None is the unset map; extract_to creates it on demand
    auth_configs: Optional[Dict[AuthMode, AuthConfig]] = None

    use_standard_auth: bool = False

    enable_jwt: bool = False
    jwt_source: str = ""
    jwt_signing_method: str = ""
    jwt_identity_base_field: str = ""
    jwt_skip_kid: bool = False
    jwt_scope_claim_name: str = ""
    jwt_scope_to_policy_mapping: Dict[str, str] = field(default_factory=dict)
    jwt_policy_field_name: str = ""
    jwt_client_id_base_field: str = ""
    jwt_default_policies: List[str] = field(default_factory=list)
    jwt_issued_at_validation_skew: int = 0
    jwt_not_before_validation_skew: int = 0
    jwt_expires_at_validation_skew: int = 0

    use_basic_auth: bool = False
    basic_auth: BasicAuthMeta = field(default_factory=BasicAuthMeta)

    use_oauth2: bool = False
    oauth2_meta: OAuth2Meta = field(default_factory=OAuth2Meta)
    notifications_details: NotificationsManager = field(default_factory=NotificationsManager)

    enable_signature_checking: bool = False
    hmac_allowed_algorithms: List[str] = field(default_factory=list)
    hmac_allowed_clock_skew: float = 0.0

    def auth_config(self, mode: AuthMode) -> AuthConfig:
        """Return the auth config registered for mode, or a zero one."""
        if self.auth_configs is None or mode not in self.auth_configs:
            return AuthConfig()
        return self.auth_configs[mode]

    def set_auth_config(self, mode: AuthMode, auth_config: AuthConfig) -> None:
        """Register auth_config under mode, creating the map if needed."""
        if self.auth_configs is None:
            self.auth_configs = {}
        self.auth_configs[mode] = auth_config

    def has_auth_config(self, mode: AuthMode) -> bool:
        return self.auth_configs is not None and mode in self.auth_configs

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        auth_configs = None
        if self.auth_configs is not None:
            auth_configs = {
                enum_to_value(mode): auth_config.to_dict()
                for mode, auth_config in self.auth_configs.items()
            }

        return {
            'use_keyless': self.use_keyless_access,
            'strip_auth_data': self.strip_auth_data,
            'base_identity_provided_by': enum_to_value(self.base_identity_provided_by),
            'auth_configs': auth_configs,
            'use_standard_auth': self.use_standard_auth,
            'enable_jwt': self.enable_jwt,
            'jwt_source': self.jwt_source,
            'jwt_signing_method': self.jwt_signing_method,
            'jwt_identity_base_field': self.jwt_identity_base_field,
            'jwt_skip_kid': self.jwt_skip_kid,
            'jwt_scope_claim_name': self.jwt_scope_claim_name,
            'jwt_scope_to_policy_mapping': dict(self.jwt_scope_to_policy_mapping),
            'jwt_policy_field_name': self.jwt_policy_field_name,
            'jwt_client_base_field': self.jwt_client_id_base_field,
            'jwt_default_policies': list(self.jwt_default_policies),
            'jwt_issued_at_validation_skew': self.jwt_issued_at_validation_skew,
            'jwt_not_before_validation_skew': self.jwt_not_before_validation_skew,
            'jwt_expires_at_validation_skew': self.jwt_expires_at_validation_skew,
            'use_basic_auth': self.use_basic_auth,
            'basic_auth': self.basic_auth.to_dict(),
            'use_oauth2': self.use_oauth2,
            'oauth_meta': self.oauth2_meta.to_dict(),
            'notifications': self.notifications_details.to_dict(),
            'enable_signature_checking': self.enable_signature_checking,
            'hmac_allowed_algorithms': list(self.hmac_allowed_algorithms),
            'hmac_allowed_clock_skew': self.hmac_allowed_clock_skew,
        }

    @classmethod
    def from_dict(cls, data: Any) -> 'APIDefinition':
        """Create from dictionary."""
        data = expect_mapping(data, "$")

        auth_configs = None
        if data.get('auth_configs') is not None:
            raw_configs: Mapping[str, Any] = expect_mapping(data['auth_configs'], "auth_configs")
            auth_configs = {
                enum_from_value(AuthMode, key): AuthConfig.from_dict(value, f"auth_configs.{key}")
                for key, value in raw_configs.items()
            }

        return cls(
            use_keyless_access=get_value(data, 'use_keyless', False),
            strip_auth_data=get_value(data, 'strip_auth_data', False),
            base_identity_provided_by=enum_from_value(
                AuthTypeEnum, get_value(data, 'base_identity_provided_by', "")
            ),
            auth_configs=auth_configs,
            use_standard_auth=get_value(data, 'use_standard_auth', False),
            enable_jwt=get_value(data, 'enable_jwt', False),
            jwt_source=get_value(data, 'jwt_source', ""),
            jwt_signing_method=get_value(data, 'jwt_signing_method', ""),
            jwt_identity_base_field=get_value(data, 'jwt_identity_base_field', ""),
            jwt_skip_kid=get_value(data, 'jwt_skip_kid', False),
            jwt_scope_claim_name=get_value(data, 'jwt_scope_claim_name', ""),
            jwt_scope_to_policy_mapping=string_map(
                data.get('jwt_scope_to_policy_mapping'), "jwt_scope_to_policy_mapping"
            ),
            jwt_policy_field_name=get_value(data, 'jwt_policy_field_name', ""),
            jwt_client_id_base_field=get_value(data, 'jwt_client_base_field', ""),
            jwt_default_policies=expect_list(data.get('jwt_default_policies'), "jwt_default_policies"),
            jwt_issued_at_validation_skew=get_value(data, 'jwt_issued_at_validation_skew', 0),
            jwt_not_before_validation_skew=get_value(data, 'jwt_not_before_validation_skew', 0),
            jwt_expires_at_validation_skew=get_value(data, 'jwt_expires_at_validation_skew', 0),
            use_basic_auth=get_value(data, 'use_basic_auth', False),
            basic_auth=BasicAuthMeta.from_dict(data.get('basic_auth')),
            use_oauth2=get_value(data, 'use_oauth2', False),
            oauth2_meta=OAuth2Meta.from_dict(data.get('oauth_meta')),
            notifications_details=NotificationsManager.from_dict(data.get('notifications')),
            enable_signature_checking=get_value(data, 'enable_signature_checking', False),
            hmac_allowed_algorithms=expect_list(data.get('hmac_allowed_algorithms'), "hmac_allowed_algorithms"),
            hmac_allowed_clock_skew=get_value(data, 'hmac_allowed_clock_skew', 0.0),
        )
