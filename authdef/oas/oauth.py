# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
OAuth2 authentication mode and its key rotation notifications.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..apidef.types import (
    APIDefinition, AccessRequestType, AuthConfig, AuthMode, AuthorizeRequestType,
    NotificationsManager,
)
from ..util.encoding import (
    enum_from_value, enum_to_value, expect_list, expect_mapping, get_value, optional_object,
)
from .auth_sources import AuthSources
from .omit import omit_if_zero


@dataclass
class Notifications:
    """Where to notify when an OAuth key changes."""
    shared_secret: str = ""
    on_key_change_url: str = ""

    def fill(self, notifications: NotificationsManager) -> None:
        self.shared_secret = notifications.shared_secret
        self.on_key_change_url = notifications.oauth_key_change_url

    def extract_to(self, notifications: NotificationsManager) -> None:
        notifications.shared_secret = self.shared_secret
        notifications.oauth_key_change_url = self.on_key_change_url

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        result = {}

        if self.shared_secret:
            result['sharedSecret'] = self.shared_secret
        if self.on_key_change_url:
            result['onKeyChangeURL'] = self.on_key_change_url

        return result

    @classmethod
    def from_dict(cls, data: Any, path: str = "notifications") -> 'Notifications':
        """Create from dictionary."""
        data = expect_mapping(data, path)
        return cls(
            shared_secret=get_value(data, 'sharedSecret', ""),
            on_key_change_url=get_value(data, 'onKeyChangeURL', ""),
        )


@dataclass
class OAuth:
    """
    OAuth2 authentication mode.

    Legacy origin: `use_oauth2`, `auth_configs["oauth"]`, `oauth_meta` and
    `notifications`.
    """
    enabled: bool = False
    auth_sources: AuthSources = field(default_factory=AuthSources)
    allowed_access_types: List[AccessRequestType] = field(default_factory=list)
    allowed_authorize_types: List[AuthorizeRequestType] = field(default_factory=list)
    auth_login_redirect: str = ""
    notifications: Optional[Notifications] = None

    def fill(self, api: APIDefinition) -> None:
        self.enabled = api.use_oauth2
        self.auth_sources.fill(api.auth_config(AuthMode.OAUTH))

        self.allowed_access_types = list(api.oauth2_meta.allowed_access_types)
        self.allowed_authorize_types = list(api.oauth2_meta.allowed_authorize_types)
        self.auth_login_redirect = api.oauth2_meta.authorize_login_redirect

        if self.notifications is None:
            self.notifications = Notifications()
        self.notifications.fill(api.notifications_details)
        self.notifications = omit_if_zero(self.notifications)

    def extract_to(self, api: APIDefinition) -> None:
        api.use_oauth2 = self.enabled

        auth_config = AuthConfig()
        self.auth_sources.extract_to(auth_config)
        api.set_auth_config(AuthMode.OAUTH, auth_config)

        api.oauth2_meta.allowed_access_types = list(self.allowed_access_types)
        api.oauth2_meta.allowed_authorize_types = list(self.allowed_authorize_types)
        api.oauth2_meta.authorize_login_redirect = self.auth_login_redirect

        if self.notifications is not None:
            self.notifications.extract_to(api.notifications_details)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        result = {'enabled': self.enabled}
        result.update(self.auth_sources.to_dict())

        if self.allowed_access_types:
            result['allowedAccessTypes'] = [enum_to_value(t) for t in self.allowed_access_types]
        if self.allowed_authorize_types:
            result['allowedAuthorizeTypes'] = [enum_to_value(t) for t in self.allowed_authorize_types]
        if self.auth_login_redirect:
            result['authLoginRedirect'] = self.auth_login_redirect
        if self.notifications is not None:
            result['notifications'] = self.notifications.to_dict()

        return result

    @classmethod
    def from_dict(cls, data: Any, path: str = "oauth") -> 'OAuth':
        """Create from dictionary."""
        data = expect_mapping(data, path)
        access_types = expect_list(data.get('allowedAccessTypes'), f"{path}.allowedAccessTypes")
        authorize_types = expect_list(data.get('allowedAuthorizeTypes'), f"{path}.allowedAuthorizeTypes")
        notifications = optional_object(data.get('notifications'), f"{path}.notifications")

        return cls(
            enabled=get_value(data, 'enabled', False),
            auth_sources=AuthSources.from_dict(data, path),
            allowed_access_types=[enum_from_value(AccessRequestType, t) for t in access_types],
            allowed_authorize_types=[enum_from_value(AuthorizeRequestType, t) for t in authorize_types],
            auth_login_redirect=get_value(data, 'authLoginRedirect', ""),
            notifications=Notifications.from_dict(notifications, f"{path}.notifications")
            if notifications is not None else None,
        )
