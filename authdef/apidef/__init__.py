# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Package apidef holds the legacy, flat authentication schema.

The legacy definition keeps one enable flag per authentication mode, a map
from mode key to per-mode auth config, and the mode-specific settings in
separate top-level fields.
"""

from .types import (
    AuthTypeEnum,
    AuthMode,
    AccessRequestType,
    AuthorizeRequestType,
    SignatureConfig,
    AuthConfig,
    BasicAuthMeta,
    OAuth2Meta,
    NotificationsManager,
    APIDefinition,
)

__all__ = [
    'AuthTypeEnum',
    'AuthMode',
    'AccessRequestType',
    'AuthorizeRequestType',
    'SignatureConfig',
    'AuthConfig',
    'BasicAuthMeta',
    'OAuth2Meta',
    'NotificationsManager',
    'APIDefinition',
]
