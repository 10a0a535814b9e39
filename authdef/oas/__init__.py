# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Package oas holds the modern, nested authentication schema.

Every structure can be filled from a legacy APIDefinition (`fill`) and
written back into one (`extract_to`):

- Authentication: enable flag, base identity provider and the five modes
- Token, JWT, Basic, OAuth, HMAC: one structure per authentication mode
- AuthSources: header/param/cookie credential locations, inlined into each mode
- Signature, ExtractCredentialsFromBody, Notifications: optional sub-structures

Optional structures that come out of `fill` with only zero values are
dropped (see `omit.should_omit`); the header source and JWT never are.
"""

from .omit import is_zero, should_omit, omit_if_zero
from .auth_sources import AuthSource, AuthSources, HeaderAuthSource
from .token import Signature, Token
from .jwt import JWT
from .basic import Basic, ExtractCredentialsFromBody
from .oauth import Notifications, OAuth
from .hmac import HMAC
from .authentication import Authentication

__all__ = [
    # Omission test
    'is_zero',
    'should_omit',
    'omit_if_zero',

    # Auth sources
    'AuthSource',
    'AuthSources',
    'HeaderAuthSource',

    # Modes
    'Token',
    'Signature',
    'JWT',
    'Basic',
    'ExtractCredentialsFromBody',
    'OAuth',
    'Notifications',
    'HMAC',

    # Top level
    'Authentication',
]
