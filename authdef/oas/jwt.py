# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
JWT authentication mode.

Unlike the other modes, JWT is kept whenever the legacy definition has a
`jwt` auth config entry, even if every field is zero.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..apidef.types import APIDefinition, AuthConfig, AuthMode
from ..util.encoding import expect_list, expect_mapping, get_value, string_map
from .auth_sources import AuthSources


@dataclass
class JWT:
    """JSON Web Token authentication mode."""
    enabled: bool = False
    auth_sources: AuthSources = field(default_factory=AuthSources)
    source: str = ""
    signing_method: str = ""
    identity_base_field: str = ""
    skip_kid: bool = False
    scope_claim_name: str = ""
    scope_to_policy_mapping: Dict[str, str] = field(default_factory=dict)
    policy_field_name: str = ""
    client_base_field: str = ""
    default_policies: List[str] = field(default_factory=list)
    issued_at_validation_skew: int = 0
    not_before_validation_skew: int = 0
    expires_at_validation_skew: int = 0

    def fill(self, api: APIDefinition) -> None:
        self.auth_sources.fill(api.auth_config(AuthMode.JWT))

        self.enabled = api.enable_jwt
        self.source = api.jwt_source
        self.signing_method = api.jwt_signing_method
        self.identity_base_field = api.jwt_identity_base_field
        self.skip_kid = api.jwt_skip_kid
        self.scope_claim_name = api.jwt_scope_claim_name
        self.scope_to_policy_mapping = dict(api.jwt_scope_to_policy_mapping)
        self.policy_field_name = api.jwt_policy_field_name
        self.client_base_field = api.jwt_client_id_base_field
        self.default_policies = list(api.jwt_default_policies)
        self.issued_at_validation_skew = api.jwt_issued_at_validation_skew
        self.not_before_validation_skew = api.jwt_not_before_validation_skew
        self.expires_at_validation_skew = api.jwt_expires_at_validation_skew

    def extract_to(self, api: APIDefinition) -> None:
        auth_config = AuthConfig()
        self.auth_sources.extract_to(auth_config)
        api.set_auth_config(AuthMode.JWT, auth_config)

        api.enable_jwt = self.enabled
        api.jwt_source = self.source
        api.jwt_signing_method = self.signing_method
        api.jwt_identity_base_field = self.identity_base_field
        api.jwt_skip_kid = self.skip_kid
        api.jwt_scope_claim_name = self.scope_claim_name
        api.jwt_scope_to_policy_mapping = dict(self.scope_to_policy_mapping)
        api.jwt_policy_field_name = self.policy_field_name
        api.jwt_client_id_base_field = self.client_base_field
        api.jwt_default_policies = list(self.default_policies)
        api.jwt_issued_at_validation_skew = self.issued_at_validation_skew
        api.jwt_not_before_validation_skew = self.not_before_validation_skew
        api.jwt_expires_at_validation_skew = self.expires_at_validation_skew

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        result = {'enabled': self.enabled}
        result.update(self.auth_sources.to_dict())

        if self.source:
            result['source'] = self.source
        if self.signing_method:
            result['signingMethod'] = self.signing_method
        if self.identity_base_field:
            result['identityBaseField'] = self.identity_base_field
        if self.skip_kid:
            result['skipKid'] = self.skip_kid
        if self.scope_claim_name:
            result['scopeClaimName'] = self.scope_claim_name
        if self.scope_to_policy_mapping:
            result['scopeToPolicyMapping'] = dict(self.scope_to_policy_mapping)
        if self.policy_field_name:
            result['policyFieldName'] = self.policy_field_name
        if self.client_base_field:
            result['clientBaseField'] = self.client_base_field
        if self.default_policies:
            result['defaultPolicies'] = list(self.default_policies)
        if self.issued_at_validation_skew:
            result['issuedAtValidationSkew'] = self.issued_at_validation_skew
        if self.not_before_validation_skew:
            result['notBeforeValidationSkew'] = self.not_before_validation_skew
        if self.expires_at_validation_skew:
            result['expiresAtValidationSkew'] = self.expires_at_validation_skew

        return result

    @classmethod
    def from_dict(cls, data: Any, path: str = "jwt") -> 'JWT':
        """Create from dictionary."""
        data = expect_mapping(data, path)
        return cls(
            enabled=get_value(data, 'enabled', False),
            auth_sources=AuthSources.from_dict(data, path),
            source=get_value(data, 'source', ""),
            signing_method=get_value(data, 'signingMethod', ""),
            identity_base_field=get_value(data, 'identityBaseField', ""),
            skip_kid=get_value(data, 'skipKid', False),
            scope_claim_name=get_value(data, 'scopeClaimName', ""),
            scope_to_policy_mapping=string_map(data.get('scopeToPolicyMapping'), f"{path}.scopeToPolicyMapping"),
            policy_field_name=get_value(data, 'policyFieldName', ""),
            client_base_field=get_value(data, 'clientBaseField', ""),
            default_policies=expect_list(data.get('defaultPolicies'), f"{path}.defaultPolicies"),
            issued_at_validation_skew=get_value(data, 'issuedAtValidationSkew', 0),
            not_before_validation_skew=get_value(data, 'notBeforeValidationSkew', 0),
            expires_at_validation_skew=get_value(data, 'expiresAtValidationSkew', 0),
        )
