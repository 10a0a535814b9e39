"""
Tests for the dictionary codecs of both schemas.
"""

import pytest

from authdef import DecodeError, to_oas
from authdef.apidef import APIDefinition, AccessRequestType, AuthConfig, AuthMode, AuthTypeEnum
from authdef.oas import (
    Authentication,
    AuthSource,
    AuthSources,
    HeaderAuthSource,
    Signature,
    Token,
)


class TestModernCodec:
    """Test the camelCase modern document codec"""

    def test_minimal_document(self):
        assert Authentication().to_dict() == {'enabled': False}

    def test_auth_sources_are_inlined(self):
        token = Token(
            enabled=True,
            auth_sources=AuthSources(
                header=HeaderAuthSource(""),
                param=AuthSource(enabled=True, name="token"),
            ),
        )

        assert Authentication(enabled=True, token=token).to_dict() == {
            'enabled': True,
            'token': {
                'enabled': True,
                'header': {'name': ''},
                'param': {'enabled': True, 'name': 'token'},
            },
        }

    def test_zero_fields_are_omitted_but_enabled_is_not(self):
        token = Token(signature=Signature(enabled=False, secret="s"))

        assert token.to_dict() == {
            'enabled': False,
            'header': {'name': ''},
            'signatureValidation': {'enabled': False, 'secret': 's'},
        }

    def test_full_document_keys(self, full_legacy):
        document = to_oas(full_legacy).to_dict()

        assert document['stripAuthorizationData'] is True
        assert document['baseIdentityProvider'] == "jwt_claim"
        assert document['token']['enableClientCertificate'] is True
        assert document['token']['signatureValidation']['allowedClockSkew'] == 30
        assert document['jwt']['scopeToPolicyMapping'] == {"read": "policy-read", "write": "policy-write"}
        assert document['basic']['cacheTTL'] == 60
        assert document['basic']['extractCredentialsFromBody']['userRegexp'] == "<User>(.*)</User>"
        assert document['oauth']['allowedAccessTypes'] == ["authorization_code", "refresh_token"]
        assert document['oauth']['notifications'] == {
            'sharedSecret': "notify-secret",
            'onKeyChangeURL': "https://hooks.example.com/keys",
        }
        assert document['hmac']['allowedClockSkew'] == 1500.5

    def test_decode_reproduces_value(self, full_legacy):
        auth = to_oas(full_legacy)

        assert Authentication.from_dict(auth.to_dict()) == auth

    def test_decode_keeps_unknown_enum_values(self):
        auth = Authentication.from_dict({
            'enabled': True,
            'baseIdentityProvider': "custom_provider",
            'oauth': {'enabled': True, 'header': {'name': ''}, 'allowedAccessTypes': ["password", "device_code"]},
        })

        assert auth.base_identity_provider == "custom_provider"
        assert auth.oauth.allowed_access_types == [AccessRequestType.PASSWORD, "device_code"]

    def test_decode_missing_header_defaults_to_empty_name(self):
        auth = Authentication.from_dict({'enabled': True, 'hmac': {'enabled': True}})

        assert auth.hmac.auth_sources.header == HeaderAuthSource("")

    def test_decode_treats_null_as_missing(self):
        auth = Authentication.from_dict({
            'enabled': None,
            'stripAuthorizationData': None,
            'baseIdentityProvider': None,
            'token': {'enabled': None, 'header': {'name': None}, 'param': {'enabled': True, 'name': None}},
        })

        assert auth.enabled is False
        assert auth.strip_authorization_data is False
        assert auth.base_identity_provider is AuthTypeEnum.NONE
        assert auth.token.enabled is False
        assert auth.token.auth_sources.header == HeaderAuthSource("")
        assert auth.token.auth_sources.param == AuthSource(enabled=True, name="")

    def test_decode_rejects_wrong_shape(self):
        with pytest.raises(DecodeError) as exc_info:
            Authentication.from_dict({'enabled': True, 'token': ["not", "an", "object"]})

        assert exc_info.value.path == "authentication.token"
        assert exc_info.value.to_dict()['error'] == "decode_failed"


class TestLegacyCodec:
    """Test the snake_case legacy document codec"""

    def test_empty_document_gives_defaults(self):
        assert APIDefinition.from_dict({}) == APIDefinition()

    def test_absent_auth_configs_encode_as_null(self):
        assert APIDefinition().to_dict()['auth_configs'] is None

    def test_decode_auth_configs(self):
        api = APIDefinition.from_dict({
            'use_keyless': False,
            'base_identity_provided_by': "auth_token",
            'auth_configs': {
                'authToken': {'use_param': True, 'param_name': 'token'},
                'coprocess': {'auth_header_name': 'X-Plugin'},
            },
        })

        assert api.base_identity_provided_by is AuthTypeEnum.AUTH_TOKEN
        assert api.auth_configs[AuthMode.AUTH_TOKEN] == AuthConfig(use_param=True, param_name="token")
        assert api.auth_configs["coprocess"].auth_header_name == "X-Plugin"

    def test_decode_reproduces_value(self, full_legacy):
        assert APIDefinition.from_dict(full_legacy.to_dict()) == full_legacy

    def test_decode_treats_null_as_missing(self):
        api = APIDefinition.from_dict({
            'use_keyless': None,
            'base_identity_provided_by': None,
            'hmac_allowed_clock_skew': None,
            'auth_configs': {'jwt': {'auth_header_name': None}},
        })

        assert api.use_keyless_access is False
        assert api.base_identity_provided_by is AuthTypeEnum.NONE
        assert api.hmac_allowed_clock_skew == 0.0
        assert api.auth_configs == {AuthMode.JWT: AuthConfig()}

    def test_legacy_key_names(self, full_legacy):
        document = full_legacy.to_dict()

        assert document['use_keyless'] is False
        assert document['jwt_client_base_field'] == "azp"
        assert document['oauth_meta']['auth_login_redirect'] == "https://login.example.com"
        assert document['notifications']['oauth_on_keychange_url'] == "https://hooks.example.com/keys"
        assert document['auth_configs']['authToken']['signature']['error_code'] == 401

    def test_decode_rejects_wrong_shape(self):
        with pytest.raises(DecodeError):
            APIDefinition.from_dict({'hmac_allowed_algorithms': "hmac-sha256"})
