"""
Shared fixtures for authdef tests.
"""

import pytest

from authdef.apidef import (
    APIDefinition,
    AccessRequestType,
    AuthConfig,
    AuthMode,
    AuthTypeEnum,
    AuthorizeRequestType,
    BasicAuthMeta,
    NotificationsManager,
    OAuth2Meta,
    SignatureConfig,
)


def build_full_legacy_definition() -> APIDefinition:
    """Legacy definition with every mode and every optional structure set."""
    return APIDefinition(
        use_keyless_access=False,
        strip_auth_data=True,
        base_identity_provided_by=AuthTypeEnum.JWT_CLAIM,
        auth_configs={
            AuthMode.AUTH_TOKEN: AuthConfig(
                use_param=True,
                param_name="access_token",
                use_cookie=True,
                cookie_name="session",
                auth_header_name="Authorization",
                use_certificate=True,
                validate_signature=True,
                signature=SignatureConfig(
                    algorithm="MasherySHA256",
                    header="X-Signature",
                    secret="sig-secret",
                    allowed_clock_skew=30,
                    error_code=401,
                    error_message="bad signature",
                ),
            ),
            AuthMode.JWT: AuthConfig(
                auth_header_name="X-JWT",
                use_cookie=True,
                cookie_name="jwt",
            ),
            AuthMode.BASIC: AuthConfig(
                auth_header_name="Authorization",
                use_param=True,
                param_name="basic",
            ),
            AuthMode.OAUTH: AuthConfig(auth_header_name="X-OAuth"),
            AuthMode.HMAC: AuthConfig(
                auth_header_name="X-HMAC",
                use_param=True,
                param_name="sig",
                use_cookie=True,
                cookie_name="hmac",
            ),
        },
        use_standard_auth=True,
        enable_jwt=True,
        jwt_source="https://idp.example.com/jwks",
        jwt_signing_method="rsa",
        jwt_identity_base_field="sub",
        jwt_skip_kid=True,
        jwt_scope_claim_name="scope",
        jwt_scope_to_policy_mapping={"read": "policy-read", "write": "policy-write"},
        jwt_policy_field_name="pol",
        jwt_client_id_base_field="azp",
        jwt_default_policies=["default-a", "default-b"],
        jwt_issued_at_validation_skew=5,
        jwt_not_before_validation_skew=6,
        jwt_expires_at_validation_skew=7,
        use_basic_auth=True,
        basic_auth=BasicAuthMeta(
            disable_caching=True,
            cache_ttl=60,
            extract_from_body=True,
            body_user_regexp="<User>(.*)</User>",
            body_password_regexp="<Password>(.*)</Password>",
        ),
        use_oauth2=True,
        oauth2_meta=OAuth2Meta(
            allowed_access_types=[AccessRequestType.AUTHORIZATION_CODE, AccessRequestType.REFRESH_TOKEN],
            allowed_authorize_types=[AuthorizeRequestType.CODE, AuthorizeRequestType.TOKEN],
            authorize_login_redirect="https://login.example.com",
        ),
        notifications_details=NotificationsManager(
            shared_secret="notify-secret",
            oauth_key_change_url="https://hooks.example.com/keys",
        ),
        enable_signature_checking=True,
        hmac_allowed_algorithms=["hmac-sha256", "hmac-sha512"],
        hmac_allowed_clock_skew=1500.5,
    )


@pytest.fixture
def full_legacy():
    """A fully populated legacy definition."""
    return build_full_legacy_definition()
