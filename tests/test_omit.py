"""
Tests for the omission test shared by all optional structures.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

import pytest

from authdef.apidef import AuthTypeEnum
from authdef.oas import (
    AuthSource,
    AuthSources,
    ExtractCredentialsFromBody,
    HeaderAuthSource,
    Notifications,
    Signature,
    Token,
    is_zero,
    omit_if_zero,
    should_omit,
)


@dataclass
class _Inner:
    flag: bool = False


@dataclass
class _Outer:
    name: str = ""
    count: int = 0
    ratio: float = 0.0
    tags: List[str] = field(default_factory=list)
    labels: Dict[str, str] = field(default_factory=dict)
    inner: _Inner = field(default_factory=_Inner)
    maybe: Optional[_Inner] = None


class TestIsZero:
    """Test the zero-value predicate"""

    @pytest.mark.parametrize("value", [None, False, 0, 0.0, "", [], {}, (), set(), AuthTypeEnum.NONE])
    def test_zero_scalars_and_containers(self, value):
        assert is_zero(value)

    @pytest.mark.parametrize("value", [True, 1, -1, 0.5, "x", ["a"], {"k": "v"}, AuthTypeEnum.JWT_CLAIM])
    def test_non_zero_scalars_and_containers(self, value):
        assert not is_zero(value)

    def test_new_dataclass_is_zero(self):
        assert is_zero(_Outer())

    def test_any_field_makes_dataclass_non_zero(self):
        assert not is_zero(_Outer(name="n"))
        assert not is_zero(_Outer(count=1))
        assert not is_zero(_Outer(ratio=0.1))
        assert not is_zero(_Outer(tags=["t"]))
        assert not is_zero(_Outer(labels={"a": "b"}))

    def test_nested_dataclasses_are_checked_recursively(self):
        assert not is_zero(_Outer(inner=_Inner(flag=True)))
        assert is_zero(_Outer(maybe=_Inner()))
        assert not is_zero(_Outer(maybe=_Inner(flag=True)))

    def test_dataclass_type_is_not_zero(self):
        assert not is_zero(_Outer)


class TestShouldOmit:
    """Test omission of the concrete optional structures"""

    def test_auth_source_default_is_omitted(self):
        assert should_omit(AuthSource())

    def test_auth_source_enabled_without_name_is_kept(self):
        assert not should_omit(AuthSource(enabled=True))

    def test_auth_source_name_without_enabled_is_kept(self):
        assert not should_omit(AuthSource(name="token"))

    def test_signature(self):
        assert should_omit(Signature())
        assert not should_omit(Signature(allowed_clock_skew=1))
        assert not should_omit(Signature(error_message="nope"))

    def test_extract_credentials_from_body(self):
        assert should_omit(ExtractCredentialsFromBody())
        assert not should_omit(ExtractCredentialsFromBody(user_regexp="<User>(.*)</User>"))

    def test_notifications(self):
        assert should_omit(Notifications())
        assert not should_omit(Notifications(on_key_change_url="https://hooks.example.com"))

    def test_token_with_only_default_header_is_zero(self):
        assert should_omit(Token())
        assert should_omit(Token(auth_sources=AuthSources(header=HeaderAuthSource(""))))

    def test_token_with_named_header_is_kept(self):
        assert not should_omit(Token(auth_sources=AuthSources(header=HeaderAuthSource("X-Key"))))

    def test_omit_if_zero(self):
        source = AuthSource(enabled=True, name="t")
        assert omit_if_zero(source) is source
        assert omit_if_zero(AuthSource()) is None
        assert omit_if_zero(None) is None
