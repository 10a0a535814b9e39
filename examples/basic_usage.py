"""
Basic authdef usage example.

This example demonstrates the fundamental conversions:
- Filling the modern authentication section from a legacy definition
- Rendering it as a document
- Writing it back into a legacy definition
"""

import json

from authdef import APIDefinition, AuthConfig, AuthMode, to_legacy, to_oas


def basic_example():
    """Demonstrate basic authdef usage"""
    print("Basic authdef Example")
    print("=" * 30)

    # 1. A legacy definition with token and JWT auth
    api = APIDefinition(
        use_standard_auth=True,
        enable_jwt=True,
        jwt_signing_method="rsa",
        auth_configs={
            AuthMode.AUTH_TOKEN: AuthConfig(use_param=True, param_name="token"),
            AuthMode.JWT: AuthConfig(),
        },
    )

    # 2. Legacy to modern
    auth = to_oas(api)
    print("✓ Converted legacy definition")
    print(f"  - Modes: {', '.join(str(mode) for mode in auth.modes())}")
    print(json.dumps(auth.to_dict(), indent=2))
    print()

    # 3. Modern back to legacy
    legacy = to_legacy(auth)
    print("✓ Converted back to legacy")
    print(f"  - use_standard_auth: {legacy.use_standard_auth}")
    print(f"  - auth_configs keys: {', '.join(str(mode) for mode in legacy.auth_configs)}")


if __name__ == "__main__":
    basic_example()
