#!/usr/bin/env python3
"""Create a test JWT token for API testing."""

import sys
import uuid

from serenity_pulse.api.auth.tokens import issue_app_token


def create_test_token(user_id: str | None = None, email: str = "test@example.com"):
    """Create a test JWT token.

    The ``uid`` must belong to an existing row in ``users`` or the API answers 401;
    run create_test_data.py first if you need one.
    """
    test_user_id = user_id or str(uuid.UUID('11111111-1111-1111-1111-111111111111'))
    token = issue_app_token(test_user_id, email)

    with open('test_token.txt', 'w') as f:
        f.write(token)

    print(f"✅ Test token created!")
    print(f"User ID: {test_user_id}")
    print(f"Email: {email}")
    print(f"Token saved to: test_token.txt")
    print(f"\nToken: {token}")

    return token, test_user_id

if __name__ == "__main__":
    token, user_id = create_test_token(sys.argv[1] if len(sys.argv) > 1 else None)
