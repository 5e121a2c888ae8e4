"""Print a long-lived bearer token for a user id.

Usage:
    python create_token.py <user id> [days]
"""
import sys

from resource_pack_api.app.core.security import create_access_token

if __name__ == "__main__":
    if len(sys.argv) < 2:
        sys.exit(__doc__)
    days = int(sys.argv[2]) if len(sys.argv) > 2 else 365
    print(create_access_token({"sub": sys.argv[1]}, expires_delta=days * 24 * 60 * 60))
