"""Print a long‑lived access token for an account id.

Tokens are only valid against a running process that holds the account
(the store is in memory), so this is meant for the seeded demo data:

    python create_token.py 1
"""
import argparse

from bliss_api.app.core.security import create_access_token


def main() -> None:
    ap = argparse.ArgumentParser(description="Issue an API token for an account id.")
    ap.add_argument("user_id", type=int, help="Account id (1 is 'miguel' in the demo data)")
    ap.add_argument("--days", type=int, default=365, help="Token lifetime in days")
    args = ap.parse_args()
    print(create_access_token({"sub": str(args.user_id)}, expires_delta=args.days * 24 * 60 * 60))


if __name__ == "__main__":
    main()
