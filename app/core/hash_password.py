"""Print a bcrypt hash for seeding user rows by hand.

    python -m app.core.hash_password [password]

Prompts for the password when none is given. Uses the same cost factor as
registration, so the hash is accepted by /login.
"""
import sys
from getpass import getpass

from app.core.security import hash_password


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    password = argv[0] if argv else getpass("Password: ")
    if not password:
        print("Password must not be empty", file=sys.stderr)
        return 1

    print(hash_password(password))
    return 0


if __name__ == "__main__":
    sys.exit(main())
