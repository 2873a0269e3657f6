"""Generate a stored password hash from the terminal.

Parameters come from CREDHASH_* environment variables, e.g.
``CREDHASH_ITERATIONS=20000 python examples/mkhash.py``.
"""

import getpass

from credhash import Credentials, HashingConfig


def main() -> None:
    creds = Credentials(HashingConfig.from_env())
    password = getpass.getpass("Password: ")
    confirm = getpass.getpass("Confirm password: ")
    if password != confirm:
        print("Passwords do not match.")
        raise SystemExit(2)
    print(creds.hash(password))


if __name__ == "__main__":
    main()
