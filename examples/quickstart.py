"""Credhash quickstart: hash, verify, upgrade."""

import hashlib

from credhash import Credentials

# 1. Create a client (sha256, 1000 iterations, 24-byte salt and key)
creds = Credentials()

# 2. Hash a password and persist the string verbatim
stored = creds.hash("S3cr3t!")
print(f"Stored hash: {stored}")

# 3. Verify at login time
print("right password:", creds.verify("S3cr3t!", stored))
print("wrong password:", creds.verify("wrong", stored))

# 4. Old unsalted MD5 digests still verify, and are flagged for upgrade
legacy = hashlib.md5(b"old-password").hexdigest()
if creds.verify("old-password", legacy) and creds.needs_rehash(legacy):
    legacy = creds.hash("old-password")
    print(f"Upgraded legacy digest: {legacy}")

# 5. One-time passwords / tokens
print("Temporary password:", creds.random_string(12, complex=True))
