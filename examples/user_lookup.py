"""
Chaining lookups that may come back empty.

Run: python examples/user_lookup.py
"""
from pelouse import maybe

USERS = {1: {"name": "John"}}
PROFILES = {"John": {"profile": "Developer"}}


def find_user(uid):
    return maybe(USERS.get(uid))


def get_user_profile(user):
    return maybe(PROFILES.get(user["name"]))


def main():
    fallback = {"profile": "Guest"}
    for uid in (1, 2):
        profile = maybe(uid).flat_map(find_user).flat_map(get_user_profile).get_or_else(fallback)
        print(f"user {uid} =>", profile)   # 1: Developer, 2: Guest

    maybe(USERS.get(1)).map(lambda u: u["name"].upper()).for_each(print)  # JOHN


if __name__ == "__main__":
    main()
