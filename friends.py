import json

from config_store import StorageError

USERS_KEY = "Users"


# =========================
# REGISTRY
# =========================

def dump_friends(friends):
    return json.dumps(friends, separators=(",", ":"))


def load_friends(doc):
    raw = doc.get(USERS_KEY)
    if not raw:
        return {}
    try:
        friends = json.loads(raw)
    except ValueError as e:
        raise StorageError(f"'{USERS_KEY}' is not valid JSON: {e}") from e
    if not isinstance(friends, dict) or not all(isinstance(v, str) for v in friends.values()):
        raise StorageError(f"'{USERS_KEY}' must map friend names to passkeys")
    return friends


def save_friends(doc, friends):
    doc.set(USERS_KEY, dump_friends(friends))


def add_or_update(doc, name, passkey):
    friends = load_friends(doc)
    existed = name in friends
    friends[name] = passkey
    save_friends(doc, friends)
    return existed


def lookup(doc, name):
    return load_friends(doc).get(name)


def remove(doc, name):
    friends = load_friends(doc)
    if name not in friends:
        return False
    del friends[name]
    save_friends(doc, friends)
    return True

