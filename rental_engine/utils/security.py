from werkzeug.security import generate_password_hash, check_password_hash


def hash_password(password: str) -> str:
    return generate_password_hash(password)


def verify_password(password: str, hashed: str) -> bool:
    """True if `password` produces `hashed`; malformed hashes never match."""
    if password is None or not hashed:
        return False
    try:
        return check_password_hash(hashed, password)
    except ValueError:
        return False
