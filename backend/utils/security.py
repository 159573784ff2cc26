from werkzeug.security import check_password_hash, generate_password_hash


def hash_password(password: str) -> str:
    return generate_password_hash(password)


def verify_password(password: str, hashed: str) -> bool:
    """Check ``password`` against a stored hash; unusable hashes never match."""
    if not hashed:
        return False
    try:
        return check_password_hash(hashed, password)
    except ValueError:
        return False
