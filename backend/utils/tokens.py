"""Bearer token issuing and verification.

Tokens are flask-jwt-extended access tokens signed with ``JWT_SECRET_KEY``.
The subject is the user id; name and email ride along as extra claims.
Nothing is stored server side, so a token is valid exactly as long as its
signature checks out and ``exp`` has not been reached.
"""
from flask_jwt_extended import create_access_token, decode_token
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError

from backend.utils.errors import ExpiredToken, InvalidToken


def issue_token(claims):
    """Sign a token for ``{"subjectId", "name", "email"}``, expiring after one hour."""
    return create_access_token(
        identity=str(claims["subjectId"]),
        additional_claims={"name": claims.get("name"), "email": claims.get("email")},
    )


def verify_token(token):
    if not token:
        raise InvalidToken()
    try:
        decoded = decode_token(token)
    except ExpiredSignatureError as exc:
        raise ExpiredToken() from exc
    except (InvalidTokenError, JWTExtendedException) as exc:
        raise InvalidToken() from exc
    return {
        "subjectId": decoded["sub"],
        "name": decoded.get("name"),
        "email": decoded.get("email"),
        "iat": decoded.get("iat"),
        "exp": decoded.get("exp"),
    }
