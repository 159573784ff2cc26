from flask import jsonify

from backend.utils.errors import AccessDenied, InvalidToken


def init_jwt(jwt):
    """Shape flask-jwt-extended rejections like the rest of the API.

    Requests without a bearer token are answered with 401; tokens that are
    malformed, badly signed or expired with 403.
    """

    @jwt.unauthorized_loader
    def missing_token(_reason):
        return jsonify(error=AccessDenied.message), AccessDenied.status_code

    @jwt.invalid_token_loader
    def invalid_token(_reason):
        return jsonify(error=InvalidToken.message), InvalidToken.status_code

    @jwt.expired_token_loader
    def expired_token(_jwt_header, _jwt_payload):
        return jsonify(error=InvalidToken.message), InvalidToken.status_code

    return jwt
