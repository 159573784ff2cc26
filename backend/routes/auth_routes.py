from flask import Blueprint, jsonify, request
from flask_jwt_extended import get_jwt_identity, jwt_required

from backend.models.user_model import User
from backend.utils.db import serialize_doc, to_object_id, users_collection
from backend.utils.errors import DuplicateEmail, InvalidCredentials, NoChange, NotFound, ValidationError
from backend.utils.security import hash_password, verify_password
from backend.utils.tokens import issue_token

auth_bp = Blueprint("auth", __name__)


def form_payload():
    """Request body, unwrapping the ``formData`` envelope the web client sends."""
    payload = request.get_json(silent=True) or {}
    if isinstance(payload.get("formData"), dict):
        payload = payload["formData"]
    return payload


@auth_bp.post("/signup")
def signup():
    payload = form_payload()
    name = payload.get("name")
    email = payload.get("email")
    password = payload.get("password")
    if not name or not email or not password:
        raise ValidationError("Please provide name, email, and password.")

    users = users_collection()
    if users.find_one({"email": email}):
        raise DuplicateEmail()

    user = User(name=name, email=email, password=hash_password(password))
    result = users.insert_one(user.to_doc())
    user.id = str(result.inserted_id)

    return jsonify(user=user.public(), token=issue_token(user.claims())), 201


@auth_bp.post("/login")
def login():
    payload = form_payload()
    email = payload.get("email")
    password = payload.get("password")
    if not email or not password:
        raise ValidationError("Please provide email and password.")

    doc = users_collection().find_one({"email": email})
    # Same error whether the email or the password was wrong
    if doc is None or not verify_password(password, doc.get("password")):
        raise InvalidCredentials()

    user = User.from_doc(doc)
    return jsonify(user=user.public(), token=issue_token(user.claims())), 200


@auth_bp.post("/logout")
def logout():
    # Tokens are stateless; the client discards its copy.
    return jsonify(message="Logout successful."), 200


@auth_bp.get("/profile")
@jwt_required()
def get_profile():
    user_id = to_object_id(get_jwt_identity())
    doc = users_collection().find_one({"_id": user_id}, {"password": 0})
    if doc is None:
        raise NotFound("User not found.")
    return jsonify(user=serialize_doc(doc)), 200


@auth_bp.patch("/profile")
@jwt_required()
def update_profile():
    user_id = to_object_id(get_jwt_identity())
    payload = request.get_json(silent=True) or {}
    name = payload.get("name")
    password = payload.get("password")
    if not name and not password:
        raise ValidationError("Please provide name or password to update.")

    updates = {}
    if name:
        updates["name"] = name
    if password:
        updates["password"] = hash_password(password)

    users = users_collection()
    result = users.update_one({"_id": user_id}, {"$set": updates})
    if result.matched_count == 0:
        raise NotFound("User not found.")
    if result.modified_count == 0:
        raise NoChange()

    doc = users.find_one({"_id": user_id}, {"password": 0})
    return jsonify(message="Profile updated successfully.", user=serialize_doc(doc)), 200
