from functools import wraps

from flask import jsonify, session


def login_required(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        if "username" not in session:
            return jsonify(ok=False, message="Please login first"), 401
        return fn(*args, **kwargs)

    return wrapper


def role_required(*roles):
    def deco(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            if "username" not in session:
                return jsonify(ok=False, message="Please login first"), 401
            if session.get("role") not in roles:
                return jsonify(ok=False, message="Insufficient permission"), 403
            return fn(*args, **kwargs)

        return wrapper

    return deco
