"""Uniform JSON envelopes for every API response."""
from flask import jsonify


def send_success(message, data=None, status_code=200):
    body = {"message": message, "status": "success"}
    if data is not None:
        body["data"] = data
    return jsonify(body), status_code


def send_error(message, error, status_code=500):
    return jsonify({"message": message, "status": "error", "error": error}), status_code
