"""Shared helpers for building canned HTTP responses."""
import json

import requests


def make_response(status_code=200, body=None, reason='OK'):
    """Build a requests.Response carrying body (a dict is JSON encoded)."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response.encoding = 'utf-8'
    if body is None:
        body = b''
    elif isinstance(body, (dict, list)):
        body = json.dumps(body).encode('utf-8')
    elif isinstance(body, str):
        body = body.encode('utf-8')
    response._content = body
    return response


def completion(*contents):
    return {"choices": [{"message": {"role": "assistant", "content": c}} for c in contents]}
