from __future__ import annotations

import logging
from functools import wraps
from typing import Optional

from flask import g, request

from ..core.constants import BEARER_PREFIX
from ..core.exceptions import InvalidTokenError, UnauthenticatedError
from .tokens import TokenService, TokenSubject

logger = logging.getLogger(__name__)

NO_TOKEN_MESSAGE = "Access denied. No token provided."
INVALID_TOKEN_MESSAGE = "Invalid token."


def extract_bearer_token(header_value: Optional[str]) -> Optional[str]:
    """Return the credential part of ``Authorization: Bearer <token>``."""
    if not header_value:
        return None
    parts = header_value.strip().split(" ", 1)
    if len(parts) != 2 or parts[0] != BEARER_PREFIX:
        return None
    token = parts[1].strip()
    return token or None


def authenticate_request(tokens: TokenService, header_value: Optional[str]) -> TokenSubject:
    token = extract_bearer_token(header_value)
    if not token:
        raise UnauthenticatedError(NO_TOKEN_MESSAGE)
    return tokens.verify(token)


def make_token_required(tokens: TokenService):
    """Build the ``token_required`` decorator bound to a token service.

    Only the token is checked; the account directory is never consulted, so a
    token for a since-removed account is still honoured until it expires.
    """

    def token_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                g.current_user = authenticate_request(tokens, request.headers.get("Authorization"))
            except UnauthenticatedError as e:
                return str(e), 401
            except InvalidTokenError as e:
                logger.debug("Rejected token on %s: %s", request.path, e)
                return INVALID_TOKEN_MESSAGE, 400
            return view(*args, **kwargs)

        return wrapper

    return token_required
