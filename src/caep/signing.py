"""SET signing with PyJWT."""

from typing import Any

import jwt

from caep.errors import SigningError
from caep.models import SigningKey

SET_TOKEN_TYPE = "secevent+jwt"


def sign_set(claims: dict[str, Any], signing_key: SigningKey) -> str:
    try:
        return jwt.encode(
            claims,
            signing_key.key,
            algorithm=signing_key.alg,
            headers={"kid": signing_key.kid, "typ": SET_TOKEN_TYPE},
        )
    except (jwt.PyJWTError, NotImplementedError, ValueError, TypeError) as e:
        raise SigningError(f"Failed to sign SET: {e}") from e
