"""
Ramlink Gates - Request validation rules.

G1: ServiceTokenAuthenticity - Bearer token matches the shared service token
"""

import hmac
import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_BEARER_RE = re.compile(r"^Bearer\s+(.+)$", re.IGNORECASE)


class GateError(Exception):
    """Gate validation error."""

    def __init__(self, gate_name: str, message: str, details: dict | None = None):
        self.gate_name = gate_name
        self.message = message
        self.details = details or {}
        super().__init__(f"[{gate_name}] {message}")


@dataclass
class GateResult:
    """Result of a gate check."""

    passed: bool
    gate_name: str
    message: str = ""


# =============================================================================
# Gates
# =============================================================================


class Gates:
    """Ramlink validation gates."""

    # =========================================================================
    # G1: Service Token Authenticity
    # =========================================================================

    @staticmethod
    def extract_bearer_token(authorization: str | None) -> str | None:
        """Credential from an ``Authorization: Bearer <token>`` header, or None."""
        if not authorization:
            return None
        match = _BEARER_RE.match(authorization.strip())
        if not match:
            return None
        return match.group(1).strip() or None

    @classmethod
    def service_token_authenticity(
        cls,
        authorization: str | None,
        secret: str | None,
    ) -> GateResult:
        """
        G1: Request carries the shared service token.

        Server-to-server calls are stateless: no session, no user login.
        The partner sends ``Authorization: Bearer <token>``.

        Args:
            authorization: Raw Authorization header value
            secret: Configured service token

        Raises:
            GateError: If the header is missing/malformed, no secret is
                configured, or the token does not match
        """
        if not secret:
            # No dev-mode bypass: an empty token rejects everything
            logger.warning(
                "G1_ServiceTokenAuthenticity: service token is not configured, "
                "rejecting request."
            )
            raise GateError(
                "G1_ServiceTokenAuthenticity",
                "Service token not configured.",
            )

        token = cls.extract_bearer_token(authorization)
        if not token:
            raise GateError(
                "G1_ServiceTokenAuthenticity",
                "Missing or malformed Authorization header.",
            )

        if not hmac.compare_digest(token.encode(), secret.encode()):
            raise GateError(
                "G1_ServiceTokenAuthenticity",
                "Invalid service token.",
            )

        return GateResult(True, "G1_ServiceTokenAuthenticity")

    @classmethod
    def check_service_token_authenticity(cls, *args, **kwargs) -> bool:
        """Check without raising (returns bool)."""
        try:
            cls.service_token_authenticity(*args, **kwargs)
            return True
        except GateError:
            return False
