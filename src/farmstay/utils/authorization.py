from typing import Optional
from farmstay.models.users import UserRole
from farmstay.utils.custom_response import send_custom_response


def require_admin(event) -> Optional[dict]:
    """Error response unless the upstream authorizer marked the caller ADMIN."""
    try:
        role_raw = event["requestContext"]["authorizer"]["role"]
    except (KeyError, TypeError):
        return send_custom_response(401, "Unauthorized")

    try:
        role = UserRole(str(role_raw).upper())
    except ValueError:
        return send_custom_response(403, "Forbidden")

    if role != UserRole.ADMIN:
        return send_custom_response(403, "Only admins can perform this action")
    return None
