"""Security utilities for webhook registration."""

import uuid


def generate_webhook_secret() -> str:
    """
    Generate the signing secret for a new webhook.

    A random (version 4) UUID in canonical string form. Called exactly once per
    webhook, at creation time.
    """
    return str(uuid.uuid4())
