"""Cognito User Pool authentication configuration for the TestApp stack.

This module creates and configures:
- Cognito User Pool with self sign-up and email verification
- User Pool Client whose OAuth redirects cover local development and CloudFront
"""

from aws_cdk import aws_cognito as cognito
from constructs import Construct

LOCAL_DEV_URL = "http://localhost:3000"


def get_callback_urls(site_domain: str) -> list[str]:
    """Get OAuth callback URLs."""
    return [LOCAL_DEV_URL, site_domain]


def get_logout_urls(site_domain: str) -> list[str]:
    """Get OAuth logout URLs."""
    return [LOCAL_DEV_URL, site_domain]


def create_user_pool(scope: Construct) -> cognito.UserPool:
    """Create the user directory with open sign-up."""
    return cognito.UserPool(
        scope,
        "UserPool",
        self_sign_up_enabled=True,
        auto_verify=cognito.AutoVerifiedAttrs(email=True),
    )


def create_user_pool_client(
    scope: Construct,
    user_pool: cognito.IUserPool,
    site_domain: str,
) -> cognito.UserPoolClient:
    """Register the web client.

    Args:
        scope: CDK construct scope
        user_pool: User pool the client belongs to
        site_domain: CloudFront domain name (a token until deploy)

    Returns:
        The User Pool Client
    """
    return cognito.UserPoolClient(
        scope,
        "UserPoolClient",
        user_pool=user_pool,
        o_auth=cognito.OAuthSettings(
            callback_urls=get_callback_urls(site_domain),
            logout_urls=get_logout_urls(site_domain),
        ),
    )
