"""
Shared helper utilities for CDK stack construction.

This module provides:
- Region abbreviation mapping for stack naming
- Environment and context lookups
- Stable bucket suffix derivation
"""

import hashlib
import os
from typing import Any, Optional

# Region abbreviation mapping for stack naming
# Pattern: testapp-{region_abbrev}-{env} e.g. testapp-ue1-dev
REGION_ABBREVIATIONS: dict[str, str] = {
    "us-east-1": "ue1",
    "us-east-2": "ue2",
    "us-west-1": "uw1",
    "us-west-2": "uw2",
    "eu-west-1": "ew1",
    "eu-west-2": "ew2",
    "eu-west-3": "ew3",
    "eu-central-1": "ec1",
    "eu-north-1": "en1",
    "ap-northeast-1": "ane1",  # Tokyo
    "ap-northeast-2": "ane2",  # Seoul
    "ap-northeast-3": "ane3",  # Osaka
    "ap-southeast-1": "ase1",  # Singapore
    "ap-southeast-2": "ase2",  # Sydney
    "ap-south-1": "as1",  # Mumbai
    "sa-east-1": "se1",  # São Paulo
    "ca-central-1": "cc1",  # Canada
}

# Bucket suffixes are kept in the same range as the original random suffix
BUCKET_SUFFIX_RANGE = 1000


def get_region() -> str:
    """Get the AWS region from environment variables or default to us-east-1."""
    return os.getenv("AWS_REGION") or os.getenv("CDK_DEFAULT_REGION") or "us-east-1"


def get_region_abbrev(region: Optional[str] = None) -> str:
    """Get the region abbreviation for stack naming.

    Args:
        region: AWS region code. If None, reads from environment.

    Returns:
        Region abbreviation (e.g., 'ue1' for 'us-east-1')
    """
    if region is None:
        region = get_region()
    return REGION_ABBREVIATIONS.get(region, region[:3])


def get_stack_name(region_abbrev: str, env_name: str) -> str:
    """CloudFormation stack name for an environment: testapp-{abbrev}-{env}."""
    return f"testapp-{region_abbrev}-{env_name}"


def get_context_bool(scope: Any, key: str, default: bool = False) -> bool:
    """Read a boolean CDK context value.

    Context passed on the command line (``-c key=false``) arrives as a string,
    so anything other than a case-insensitive "false" counts as True.
    """
    value = scope.node.try_get_context(key)
    if value is None:
        return default
    if isinstance(value, str):
        return value.lower() != "false"
    return bool(value)


def get_setting(scope: Any, context_key: str, env_var: str, default: Optional[str] = None) -> Optional[str]:
    """Look up a setting in CDK context first, then in the environment."""
    value = scope.node.try_get_context(context_key)
    if value is not None and value != "":
        return str(value)
    return os.getenv(env_var) or default


def derive_bucket_suffix(*parts: Optional[str]) -> int:
    """Derive a stable bucket suffix from the deployment coordinates.

    The same account/region/environment always yields the same suffix, so
    re-synthesizing does not rename the bucket.
    """
    seed = "/".join(part or "" for part in parts)
    digest = hashlib.sha256(seed.encode("utf-8")).hexdigest()
    return int(digest, 16) % BUCKET_SUFFIX_RANGE
