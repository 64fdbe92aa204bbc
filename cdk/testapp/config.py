"""
Deployment configuration for the TestApp stack.

Settings are read from CDK context first (``cdk synth -c key=value``) and
then from environment variables, falling back to defaults for local use.
"""

import os
import random
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from testapp.errors import ConfigError
from testapp.helpers import (
    BUCKET_SUFFIX_RANGE,
    derive_bucket_suffix,
    get_context_bool,
    get_region,
    get_region_abbrev,
    get_setting,
    get_stack_name,
)

DEFAULT_ENV_NAME = "dev"
DEFAULT_TABLE_NAME = "TestApp"
DEFAULT_FUNCTION_HANDLER = "index.mjs"
BUCKET_NAME_PREFIX = "test-bucket"

# cdk/lambda/app, next to app.py
DEFAULT_FUNCTION_CODE_PATH = str(Path(__file__).resolve().parent.parent / "lambda" / "app")

_ENV_NAME_PATTERN = re.compile(r"^[a-z][a-z0-9-]{0,19}$")


@dataclass(frozen=True)
class DeploymentConfig:
    """Inputs for one TestApp environment instance."""

    env_name: str
    region: str
    bucket_name: str
    function_code_path: str
    account: Optional[str] = None
    table_name: str = DEFAULT_TABLE_NAME
    function_handler: str = DEFAULT_FUNCTION_HANDLER

    @property
    def region_abbrev(self) -> str:
        return get_region_abbrev(self.region)

    @property
    def stack_name(self) -> str:
        return get_stack_name(self.region_abbrev, self.env_name)


def validate_env_name(env_name: str) -> str:
    """Environment names end up in stack names, so keep them short and DNS-safe."""
    if not _ENV_NAME_PATTERN.match(env_name):
        raise ConfigError(f"Invalid environment name: {env_name!r}", envName=env_name)
    return env_name


def parse_bucket_suffix(raw: str) -> int:
    """Parse an explicit bucket suffix given in context or environment."""
    try:
        suffix = int(raw)
    except ValueError:
        raise ConfigError(f"Bucket suffix must be an integer, got {raw!r}", bucketSuffix=raw) from None
    if not 0 <= suffix < BUCKET_SUFFIX_RANGE:
        raise ConfigError(
            f"Bucket suffix must be between 0 and {BUCKET_SUFFIX_RANGE - 1}, got {suffix}",
            bucketSuffix=raw,
        )
    return suffix


def resolve_bucket_name(scope: Any, env_name: str, region: str, account: Optional[str]) -> str:
    """Pick the bucket name for this environment.

    Order: explicit name, explicit suffix, random suffix when requested,
    otherwise a suffix derived from account/region/environment.
    """
    explicit_name = get_setting(scope, "bucket_name", "BUCKET_NAME")
    if explicit_name:
        return explicit_name

    raw_suffix = get_setting(scope, "bucket_suffix", "BUCKET_SUFFIX")
    if raw_suffix is not None:
        suffix = parse_bucket_suffix(raw_suffix)
    elif get_context_bool(scope, "random_bucket_suffix", default=False):
        suffix = random.randrange(BUCKET_SUFFIX_RANGE)
    else:
        suffix = derive_bucket_suffix(account, region, env_name)

    return f"{BUCKET_NAME_PREFIX}-{suffix}"


def resolve_function_code_path(scope: Any) -> str:
    """Locate the function artifact directory; it must exist before synthesis."""
    code_path = get_setting(scope, "function_code_path", "FUNCTION_CODE_PATH", DEFAULT_FUNCTION_CODE_PATH)
    assert code_path is not None
    if not os.path.isdir(code_path):
        raise ConfigError(
            f"Function code directory not found: {code_path}",
            functionCodePath=code_path,
        )
    return code_path


def load_config(scope: Any) -> DeploymentConfig:
    """Build the DeploymentConfig for a CDK app or construct.

    Args:
        scope: CDK construct whose node context is consulted (usually the App)

    Returns:
        DeploymentConfig for the selected environment

    Raises:
        ConfigError: when a setting is present but unusable
    """
    env_name = validate_env_name(get_setting(scope, "environment", "ENVIRONMENT", DEFAULT_ENV_NAME) or "")
    region = get_region()
    account = os.getenv("AWS_ACCOUNT_ID") or os.getenv("CDK_DEFAULT_ACCOUNT")

    return DeploymentConfig(
        env_name=env_name,
        region=region,
        account=account,
        bucket_name=resolve_bucket_name(scope, env_name, region, account),
        table_name=get_setting(scope, "table_name", "TESTAPP_TABLE_NAME", DEFAULT_TABLE_NAME) or DEFAULT_TABLE_NAME,
        function_code_path=resolve_function_code_path(scope),
        function_handler=get_setting(scope, "function_handler", "FUNCTION_HANDLER", DEFAULT_FUNCTION_HANDLER)
        or DEFAULT_FUNCTION_HANDLER,
    )
