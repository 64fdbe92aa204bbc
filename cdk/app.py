#!/usr/bin/env python3
"""
CDK app entry point for one TestApp environment.

The function asset is read from cdk/lambda/app unless FUNCTION_CODE_PATH (or
`-c function_code_path=...`) names another directory. Settings may also be
put in cdk/.env as KEY=VALUE lines.
"""
import os
import sys
from pathlib import Path

import aws_cdk as cdk

from testapp.config import load_config
from testapp.errors import ConfigError
from testapp.logging import StructuredLogger
from testapp.stack import TestAppStack

logger = StructuredLogger("testapp.app")

# Load environment variables from .env file if it exists
env_file = Path(__file__).parent / ".env"
if env_file.exists():
    with open(env_file) as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#") and "=" in line:
                key, value = line.split("=", 1)
                # Only set if not already in environment (allow override)
                if key.strip() and not os.getenv(key.strip()):
                    os.environ[key.strip()] = value.strip()

app = cdk.App()

try:
    config = load_config(app)
except ConfigError as e:
    logger.error("Invalid deployment configuration", error=e.to_dict())
    sys.exit(1)

logger.info(
    "Synthesizing stack",
    stack_name=config.stack_name,
    env_name=config.env_name,
    region=config.region,
    bucket_name=config.bucket_name,
)

TestAppStack(
    app,
    f"TestAppStack-{config.region_abbrev}-{config.env_name}",
    config=config,
    stack_name=config.stack_name,
    env=cdk.Environment(account=config.account, region=config.region),
    description=f"TestApp - Deployment ({config.region_abbrev}-{config.env_name})",
)

app.synth()
