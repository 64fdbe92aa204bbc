"""
Shared fixtures for TestApp stack tests.

Provides a throwaway function artifact directory, a deployment config and
a synthesized template.
"""

from typing import Any

import pytest
from aws_cdk import App, Stack, assertions

from testapp import stack as stack_module
from testapp.config import DeploymentConfig


@pytest.fixture
def aws_credentials(monkeypatch) -> None:
    """Set fake AWS credentials for moto."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.setenv("AWS_REGION", "us-east-1")


@pytest.fixture
def code_dir(tmp_path) -> str:
    """Directory standing in for the externally built function artifact."""
    artifact = tmp_path / "app"
    artifact.mkdir()
    (artifact / "index.mjs").write_text("export const handler = async () => ({ statusCode: 200 });\n")
    return str(artifact)


@pytest.fixture
def config(code_dir: str) -> DeploymentConfig:
    """Deployment config for a test environment."""
    return DeploymentConfig(
        env_name="test",
        region="us-east-1",
        account="123456789012",
        bucket_name="test-bucket-42",
        function_code_path=code_dir,
    )


@pytest.fixture
def plain_stack() -> Stack:
    """Create an empty stack for testing single factories."""
    app = App()
    return Stack(app, "TestStack")


@pytest.fixture
def app_stack(config: DeploymentConfig) -> Any:
    """Full TestApp stack."""
    app = App()
    return stack_module.TestAppStack(app, "TestAppStack-ue1-test", config=config)


@pytest.fixture
def template(app_stack: Any) -> assertions.Template:
    """Synthesized template of the full stack."""
    return assertions.Template.from_stack(app_stack)


@pytest.fixture
def clean_env(monkeypatch) -> None:
    """Run with no AWS or app settings in the environment."""
    for key in (
        "AWS_REGION",
        "CDK_DEFAULT_REGION",
        "AWS_ACCOUNT_ID",
        "CDK_DEFAULT_ACCOUNT",
        "ENVIRONMENT",
        "BUCKET_NAME",
        "BUCKET_SUFFIX",
        "TESTAPP_TABLE_NAME",
        "FUNCTION_CODE_PATH",
        "FUNCTION_HANDLER",
    ):
        monkeypatch.delenv(key, raising=False)
