"""Tests for Lambda function module."""

import pytest
from aws_cdk import assertions
from aws_cdk import aws_lambda as lambda_

from template_helpers import logical_id, properties
from testapp.dynamodb_tables import create_table
from testapp.lambdas import DEFAULT_RUNTIME, create_function


@pytest.fixture
def table(plain_stack):
    """Table the function is wired to."""
    return create_table(plain_stack)


class TestCreateFunction:
    """Tests for create_function function."""

    def test_returns_function(self, plain_stack, table, code_dir):
        """Should return a Lambda Function construct."""
        result = create_function(plain_stack, table, code_dir)
        assert isinstance(result, lambda_.Function)

    def test_handler_and_runtime(self, plain_stack, table, code_dir):
        """Function uses the index.mjs entry point on Node.js 18."""
        create_function(plain_stack, table, code_dir)
        template = assertions.Template.from_stack(plain_stack)
        template.has_resource_properties(
            "AWS::Lambda::Function",
            {"Handler": "index.mjs", "Runtime": "nodejs18.x"},
        )

    def test_default_runtime_constant(self):
        """Default runtime is Node.js 18."""
        assert DEFAULT_RUNTIME.name == "nodejs18.x"

    def test_custom_handler(self, plain_stack, table, code_dir):
        """Handler can be overridden."""
        create_function(plain_stack, table, code_dir, handler="index.handler")
        template = assertions.Template.from_stack(plain_stack)
        template.has_resource_properties("AWS::Lambda::Function", {"Handler": "index.handler"})

    def test_environment_has_only_table_name(self, plain_stack, table, code_dir):
        """TABLE_NAME is the only variable and resolves to the table."""
        create_function(plain_stack, table, code_dir)
        template = assertions.Template.from_stack(plain_stack)

        table_id = logical_id(template, "AWS::DynamoDB::Table")
        env = properties(template, "AWS::Lambda::Function")["Environment"]

        assert env == {"Variables": {"TABLE_NAME": {"Ref": table_id}}}

    def test_grants_full_table_access(self, plain_stack, table, code_dir):
        """Function role gets dynamodb:* on the table."""
        create_function(plain_stack, table, code_dir)
        template = assertions.Template.from_stack(plain_stack)
        table_id = logical_id(template, "AWS::DynamoDB::Table")

        template.has_resource_properties(
            "AWS::IAM::Policy",
            {
                "PolicyDocument": {
                    "Statement": assertions.Match.array_with(
                        [
                            assertions.Match.object_like(
                                {
                                    "Action": "dynamodb:*",
                                    "Effect": "Allow",
                                    "Resource": assertions.Match.array_with(
                                        [{"Fn::GetAtt": [table_id, "Arn"]}]
                                    ),
                                }
                            )
                        ]
                    )
                }
            },
        )

    def test_missing_code_directory_fails(self, plain_stack, table, tmp_path):
        """Asset directories must exist when the function is declared."""
        with pytest.raises(Exception):
            create_function(plain_stack, table, str(tmp_path / "missing"))
