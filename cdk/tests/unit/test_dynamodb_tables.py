"""Tests for the dynamodb_tables module."""

from aws_cdk import assertions
from aws_cdk import aws_dynamodb as dynamodb

from testapp.dynamodb_tables import PARTITION_KEY_NAME, create_table


class TestCreateTable:
    """Tests for create_table function."""

    def test_returns_table(self, plain_stack):
        """Should return a Table construct."""
        result = create_table(plain_stack)
        assert isinstance(result, dynamodb.Table)

    def test_default_table_name(self, plain_stack):
        """Table is named TestApp by default."""
        create_table(plain_stack)
        template = assertions.Template.from_stack(plain_stack)
        template.has_resource_properties("AWS::DynamoDB::Table", {"TableName": "TestApp"})

    def test_custom_table_name(self, plain_stack):
        """Table name can be overridden."""
        create_table(plain_stack, "OtherApp")
        template = assertions.Template.from_stack(plain_stack)
        template.has_resource_properties("AWS::DynamoDB::Table", {"TableName": "OtherApp"})

    def test_single_string_partition_key(self, plain_stack):
        """Table has exactly one key, TestId, typed as a string."""
        create_table(plain_stack)
        template = assertions.Template.from_stack(plain_stack)
        template.has_resource_properties(
            "AWS::DynamoDB::Table",
            {
                "KeySchema": [{"AttributeName": "TestId", "KeyType": "HASH"}],
                "AttributeDefinitions": [{"AttributeName": "TestId", "AttributeType": "S"}],
            },
        )

    def test_partition_key_constant(self):
        """Partition key name is TestId."""
        assert PARTITION_KEY_NAME == "TestId"

    def test_no_secondary_indexes(self, plain_stack):
        """Table declares no GSIs."""
        create_table(plain_stack)
        template = assertions.Template.from_stack(plain_stack)
        template.has_resource_properties(
            "AWS::DynamoDB::Table",
            {"GlobalSecondaryIndexes": assertions.Match.absent()},
        )
