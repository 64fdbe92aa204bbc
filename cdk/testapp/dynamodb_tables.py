from aws_cdk import aws_dynamodb as ddb
from constructs import Construct

PARTITION_KEY_NAME = "TestId"


def create_table(stack: Construct, table_name: str = "TestApp") -> ddb.Table:
    """Create the application table, keyed on a single string partition key.

    Args:
        stack: CDK Construct (usually the Stack instance)
        table_name: Physical table name

    Returns:
        The Table construct
    """
    return ddb.Table(
        stack,
        "Table",
        table_name=table_name,
        partition_key=ddb.Attribute(name=PARTITION_KEY_NAME, type=ddb.AttributeType.STRING),
    )
