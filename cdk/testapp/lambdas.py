"""Lambda function definition for the TestApp stack.

The function code is supplied from outside this repository as an asset
directory; only its entry point, runtime and environment are declared here.
"""

from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as lambda_
from constructs import Construct

DEFAULT_RUNTIME = lambda_.Runtime.NODEJS_18_X


def create_function(
    scope: Construct,
    table: dynamodb.ITable,
    code_path: str,
    handler: str = "index.mjs",
    runtime: lambda_.Runtime = DEFAULT_RUNTIME,
) -> lambda_.Function:
    """Create the request-handling function and grant it the table.

    Args:
        scope: CDK construct scope
        table: Table whose name is passed as TABLE_NAME
        code_path: Directory holding the function artifact
        handler: Entry point inside the artifact
        runtime: Lambda runtime for the artifact

    Returns:
        The Lambda function
    """
    function = lambda_.Function(
        scope,
        "Lambda",
        code=lambda_.Code.from_asset(code_path),
        handler=handler,
        runtime=runtime,
        environment={
            "TABLE_NAME": table.table_name,
        },
    )

    # Full access, not per-operation grants
    table.grant_full_access(function)

    return function
