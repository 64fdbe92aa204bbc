"""
Stack outputs for the TestApp stack.

Declares the six CloudFormation outputs and reads them back from a deployed
stack with boto3.

Usage:
    python -m testapp.outputs --stack-name testapp-ue1-dev
"""

import argparse
import json
import os
import sys
from typing import Optional

import boto3
from aws_cdk import CfnOutput
from aws_cdk import aws_apigateway as apigw
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_cognito as cognito
from aws_cdk import aws_s3 as s3
from botocore.exceptions import ClientError
from constructs import Construct

from testapp.errors import AppError, MissingOutputsError, StackNotFoundError
from testapp.logging import StructuredLogger

logger = StructuredLogger(__name__)

OUTPUT_NAMES: tuple[str, ...] = (
    "BucketName",
    "UserPoolId",
    "UserPoolWebClientId",
    "CloudFrontURL",
    "CloudFrontDistributionId",
    "ApiEndpoint",
)

# Cache boto3 clients
_clients: dict = {}


def get_client(service: str):
    """Get a cached boto3 client."""
    if service not in _clients:
        region = os.getenv("AWS_REGION") or os.getenv("CDK_DEFAULT_REGION", "us-east-1")
        _clients[service] = boto3.client(service, region_name=region)
    return _clients[service]


def create_outputs(
    stack: Construct,
    bucket: s3.IBucket,
    user_pool: cognito.IUserPool,
    user_pool_client: cognito.IUserPoolClient,
    distribution: cloudfront.IDistribution,
    api: apigw.RestApi,
) -> dict[str, CfnOutput]:
    """Declare the stack outputs.

    Outputs are created directly under the stack so their logical IDs are
    exactly the output names.
    """
    values = {
        "BucketName": bucket.bucket_name,
        "UserPoolId": user_pool.user_pool_id,
        "UserPoolWebClientId": user_pool_client.user_pool_client_id,
        "CloudFrontURL": distribution.distribution_domain_name,
        "CloudFrontDistributionId": distribution.distribution_id,
        "ApiEndpoint": api.url,
    }
    return {name: CfnOutput(stack, name, value=values[name]) for name in OUTPUT_NAMES}


def fetch_stack_outputs(stack_name: str) -> dict[str, str]:
    """Read the outputs of a deployed stack.

    Args:
        stack_name: CloudFormation stack name

    Returns:
        Mapping of output name to value for the six TestApp outputs

    Raises:
        StackNotFoundError: CloudFormation does not know the stack
        MissingOutputsError: any expected output is absent or empty
    """
    client = get_client("cloudformation")
    try:
        response = client.describe_stacks(StackName=stack_name)
    except ClientError as e:
        if "does not exist" in e.response.get("Error", {}).get("Message", ""):
            raise StackNotFoundError(stack_name) from e
        raise

    stacks = response.get("Stacks", [])
    if not stacks:
        raise StackNotFoundError(stack_name)

    deployed = {o["OutputKey"]: o.get("OutputValue", "") for o in stacks[0].get("Outputs", [])}
    missing = [name for name in OUTPUT_NAMES if not deployed.get(name)]
    if missing:
        raise MissingOutputsError(stack_name, missing)

    logger.info("Read stack outputs", stack_name=stack_name, output_count=len(OUTPUT_NAMES))
    return {name: deployed[name] for name in OUTPUT_NAMES}


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Print the outputs of a deployed TestApp stack")
    parser.add_argument("--stack-name", required=True, help="CloudFormation stack name")
    args = parser.parse_args(argv)

    try:
        outputs = fetch_stack_outputs(args.stack_name)
    except AppError as e:
        logger.error("Could not read stack outputs", error=e.to_dict())
        return 1

    print(json.dumps(outputs, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
