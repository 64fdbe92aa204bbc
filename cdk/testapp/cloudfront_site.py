"""CloudFront distribution for the TestApp stack.

This module creates and configures:
- CloudFront Origin Access Identity (OAI) so the private bucket can be read
- Distribution with the bucket as default origin
- /api behavior routed to the REST API
"""

from aws_cdk import aws_apigateway as apigw
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_cloudfront_origins as origins
from aws_cdk import aws_s3 as s3
from constructs import Construct

API_PATH_PATTERN = "/api"


def create_distribution(
    scope: Construct,
    bucket: s3.IBucket,
    api: apigw.RestApi,
) -> cloudfront.Distribution:
    """Create the CloudFront distribution.

    Args:
        scope: CDK construct scope
        bucket: Site bucket used by the default behavior
        api: REST API served under /api

    Returns:
        The distribution
    """
    origin_access_identity = cloudfront.OriginAccessIdentity(
        scope,
        "OAI",
        comment="OAI for TestApp site bucket",
    )

    distribution = cloudfront.Distribution(
        scope,
        "Distribution",
        default_behavior=cloudfront.BehaviorOptions(
            origin=origins.S3BucketOrigin.with_origin_access_identity(
                bucket,
                origin_access_identity=origin_access_identity,
            ),
        ),
    )

    # RestApiOrigin splits api.url into domain and stage path
    distribution.add_behavior(API_PATH_PATTERN, origins.RestApiOrigin(api))

    return distribution
