"""
S3 Bucket creation for the TestApp stack.

Creates:
- Private bucket served through CloudFront as the site origin
"""

from aws_cdk import aws_s3 as s3
from constructs import Construct


def create_bucket(stack: Construct, bucket_name: str) -> s3.Bucket:
    """Create the private site bucket.

    Args:
        stack: CDK Construct (usually the Stack instance)
        bucket_name: Globally unique bucket name

    Returns:
        The site bucket
    """
    return s3.Bucket(
        stack,
        "Bucket",
        bucket_name=bucket_name,
        public_read_access=False,
        block_public_access=s3.BlockPublicAccess.BLOCK_ALL,
    )
