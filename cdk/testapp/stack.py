from aws_cdk import Stack
from constructs import Construct

from testapp.api_gateway import create_rest_api
from testapp.auth import create_user_pool, create_user_pool_client
from testapp.cloudfront_site import create_distribution
from testapp.config import DeploymentConfig
from testapp.dynamodb_tables import create_table
from testapp.lambdas import create_function
from testapp.logging import StructuredLogger
from testapp.outputs import create_outputs
from testapp.s3_buckets import create_bucket

logger = StructuredLogger(__name__)


class TestAppStack(Stack):
    """
    TestApp - Deployment Stack

    Creates, in dependency order:
    - Private S3 bucket for the site
    - DynamoDB table keyed on TestId
    - Lambda function with TABLE_NAME and full table access
    - REST API routing POST / to the function
    - CloudFront distribution (bucket by default, API under /api)
    - Cognito User Pool and web client redirecting to localhost and CloudFront
    - Stack outputs
    """

    def __init__(self, scope: Construct, construct_id: str, config: DeploymentConfig, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        self.config = config

        # ====================================================================
        # Storage
        # ====================================================================

        self.bucket = create_bucket(self, config.bucket_name)
        self.table = create_table(self, config.table_name)
        logger.info("Declared storage", bucket_name=config.bucket_name, table_name=config.table_name)

        # ====================================================================
        # Compute & API
        # ====================================================================

        self.function = create_function(
            self,
            self.table,
            config.function_code_path,
            handler=config.function_handler,
        )
        self.api = create_rest_api(self, self.function)
        logger.info("Declared function and API", code_path=config.function_code_path)

        # ====================================================================
        # CDN
        # ====================================================================

        self.distribution = create_distribution(self, self.bucket, self.api)

        # ====================================================================
        # Auth - client redirects depend on the distribution domain
        # ====================================================================

        self.user_pool = create_user_pool(self)
        self.user_pool_client = create_user_pool_client(
            self,
            self.user_pool,
            self.distribution.distribution_domain_name,
        )

        # ====================================================================
        # Outputs
        # ====================================================================

        self.outputs = create_outputs(
            self,
            self.bucket,
            self.user_pool,
            self.user_pool_client,
            self.distribution,
            self.api,
        )
        logger.info("Declared stack", stack_name=self.stack_name, outputs=list(self.outputs))
