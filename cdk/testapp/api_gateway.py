"""API Gateway REST API for the TestApp stack.

Creates:
- REST API with CORS preflight open to all origins and methods
- Lambda integration with a fixed request template
- POST method on the API root
"""

from aws_cdk import aws_apigateway as apigw
from aws_cdk import aws_lambda as lambda_
from constructs import Construct

REST_API_NAME = "ApiGatewayWithLambda"

# Sent to the integration in place of the request body
REQUEST_TEMPLATES = {"application/json": '{ "statusCode": "200" }'}


def create_rest_api(scope: Construct, function: lambda_.IFunction) -> apigw.RestApi:
    """Create the REST API fronting the function.

    Args:
        scope: CDK construct scope
        function: Lambda function handling POST /

    Returns:
        The REST API
    """
    api = apigw.RestApi(
        scope,
        "Api",
        rest_api_name=REST_API_NAME,
        default_cors_preflight_options=apigw.CorsOptions(
            allow_origins=apigw.Cors.ALL_ORIGINS,
            allow_methods=apigw.Cors.ALL_METHODS,
        ),
    )

    integration = apigw.LambdaIntegration(function, request_templates=REQUEST_TEMPLATES)

    api.root.add_method("POST", integration)

    # ApiEndpoint is declared with the other stack outputs
    api.node.try_remove_child("Endpoint")

    return api
