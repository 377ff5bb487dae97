from aws_cdk import (
    Stack,
    Duration,
    aws_lambda as _lambda,
    aws_lambda_python_alpha as lambda_py,
    aws_apigatewayv2 as apigwv2,
    aws_apigatewayv2_integrations as apigwv2_integrations,
    aws_iam as iam,
    CfnOutput,
)
from constructs import Construct
import os

LAMBDAS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "aws", "lambdas")


class HelloLambdaStack(Stack):
    """CDK stack that deploys the two hello Lambdas (`hello` and `hello_v3`)
    behind a single HTTP API.  Neither function needs a VPC, environment
    variables or any permission beyond writing to CloudWatch Logs.
    """

    def __init__(self, scope: Construct, construct_id: str, **kwargs):
        super().__init__(scope, construct_id, **kwargs)

        # ──────────────────────────────────────────────────────────────
        # IAM Role
        # ──────────────────────────────────────────────────────────────
        lambda_role = iam.Role(
            self,
            "LambdaExecRole",
            assumed_by=iam.ServicePrincipal("lambda.amazonaws.com"),
            managed_policies=[
                iam.ManagedPolicy.from_aws_managed_policy_name("service-role/AWSLambdaBasicExecutionRole"),
            ],
        )

        # ──────────────────────────────────────────────────────────────
        # Lambda Functions
        # ──────────────────────────────────────────────────────────────
        lambda_configs = [
            {"name": "hello", "id": "HelloLambda"},
            {"name": "hello_v3", "id": "HelloV3Lambda"},
        ]

        lambdas: dict[str, _lambda.Function] = {}
        for cfg in lambda_configs:
            lambdas[cfg["name"]] = lambda_py.PythonFunction(
                self,
                cfg["id"],
                entry=os.path.join(LAMBDAS_DIR, cfg["name"]),
                runtime=_lambda.Runtime.PYTHON_3_12,
                index="main.py",
                handler="handler",
                role=lambda_role,
                timeout=Duration.seconds(10),
            )

        # ──────────────────────────────────────────────────────────────
        # HTTP API Gateway
        # ──────────────────────────────────────────────────────────────
        http_api = apigwv2.HttpApi(self, "ServerlessHttpApi")

        for route in [
            ("hello", "GET", "/hello"),
            ("hello_v3", "GET", "/hello/v3"),
        ]:
            name, method, path = route
            integration = apigwv2_integrations.HttpLambdaIntegration(
                f"{name.title().replace('_', '')}Integration", handler=lambdas[name]
            )
            http_api.add_routes(
                path=path,
                methods=[getattr(apigwv2.HttpMethod, method)],
                integration=integration,
            )

        CfnOutput(self, "ApiBaseUrl", value=http_api.api_endpoint)
