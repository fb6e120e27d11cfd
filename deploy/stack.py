"""CDK stack for the Mario auth pool, auth log and secret-check API."""

from pathlib import Path

from aws_cdk import (
    BundlingOptions,
    CfnOutput,
    Duration,
    RemovalPolicy,
    SecretValue,
    Stack,
    aws_cognito as cognito,
    aws_dynamodb as dynamodb,
    aws_lambda as lambda_,
    aws_logs as logs,
    aws_secretsmanager as secretsmanager,
)
from aws_cdk.aws_apigatewayv2 import CorsHttpMethod, CorsPreflightOptions, HttpApi, HttpMethod
from aws_cdk.aws_apigatewayv2_integrations import HttpLambdaIntegration
from constructs import Construct

PROJECT_ROOT = Path(__file__).resolve().parent.parent

DEFAULT_SECRET_NAME = "mario/defaultSecret"

RUNTIME = lambda_.Runtime.PYTHON_3_13

# Third-party packages go under python/ so the layer lands on sys.path at /opt/python.
DEPENDENCIES_INSTALL = (
    "cp -r /asset-input /tmp/src"
    " && pip install --no-cache-dir /tmp/src -t /asset-output/python"
)

ASSET_EXCLUDES = [
    "deploy/*",
    "tests/*",
    "scripts/*",
    ".venv/*",
    "cdk.out",
    "__pycache__",
    "*.pyc",
    ".pytest_cache",
    ".git",
    "*.md",
]


class MarioCdkStack(Stack):
    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        code_path: str | None = None,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # --- Context values (pass via -c or cdk.json) ---
        default_secret_arn = self.node.try_get_context("default_secret_arn")
        domain_prefix = self.node.try_get_context("domain_prefix") or "mario"
        callback_url = self.node.try_get_context("callback_url") or "http://localhost:2000/callback"
        logout_url = self.node.try_get_context("logout_url") or "http://localhost:2000/logout"

        code = lambda_.Code.from_asset(
            code_path or str(PROJECT_ROOT),
            exclude=ASSET_EXCLUDES,
        )

        # --- Runtime dependencies (fastapi, mangum, aioboto3, ...) ---
        dependencies = lambda_.LayerVersion(
            self,
            "MarioDependencies",
            code=lambda_.Code.from_asset(
                str(PROJECT_ROOT),
                exclude=ASSET_EXCLUDES,
                bundling=BundlingOptions(
                    image=RUNTIME.bundling_image,
                    command=["bash", "-c", DEPENDENCIES_INSTALL],
                ),
            ),
            compatible_runtimes=[RUNTIME],
            description="Third-party packages for the Mario Lambda functions",
            removal_policy=RemovalPolicy.DESTROY,
        )

        # --- Secret-check function ---
        if default_secret_arn:
            default_secret = secretsmanager.Secret.from_secret_complete_arn(
                self, "DefaultSecret", default_secret_arn
            )
        else:
            default_secret = secretsmanager.Secret.from_secret_name_v2(
                self, "DefaultSecret", DEFAULT_SECRET_NAME
            )

        test_fn = lambda_.Function(
            self,
            "MarioTestLambda",
            function_name="MarioTestLambda",
            runtime=RUNTIME,
            handler="handler.handler",
            code=code,
            layers=[dependencies],
            memory_size=256,
            timeout=Duration.seconds(10),
            log_retention=logs.RetentionDays.TWO_WEEKS,
            environment={
                "DEFAULT_SECRET_NAME": DEFAULT_SECRET_NAME,
                "SECRET_VERSION_STAGE": "AWSCURRENT",
            },
        )
        test_fn.apply_removal_policy(RemovalPolicy.DESTROY)
        default_secret.grant_read(test_fn)

        # --- HTTP API (API Gateway v2) ---
        api = HttpApi(
            self,
            "TestAPI",
            api_name="TestAPI",
            cors_preflight=CorsPreflightOptions(
                allow_headers=["Authorization"],
                allow_methods=[
                    CorsHttpMethod.GET,
                    CorsHttpMethod.POST,
                    CorsHttpMethod.OPTIONS,
                    CorsHttpMethod.HEAD,
                ],
                allow_origins=["*"],
            ),
        )
        api.apply_removal_policy(RemovalPolicy.DESTROY)

        integration = HttpLambdaIntegration("TestIntegration", test_fn)
        api.add_routes(
            path="/secret/{id}",
            methods=[HttpMethod.GET],
            integration=integration,
        )
        api.add_routes(
            path="/health",
            methods=[HttpMethod.GET],
            integration=integration,
        )

        # --- DynamoDB auth log table ---
        auth_log_table = dynamodb.Table(
            self,
            "MarioAuthLog",
            table_name="MarioAuthLog",
            partition_key=dynamodb.Attribute(name="PK", type=dynamodb.AttributeType.STRING),
            sort_key=dynamodb.Attribute(name="SK", type=dynamodb.AttributeType.STRING),
            billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
            removal_policy=RemovalPolicy.DESTROY,
        )

        # --- Auth log trigger function ---
        auth_log_trigger = lambda_.Function(
            self,
            "MarioAuthLogTrigger",
            function_name="MarioAuthLogTrigger",
            runtime=RUNTIME,
            handler="mario.authlog.trigger.handler",
            code=code,
            layers=[dependencies],
            memory_size=256,
            timeout=Duration.seconds(10),
            log_retention=logs.RetentionDays.TWO_WEEKS,
        )
        auth_log_trigger.apply_removal_policy(RemovalPolicy.DESTROY)
        auth_log_trigger.add_environment("AUTHLOG_TABLENAME", auth_log_table.table_name)
        auth_log_table.grant_full_access(auth_log_trigger)

        # --- Cognito user pool and client ---
        user_pool = cognito.UserPool(
            self,
            "MarioUserPool",
            user_pool_name="MarioUserPool",
            account_recovery=cognito.AccountRecovery.EMAIL_ONLY,
            lambda_triggers=cognito.UserPoolTriggers(
                post_confirmation=auth_log_trigger,
                post_authentication=auth_log_trigger,
            ),
            self_sign_up_enabled=True,
            password_policy=cognito.PasswordPolicy(
                min_length=8,
                require_lowercase=True,
                require_uppercase=True,
                require_digits=True,
                require_symbols=True,
            ),
            removal_policy=RemovalPolicy.DESTROY,
            standard_attributes=cognito.StandardAttributes(
                fullname=cognito.StandardAttribute(required=True),
                email=cognito.StandardAttribute(required=True),
            ),
            sign_in_aliases=cognito.SignInAliases(email=True, username=False),
        )

        user_pool_client = user_pool.add_client(
            "MarioUserPoolClient",
            user_pool_client_name="MarioUserPoolClient",
            enable_token_revocation=True,
            generate_secret=True,
            auth_flows=cognito.AuthFlow(user_srp=True),
            o_auth=cognito.OAuthSettings(
                callback_urls=[callback_url],
                logout_urls=[logout_url],
                flows=cognito.OAuthFlows(authorization_code_grant=True),
                scopes=[
                    cognito.OAuthScope.OPENID,
                    cognito.OAuthScope.EMAIL,
                    cognito.OAuthScope.PROFILE,
                ],
            ),
            write_attributes=cognito.ClientAttributes().with_standard_attributes(
                fullname=True,
                email=True,
            ),
        )
        user_pool_client.apply_removal_policy(RemovalPolicy.DESTROY)

        cognito.CfnManagedLoginBranding(
            self,
            "MarioLoginBranding",
            user_pool_id=user_pool.user_pool_id,
            client_id=user_pool_client.user_pool_client_id,
            use_cognito_provided_values=True,
        )
        user_pool.add_domain(
            "MarioUserPoolDomain",
            cognito_domain=cognito.CognitoDomainOptions(domain_prefix=domain_prefix),
            managed_login_version=cognito.ManagedLoginVersion.NEWER_MANAGED_LOGIN,
        )

        # --- OIDC settings for web clients ---
        issuer = f"https://cognito-idp.{self.region}.amazonaws.com/{user_pool.user_pool_id}"
        secretsmanager.Secret(
            self,
            "MarioUserPoolSecret",
            secret_name="MarioUserPoolSecret",
            secret_object_value={
                "issuerURL": SecretValue.unsafe_plain_text(issuer),
                "clientID": SecretValue.unsafe_plain_text(user_pool_client.user_pool_client_id),
                "clientSecret": user_pool_client.user_pool_client_secret,
            },
            removal_policy=RemovalPolicy.DESTROY,
        )

        # --- Outputs ---
        CfnOutput(
            self,
            "AuthTriggerRole",
            value=auth_log_trigger.role.role_name,
            description="Role that runs the auth trigger",
        )
        CfnOutput(self, "TestApiUrl", value=api.url or "", description="The URL to test")
        CfnOutput(
            self,
            "AuthLogTableName",
            value=auth_log_table.table_name,
            description="The name of the auth log table",
        )
