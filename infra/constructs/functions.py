from aws_cdk import Duration
from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as _lambda
from aws_cdk import aws_secretsmanager as secretsmanager
from constructs import Construct

SERVICE_NAME = "reservation-service"


class Functions(Construct):
    """Lambda 関数を管理する Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        table: dynamodb.ITable,
        token_secret: secretsmanager.ISecret,
        common_layer: _lambda.ILayerVersion,
    ) -> None:
        super().__init__(scope, id)

        self.reserve_property = _lambda.Function(
            self,
            "ReservePropertyLambda",
            runtime=_lambda.Runtime.PYTHON_3_13,
            handler="services.reservation.handlers.reserve.lambda_handler",
            code=_lambda.Code.from_asset("src"),
            layers=[common_layer],
            timeout=Duration.seconds(10),
            environment={
                "TABLE_NAME": table.table_name,
                "RENTAL_API_TOKEN_SECRET_ARN": token_secret.secret_arn,
                "POWERTOOLS_SERVICE_NAME": SERVICE_NAME,
            },
        )

        table.grant_read_write_data(self.reserve_property)
        token_secret.grant_read(self.reserve_property)
