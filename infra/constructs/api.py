from aws_cdk import aws_apigateway as apigw
from aws_cdk import aws_lambda as _lambda
from constructs import Construct


class Api(Construct):
    """API Gateway Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        reserve_property: _lambda.IFunction,
    ) -> None:
        super().__init__(scope, id)

        self.rest_api = apigw.RestApi(
            self,
            "ReservationRestApi",
            rest_api_name="Rental Reservation API",
            deploy_options=apigw.StageOptions(
                stage_name="prod",
                throttling_burst_limit=10,
                throttling_rate_limit=5,
            ),
        )

        # POST /reservations -> Lambda (reserve_property)
        reservations_resource = self.rest_api.root.add_resource("reservations")
        reservations_resource.add_method(
            "POST",
            apigw.LambdaIntegration(reserve_property),
            authorization_type=apigw.AuthorizationType.IAM,
        )
