from aws_cdk import Stack
from aws_cdk import aws_secretsmanager as secretsmanager
from constructs import Construct

from infra.constructs import Api, Database, Functions, Layers


class RentalReservationStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        database = Database(self, "Database")
        layers = Layers(self, "Layers")

        # ログイン時に書き込まれるレンタル API トークンのキャッシュ
        token_secret = secretsmanager.Secret(
            self,
            "RentalApiTokenSecret",
            secret_name="/rental-reservation/rental-api-token",
        )

        fns = Functions(
            self,
            "Functions",
            table=database.table,
            token_secret=token_secret,
            common_layer=layers.common_layer,
        )

        Api(
            self,
            "Api",
            reserve_property=fns.reserve_property,
        )
