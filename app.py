#!/usr/bin/env python3

import aws_cdk as cdk

from rental_reservation_stack import RentalReservationStack

app = cdk.App()
RentalReservationStack(
    app,
    "RentalReservationStack",
)

app.synth()
