#!/usr/bin/env python3
"""CDK app entry point for the Mario stack."""

import os

import aws_cdk as cdk

from stack import MarioCdkStack

app = cdk.App()
MarioCdkStack(
    app,
    "MarioCdkStack",
    stack_name="MarioCdkStack",
    env=cdk.Environment(
        account=os.environ.get("CDK_DEFAULT_ACCOUNT"),
        region=os.environ.get("CDK_DEFAULT_REGION"),
    ),
)
app.synth()
