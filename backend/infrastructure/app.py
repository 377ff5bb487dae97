#!/usr/bin/env python3
import aws_cdk as cdk
import os
from cdk_stack import HelloLambdaStack

app = cdk.App()

# Unset account/region synthesizes an environment-agnostic stack for `cdk deploy`
env = cdk.Environment(
    account=os.environ.get("AWS_ACCOUNT_ID"),
    region=os.environ.get("AWS_REGION"),
)

HelloLambdaStack(app, "HelloLambdaStack", env=env)
app.synth()
