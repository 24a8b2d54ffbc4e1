from aws_lambda_powertools.logging import Logger

# Shared structured logger for the lifecycle core
logger = Logger(service="document-lifecycle")
