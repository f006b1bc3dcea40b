"""
Common modules package initialization.
Adds the Lambda task root to sys.path when running inside Lambda.
"""

import sys
import os

# Add parent directory to path if running in Lambda
if os.getenv("AWS_LAMBDA_FUNCTION_NAME"):
    sys.path.insert(0, "/var/task")

__all__ = [
    "aws_client",
    "base_handler",
    "billing_config",
    "environment",
    "exceptions",
    "structured_logging",
    "supabase_client",
]
