"""aws-login - switch AWS CLI profiles and log in to AWS services from the shell."""

__version__ = "0.1.0"
