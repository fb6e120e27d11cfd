"""Lambda handlers and supporting clients for the Mario CDK stack."""
