"""AWS Lambda handler via Mangum.

Wraps the FastAPI app for API Gateway (v2 HTTP API) events.
The app and Mangum adapter are created at module level so they persist
across warm Lambda invocations, along with the app's SecretStore.

Environment variables (optional):
    DEFAULT_SECRET_NAME=mario/defaultSecret
    SECRET_VERSION_STAGE=AWSCURRENT
    LOG_LEVEL=INFO

Lifespan handling is off because the app registers no startup or shutdown
hooks; "auto" would only add a lifespan round-trip to every cold start.
"""

from mangum import Mangum

from mario.config import configure_logging
from mario.main import create_app

configure_logging()

app = create_app()

handler = Mangum(app, lifespan="off")
