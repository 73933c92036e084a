"""AWS Lambda handler using Mangum for FastAPI."""

from mangum import Mangum

from country_explorer.api.server import app

handler = Mangum(app, lifespan="off")
