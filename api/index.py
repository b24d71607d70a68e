# api/index.py
from mangum import Mangum

from itinerary_api.main import app

# ASGI runtimes serve `app` directly; Lambda-style runtimes call `handler`.
handler = Mangum(app)
