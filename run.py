import uvicorn

from taskplanner.config import settings

# Determine environment: "prod" or "local"
ENV = settings.ENV.lower()

HOST = settings.HOST
PORT = settings.PORT
RELOAD = True  # Enable live reload in local development

# Production config
if ENV == "prod":
    HOST = "0.0.0.0"
    RELOAD = False  # Disable reload in production
else:
    print("[Info] Running in local mode, live reload enabled.")

# Start the FastAPI app
if __name__ == "__main__":
    uvicorn.run("taskplanner.main:app", host=HOST, port=PORT, reload=RELOAD)
