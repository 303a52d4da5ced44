import uvicorn

from channel_api.config import PORT
from channel_api.main import create_app

app = create_app()

# run locally
if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=PORT, reload=True)
