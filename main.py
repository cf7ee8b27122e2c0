# Local entry point: `python main.py` serves the API on :8000
import uvicorn
from decouple import config

from ppemarts.main import app

if __name__ == "__main__":
    uvicorn.run(
        app,
        host=config("HOST", default="127.0.0.1"),
        port=config("PORT", cast=int, default=8000),
    )
