"""FastAPI application for the taskboard API."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taskboard import __version__, config
from taskboard.api import keywords, responses, tasks

app = FastAPI(title="Taskboard API", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.get("cors_origins"),
    allow_methods=["*"],
    allow_headers=["*"],
)

responses.install(app)

app.include_router(tasks.router)
app.include_router(keywords.router)


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


def main(host: str | None = None, port: int | None = None, reload: bool = False):
    import uvicorn

    uvicorn.run(
        "taskboard.api.main:app",
        host=host or config.get("host"),
        port=port or config.get("port"),
        access_log=False,
        reload=reload,
    )


if __name__ == "__main__":
    main()
