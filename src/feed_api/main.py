"""FastAPI application entry point."""

import os

from fastapi import FastAPI

from feed_api.routers import articles, subscribers

app = FastAPI(
    title="Bloom Feed API",
    description="Read-only feed of classified, published articles",
    version="1.0.0",
)

# Register routers
app.include_router(articles.router)
app.include_router(subscribers.router)


@app.get("/")
async def root():
    """API root - returns basic info."""
    return {
        "name": "Bloom Feed API",
        "version": "1.0.0",
        "docs": "/docs",
    }


def main():
    """Run the API server."""
    import uvicorn

    uvicorn.run(
        "feed_api.main:app",
        host=os.getenv("FEED_API_HOST", "0.0.0.0"),
        port=int(os.getenv("FEED_API_PORT", "8000")),
    )


if __name__ == "__main__":
    main()
