import os

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from hpworld.api.endpoints import failure, router

app = FastAPI(title="HP World Signup")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router, prefix="/api")


@app.exception_handler(RequestValidationError)
async def malformed_payload(request: Request, exc: RequestValidationError):
    return failure(400, "Invalid request payload")


@app.get("/")
def read_root():
    return {"message": "HP World signup API is running"}


if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("PORT", 8000))
    uvicorn.run(app, host="0.0.0.0", port=port)
