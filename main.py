from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from routers import router as api_router

app = FastAPI(
    title="Cart History API",
    description="Undo/redo for shopping cart edits",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origin_regex=".*",
    allow_credentials=True,    # the session lives in the access_token cookie
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)

@app.get("/")
async def root():
    return {"message": "Cart History API is running"}
