from fastapi import Depends, Request, HTTPException, status
from jose import jwt, JWTError
from core.config import SECRET_KEY, ALGORITHM
from cart_history import CartCaretaker, HistoryRegistry
from services.cart_client import CartAPIClient

# one undo/redo history per signed-in user, for the life of the process
history_registry = HistoryRegistry()

async def get_current_user(request: Request) -> dict:
    token = request.cookies.get("access_token")
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access token not found, please sign in again",
        )

    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
        email: str = payload.get("sub")
        if email is None:
            raise HTTPException(status_code=401, detail="Invalid token")
    except JWTError:
        raise HTTPException(status_code=401, detail="Invalid token")

    return {"email": email, "token": token}

def get_registry() -> HistoryRegistry:
    return history_registry

async def get_history(
    current_user: dict = Depends(get_current_user),
    registry: HistoryRegistry = Depends(get_registry),
):
    # held for the whole request: one history operation per session at a time
    async with registry.lock(current_user["email"]):
        yield registry.get(current_user["email"])

async def get_cart_client(current_user: dict = Depends(get_current_user)):
    async with CartAPIClient(access_token=current_user["token"]) as client:
        yield client
