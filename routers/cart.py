from fastapi import APIRouter, Depends, HTTPException
from cart_history import CartCaretaker
from core.dependencies import get_cart_client, get_current_user, get_history
from core.logging import get_logger
from schemas.cart import CartHistoryOut, HistoryStatus, HistoryStep, LineItemCreate, LineItemUpdate
from services.cart_client import CartAPIClient, CartAPIError, CartAuthError

router = APIRouter(prefix="/cart", tags=["Cart"])
logger = get_logger(__name__)

def to_out(history: CartCaretaker, items=None, restored: bool = False) -> dict:
    return {
        "items": history.originator.items() if items is None else items,
        "restored": restored,
        "can_undo": history.can_undo(),
        "can_redo": history.can_redo(),
    }

def upstream_error(e: CartAPIError) -> HTTPException:
    if isinstance(e, CartAuthError):
        return HTTPException(status_code=401, detail="Cart service rejected the session")
    return HTTPException(status_code=502, detail="Cart service unavailable")

async def refresh(history: CartCaretaker, client: CartAPIClient) -> None:
    """Pull the canonical cart and make it the live state."""
    history.originator.set_state(await client.fetch_cart())

# GET /cart/ - current cart, also resyncs the live state
@router.get("/", response_model=CartHistoryOut)
async def get_cart(
    history: CartCaretaker = Depends(get_history),
    client: CartAPIClient = Depends(get_cart_client),
):
    try:
        await refresh(history, client)
    except CartAPIError as e:
        raise upstream_error(e)
    return to_out(history)

# POST /cart/items - add a line item (undoable)
@router.post("/items", response_model=CartHistoryOut)
async def add_item(
    item: LineItemCreate,
    history: CartCaretaker = Depends(get_history),
    client: CartAPIClient = Depends(get_cart_client),
):
    try:
        # checkpoint the cart as upstream has it, not whatever this session last saw
        await refresh(history, client)
        history.backup()
        await client.create_line_item(item.product_variant_id, item.quantity)
        await refresh(history, client)
    except CartAPIError as e:
        raise upstream_error(e)
    return to_out(history)

# PUT /cart/items/{item_id} - change quantity (undoable)
@router.put("/items/{item_id}", response_model=CartHistoryOut)
async def update_item(
    item_id: str,
    data: LineItemUpdate,
    history: CartCaretaker = Depends(get_history),
    client: CartAPIClient = Depends(get_cart_client),
):
    try:
        await refresh(history, client)
        history.backup()
        await client.update_line_item_quantity(item_id, data.quantity)
        await refresh(history, client)
    except CartAPIError as e:
        raise upstream_error(e)
    return to_out(history)

# DELETE /cart/items/{item_id} - remove a line item (undoable)
@router.delete("/items/{item_id}", response_model=CartHistoryOut)
async def remove_item(
    item_id: str,
    history: CartCaretaker = Depends(get_history),
    client: CartAPIClient = Depends(get_cart_client),
):
    try:
        await refresh(history, client)
        history.backup()
        await client.delete_line_item(item_id)
        await refresh(history, client)
    except CartAPIError as e:
        raise upstream_error(e)
    return to_out(history)

# POST /cart/undo - step back; restored=False when there is nothing to undo
@router.post("/undo", response_model=CartHistoryOut)
async def undo(step: HistoryStep, history: CartCaretaker = Depends(get_history)):
    items = history.undo(step.current_state)
    return to_out(history, items, restored=items is not None)

# POST /cart/redo
@router.post("/redo", response_model=CartHistoryOut)
async def redo(step: HistoryStep, history: CartCaretaker = Depends(get_history)):
    items = history.redo(step.current_state)
    return to_out(history, items, restored=items is not None)

# GET /cart/history - what the undo/redo buttons should show
@router.get("/history", response_model=HistoryStatus)
async def history_status(history: CartCaretaker = Depends(get_history)):
    return {
        "can_undo": history.can_undo(),
        "can_redo": history.can_redo(),
        "undo_depth": history.undo_depth,
        "redo_depth": history.redo_depth,
    }

# DELETE /cart/history - forget undo/redo history, keep the current cart
@router.delete("/history")
async def reset_history(
    current_user: dict = Depends(get_current_user),
    history: CartCaretaker = Depends(get_history),
):
    history.clear()
    logger.info("Cart history reset for %s", current_user["email"])
    return {"message": "Cart history cleared"}
