# schemas/cart.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional

class CartItem(BaseModel):
    # upstream line items carry more fields than these; keep them as they are
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    product_variant_id: Any = Field(alias="productVariantId")
    quantity: int

class LineItemCreate(BaseModel):
    product_variant_id: Any = Field(alias="productVariantId")
    quantity: int = Field(gt=0)

    model_config = ConfigDict(populate_by_name=True)

class LineItemUpdate(BaseModel):
    quantity: int = Field(gt=0)

class HistoryStep(BaseModel):
    # the cart as the UI currently shows it; omitted = server-side live state
    current_state: Optional[List[Dict[str, Any]]] = None

class CartHistoryOut(BaseModel):
    items: List[Dict[str, Any]]
    restored: bool = False
    can_undo: bool
    can_redo: bool

class HistoryStatus(BaseModel):
    can_undo: bool
    can_redo: bool
    undo_depth: int
    redo_depth: int
