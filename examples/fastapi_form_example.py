"""FastAPI app that parses nested form submissions with FormParser.

Run with ``uvicorn examples.fastapi_form_example:app`` and submit::

    curl -X POST localhost:8000/orders \
        -F customer.name=Ada -F +items.0.qty=2 -F items.0.sku=A1 -F "&gift=on" -F notes[]=fragile
"""

import logging
from typing import Any

from fastapi import Depends, FastAPI

from deepform.integrations import FormParser


logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="deepform example")


@app.post("/orders")
async def create_order(order: dict[str, Any] = Depends(FormParser(omit_empty_strings=True))) -> dict[str, Any]:
    logger.info("received order for %s", order.get("customer", {}).get("name", "unknown"))
    return order


@app.get("/orders")
async def search_orders(query: dict[str, Any] = Depends(FormParser(source="query"))) -> dict[str, Any]:
    return query
