# app/utils/http.py
import httpx
from typing import Optional

async def post_form(url: str, data: Optional[dict] = None, files: Optional[dict] = None, timeout: float = 30.0) -> httpx.Response:
    async with httpx.AsyncClient(timeout=timeout) as client:
        return await client.post(url, data=data, files=files)
